from fastapi import APIRouter

from countyscope.api.routes import analysis, downloads, regions

api_router = APIRouter()


api_router.include_router(regions.router)
api_router.include_router(downloads.router)
api_router.include_router(analysis.router)
