import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from countyscope.api.deps import get_earth_engine
from countyscope.api.main import api_router
from countyscope.clients.earth_engine import earth_engine
from countyscope.core.config import config
from countyscope.core.exceptions import (
    CountyscopeError,
    RemoteServiceError,
    ServiceNotReadyError,
)
from countyscope.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # A bad key is fatal: let the error abort startup.
    earth_engine.load_credentials()
    init_task = asyncio.create_task(earth_engine.initialize())
    logger.info("Awaiting Earth Engine client initialization...")
    yield
    if not init_task.done():
        init_task.cancel()
        logger.info("Earth Engine initialization cancelled at shutdown")


app = FastAPI(
    title="countyscope",
    summary="County-level Sentinel-2 analysis relay",
    description="""
    A thin API in front of Google Earth Engine. It turns simple JSON requests (county, year, cloud cover, enhancement)
    into Sentinel-2 median composites or vegetation/moisture indices and returns map tile ids and legends for a
    browser map, plus county names, boundaries and GeoJSON download links.
    """,
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(CountyscopeError)
async def countyscope_error_handler(request: Request, exc: CountyscopeError):
    if isinstance(exc, RemoteServiceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    # Bodies are parsed before dependencies run, so gate here as well.
    if request.url.path.startswith(config.API_PREFIX):
        gate = request.app.dependency_overrides.get(get_earth_engine, get_earth_engine)
        try:
            gate()
        except ServiceNotReadyError as e:
            return JSONResponse(status_code=e.status_code, content={"error": e.message})
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=400, content={"error": f"Invalid request parameters. {details}"}
    )


app.include_router(api_router, prefix=config.API_PREFIX)


@app.get("/ping")
def health_check():
    """Health check endpoint."""
    return {"status": "up", "earth_engine": earth_engine.state.value}


def run() -> None:
    uvicorn.run("countyscope.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
