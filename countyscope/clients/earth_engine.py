"""Google Earth Engine client: credentials, readiness and remote evaluation."""

import asyncio
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import ee

from countyscope.core.config import config
from countyscope.core.exceptions import (
    CredentialsError,
    RemoteServiceError,
    ServiceNotReadyError,
    TileGenerationError,
)

logger = logging.getLogger(__name__)


class ClientState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class EarthEngineClient:
    """
    Thin wrapper around the ``ee`` library.

    Building ``ee`` expressions is lazy and happens in the services; every
    call that actually talks to Earth Engine goes through this class so it
    runs off the event loop, is bounded by a timeout and fails with a
    ``RemoteServiceError``.
    """

    def __init__(
        self,
        key_path: str | Path | None = None,
        project: str | None = None,
        timeout: float | None = None,
    ):
        """
        Args:
            key_path: service-account private key (JSON)
            project: Google Cloud project billed for Earth Engine calls
            timeout: upper bound in seconds for each remote call
        """
        self.key_path = Path(key_path or config.EE_KEY_PATH)
        self.project = project or config.EE_PROJECT
        self.timeout = timeout or config.REMOTE_CALL_TIMEOUT_SECONDS
        self.state = ClientState.UNINITIALIZED
        self._credentials: ee.ServiceAccountCredentials | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is ClientState.READY

    def load_credentials(self) -> None:
        """
        Read the private key and build service-account credentials.

        Raises:
            CredentialsError: if the key file is missing, unreadable or invalid
        """
        try:
            key_data = self.key_path.read_text(encoding="utf8")
            service_account = json.loads(key_data)["client_email"]
            self._credentials = ee.ServiceAccountCredentials(
                service_account, key_data=key_data
            )
        except (OSError, ValueError, KeyError) as e:
            raise CredentialsError(
                f"Failed to read or parse '{self.key_path}': {e}"
            ) from e
        logger.info(f"Earth Engine authentication successful for {service_account}")

    async def initialize(self) -> None:
        """
        Initialize the ``ee`` library with the loaded credentials.

        A failure here is logged and leaves the client uninitialized, so
        gated endpoints keep answering 503.
        """
        if self.is_ready:
            return
        if self._credentials is None:
            self.load_credentials()
        try:
            await asyncio.wait_for(
                asyncio.to_thread(
                    ee.Initialize, self._credentials, project=self.project
                ),
                timeout=self.timeout,
            )
        except Exception as e:
            logger.exception(f"Earth Engine client initialization failed: {e}")
            return
        self.state = ClientState.READY
        logger.info("Earth Engine client initialized")

    def ensure_ready(self) -> None:
        if not self.is_ready:
            raise ServiceNotReadyError()

    async def _call(self, func: Callable[..., Any], *args, description: str) -> Any:
        self.ensure_ready()
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise RemoteServiceError(
                f"Earth Engine did not respond within {self.timeout:g}s while {description}."
            ) from e
        except Exception as e:
            # EEException, and transport failures (socket, httplib2, google.auth)
            # that earthengine-api does not wrap
            raise RemoteServiceError(
                f"An unexpected error occurred while {description}. Details: {e}"
            ) from e

    async def get_info(self, computed: Any, description: str = "evaluating a query") -> Any:
        """Evaluate an ``ee`` object and return its client-side value."""
        return await self._call(computed.getInfo, description=description)

    async def get_map_id(self, image: Any, vis_params: dict[str, Any]) -> dict[str, Any]:
        """
        Request a tile-serving handle for ``image``.

        Returns:
            ``mapid``, ``token`` and the tile ``url_format``

        Raises:
            TileGenerationError: on any remote failure
        """
        try:
            map_id = await self._call(
                image.getMapId, vis_params, description="generating map tiles"
            )
        except RemoteServiceError as e:
            logger.error(f"Earth Engine map generation failed: {e}")
            raise TileGenerationError() from e
        return {
            "mapid": map_id["mapid"],
            "token": map_id.get("token"),
            "url_format": map_id["tile_fetcher"].url_format,
        }

    async def get_download_url(
        self, collection: Any, filetype: str, filename: str
    ) -> str:
        return await self._call(
            lambda: collection.getDownloadURL(filetype=filetype, filename=filename),
            description="generating a download link",
        )


earth_engine = EarthEngineClient()
