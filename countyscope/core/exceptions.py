"""Error taxonomy shared by services and the HTTP layer.

Each error carries the HTTP status it maps to; the handlers registered in
``countyscope.main`` turn them into ``{"error": message}`` bodies.
"""


class CountyscopeError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(CountyscopeError):
    status_code = 400


class MissingParametersError(InvalidRequestError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required parameters: {', '.join(missing)}.")


class InvalidEnhancementError(InvalidRequestError):
    def __init__(self, enhancement: str):
        self.enhancement = enhancement
        super().__init__(f"Invalid enhancement type specified: '{enhancement}'.")


class NotFoundError(CountyscopeError):
    status_code = 404


class RegionNotFoundError(NotFoundError):
    def __init__(self, region_name: str):
        self.region_name = region_name
        super().__init__(f"Could not find a geometry for county: '{region_name}'.")


class NoImageryFoundError(NotFoundError):
    def __init__(self, year: int, region_label: str, cloud_cover: float):
        self.year = year
        self.region_label = region_label
        self.cloud_cover = cloud_cover
        super().__init__(
            "No Sentinel-2 imagery found for the specified criteria "
            f"(Year: {year}, County: {region_label}, Cloud Cover: < {cloud_cover}%)"
        )


class RemoteServiceError(CountyscopeError):
    status_code = 500


class TileGenerationError(RemoteServiceError):
    def __init__(
        self,
        message: str = "Failed to generate map tiles. Please check your parameters.",
    ):
        super().__init__(message)


class ServiceNotReadyError(CountyscopeError):
    status_code = 503

    def __init__(
        self,
        message: str = "Earth Engine is not initialized. Please try again in a moment.",
    ):
        super().__init__(message)


class CredentialsError(Exception):
    """Raised when the service-account key cannot be loaded at startup."""
