from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    ENV_STATE: str = "dev"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class GlobalConfig(BaseConfig):
    EE_KEY_PATH: str = "key.json"
    EE_PROJECT: str | None = None
    REGION_COLLECTION_ID: str = "projects/ee-celestakim019/assets/counties"
    REGION_NAME_FIELD: str = "COUNTY_NAM"
    WHOLE_AREA_LABEL: str = "Whole Area"
    DEFAULT_AOI_POINT: tuple[float, float] = (37.65, -0.05)  # lon, lat
    DEFAULT_AOI_BUFFER_METERS: float = 50_000
    IMAGERY_COLLECTION_ID: str = "COPERNICUS/S2_SR_HARMONIZED"
    CLOUD_COVER_PROPERTY: str = "CLOUDY_PIXEL_PERCENTAGE"
    DOWNLOAD_ALL_FILENAME: str = "kenya_counties_all"
    REMOTE_CALL_TIMEOUT_SECONDS: float = 60.0
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_DIR: str = "logs"


class DevConfig(GlobalConfig):
    model_config = SettingsConfigDict(env_prefix="DEV_")


class TestConfig(GlobalConfig):
    REMOTE_CALL_TIMEOUT_SECONDS: float = 2.0
    model_config = SettingsConfigDict(env_prefix="TEST_")


class ProdConfig(GlobalConfig):
    model_config = SettingsConfigDict(env_prefix="PROD_")


@lru_cache()
def get_config(env_state: str):
    config_dict = {"dev": DevConfig, "test": TestConfig, "prod": ProdConfig}
    return config_dict[env_state]()


config = get_config(BaseConfig().ENV_STATE)
