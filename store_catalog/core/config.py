from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Store Catalog"
    LOG_LEVEL: str = "INFO"

    # Mongo
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "store_catalog"

    # HTTP
    API_PREFIX: str = "/api/v1"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

@lru_cache
def get_settings() -> Settings:
    return Settings()
