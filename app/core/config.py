from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]


class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    APP_ENV: EnvName = "development"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Auth
    SECRET_KEY: str = "supersecretkey"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 8  # 8 days
    CORS_ORIGINS: List[str] = ["*"]

    # MongoDB settings
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "storefront"

    # Catalog
    PAGE_SIZE: int = 10
    TOP_PRODUCTS_LIMIT: int = 3
    WRITE_RETRIES: int = 3

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
