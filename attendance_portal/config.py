"""Application configuration using Pydantic Settings."""
from functools import lru_cache

from pydantic import MongoDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = "Attendance Portal"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    # MongoDB (MONGO_URI is required; there is no usable default)
    mongo_uri: MongoDsn
    mongo_db_name: str = "attendance"

    # CORS (comma-separated origins, e.g. "http://localhost:5173,https://portal.example.com")
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
