# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

from app.core.errors import StartupError

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Contact Form API", alias="API_TITLE")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Required before serving; checked by require_mongo_uri at startup
    mongo_uri: Optional[str] = Field(default=None, alias="MONGO_URI")
    # Used only when the URI does not name a database
    mongo_db: str = Field(default="test", alias="MONGO_DB")
    mongo_collection: str = Field(default="contacts", alias="MONGO_COLLECTION")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=10000, alias="PORT")
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    # Frontend assets; if unset we use <project-root>/public
    static_dir: Optional[str] = Field(default=None, alias="STATIC_DIR")


def require_mongo_uri(settings: Settings) -> str:
    if not settings.mongo_uri:
        raise StartupError("MONGO_URI is not defined. Check your .env file.")
    return settings.mongo_uri


settings = Settings()
