# Settings management (reads env vars / .env)
# movies_api/core/config.py

import logging
from functools import lru_cache
from typing import Annotated, List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ACCEPTED_ORIGINS = [
    "http://localhost:3003",
    "http://localhost:8080",
    "http://localhost:8081",
]


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables or .env file.
    """
    # --- Project Info ---
    PROJECT_NAME: str = Field("Movies API", validation_alias="PROJECT_NAME")
    VERSION: str = Field("1.0.0", validation_alias="APP_VERSION")

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # --- Server ---
    HOST: str = Field("0.0.0.0", validation_alias="HOST")
    PORT: int = Field(3003, validation_alias="PORT")

    # --- Data ---
    SEED_DATA_PATH: Optional[str] = Field(
        None,
        validation_alias="SEED_DATA_PATH",
        description="JSON file used to seed the in-memory collection. Uses the bundled dataset when unset."
    )

    # --- CORS ---
    # Comma-separated in the env var, e.g. "http://localhost:8080,http://localhost:8081"
    ACCEPTED_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=DEFAULT_ACCEPTED_ORIGINS,
        validation_alias="ACCEPTED_ORIGINS"
    )

    @field_validator("ACCEPTED_ORIGINS", mode='before')
    @classmethod
    def assemble_accepted_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid ACCEPTED_ORIGINS format: {v}")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


@lru_cache()
def get_settings() -> Settings:
    """Returns the application settings instance."""
    logger.info("Attempting to load application settings...")
    try:
        settings_instance = Settings()
        logger.info(f"Settings loaded successfully for Project: {settings_instance.PROJECT_NAME}")
        logger.info(f"Log Level: {settings_instance.LOG_LEVEL}")
        logger.info(f"Accepted Origins: {settings_instance.ACCEPTED_ORIGINS}")
        logger.info(f"Seed Data: {settings_instance.SEED_DATA_PATH or 'bundled'}")
        return settings_instance
    except Exception as e:
        logger.critical(f"CRITICAL ERROR: Failed to load application settings: {e}", exc_info=True)
        raise RuntimeError(f"Could not load settings: {e}")
