# intake_wizard/config.py
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    app_title: str = Field("Intake Wizard API", validation_alias="APP_TITLE")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    cors_origins: List[str] = Field(["*"], validation_alias="CORS_ORIGINS")

    # Artificial "processing" pause before results are shown, in seconds.
    submit_delay: float = Field(4.0, ge=0, validation_alias="INTAKE_SUBMIT_DELAY")

    # Idle sessions older than this are dropped from memory.
    session_timeout_minutes: float = Field(60, gt=0, validation_alias="INTAKE_SESSION_TIMEOUT_MINUTES")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
