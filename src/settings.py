# src/settings.py
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.search.directory import RECORDS_PATH

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Searchable Dropdown")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # search
    MIN_QUERY_LENGTH: int = Field(default=3, ge=0)
    RECORDS_PATH: str = Field(default=RECORDS_PATH)
    TEMPLATES_DIR: str = Field(default=TEMPLATES_DIR)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    # read root-level .env.dev
    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
