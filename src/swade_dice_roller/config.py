from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SWADE_DICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_name: str = "swade-dice-roller"
    log_level: str = "INFO"
    # Empty means log to stderr only; stdout carries the MCP stdio transport.
    log_file: str = ""
    # Upper bound on dice chains started by a single roll request.
    max_dice: int = Field(default=100, gt=0)


def load_settings() -> Settings:
    return Settings()
