"""Monitor configuration managed via environment variables."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigurationError

DEFAULT_SHUTDOWNS_PAGE = "https://www.dtek-kem.com.ua/ua/shutdowns"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None
    messaging_channel: Literal["telegram", "console"] = "telegram"
    shutdowns_page: str = DEFAULT_SHUTDOWNS_PAGE
    street: str
    house: str
    state_file: Path = Path("artifacts/last_message.json")
    timezone: str = "Europe/Kyiv"
    fetch_timeout_seconds: float = 60.0
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value

    def validate_channel(self) -> None:
        if self.messaging_channel != "telegram":
            return
        if not self.telegram_bot_token:
            raise ConfigurationError("Missing TELEGRAM_BOT_TOKEN")
        if not self.telegram_chat_id:
            raise ConfigurationError("Missing TELEGRAM_CHAT_ID")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
