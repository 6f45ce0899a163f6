from __future__ import annotations

import httpx

from core.config import Settings
from gateways.base import DeleteResult, EditResult, MessagingGateway
from gateways.console import ConsoleGateway
from gateways.telegram import TelegramGateway


def build_gateway(settings: Settings, client: httpx.AsyncClient) -> MessagingGateway:
    """Pick the messaging channel named in the settings."""
    if settings.messaging_channel == "console":
        return ConsoleGateway()
    settings.validate_channel()
    return TelegramGateway(
        client=client,
        token=settings.telegram_bot_token,
        chat_id=settings.telegram_chat_id,
    )


__all__ = [
    "DeleteResult",
    "EditResult",
    "MessagingGateway",
    "ConsoleGateway",
    "TelegramGateway",
    "build_gateway",
]
