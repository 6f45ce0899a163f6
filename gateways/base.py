from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class EditResult(str, Enum):
    OK = "ok"
    UNCHANGED = "unchanged"


class DeleteResult(str, Enum):
    OK = "ok"
    ALREADY_GONE = "already_gone"


class MessagingGateway(ABC):
    """Abstract base for the channel that holds the outage notification.

    Implementations identify messages by an opaque ref returned from
    ``send()``. Failures are raised as ``GatewayError`` subclasses; the
    "content unchanged" and "already deleted" replies are successes and are
    reported through ``EditResult`` / ``DeleteResult`` instead.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable channel name (e.g. 'Telegram')."""

    @abstractmethod
    async def send(self, text: str) -> Any:
        """Post a new message and return its ref."""

    @abstractmethod
    async def edit(self, message_ref: Any, text: str) -> EditResult:
        """Replace the text of an existing message."""

    @abstractmethod
    async def delete(self, message_ref: Any) -> DeleteResult:
        """Remove an existing message."""
