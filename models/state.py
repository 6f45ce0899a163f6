from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class NotificationState:
    """The single persisted record describing the live notification.

    ``message_ref`` is whatever the messaging gateway returned from ``send``;
    it is stored as-is and only ever handed back to the same gateway.
    """

    message_ref: Any
    created_at: datetime
    updated_at: datetime

    def touched(self, now: datetime) -> NotificationState:
        return dataclasses.replace(self, updated_at=now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message_ref": self.message_ref,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> NotificationState | None:
        """Rebuild a state from its JSON record, or None if it holds no ref."""
        ref = raw.get("message_ref")
        if ref is None or ref == "":
            return None
        created_at = datetime.fromisoformat(raw["created_at"])
        updated_raw = raw.get("updated_at")
        updated_at = datetime.fromisoformat(updated_raw) if updated_raw else created_at
        return cls(message_ref=ref, created_at=created_at, updated_at=updated_at)
