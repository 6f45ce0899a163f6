from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _clean(value: Any) -> str | None:
    """Strip provider text; anything empty or non-textual becomes None.

    Plain numbers (e.g. a numeric ``type`` code) are kept as text. Booleans,
    containers and other objects never carry a displayable value.
    """
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
        return str(value)
    return None


@dataclass(frozen=True)
class StatusSnapshot:
    """One point-in-time read of the outage status for the configured house.

    Fields:
        sub_type:    Outage reason/category as reported ("Аварійне", ...).
        start_date:  Provider-reported start of the outage window.
        end_date:    Provider-reported end of the outage window.
        outage_type: Provider's raw ``type`` marker.
        updated_at:  Provider's own "last updated" text, passed through.
        fetched_at:  Local time the snapshot was obtained.
    """

    sub_type: str | None
    start_date: str | None
    end_date: str | None
    outage_type: str | None
    updated_at: str | None
    fetched_at: datetime

    def __post_init__(self) -> None:
        for name in ("sub_type", "start_date", "end_date", "outage_type", "updated_at"):
            object.__setattr__(self, name, _clean(getattr(self, name)))

    @property
    def is_outage_active(self) -> bool:
        return any((self.sub_type, self.start_date, self.end_date, self.outage_type))

    @classmethod
    def from_house_record(
        cls,
        record: Mapping[str, Any] | None,
        updated_at: Any,
        fetched_at: datetime,
    ) -> StatusSnapshot:
        """Build a snapshot from the provider's per-house record.

        A missing record means the provider knows of no outage for the house.
        """
        record = record or {}
        return cls(
            sub_type=record.get("sub_type"),
            start_date=record.get("start_date"),
            end_date=record.get("end_date"),
            outage_type=record.get("type"),
            updated_at=updated_at,
            fetched_at=fetched_at,
        )
