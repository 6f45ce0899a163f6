from __future__ import annotations

from datetime import datetime
from html import escape

from models.snapshot import StatusSnapshot

UNKNOWN = "Невідомо"
CHECK_TIME_FORMAT = "%H:%M %d.%m.%Y"


def _capitalize(text: str | None) -> str | None:
    if not text:
        return None
    return text[0].upper() + text[1:].lower()


def _field(text: str | None) -> str:
    """Escape provider text for Telegram HTML, or fall back to the placeholder."""
    return escape(text) if text else UNKNOWN


def compose(snapshot: StatusSnapshot, now: datetime) -> str:
    """Render the outage notification in Telegram's HTML dialect.

    ``now`` is the local check time and must already be in the display
    timezone; the provider's own update time is shown alongside it.
    """
    if not snapshot.is_outage_active:
        raise ValueError("cannot compose a notification without an active outage")

    reason = _field(_capitalize(snapshot.sub_type))
    begin = _field(snapshot.start_date)
    end = _field(snapshot.end_date)

    return "\n".join([
        "⚡️ <b>За даними сайту ДТЕК зафіксовано:</b>",
        "",
        f"⚠️ <i>{reason}</i>",
        f"🪫 <code>{begin} — {end}</code>",
        "",
        "🤖 <i>Це повідомлення оновлюється автоматично</i>",
        "",
        f"🔄 <i>Оновлення на сайті: {_field(snapshot.updated_at)}</i>",
        f"🕒 <i>Час перевірки: {now.strftime(CHECK_TIME_FORMAT)}</i>",
    ])
