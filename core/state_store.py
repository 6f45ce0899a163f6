from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from models.state import NotificationState

log = logging.getLogger(__name__)


class StateStore(ABC):
    """Durable single-record store for the live notification.

    ``load()`` after ``clear()`` must be indistinguishable from a store
    that was never written.
    """

    @abstractmethod
    def load(self) -> NotificationState | None:
        """Return the stored state, or None when no notification is tracked."""

    @abstractmethod
    def save(self, state: NotificationState) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class JsonFileStateStore(StateStore):
    """Keeps the record as one JSON object in a file.

    ``clear()`` leaves an empty ``{}`` object behind instead of removing the
    file, so a checked-in artifacts directory keeps its file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> NotificationState | None:
        try:
            raw = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            return NotificationState.from_dict(data)
        except (ValueError, KeyError, TypeError) as exc:
            log.warning("Ignoring unreadable state file %s: %s", self._path, exc)
            return None

    def save(self, state: NotificationState) -> None:
        self._write(state.to_dict())

    def clear(self) -> None:
        self._write({})

    def _write(self, payload: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".state-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, ensure_ascii=False)
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise


class MemoryStateStore(StateStore):
    """In-process store, for tests and one-off runs that keep no history."""

    def __init__(self, state: NotificationState | None = None) -> None:
        self._state = state

    def load(self) -> NotificationState | None:
        return self._state

    def save(self, state: NotificationState) -> None:
        self._state = state

    def clear(self) -> None:
        self._state = None
