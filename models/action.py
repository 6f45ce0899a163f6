from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Action(str, Enum):
    """What a run should do with the outage notification."""

    NOOP = "noop"
    CLEAR = "clear"
    CREATE = "create"
    REFRESH = "refresh"


class Outcome(str, Enum):
    """What actually happened when the action was executed."""

    NOTHING_TO_DO = "nothing_to_do"
    SENT = "sent"
    SEND_FAILED = "send_failed"
    EDITED = "edited"
    UNCHANGED = "unchanged"
    EDIT_FAILED = "edit_failed"
    DELETED = "deleted"
    ALREADY_GONE = "already_gone"
    DELETE_FAILED = "delete_failed"


_FAILED = frozenset({Outcome.SEND_FAILED, Outcome.EDIT_FAILED})


@dataclass(frozen=True)
class RunResult:
    """Report of one run.

    Fields:
        action:      Action chosen by the reconciler.
        outcome:     Result of executing it against the gateway.
        message_ref: Ref the state store points at after the run (None if
                     no notification is being tracked).
        error:       Text of the gateway error, when one occurred.
    """

    action: Action
    outcome: Outcome
    message_ref: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """False only when the store was left in place for a retry next run."""
        return self.outcome not in _FAILED
