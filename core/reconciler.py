from __future__ import annotations

from models.action import Action
from models.snapshot import StatusSnapshot
from models.state import NotificationState

_TABLE = {
    (False, False): Action.NOOP,
    (False, True): Action.CLEAR,
    (True, False): Action.CREATE,
    (True, True): Action.REFRESH,
}


def decide(snapshot: StatusSnapshot, state: NotificationState | None) -> Action:
    """Map the current status and the stored notification to one action.

    Outage episodes are inferred from transitions only: the stored state is
    the sole memory of "we already notified".
    """
    return _TABLE[(snapshot.is_outage_active, state is not None)]
