from models.action import Action, Outcome, RunResult
from models.snapshot import StatusSnapshot
from models.state import NotificationState

__all__ = ["Action", "Outcome", "RunResult", "StatusSnapshot", "NotificationState"]
