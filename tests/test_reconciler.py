from datetime import datetime, timezone

import pytest

from core.reconciler import decide
from models.action import Action
from models.state import NotificationState
from tests.fakes import OUTAGE, make_snapshot

STORED = NotificationState(
    message_ref="m1",
    created_at=datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc),
    updated_at=datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc),
)


@pytest.mark.parametrize(
    ("outage", "state", "expected"),
    [
        (False, None, Action.NOOP),
        (False, STORED, Action.CLEAR),
        (True, None, Action.CREATE),
        (True, STORED, Action.REFRESH),
    ],
)
def test_truth_table(outage, state, expected) -> None:
    snapshot = make_snapshot(**OUTAGE) if outage else make_snapshot()

    assert decide(snapshot, state) is expected


@pytest.mark.parametrize("field", ["sub_type", "start_date", "end_date", "outage_type"])
def test_any_single_field_starts_an_episode(field) -> None:
    assert decide(make_snapshot(**{field: "x"}), None) is Action.CREATE


def test_blank_sub_type_is_not_an_outage() -> None:
    snapshot = make_snapshot(sub_type="   ")

    assert decide(snapshot, STORED) is Action.CLEAR
