import pytest

from models.snapshot import StatusSnapshot
from tests.fakes import NOW, make_snapshot


def test_no_fields_means_no_outage() -> None:
    assert make_snapshot().is_outage_active is False


def test_empty_strings_are_normalised_to_none() -> None:
    snapshot = make_snapshot(sub_type="", start_date=" ", end_date="\n", outage_type="")

    assert snapshot.sub_type is None
    assert snapshot.start_date is None
    assert snapshot.is_outage_active is False


def test_values_are_trimmed() -> None:
    snapshot = make_snapshot(start_date="  08:00 19.10.2026 ")

    assert snapshot.start_date == "08:00 19.10.2026"
    assert snapshot.is_outage_active is True


def test_type_alone_marks_outage() -> None:
    snapshot = StatusSnapshot.from_house_record({"type": "2"}, updated_at=None, fetched_at=NOW)

    assert snapshot.is_outage_active is True
    assert snapshot.outage_type == "2"


def test_from_house_record_maps_provider_keys() -> None:
    record = {
        "sub_type": "Стабілізаційне відключення",
        "start_date": "10:00",
        "end_date": "14:00",
        "type": "",
    }

    snapshot = StatusSnapshot.from_house_record(record, updated_at="11:05 19.10.2026", fetched_at=NOW)

    assert snapshot.sub_type == "Стабілізаційне відключення"
    assert snapshot.end_date == "14:00"
    assert snapshot.outage_type is None
    assert snapshot.updated_at == "11:05 19.10.2026"
    assert snapshot.fetched_at == NOW


def test_missing_record_is_inactive() -> None:
    snapshot = StatusSnapshot.from_house_record(None, updated_at="x", fetched_at=NOW)

    assert snapshot.is_outage_active is False


@pytest.mark.parametrize("value", [False, 0, 0.0, [], {}, None])
def test_falsy_non_strings_are_absent(value) -> None:
    snapshot = StatusSnapshot.from_house_record(
        {"sub_type": value, "start_date": value, "end_date": value, "type": value},
        updated_at=None,
        fetched_at=NOW,
    )

    assert snapshot.sub_type is None
    assert snapshot.outage_type is None
    assert snapshot.is_outage_active is False


def test_empty_list_reason_with_zero_type_is_no_outage() -> None:
    snapshot = StatusSnapshot.from_house_record({"sub_type": [], "type": 0}, updated_at=None, fetched_at=NOW)

    assert snapshot.sub_type is None
    assert snapshot.is_outage_active is False


@pytest.mark.parametrize("value", [True, ["Аварійне"], {"a": 1}])
def test_non_textual_values_are_absent(value) -> None:
    snapshot = StatusSnapshot.from_house_record({"sub_type": value}, updated_at=None, fetched_at=NOW)

    assert snapshot.sub_type is None
    assert snapshot.is_outage_active is False


def test_numeric_type_code_is_kept_as_text() -> None:
    snapshot = StatusSnapshot.from_house_record({"type": 2}, updated_at=None, fetched_at=NOW)

    assert snapshot.outage_type == "2"
    assert snapshot.is_outage_active is True
