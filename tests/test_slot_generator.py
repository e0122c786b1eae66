"""
Tests for hourly slot generation from a turf's operating window
"""
from app.models.turf import Turf
from app.services.slot_generator import find_slot, generate_slots

from tests.conftest import TODAY


def _turf(available_from, available_to):
    return Turf(available_from=available_from, available_to=available_to)


def test_full_day_window_yields_sixteen_slots():
    slots = generate_slots(_turf("06:00", "22:00"), TODAY)

    assert len(slots) == 16
    assert (slots[0].start_time, slots[0].end_time) == ("06:00", "07:00")
    assert (slots[-1].start_time, slots[-1].end_time) == ("21:00", "22:00")


def test_slots_are_consecutive_and_one_hour_wide():
    slots = generate_slots(_turf("06:00", "22:00"), TODAY)

    for previous, current in zip(slots, slots[1:]):
        assert previous.end_time == current.start_time
    for slot in slots:
        start = int(slot.start_time[:2])
        assert slot.end_time == f"{start + 1:02d}:00"


def test_partial_last_hour_is_dropped():
    slots = generate_slots(_turf("06:00", "21:30"), TODAY)

    assert (slots[-1].start_time, slots[-1].end_time) == ("20:00", "21:00")
    assert all(slot.start_time != "21:00" for slot in slots)


def test_partial_first_hour_starts_on_next_boundary():
    slots = generate_slots(_turf("06:30", "09:00"), TODAY)

    assert [s.start_time for s in slots] == ["07:00", "08:00"]


def test_window_until_midnight():
    slots = generate_slots(_turf("22:00", "24:00"), TODAY)

    assert [(s.start_time, s.end_time) for s in slots] == [
        ("22:00", "23:00"),
        ("23:00", "24:00"),
    ]


def test_empty_or_inverted_window_yields_no_slots():
    assert generate_slots(_turf("10:00", "10:00"), TODAY) == []
    assert generate_slots(_turf("18:00", "08:00"), TODAY) == []
    assert generate_slots(_turf("10:00", "10:30"), TODAY) == []


def test_unparsable_window_yields_no_slots():
    assert generate_slots(_turf("ten", "22:00"), TODAY) == []
    assert generate_slots(_turf("06:00", "25:00"), TODAY) == []


def test_generation_is_repeatable():
    turf = _turf("08:00", "12:00")

    assert generate_slots(turf, TODAY) == generate_slots(turf, TODAY)


def test_find_slot_matches_grid_only():
    turf = _turf("06:00", "22:00")

    assert find_slot(turf, TODAY, "10:00", "11:00").start_time == "10:00"
    assert find_slot(turf, TODAY, "10:00", "12:00") is None
    assert find_slot(turf, TODAY, "10:30", "11:30") is None
    assert find_slot(turf, TODAY, "05:00", "06:00") is None
    assert find_slot(turf, TODAY, "22:00", "23:00") is None
    assert find_slot(turf, TODAY, "bad", "11:00") is None
