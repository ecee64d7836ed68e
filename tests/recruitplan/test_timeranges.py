from __future__ import annotations

import pytest

from recruitplan.timeranges import (
    SlotSelection,
    TimeRange,
    decode_ranges_to_slots,
    encode_slots_to_ranges,
    format_range,
    slot_to_time,
    time_to_slot,
)


def test_slot_time_conversions():
    assert slot_to_time(0) == "00:00"
    assert slot_to_time(19) == "09:30"
    assert slot_to_time(48) == "24:00"
    assert time_to_slot("09:30") == 19
    assert time_to_slot("24:00") == 48


@pytest.mark.parametrize("bad", ["9:30", "09:15", "25:00", "ab:cd", "24:30"])
def test_time_to_slot_rejects_off_grid_values(bad):
    with pytest.raises(ValueError):
        time_to_slot(bad)


def test_time_range_validates_and_normalises_days():
    tr = TimeRange("08:00", "09:00", days=(3, 1, 1))
    assert tr.days == (1, 3)
    with pytest.raises(ValueError):
        TimeRange("09:00", "08:00")
    with pytest.raises(ValueError):
        TimeRange("08:00", "09:00", days=(7,))


def test_encode_consecutive_half_hours():
    ranges = encode_slots_to_ranges({(0, 16), (0, 17), (0, 18)})
    assert ranges == [TimeRange(start="08:00", end="09:30", days=(0,))]


def test_encode_merges_days_with_identical_bounds():
    ranges = encode_slots_to_ranges({(0, 16), (0, 17), (2, 16), (2, 17)})
    assert ranges == [TimeRange(start="08:00", end="09:00", days=(0, 2))]


def test_encode_splits_runs_and_sorts_by_start():
    slots = {(1, 40), (1, 41), (1, 10), (4, 10)}
    ranges = encode_slots_to_ranges(slots)
    assert ranges == [
        TimeRange("05:00", "05:30", (1, 4)),
        TimeRange("20:00", "21:00", (1,)),
    ]


def test_encode_last_slot_ends_at_midnight():
    (only,) = encode_slots_to_ranges({(6, 47)})
    assert only.end == "24:00"


def test_encode_ignores_out_of_grid_slots():
    assert encode_slots_to_ranges({(7, 0), (0, 48), (-1, 3)}) == []


def test_decode_expands_half_open_ranges():
    slots = decode_ranges_to_slots([TimeRange("08:00", "09:00", (0, 2))])
    assert slots == {(0, 16), (0, 17), (2, 16), (2, 17)}


def test_decode_without_days_covers_every_day():
    assert len(decode_ranges_to_slots([TimeRange("12:00", "13:00")])) == 14
    assert len(decode_ranges_to_slots([TimeRange("12:00", "13:00", ())])) == 14


def test_round_trip_is_stable():
    slots = {(0, 16), (0, 17), (2, 16), (2, 17), (3, 30), (5, 0), (5, 1), (5, 2)}
    ranges = encode_slots_to_ranges(slots)
    assert decode_ranges_to_slots(ranges) == slots
    assert encode_slots_to_ranges(decode_ranges_to_slots(ranges)) == ranges


def test_format_range():
    assert format_range(TimeRange("08:00", "09:30", (0, 4))) == "08:00-09:30 (Mon, Fri)"
    assert format_range(TimeRange("08:00", "09:30")) == "08:00-09:30 (All days)"


def test_selection_toggle():
    sel = SlotSelection()
    sel.toggle(1, 20)
    assert (1, 20) in sel
    sel.toggle(1, 20)
    assert len(sel) == 0
    sel.toggle(9, 20)
    assert len(sel) == 0


def test_drag_selects_span_in_anchor_column_only():
    sel = SlotSelection()
    sel.begin_drag(2, 20)
    sel.drag_to(2, 23)
    sel.drag_to(4, 30)  # other column: ignored
    sel.end_drag()
    assert sel.slots == {(2, 20), (2, 21), (2, 22), (2, 23)}
    assert not sel.dragging


def test_drag_shrinking_restores_cells_outside_the_span():
    sel = SlotSelection([(2, 25)])
    sel.begin_drag(2, 20)
    sel.drag_to(2, 26)
    sel.drag_to(2, 21)
    assert sel.slots == {(2, 20), (2, 21), (2, 25)}


def test_drag_from_selected_cell_deselects():
    sel = SlotSelection.from_ranges([TimeRange("10:00", "12:00", (0,))])
    sel.begin_drag(0, 21)
    sel.drag_to(0, 22)
    sel.end_drag()
    assert sel.to_ranges() == [
        TimeRange("10:00", "10:30", (0,)),
        TimeRange("11:30", "12:00", (0,)),
    ]
