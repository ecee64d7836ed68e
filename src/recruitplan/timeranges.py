from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAYS = len(DAY_NAMES)
SLOTS_PER_DAY = 48
SLOT_MINUTES = 30

Slot = tuple[int, int]  # (day, slot index)

_HHMM = re.compile(r"^(\d{2}):(\d{2})$")


def slot_to_time(slot: int) -> str:
    """Slot index -> ``"HH:MM"``; slot 48 (end of day) is ``"24:00"``."""
    if not (0 <= slot <= SLOTS_PER_DAY):
        raise ValueError(f"slot must be within [0, {SLOTS_PER_DAY}]; got {slot}")
    minutes = slot * SLOT_MINUTES
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def time_to_slot(value: str) -> int:
    """``"HH:MM"`` on the half-hour grid -> slot index."""
    match = _HHMM.match(value)
    if match is None:
        raise ValueError(f"Expected a zero-padded 'HH:MM' string; got {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    total = hours * 60 + minutes
    if minutes >= 60 or total > 24 * 60 or total % SLOT_MINUTES:
        raise ValueError(f"{value!r} is not on the {SLOT_MINUTES}-minute grid")
    return total // SLOT_MINUTES


@dataclass(frozen=True)
class TimeRange:
    """
    A recurring priority window. ``days`` of ``None`` means every day.
    """

    start: str
    end: str
    days: Optional[tuple[int, ...]] = None

    def __post_init__(self) -> None:
        if time_to_slot(self.start) >= time_to_slot(self.end):
            raise ValueError(f"start must precede end; got {self.start}-{self.end}")
        if self.days is not None:
            days = tuple(sorted({int(d) for d in self.days}))
            if any(not (0 <= d < DAYS) for d in days):
                raise ValueError(f"days must be within [0, {DAYS}); got {days}")
            object.__setattr__(self, "days", days)

    @property
    def start_slot(self) -> int:
        return time_to_slot(self.start)

    @property
    def end_slot(self) -> int:
        return time_to_slot(self.end)

    def active_days(self) -> tuple[int, ...]:
        """Days this range applies to; ``None`` or empty means all of them."""
        return self.days if self.days else tuple(range(DAYS))


def _runs(slots: list[int]) -> list[tuple[int, int]]:
    """Merge sorted slot indices into inclusive ``(first, last)`` runs."""
    runs: list[tuple[int, int]] = []
    for s in slots:
        if runs and s == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], s)
        else:
            runs.append((s, s))
    return runs


def encode_slots_to_ranges(slots: Iterable[Slot]) -> list[TimeRange]:
    """
    Collapse individually selected half-hour cells into the minimal ordered list
    of ranges. Days sharing identical bounds merge into one range.
    """
    by_day: dict[int, set[int]] = defaultdict(set)
    for day, slot in slots:
        if 0 <= day < DAYS and 0 <= slot < SLOTS_PER_DAY:
            by_day[int(day)].add(int(slot))

    by_bounds: dict[tuple[str, str], list[int]] = defaultdict(list)
    for day in sorted(by_day):
        for first, last in _runs(sorted(by_day[day])):
            by_bounds[(slot_to_time(first), slot_to_time(last + 1))].append(day)

    ranges = [
        TimeRange(start=start, end=end, days=tuple(days))
        for (start, end), days in by_bounds.items()
    ]
    ranges.sort(key=lambda r: (r.start, r.end, r.days))
    return ranges


def decode_ranges_to_slots(ranges: Iterable[TimeRange]) -> set[Slot]:
    """Expand ranges back into the ``(day, slot)`` cells they cover."""
    out: set[Slot] = set()
    for r in ranges:
        span = range(r.start_slot, r.end_slot)
        for day in r.active_days():
            out.update((day, s) for s in span)
    return out


def format_days(days: Optional[Iterable[int]]) -> str:
    if days is None:
        return ""
    ordered = sorted(set(days))
    if not ordered:
        return ""
    if len(ordered) == DAYS:
        return "All days"
    return ", ".join(DAY_NAMES[d] for d in ordered)


def format_range(r: TimeRange) -> str:
    label = format_days(r.active_days())
    return f"{r.start}-{r.end} ({label})"


class SlotSelection:
    """
    Editable set of selected half-hour cells.

    Supports click-to-toggle and vertical drags. A drag is locked to the column
    it started in and either selects or deselects depending on the state of the
    anchor cell.
    """

    def __init__(self, slots: Iterable[Slot] = ()) -> None:
        self.slots: set[Slot] = {
            (int(d), int(s))
            for d, s in slots
            if 0 <= d < DAYS and 0 <= s < SLOTS_PER_DAY
        }
        self._anchor: Optional[Slot] = None
        self._selecting = True
        self._snapshot: set[Slot] = set()

    @classmethod
    def from_ranges(cls, ranges: Iterable[TimeRange]) -> "SlotSelection":
        return cls(decode_ranges_to_slots(ranges))

    def __len__(self) -> int:
        return len(self.slots)

    def __contains__(self, item: object) -> bool:
        return item in self.slots

    @property
    def dragging(self) -> bool:
        return self._anchor is not None

    def toggle(self, day: int, slot: int) -> None:
        cell = (day, slot)
        if not (0 <= day < DAYS and 0 <= slot < SLOTS_PER_DAY):
            return
        if cell in self.slots:
            self.slots.remove(cell)
        else:
            self.slots.add(cell)

    def begin_drag(self, day: int, slot: int) -> None:
        if not (0 <= day < DAYS and 0 <= slot < SLOTS_PER_DAY):
            return
        self._anchor = (day, slot)
        self._selecting = (day, slot) not in self.slots
        self._snapshot = set(self.slots)
        self._apply(slot)

    def drag_to(self, day: int, slot: int) -> None:
        if self._anchor is None or day != self._anchor[0]:
            return
        if not (0 <= slot < SLOTS_PER_DAY):
            return
        self._apply(slot)

    def end_drag(self) -> None:
        self._anchor = None
        self._snapshot = set()

    def _apply(self, slot: int) -> None:
        assert self._anchor is not None
        day, anchor_slot = self._anchor
        lo, hi = sorted((anchor_slot, slot))
        span = {(day, s) for s in range(lo, hi + 1)}
        if self._selecting:
            self.slots = self._snapshot | span
        else:
            self.slots = self._snapshot - span

    def clear(self) -> None:
        self.slots.clear()
        self.end_drag()

    def to_ranges(self) -> list[TimeRange]:
        return encode_slots_to_ranges(self.slots)
