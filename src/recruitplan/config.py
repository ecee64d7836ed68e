from dataclasses import dataclass, field
from typing import Optional, TypeAlias

# role -> location -> (good %, ok %, bad %)
TargetTable: TypeAlias = dict[str, dict[str, tuple[int, int, int]]]


def _default_location_targets() -> TargetTable:
    return {
        "Cook": {
            "BOS": (20, 30, 50),
            "LGA": (25, 35, 40),
            "DCA": (35, 35, 30),
            "ORD": (15, 30, 55),
        },
        "Server": {
            "BOS": (40, 35, 25),
            "LGA": (45, 35, 20),
            "DCA": (30, 40, 30),
            "ORD": (35, 35, 30),
        },
        "Bartender": {
            "BOS": (25, 30, 45),
            "LGA": (30, 35, 35),
            "DCA": (20, 30, 50),
            "ORD": (40, 35, 25),
        },
        "Host": {
            "BOS": (55, 30, 15),
            "LGA": (50, 30, 20),
            "DCA": (45, 35, 20),
            "ORD": (50, 35, 15),
        },
    }


@dataclass
class Config:

    # Weekly grid
    DAYS: int = 7
    SLOTS_PER_DAY: int = 48
    SLOT_MINUTES: int = 30

    # Open hours, [open, close) in whole hours
    WEEKDAY_OPEN_HOURS: tuple[int, int] = (9, 21)  # Mon-Fri
    WEEKEND_OPEN_HOURS: tuple[int, int] = (10, 22)  # Sat-Sun

    ### DEMAND ###

    ROLE_BASE_DEMAND: dict[str, int] = field(
        default_factory=lambda: {"Cook": 10, "Server": 8, "Bartender": 5, "Host": 4}
    )
    DEFAULT_BASE_DEMAND: int = 4

    # Bimodal lunch/dinner curve
    LUNCH_HOUR: float = 12.0
    DINNER_HOUR: float = 19.0
    PEAK_WIDTH_HOURS: float = 2.0
    LUNCH_WEIGHT: float = 0.7
    DINNER_WEIGHT: float = 1.0
    PEAK_SCALE: float = 1.2
    DEMAND_FLOOR: float = 0.25
    WEEKEND_MULTIPLIER: float = 1.25

    # Slow wobble across week offsets
    PHASE_AMPLITUDE: float = 0.03
    PHASE_FREQUENCY: float = 0.9

    ### SUPPLY ###

    SUPPLY_FACTOR: float = 0.86
    SUPPLY_DAY_STEP: float = 0.03
    TARGET_SUPPLY_SPREAD: float = 0.30
    LOCATION_TARGETS: TargetTable = field(default_factory=_default_location_targets)

    ### CLASSIFICATION ###

    BUCKET_THRESHOLD: float = 0.05
    # OVER_LIGHT/UNDER_LIGHT, OVER/UNDER, STRONG_OVER/STRONG_UNDER
    SEVERITY_THRESHOLDS: tuple[float, float, float] = (0.10, 0.20, 0.30)

    ### SUGGESTIONS ###

    MIN_SUGGESTION_SLOTS: int = 4
    MAX_SUGGESTIONS: int = 3
    ALL_TIMES_START: str = "08:00"
    ALL_TIMES_END: str = "23:30"

    ### PROJECTION ###

    CREST_BASE: float = 0.85
    CREST_HUMP: float = 0.35
    CREST_WOBBLE: float = 0.05
    CREST_PHASE_STEP: float = 0.17
    CREST_MIN: float = 0.70
    CREST_MAX: float = 1.35
    SOURCE_PHASE_INDEX: dict[str, int] = field(
        default_factory=lambda: {
            "indeed": 0,
            "facebook": 1,
            "craigslist": 2,
            "referrals": 3,
            "qr_posters": 4,
        }
    )

    # Default campaign window is today -> today + DEFAULT_WINDOW_DAYS
    DEFAULT_WINDOW_DAYS: int = 27

    # Role shown when none is selected
    DEFAULT_ROLE: Optional[str] = "Cook"

    def validate(self):
        """
        Validate the Config object has sensible values before generating data.
        """
        if self.DAYS != 7:
            raise ValueError("DAYS must be 7 (Monday-first week).")
        if self.SLOTS_PER_DAY * self.SLOT_MINUTES != 24 * 60:
            raise ValueError("SLOTS_PER_DAY * SLOT_MINUTES must cover 24 hours.")
        for attr in ("WEEKDAY_OPEN_HOURS", "WEEKEND_OPEN_HOURS"):
            start, end = getattr(self, attr)
            if not (0 <= start < end <= 24):
                raise ValueError(f"{attr} must satisfy 0 <= open < close <= 24.")
        if any(v < 0 for v in self.ROLE_BASE_DEMAND.values()):
            raise ValueError("ROLE_BASE_DEMAND values must be non-negative.")
        if self.DEFAULT_BASE_DEMAND < 0:
            raise ValueError("DEFAULT_BASE_DEMAND must be non-negative.")
        if self.PEAK_WIDTH_HOURS <= 0:
            raise ValueError("PEAK_WIDTH_HOURS must be > 0.")
        if self.SUPPLY_FACTOR < 0:
            raise ValueError("SUPPLY_FACTOR must be non-negative.")
        for role, by_loc in self.LOCATION_TARGETS.items():
            for loc, split in by_loc.items():
                if len(split) != 3 or sum(split) != 100:
                    raise ValueError(
                        f"LOCATION_TARGETS[{role!r}][{loc!r}] must be a "
                        "(good, ok, bad) split summing to 100."
                    )
        if not (0.0 < self.BUCKET_THRESHOLD < 1.0):
            raise ValueError("BUCKET_THRESHOLD must be within (0, 1).")
        lo, mid, hi = self.SEVERITY_THRESHOLDS
        if not (0.0 < lo < mid < hi):
            raise ValueError("SEVERITY_THRESHOLDS must be strictly increasing and > 0.")
        if self.MIN_SUGGESTION_SLOTS <= 0:
            raise ValueError("MIN_SUGGESTION_SLOTS must be > 0.")
        if self.MAX_SUGGESTIONS < 0:
            raise ValueError("MAX_SUGGESTIONS must be non-negative.")
        if not (0.0 <= self.CREST_MIN <= self.CREST_MAX):
            raise ValueError("Require 0 <= CREST_MIN <= CREST_MAX.")
        if self.DEFAULT_WINDOW_DAYS < 0:
            raise ValueError("DEFAULT_WINDOW_DAYS must be non-negative.")

    def roles(self) -> list[str]:
        """Role catalog in display order."""
        return list(self.ROLE_BASE_DEMAND)

    def open_hours(self, day: int) -> tuple[int, int]:
        return self.WEEKDAY_OPEN_HOURS if day <= 4 else self.WEEKEND_OPEN_HOURS

    def location_target(
        self, role: str | None, location: str | None
    ) -> Optional[tuple[int, int, int]]:
        if role is None or location is None:
            return None
        return self.LOCATION_TARGETS.get(role, {}).get(location)


cfg = Config()
