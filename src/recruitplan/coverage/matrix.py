from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, TypeAlias

from recruitplan.config import Config, cfg


@dataclass(frozen=True)
class CoverageCell:
    """Projected demand vs. supply for one (day, half-hour) cell."""

    demand: int
    supply: int
    closed: bool = False

    def __post_init__(self) -> None:
        if self.demand < 0 or self.supply < 0:
            raise ValueError("demand and supply must be non-negative.")
        if self.closed and (self.demand or self.supply):
            raise ValueError("closed cells must carry zero demand and supply.")


CLOSED_CELL = CoverageCell(demand=0, supply=0, closed=True)

CoverageMatrix: TypeAlias = list[list[CoverageCell]]  # [day][slot]


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def is_open(day: int, hour: int, config: Optional[Config] = None) -> bool:
    start, end = (config or cfg).open_hours(day)
    return start <= hour < end


def noise(seed: int, day: int, slot: int) -> float:
    """Deterministic jitter in [-1, 1) from a sine hash of its inputs."""
    x = math.sin((seed + 1) * 9301 + day * 49297 + slot * 233280) * 43758.5453
    return (x - math.floor(x)) * 2 - 1


def base_demand(role: str, config: Optional[Config] = None) -> int:
    C = config or cfg
    return C.ROLE_BASE_DEMAND.get(role, C.DEFAULT_BASE_DEMAND)


def supply_factor(
    day: int,
    role: Optional[str] = None,
    location: Optional[str] = None,
    config: Optional[Config] = None,
) -> float:
    """
    Share of demand expected to be staffed on ``day``.

    With a known role x location pair the nominal factor is biased by that
    pair's good/bad target split; otherwise the flat nominal factor is used.
    """
    C = config or cfg
    factor = C.SUPPLY_FACTOR + (day % 3) * C.SUPPLY_DAY_STEP
    target = C.location_target(role, location)
    if target is not None:
        good, _ok, bad = target
        factor += C.TARGET_SUPPLY_SPREAD * (good - bad) / 100.0
    return factor


def _demand_at(
    base: int, day: int, slot: int, week_offset: int, C: Config
) -> int:
    hour = slot // 2
    width = C.PEAK_WIDTH_HOURS
    lunch = math.exp(-(((hour - C.LUNCH_HOUR) / width) ** 2))
    dinner = math.exp(-(((hour - C.DINNER_HOUR) / width) ** 2))
    weekend = C.WEEKEND_MULTIPLIER if day >= 5 else 1.0
    phase = 1 + C.PHASE_AMPLITUDE * math.sin(
        (week_offset * 7 + day + slot / C.SLOTS_PER_DAY) * C.PHASE_FREQUENCY
    )
    curve = C.DEMAND_FLOOR + C.PEAK_SCALE * (
        C.LUNCH_WEIGHT * lunch + C.DINNER_WEIGHT * dinner
    )
    return max(0, round_half_up(base * phase * curve * weekend))


def _role_matrix(
    role: str, week_offset: int, location: Optional[str], C: Config
) -> CoverageMatrix:
    base = base_demand(role, C)
    matrix: CoverageMatrix = []
    for d in range(C.DAYS):
        factor = supply_factor(d, role, location, C)
        row: list[CoverageCell] = []
        for s in range(C.SLOTS_PER_DAY):
            if not is_open(d, s // 2, C):
                row.append(CLOSED_CELL)
                continue
            demand = _demand_at(base, d, s, week_offset, C)
            supply = max(0, round_half_up(demand * factor + noise(week_offset, d, s)))
            row.append(CoverageCell(demand=demand, supply=supply))
        matrix.append(row)
    return matrix


def aggregate_matrices(matrices: list[CoverageMatrix]) -> CoverageMatrix:
    """Sum demand/supply cell-wise; a cell is closed only if closed everywhere."""
    if not matrices:
        return []
    days = len(matrices[0])
    slots = len(matrices[0][0]) if days else 0
    out: CoverageMatrix = []
    for d in range(days):
        row: list[CoverageCell] = []
        for s in range(slots):
            cells = [m[d][s] for m in matrices]
            if all(c.closed for c in cells):
                row.append(CLOSED_CELL)
                continue
            row.append(
                CoverageCell(
                    demand=sum(c.demand for c in cells),
                    supply=sum(c.supply for c in cells),
                )
            )
        out.append(row)
    return out


def generate_coverage_matrix(
    role: Optional[str],
    week_offset: int = 0,
    location: Optional[str] = None,
    config: Optional[Config] = None,
) -> CoverageMatrix:
    """
    Build the synthetic 7 x 48 demand/supply matrix.

    Parameters
    ----------
    role:
        Role name from the catalog, any other string (uses the default base
        demand), or ``None`` to aggregate across every catalog role.
    week_offset:
        Signed week offset; 0 is the current week.
    location:
        Optional location code biasing supply towards that location's targets.
    config:
        Defaults to ``recruitplan.config.cfg``.

    Returns
    -------
    CoverageMatrix
        ``matrix[day][slot]`` with day 0 = Monday and slot 0 = 00:00.
    """
    C = config or cfg
    if role is None:
        return aggregate_matrices(
            [_role_matrix(r, week_offset, location, C) for r in C.roles()]
        )
    return _role_matrix(role, week_offset, location, C)


def open_cells(matrix: CoverageMatrix) -> list[tuple[int, int, CoverageCell]]:
    return [
        (d, s, cell)
        for d, row in enumerate(matrix)
        for s, cell in enumerate(row)
        if not cell.closed
    ]
