from __future__ import annotations

import pytest

from recruitplan.config import Config
from recruitplan.coverage.matrix import (
    CLOSED_CELL,
    CoverageCell,
    aggregate_matrices,
    base_demand,
    generate_coverage_matrix,
    is_open,
    noise,
    open_cells,
    supply_factor,
)


def test_matrix_shape_is_seven_by_forty_eight():
    matrix = generate_coverage_matrix("Cook", 0)
    assert len(matrix) == 7
    assert all(len(row) == 48 for row in matrix)


def test_generation_is_deterministic():
    a = generate_coverage_matrix("Server", 3, "BOS")
    b = generate_coverage_matrix("Server", 3, "BOS")
    assert a == b


def test_week_offset_changes_the_matrix():
    assert generate_coverage_matrix("Cook", 0) != generate_coverage_matrix("Cook", 1)


def test_closed_cells_follow_open_hours_policy():
    matrix = generate_coverage_matrix("Cook", 0)
    # Mon-Fri 09:00-21:00
    assert matrix[0][17].closed and not matrix[0][18].closed
    assert not matrix[4][41].closed and matrix[4][42].closed
    # Sat-Sun 10:00-22:00
    assert matrix[5][19].closed and not matrix[5][20].closed
    assert not matrix[6][43].closed and matrix[6][44].closed
    for row in matrix:
        for cell in row:
            if cell.closed:
                assert cell.demand == 0 and cell.supply == 0
            assert cell.demand >= 0 and cell.supply >= 0


def test_open_cells_have_demand():
    for _, _, cell in open_cells(generate_coverage_matrix("Host", -2)):
        assert cell.demand >= 1


def test_dinner_peak_exceeds_opening_hour():
    matrix = generate_coverage_matrix("Cook", 0)
    assert matrix[0][38].demand > matrix[0][18].demand  # 19:00 vs 09:00


def test_weekend_multiplier_raises_demand():
    matrix = generate_coverage_matrix("Cook", 0)
    # same slot, Saturday vs Friday; 25% uplift dominates the 3% wobble
    assert matrix[5][38].demand > matrix[4][38].demand


def test_aggregate_mode_sums_roles():
    cfg = Config()
    total = generate_coverage_matrix(None, 1, config=cfg)
    per_role = [generate_coverage_matrix(r, 1, config=cfg) for r in cfg.roles()]
    for d in range(7):
        for s in range(48):
            cells = [m[d][s] for m in per_role]
            assert total[d][s].demand == sum(c.demand for c in cells)
            assert total[d][s].supply == sum(c.supply for c in cells)
            assert total[d][s].closed == all(c.closed for c in cells)


def test_aggregate_only_closes_cells_closed_everywhere():
    open_row = [[CoverageCell(demand=2, supply=1)]]
    closed_row = [[CLOSED_CELL]]
    merged = aggregate_matrices([open_row, closed_row])
    assert merged == [[CoverageCell(demand=2, supply=1)]]
    assert aggregate_matrices([closed_row, closed_row]) == [[CLOSED_CELL]]
    assert aggregate_matrices([]) == []


def test_unknown_role_uses_default_base_demand():
    assert base_demand("Dishwasher") == 4
    assert base_demand("Cook") == 10


def test_noise_is_pure_and_bounded():
    values = [noise(w, d, s) for w in (-1, 0, 5) for d in range(7) for s in range(48)]
    assert all(-1.0 <= v < 1.0 for v in values)
    assert noise(2, 3, 4) == noise(2, 3, 4)


def test_supply_factor_uses_location_targets():
    assert supply_factor(0) == pytest.approx(0.86)
    assert supply_factor(2) == pytest.approx(0.92)
    # Host @ BOS targets 55/30/15 -> +0.3 * 0.40
    assert supply_factor(0, "Host", "BOS") == pytest.approx(0.98)
    # Cook @ ORD targets 15/30/55 -> -0.3 * 0.40
    assert supply_factor(0, "Cook", "ORD") == pytest.approx(0.74)
    # unknown location falls back to the flat factor
    assert supply_factor(0, "Cook", "XYZ") == pytest.approx(0.86)


def test_location_biases_supply():
    good = generate_coverage_matrix("Host", 0, "BOS")
    bad = generate_coverage_matrix("Host", 0, "DCA")
    assert sum(c.supply for _, _, c in open_cells(good)) > sum(
        c.supply for _, _, c in open_cells(bad)
    )


def test_is_open_respects_config():
    cfg = Config(WEEKDAY_OPEN_HOURS=(6, 14))
    assert is_open(0, 6, cfg) and not is_open(0, 14, cfg)
    assert is_open(6, 10, cfg)


def test_cell_rejects_closed_non_zero():
    with pytest.raises(ValueError):
        CoverageCell(demand=1, supply=0, closed=True)
    with pytest.raises(ValueError):
        CoverageCell(demand=-1, supply=0)
