import pytest

from gerrymander.analyzer import FairnessAnalyzer, classify, compute_wasted_votes
from gerrymander.errors import DegenerateRegion
from gerrymander.models import Party, Region


def _region(*tallies, name="Test"):
    return Region(name, list(tallies))


# --------------------------------------------------------------------- #
# Wasted votes
# --------------------------------------------------------------------- #
def test_democratic_win_wastes_surplus_and_all_losing_votes():
    # threshold = 1000 // 2 + 1 = 501
    assert compute_wasted_votes(_region((600, 400))) == (99, 400, 1000)


def test_republican_win_wastes_surplus_and_all_losing_votes():
    assert compute_wasted_votes(_region((300, 700))) == (300, 199, 1000)


def test_tie_is_a_republican_win():
    assert compute_wasted_votes(_region((5, 5))) == (5, 2, 10)


def test_totals_accumulate_over_districts(texas):
    assert compute_wasted_votes(texas) == (99 + 300 + 500, 400 + 199 + 249, 3000)


def test_single_district_bounds():
    for dem in range(0, 30):
        for rep in range(0, 30):
            if dem + rep == 0:
                continue
            wasted_dem, wasted_rep, total = compute_wasted_votes(_region((dem, rep)))
            assert wasted_dem >= 0 and wasted_rep >= 0, (dem, rep)
            assert wasted_dem + wasted_rep <= dem + rep, (dem, rep)
            assert total == dem + rep


def test_empty_district_wastes_nothing():
    assert compute_wasted_votes(_region((0, 0), (600, 400))) == (99, 400, 1000)


# --------------------------------------------------------------------- #
# Classification
# --------------------------------------------------------------------- #
def test_texas_is_not_gerrymandered(texas):
    result = classify(texas)
    assert not result.gerrymandered
    assert result.efficiency_gap == pytest.approx(1.7)
    assert result.disadvantaged is Party.DEMOCRATIC
    assert result.eligible_voters == 1000000
    assert result.district_count == 3


def test_gerrymandered_against_republicans():
    result = classify(_region((700, 300), (700, 300), (100, 900)))
    assert result.gerrymandered
    assert result.disadvantaged is Party.REPUBLICAN
    assert result.wasted_democratic == 498
    assert result.wasted_republican == 999
    assert result.efficiency_gap == pytest.approx(16.7)


def test_swapping_parties_keeps_gap_and_flips_label():
    tallies = [(700, 300), (640, 360), (100, 900), (450, 550)]
    result = classify(_region(*tallies))
    swapped = classify(_region(*[(r, d) for d, r in tallies]))

    assert swapped.efficiency_gap == pytest.approx(result.efficiency_gap)
    assert swapped.disadvantaged is not result.disadvantaged
    assert swapped.gerrymandered == result.gerrymandered


def test_fewer_than_three_districts_never_gerrymandered():
    result = classify(_region((700, 300), (100, 900)))
    assert result.efficiency_gap >= 7.0
    assert not result.gerrymandered

    assert not classify(_region((1000, 0))).gerrymandered


def test_threshold_is_inclusive():
    # (42, 156) needs 100 to win → wasted D 42, wasted R 56; gap = 14 / 200
    region = _region((1, 0), (1, 0), (42, 156))
    assert compute_wasted_votes(region) == (42, 56, 200)
    result = classify(region)
    assert result.efficiency_gap == 7.0
    assert result.gerrymandered
    assert result.disadvantaged is Party.REPUBLICAN

    assert not classify(_region((1, 0), (1, 0), (43, 155))).gerrymandered


def test_small_districts():
    region = _region((1, 0), (1, 0), (3, 4), (1, 0))
    wasted_dem, wasted_rep, total = compute_wasted_votes(region)
    assert (wasted_dem, wasted_rep, total) == (3, 0, 10)
    result = classify(region)
    assert result.efficiency_gap == pytest.approx(30.0)
    assert result.gerrymandered
    assert result.disadvantaged is Party.DEMOCRATIC


def test_equal_wasted_votes_report_republicans():
    result = classify(_region((5, 0), (0, 5)))
    assert result.wasted_democratic == result.wasted_republican
    assert result.disadvantaged is Party.REPUBLICAN


def test_region_without_votes_is_not_gerrymandered():
    result = classify(_region((0, 0), (0, 0), (0, 0)))
    assert not result.gerrymandered
    assert result.efficiency_gap == 0.0
    assert result.total_votes == 0

    assert not classify(_region()).gerrymandered


def test_efficiency_gap_raises_on_zero_votes():
    with pytest.raises(DegenerateRegion):
        FairnessAnalyzer.efficiency_gap(_region(), 0, 0, 0)
