# gerrymander/analyzer.py
from typing import Tuple

from .config import EFFICIENCY_GAP_THRESHOLD, MIN_DISTRICTS
from .errors import DegenerateRegion
from .logger import get_logger
from .models import FairnessResult, Party, Region

log = get_logger(__name__)


class FairnessAnalyzer:
    """
    Efficiency-gap analysis of one region's districting plan.

    A vote is wasted when it is cast for the district's loser, or for the
    winner beyond the (d + r) // 2 + 1 votes needed to win. The gap is the
    difference between both parties' wasted totals as a share of all votes.
    """

    # --------------------------------------------------------------------- #
    @staticmethod
    def winning_threshold(dem: int, rep: int) -> int:
        """
        Votes the district winner needed. A tie goes to the Republican, whose
        threshold is then taken over its own tally (5/5 → 3) so the surplus
        never drops below zero.
        """
        if dem == rep:
            return rep // 2 + 1
        return (dem + rep) // 2 + 1

    @staticmethod
    def compute_wasted_votes(region: Region) -> Tuple[int, int, int]:
        """Return (wasted democratic, wasted republican, total votes)."""
        wasted_dem = wasted_rep = total = 0

        for dem, rep in region.district_tallies:
            if dem + rep == 0:
                continue

            if dem > rep:
                wasted_dem += dem - FairnessAnalyzer.winning_threshold(dem, rep)
                wasted_rep += rep
            else:
                wasted_dem += dem
                wasted_rep += rep - FairnessAnalyzer.winning_threshold(dem, rep)

            total += dem + rep

        return wasted_dem, wasted_rep, total

    @staticmethod
    def efficiency_gap(region: Region, wasted_dem: int, wasted_rep: int, total: int) -> float:
        if total == 0:
            raise DegenerateRegion(region.name)
        return 100.0 * abs(wasted_dem - wasted_rep) / total

    # --------------------------------------------------------------------- #
    @staticmethod
    def classify(region: Region) -> FairnessResult:
        wasted_dem, wasted_rep, total = FairnessAnalyzer.compute_wasted_votes(region)

        try:
            gap = FairnessAnalyzer.efficiency_gap(region, wasted_dem, wasted_rep, total)
        except DegenerateRegion as e:
            log.debug(f"{e} – treated as not gerrymandered")
            gap = 0.0

        gerrymandered = gap >= EFFICIENCY_GAP_THRESHOLD and region.district_count >= MIN_DISTRICTS
        disadvantaged = Party.DEMOCRATIC if wasted_dem > wasted_rep else Party.REPUBLICAN

        log.debug(
            f"{region.name}: wasted D={wasted_dem} R={wasted_rep} total={total} "
            f"gap={gap:.4f}% districts={region.district_count} → {gerrymandered}"
        )
        return FairnessResult(
            region=region.name,
            gerrymandered=gerrymandered,
            disadvantaged=disadvantaged,
            efficiency_gap=gap,
            wasted_democratic=wasted_dem,
            wasted_republican=wasted_rep,
            total_votes=total,
            eligible_voters=region.eligible_voters,
            district_count=region.district_count,
        )


# Module-level shortcuts
compute_wasted_votes = FairnessAnalyzer.compute_wasted_votes
classify = FairnessAnalyzer.classify
