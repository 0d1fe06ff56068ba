# gerrymander/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Party(Enum):
    DEMOCRATIC = "Democrats"
    REPUBLICAN = "Republicans"


# --------------------------------------------------------------------- #
# 1. Region
# --------------------------------------------------------------------- #
@dataclass
class Region:
    name: str
    district_tallies: List[Tuple[int, int]] = field(default_factory=list)  # (dem, rep)
    eligible_voters: int = 0

    @property
    def district_count(self) -> int:
        return len(self.district_tallies)

    @property
    def key(self) -> str:
        """Lookup key – region names are matched case-insensitively."""
        return self.name.lower()

    def add_district(self, democratic: int, republican: int) -> None:
        self.district_tallies.append((democratic, republican))


# --------------------------------------------------------------------- #
# 2. Fairness result
# --------------------------------------------------------------------- #
@dataclass(frozen=True)
class FairnessResult:
    region: str
    gerrymandered: bool
    disadvantaged: Party
    efficiency_gap: float  # percent
    wasted_democratic: int
    wasted_republican: int
    total_votes: int
    eligible_voters: int
    district_count: int

    def summary_lines(self) -> List[str]:
        """Text block shown by the `stats` command."""
        lines = [f"Gerrymandered: {'Yes' if self.gerrymandered else 'No'}"]
        if self.gerrymandered:
            lines.append(f"Gerrymandered against: {self.disadvantaged.value}")
            lines.append(f"Efficiency Factor: {self.efficiency_gap:g}%")
        lines.extend([
            f"Wasted Democratic votes: {self.wasted_democratic}",
            f"Wasted Republican votes: {self.wasted_republican}",
            f"Eligible voters: {self.eligible_voters}",
        ])
        return lines

    def to_row(self) -> dict:
        return {
            "Region": self.region,
            "Districts": self.district_count,
            "Gerrymandered": self.gerrymandered,
            "Disadvantaged": self.disadvantaged.value,
            "Efficiency Gap": round(self.efficiency_gap, 4),
            "Wasted Democratic": self.wasted_democratic,
            "Wasted Republican": self.wasted_republican,
            "Total Votes": self.total_votes,
            "Eligible Voters": self.eligible_voters,
        }


# --------------------------------------------------------------------- #
# 3. Load result
# --------------------------------------------------------------------- #
@dataclass
class LoadResult:
    success: bool = False
    regions_loaded: int = 0
    voters_merged: int = 0
    skipped: List[str] = field(default_factory=list)
    failed_source: Optional[str] = None  # "primary" | "secondary"
