# gerrymander/plot.py
from typing import List, Tuple

from .config import DEMOCRATIC_MARK, PLOT_WIDTH, REPUBLICAN_MARK
from .models import Region


def render_district(dem: int, rep: int) -> str:
    """
    One bar of PLOT_WIDTH marks: democratic share first, republican after.
    A district with no votes renders as an empty line.
    """
    if dem + rep <= 0:
        return ""
    dem_share = int(100.0 * dem / (dem + rep))
    return DEMOCRATIC_MARK * dem_share + REPUBLICAN_MARK * (PLOT_WIDTH - dem_share)


def plot_region(region: Region) -> List[Tuple[int, str]]:
    """(district number, bar) per district, numbered from 1."""
    return [
        (number, render_district(dem, rep))
        for number, (dem, rep) in enumerate(region.district_tallies, start=1)
    ]
