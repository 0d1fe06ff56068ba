# gerrymander/__init__.py
"""
Make the `gerrymander` directory a proper Python package.
This file allows:
    from gerrymander import Session
    from gerrymander.models import Region, FairnessResult
    from gerrymander.analyzer import FairnessAnalyzer
"""

# Core domain objects
from .models import (
    Region,
    FairnessResult,
    LoadResult,
    Party,
)
from .registry import RegionRegistry

# Pipeline + analysis
from .ingest import (
    TallyParser,
    EligibleVotersParser,
    ingest_district_line,
    ingest_eligible_voters_line,
    load_sources,
)
from .analyzer import FairnessAnalyzer, compute_wasted_votes, classify
from .plot import render_district, plot_region

# Session entry point
from .session import Session

__version__ = "0.1.0"
__all__ = [
    "Region",
    "FairnessResult",
    "LoadResult",
    "Party",
    "RegionRegistry",
    "TallyParser",
    "EligibleVotersParser",
    "ingest_district_line",
    "ingest_eligible_voters_line",
    "load_sources",
    "FairnessAnalyzer",
    "compute_wasted_votes",
    "classify",
    "render_district",
    "plot_region",
    "Session",
]
