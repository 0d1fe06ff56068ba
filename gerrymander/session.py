# gerrymander/session.py
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .analyzer import FairnessAnalyzer
from .config import OUTPUT_CSV
from .errors import AlreadyLoaded, NoRegionSelected
from .ingest import load_sources
from .logger import get_logger
from .models import FairnessResult, LoadResult, Region
from .plot import plot_region
from .registry import RegionRegistry
from .writer import StatsWriter

log = get_logger(__name__)


class Session:
    """
    State carried between CLI commands: the registry, whether a load has
    succeeded, and the region picked by the last successful search.
    """

    def __init__(self, registry: Optional[RegionRegistry] = None):
        self.registry = registry if registry is not None else RegionRegistry()
        self.data_loaded = False
        self.chosen: Optional[Region] = None

    # --------------------------------------------------------------------- #
    # Loading
    # --------------------------------------------------------------------- #
    def load_sources(self, primary_path: Union[str, Path], secondary_path: Union[str, Path]) -> LoadResult:
        if self.data_loaded:
            raise AlreadyLoaded()

        result = load_sources(primary_path, secondary_path, self.registry)
        self.data_loaded = result.success
        return result

    # --------------------------------------------------------------------- #
    # Lookup
    # --------------------------------------------------------------------- #
    def find_region(self, name: str) -> Optional[Region]:
        """Case-insensitive search; a hit becomes the chosen region, a miss clears it."""
        region = self.registry.find(name)
        if region is None:
            log.debug(f"Search miss: '{name}'")
            self.chosen = None
            return None
        self.chosen = region
        return region

    def _resolve(self, region: Optional[Region]) -> Region:
        if region is not None:
            return region
        if self.chosen is None:
            raise NoRegionSelected()
        return self.chosen

    # --------------------------------------------------------------------- #
    # Analysis
    # --------------------------------------------------------------------- #
    def get_stats(self, region: Optional[Region] = None) -> FairnessResult:
        return FairnessAnalyzer.classify(self._resolve(region))

    def get_district_plot(self, region: Optional[Region] = None) -> List[Tuple[int, str]]:
        return plot_region(self._resolve(region))

    def export_summary(self, path: Union[str, Path] = OUTPUT_CSV) -> Path:
        writer = StatsWriter(Path(path))
        writer.add_results(FairnessAnalyzer.classify(r) for r in self.registry)
        out = writer.flush()
        log.info(f"Wrote {len(self.registry)} regions → {out}")
        return out
