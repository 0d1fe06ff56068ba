# gerrymander/registry.py
from typing import Dict, Iterator, List, Optional
from .errors import RegionNotFound
from .logger import get_logger
from .models import Region

log = get_logger(__name__)


class RegionRegistry:
    """
    In-memory store of every Region ingested in a session.

    Regions are kept in insertion order. Names are indexed lowercased, so
    lookups are case-insensitive. A repeated name is appended as its own
    entry (nothing is merged); lookups keep returning the first one.
    """

    def __init__(self):
        self._regions: List[Region] = []
        self._index: Dict[str, Region] = {}

    # --------------------------------------------------------------------- #
    def add(self, region: Region) -> Region:
        if region.key in self._index:
            log.warning(f"Duplicate region '{region.name}' – kept as a separate entry")
        else:
            self._index[region.key] = region
        self._regions.append(region)
        return region

    def extend(self, other: "RegionRegistry") -> None:
        # duplicates were already reported when `other` was filled
        for region in other:
            self._index.setdefault(region.key, region)
            self._regions.append(region)

    # --------------------------------------------------------------------- #
    def find(self, name: str) -> Optional[Region]:
        return self._index.get(name.lower())

    def get(self, name: str) -> Region:
        if region := self.find(name):
            return region
        raise RegionNotFound(name)

    # --------------------------------------------------------------------- #
    @property
    def is_empty(self) -> bool:
        return not self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None
