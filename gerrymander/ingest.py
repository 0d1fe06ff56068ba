# gerrymander/ingest.py
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple, Union

from tqdm import tqdm

from .config import FIELD_DELIMITER, FIELDS_PER_DISTRICT, SHOW_PROGRESS, SOURCE_ENCODING
from .errors import MalformedRecord, SourceUnavailable
from .logger import get_logger
from .models import LoadResult, Region
from .registry import RegionRegistry
from .utils import parse_count, split_line

log = get_logger(__name__)

PathLike = Union[str, Path]


class TallyParser:
    """
    Static parser: district-tally line → Region.

        Texas,1,600,400,2,300,700,3,500,500
        name  └ label, dem, rep ┘ (repeated per district)
    """

    @staticmethod
    def parse(line: str) -> Region:
        fields = split_line(line, FIELD_DELIMITER)
        region = Region(name=fields[0])

        groups = fields[1:]
        if len(groups) % FIELDS_PER_DISTRICT:
            raise MalformedRecord(line, "incomplete district group")

        for i in range(0, len(groups), FIELDS_PER_DISTRICT):
            # groups[i] is the district label – not used
            dem_field, rep_field = groups[i + 1], groups[i + 2]
            try:
                region.add_district(parse_count(dem_field), parse_count(rep_field))
            except ValueError as e:
                raise MalformedRecord(line, f"district {i // FIELDS_PER_DISTRICT + 1}: {e}") from e

        log.debug(f"Parsed tallies: {region.name} → {region.district_tallies}")
        return region


class EligibleVotersParser:
    """Static parser: eligible-voter line → (name, count)."""

    @staticmethod
    def parse(line: str) -> Tuple[str, int]:
        fields = split_line(line, FIELD_DELIMITER)
        if len(fields) < 2:
            raise MalformedRecord(line, "missing eligible voter count")
        try:
            return fields[0], parse_count(fields[1])
        except ValueError as e:
            raise MalformedRecord(line, str(e)) from e


# --------------------------------------------------------------------- #
# Line-level entry points
# --------------------------------------------------------------------- #
def ingest_district_line(line: str, registry: RegionRegistry) -> Region:
    region = registry.add(TallyParser.parse(line))
    log.info(f"...{region.name}...{region.district_count} districts total")
    return region


def ingest_eligible_voters_line(line: str, registry: RegionRegistry) -> Optional[Tuple[str, int]]:
    """
    Merge one eligible-voter record into the matching region.
    Returns (region name, count), or None when no region has that name.
    """
    name, voters = EligibleVotersParser.parse(line)
    region = registry.find(name)
    if region is None:
        log.warning(f"No region named '{name}' – eligible voters skipped")
        return None

    region.eligible_voters = voters
    log.info(f"...{name}...{voters} eligible voters")
    return region.name, voters


# --------------------------------------------------------------------- #
# File-level orchestration
# --------------------------------------------------------------------- #
def _read_lines(path: Path, which: str) -> Iterator[Tuple[int, bytes]]:
    # bytes, so one badly encoded line cannot abort the whole file
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise SourceUnavailable(which, str(path)) from e

    with fh:
        log.info(f"Reading: {path}")
        for lineno, raw in enumerate(
            tqdm(fh, desc=path.stem, unit="line", leave=False, disable=not SHOW_PROGRESS),
            start=1,
        ):
            line = raw.rstrip(b"\r\n")
            if not line:
                log.debug(f"{path.name}:{lineno} blank line skipped")
                continue
            yield lineno, line


def _decode(raw: bytes) -> str:
    try:
        return raw.decode(SOURCE_ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedRecord(raw.decode(SOURCE_ENCODING, errors="replace"), f"not {SOURCE_ENCODING} text") from e


def _ingest_file(
    path: Path,
    which: str,
    handler: Callable[[str, RegionRegistry], object],
    registry: RegionRegistry,
    result: LoadResult,
) -> int:
    """Feed every line of `path` to `handler`; returns how many lines were accepted."""
    accepted = 0
    for lineno, raw in _read_lines(path, which):
        try:
            if handler(_decode(raw), registry) is not None:
                accepted += 1
        except MalformedRecord as e:
            msg = f"{path.name}:{lineno} {e}"
            log.warning(f"SKIP {msg}")
            result.skipped.append(msg)
    return accepted


def load_sources(primary_path: PathLike, secondary_path: PathLike, registry: RegionRegistry) -> LoadResult:
    """
    Load district tallies from `primary_path`, then merge eligible voters from
    `secondary_path`. Both sources must open or `registry` is left untouched:
    everything is staged in a scratch registry and committed at the end.
    """
    result = LoadResult()
    staging = RegionRegistry()

    try:
        result.regions_loaded = _ingest_file(
            Path(primary_path), "primary", ingest_district_line, staging, result
        )
        result.voters_merged = _ingest_file(
            Path(secondary_path), "secondary", ingest_eligible_voters_line, staging, result
        )
    except SourceUnavailable as e:
        log.error(str(e))
        result.failed_source = e.which
        result.regions_loaded = 0
        result.voters_merged = 0
        return result

    registry.extend(staging)
    result.success = True
    log.debug(
        f"Load complete: {result.regions_loaded} regions, "
        f"{result.voters_merged} voter records, {len(result.skipped)} skipped"
    )
    return result
