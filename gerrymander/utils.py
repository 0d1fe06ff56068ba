# gerrymander/utils.py
import re
from typing import List

# --------------------------------------------------------------------- #
# Regex patterns (compile once)
# --------------------------------------------------------------------- #
COUNT_PATTERN = re.compile(r"^\s*\+?(\d+)\s*$")


# --------------------------------------------------------------------- #
# Helper: split a raw line on a delimiter
# --------------------------------------------------------------------- #
def split_line(line: str, delimiter: str) -> List[str]:
    """
    Split `line` on every occurrence of `delimiter`, left to right.
    Empty leading/trailing fields are kept and nothing is trimmed.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return line.split(delimiter)


# --------------------------------------------------------------------- #
# Helper: vote / voter counts
# --------------------------------------------------------------------- #
def parse_count(field: str) -> int:
    """Parse a non-negative integer field. Raises ValueError otherwise."""
    if m := COUNT_PATTERN.match(field):
        return int(m.group(1))
    raise ValueError(f"not a non-negative integer: {field!r}")


def join_search_terms(words: List[str]) -> str:
    # "search new york" arrives as ["new", "york"]
    return " ".join(words)
