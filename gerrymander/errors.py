# gerrymander/errors.py
from __future__ import annotations


class GerrymanderError(Exception):
    """Base error for everything the analyzer reports back to the caller."""


class SourceUnavailable(GerrymanderError):
    """Raised when one of the two input sources cannot be opened."""

    def __init__(self, which: str, path: str):
        self.which = which
        self.path = path
        super().__init__(f"Invalid {'first' if which == 'primary' else 'second'} file, try again. ({path})")


class MalformedRecord(GerrymanderError):
    """Raised when a line's fields do not parse."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class RegionNotFound(GerrymanderError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("State does not exist, search again.")


class DegenerateRegion(GerrymanderError):
    """Raised when a region has no votes to compute an efficiency gap from."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} has no votes cast")


class AlreadyLoaded(GerrymanderError):
    def __init__(self):
        super().__init__("Already read data in, exit and start over.")


class NoRegionSelected(GerrymanderError):
    def __init__(self):
        super().__init__("No state indicated, please search for state first.")
