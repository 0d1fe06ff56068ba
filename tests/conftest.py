# tests/conftest.py
import pytest

from gerrymander.models import Region
from gerrymander.registry import RegionRegistry

DISTRICT_LINES = [
    "Texas,1,600,400,2,300,700,3,500,500",
    "New York,1,700,300,2,700,300,3,100,900",
    "Vermont,1,220,180",
]

VOTER_LINES = [
    "Texas,1000000",
    "NEW YORK,2500000",
    "Atlantis,42",
]


@pytest.fixture
def source_files(tmp_path):
    """Write both input sources and return their paths."""
    districts = tmp_path / "districts.txt"
    voters = tmp_path / "eligible_voters.txt"
    districts.write_text("\n".join(DISTRICT_LINES) + "\n", encoding="utf-8")
    voters.write_text("\n".join(VOTER_LINES) + "\n", encoding="utf-8")
    return districts, voters


@pytest.fixture
def texas():
    return Region("Texas", [(600, 400), (300, 700), (500, 500)], eligible_voters=1000000)


@pytest.fixture
def registry(texas):
    reg = RegionRegistry()
    reg.add(texas)
    reg.add(Region("New York", [(700, 300), (700, 300), (100, 900)]))
    return reg
