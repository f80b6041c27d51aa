"""Test configuration and fixtures."""

import json

import pytest

from subway_path.core.models import LineRef, Segment, Station
from subway_path.core.path import Path


@pytest.fixture
def line_ref():
    """Line owning the sample segments."""
    return LineRef(id=2, name="2호선", color="bg-green-600")


@pytest.fixture
def stations():
    """Sample stations keyed by letter."""
    return {
        "A": Station(id=1, name="강남"),
        "B": Station(id=2, name="역삼"),
        "C": Station(id=3, name="선릉"),
        "D": Station(id=4, name="삼성"),
        "E": Station(id=5, name="잠실"),
    }


@pytest.fixture
def segment(line_ref, stations):
    """Build a segment between two lettered stations."""

    def build(upstream: str, downstream: str, distance: int) -> Segment:
        return Segment(
            upstream=stations[upstream],
            downstream=stations[downstream],
            distance=distance,
            line=line_ref,
        )

    return build


@pytest.fixture
def two_segment_path(segment):
    """Path A → B (5), B → C (3)."""
    return Path([segment("A", "B", 5), segment("B", "C", 3)])


@pytest.fixture
def line_file(tmp_path):
    """Line file holding A → B (5), B → C (3)."""
    data = {
        "line": {"id": 2, "name": "2호선", "color": "bg-green-600"},
        "stations": [
            {"id": 1, "name": "강남"},
            {"id": 2, "name": "역삼"},
            {"id": 3, "name": "선릉"},
            {"id": 4, "name": "삼성"},
            {"id": 5, "name": "잠실"},
        ],
        "segments": [
            {"upstream": 1, "downstream": 2, "distance": 5},
            {"upstream": 2, "downstream": 3, "distance": 3},
        ],
    }
    file_path = tmp_path / "line2.json"
    file_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return file_path
