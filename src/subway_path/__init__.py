"""Subway Path Package

Keeps the stations of a transit line in a single ordered chain of segments,
splitting and merging segments as stations are added and removed.
"""

__version__ = "0.1.0"

from .core.line import Line
from .core.models import LineRef, Segment, Station
from .core.path import Path, PathResult

__all__ = ["Line", "LineRef", "Path", "PathResult", "Segment", "Station"]
