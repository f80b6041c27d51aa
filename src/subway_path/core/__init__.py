"""Core line path functionality."""

from .exceptions import (
    DisconnectedSectionError,
    DuplicateSectionError,
    InsertError,
    InvalidDistanceError,
    LineFileError,
    PathError,
    PathIntegrityError,
    RemoveError,
    SingleSegmentError,
    StationNotFoundError,
)
from .line import Line
from .models import LineRef, Segment, Station
from .path import Path, PathResult

__all__ = [
    "Line",
    "LineRef",
    "Path",
    "PathResult",
    "Segment",
    "Station",
    "PathError",
    "InsertError",
    "RemoveError",
    "DuplicateSectionError",
    "InvalidDistanceError",
    "DisconnectedSectionError",
    "SingleSegmentError",
    "StationNotFoundError",
    "PathIntegrityError",
    "LineFileError",
]
