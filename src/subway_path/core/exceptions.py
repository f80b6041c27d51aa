"""Custom exceptions for line path maintenance."""

from typing import Any


class PathError(Exception):
    """Base exception for path errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context


class InsertError(PathError):
    """Raised when a segment cannot be inserted into a path."""

    pass


class DuplicateSectionError(InsertError):
    """Raised when both endpoints of a new segment already form a segment."""

    pass


class InvalidDistanceError(InsertError):
    """Raised when a split segment is not shorter than the one it splits."""

    pass


class DisconnectedSectionError(InsertError):
    """Raised when a new segment shares no station with the path."""

    pass


class RemoveError(PathError):
    """Raised when a station cannot be removed from a path."""

    pass


class SingleSegmentError(RemoveError):
    """Raised when removing from a path that has a single segment."""

    pass


class StationNotFoundError(RemoveError):
    """Raised when the station is not on the path."""

    pass


class PathIntegrityError(PathError):
    """Raised when the stored segments no longer form a single chain.

    This is never a user error. It means the segment collection was corrupted
    outside of ``Path.insert``/``Path.remove``.
    """

    pass


class LineFileError(Exception):
    """Raised when a line file cannot be read or is malformed."""

    pass
