"""Ordered, non-branching path of segments for a single line."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .exceptions import (
    DisconnectedSectionError,
    DuplicateSectionError,
    InvalidDistanceError,
    PathError,
    PathIntegrityError,
    SingleSegmentError,
    StationNotFoundError,
)
from .models import Segment, Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Outcome of a path mutation.

    A rejected mutation carries the error and leaves the path untouched. A
    successful one lists the segments it added and removed.
    """

    error: PathError | None = None
    added: tuple[Segment, ...] = ()
    removed: tuple[Segment, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the held error, if any."""
        if self.error is not None:
            raise self.error

    @classmethod
    def rejected(cls, error: PathError) -> "PathResult":
        logger.info(f"Path mutation rejected: {error}")
        return cls(error=error)


class Path:
    """Segments of one line, kept as a single directed chain of stations."""

    def __init__(self, segments: Iterable[Segment] | None = None):
        """Initialize the path.

        Args:
            segments: Existing segments, in any order, e.g. loaded from storage
        """
        self._segments: list[Segment] = list(segments or [])

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Snapshot of the current segments, in storage order."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __repr__(self) -> str:
        return f"Path({len(self._segments)} segments)"

    def total_distance(self) -> int:
        """Sum of all segment distances."""
        return sum(segment.distance for segment in self._segments)

    def ordered_segments(self) -> list[Segment]:
        """Return segments from the start station to the end station.

        Raises:
            PathIntegrityError: If there is no unique start segment
        """
        if not self._segments:
            return []

        ordered = [self._find_first_segment()]
        next_segment = self._find_by_upstream(ordered[-1].downstream)
        while next_segment is not None:
            if len(ordered) > len(self._segments):
                raise PathIntegrityError(
                    "Segments loop back onto the path", segments=self.segments
                )
            ordered.append(next_segment)
            next_segment = self._find_by_upstream(next_segment.downstream)
        return ordered

    def ordered_stations(self) -> list[Station]:
        """Return stations from the start of the line to its end.

        Raises:
            PathIntegrityError: If there is no unique start segment
        """
        ordered = self.ordered_segments()
        if not ordered:
            return []
        return [ordered[0].upstream] + [segment.downstream for segment in ordered]

    def insert(self, new: Segment) -> PathResult:
        """Insert a segment, splitting an existing one if they share an end.

        Args:
            new: Segment to add

        Returns:
            PathResult holding DuplicateSectionError, InvalidDistanceError or
            DisconnectedSectionError on rejection
        """
        for old in self._segments:
            if old.endpoints() == new.endpoints():
                return PathResult.rejected(
                    DuplicateSectionError(
                        f"Segment {old.upstream} → {old.downstream} is already on the line",
                        segment=new,
                    )
                )

        split_from = self._find_by_upstream(new.upstream)
        if split_from is not None:
            remainder_ends = (new.downstream, split_from.downstream)
        else:
            split_from = self._find_by_downstream(new.downstream)
            if split_from is not None:
                remainder_ends = (split_from.upstream, new.upstream)

        if split_from is not None:
            if new.distance >= split_from.distance:
                return PathResult.rejected(
                    InvalidDistanceError(
                        f"Distance {new.distance} must be shorter than "
                        f"{split_from.distance} of {split_from}",
                        segment=new,
                        existing=split_from,
                    )
                )
            remainder = Segment(
                upstream=remainder_ends[0],
                downstream=remainder_ends[1],
                distance=split_from.distance - new.distance,
                line=split_from.line,
            )
            logger.debug(f"Splitting {split_from} into {new} and {remainder}")
            self._segments.remove(split_from)
            self._segments.append(remainder)
            self._segments.append(new)
            return PathResult(added=(remainder, new), removed=(split_from,))

        if self._segments and not any(
            old.touches(new.upstream) or old.touches(new.downstream)
            for old in self._segments
        ):
            return PathResult.rejected(
                DisconnectedSectionError(
                    f"Neither {new.upstream} nor {new.downstream} is on the line",
                    segment=new,
                )
            )

        self._segments.append(new)
        return PathResult(added=(new,))

    def remove(self, station: Station) -> PathResult:
        """Remove a station, merging the segments around it if it is interior.

        Args:
            station: Station to take off the line

        Returns:
            PathResult holding SingleSegmentError or StationNotFoundError on
            rejection
        """
        if len(self._segments) == 1:
            return PathResult.rejected(
                SingleSegmentError(
                    "A line with a single segment cannot lose a station",
                    station=station,
                )
            )

        down_segment = self._find_by_downstream(station)
        up_segment = self._find_by_upstream(station)

        if down_segment is None and up_segment is None:
            return PathResult.rejected(
                StationNotFoundError(
                    f"Station {station} is not on the line", station=station
                )
            )

        if down_segment is not None and up_segment is not None:
            merged = Segment(
                upstream=down_segment.upstream,
                downstream=up_segment.downstream,
                distance=down_segment.distance + up_segment.distance,
                line=down_segment.line,
            )
            logger.debug(f"Merging {down_segment} and {up_segment} into {merged}")
            self._segments.remove(down_segment)
            self._segments.remove(up_segment)
            self._segments.append(merged)
            return PathResult(added=(merged,), removed=(down_segment, up_segment))

        end_segment = down_segment if down_segment is not None else up_segment
        self._segments.remove(end_segment)
        return PathResult(removed=(end_segment,))

    def _find_first_segment(self) -> Segment:
        downstreams = {segment.downstream for segment in self._segments}
        starts = [s for s in self._segments if s.upstream not in downstreams]
        if len(starts) != 1:
            raise PathIntegrityError(
                f"Expected exactly one start segment, found {len(starts)}",
                segments=self.segments,
            )
        return starts[0]

    def _find_by_upstream(self, station: Station) -> Segment | None:
        return next((s for s in self._segments if s.upstream == station), None)

    def _find_by_downstream(self, station: Station) -> Segment | None:
        return next((s for s in self._segments if s.downstream == station), None)
