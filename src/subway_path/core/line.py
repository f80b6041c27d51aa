"""Line aggregate owning a path."""

import logging
from collections.abc import Callable, Iterable

from .models import LineRef, Segment, Station
from .path import Path, PathResult

logger = logging.getLogger(__name__)

ChangeHook = Callable[["Line", PathResult], None]


class Line:
    """A transit line and the path of segments it owns.

    The line is the only writer of its path. After every successful mutation
    it hands the result to ``on_change`` so the caller can persist the new
    segment set; rejected mutations never reach the hook.
    """

    def __init__(
        self,
        ref: LineRef,
        segments: Iterable[Segment] | None = None,
        on_change: ChangeHook | None = None,
    ):
        self.ref = ref
        self.path = Path(segments)
        self.on_change = on_change

    def __str__(self) -> str:
        return str(self.ref)

    def stations(self) -> list[Station]:
        """Stations of the line in travel order."""
        return self.path.ordered_stations()

    def add_segment(
        self, upstream: Station, downstream: Station, distance: int
    ) -> PathResult:
        """Add a segment between two stations of this line."""
        segment = Segment(
            upstream=upstream, downstream=downstream, distance=distance, line=self.ref
        )
        return self._apply(self.path.insert(segment))

    def remove_station(self, station: Station) -> PathResult:
        """Take a station off this line."""
        return self._apply(self.path.remove(station))

    def _apply(self, result: PathResult) -> PathResult:
        if result.ok and self.on_change is not None:
            logger.debug(
                f"Line {self.ref}: {len(result.added)} added, "
                f"{len(result.removed)} removed"
            )
            self.on_change(self, result)
        return result
