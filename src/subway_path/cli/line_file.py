"""JSON line files used by the command line front end."""

import logging
import os
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    PositiveInt,
    ValidationError,
    model_validator,
)

from ..core.exceptions import LineFileError
from ..core.line import ChangeHook, Line
from ..core.models import LineRef, Segment, Station

logger = logging.getLogger(__name__)


class SegmentRecord(BaseModel):
    """Segment as stored in a line file, with endpoints given by station id."""

    upstream: int | str = Field(..., description="Upstream station id")
    downstream: int | str = Field(..., description="Downstream station id")
    distance: PositiveInt = Field(..., description="Segment distance")


class LineDocument(BaseModel):
    """Top-level layout of a line file."""

    line: LineRef
    stations: list[Station] = Field(default_factory=list)
    segments: list[SegmentRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_station_ids(self) -> "LineDocument":
        seen: dict[str, Station] = {}
        for station in self.stations:
            key = str(station.id)
            if key in seen:
                raise ValueError(
                    f"Station ids {seen[key].id!r} and {station.id!r} collide"
                )
            seen[key] = station
        return self

    def station_index(self) -> dict[str, Station]:
        """Map station ids, as strings, to stations."""
        return {str(station.id): station for station in self.stations}

    def lookup(self, station_id: int | str) -> Station:
        """Find a station by id.

        Raises:
            LineFileError: If the file has no station with that id
        """
        station = self.station_index().get(str(station_id))
        if station is None:
            raise LineFileError(f"Unknown station id: {station_id}")
        return station

    def to_line(self, on_change: ChangeHook | None = None) -> Line:
        """Build the line and its path from the stored records."""
        try:
            segments = [
                Segment(
                    upstream=self.lookup(record.upstream),
                    downstream=self.lookup(record.downstream),
                    distance=record.distance,
                    line=self.line,
                )
                for record in self.segments
            ]
        except ValidationError as e:
            raise LineFileError(f"Invalid segment in line {self.line}: {e}") from e
        return Line(self.line, segments, on_change=on_change)

    def with_line(self, line: Line) -> "LineDocument":
        """Copy of this document holding the line's current segments."""
        records = [
            SegmentRecord(
                upstream=segment.upstream.id,
                downstream=segment.downstream.id,
                distance=segment.distance,
            )
            for segment in line.path
        ]
        return self.model_copy(update={"segments": records})


def load_line_file(file_path: str | Path) -> LineDocument:
    """Read a line file.

    Raises:
        LineFileError: If the file is missing or malformed
    """
    file_path = Path(file_path)
    try:
        document = LineDocument.model_validate_json(
            file_path.read_text(encoding="utf-8")
        )
    except OSError as e:
        raise LineFileError(f"Cannot read {file_path}: {e}") from e
    except ValidationError as e:
        raise LineFileError(f"Invalid line file {file_path}: {e}") from e

    logger.info(
        f"Loaded line {document.line} with {len(document.segments)} segments "
        f"from {file_path}"
    )
    return document


def save_line_file(file_path: str | Path, document: LineDocument) -> None:
    """Write a line file, replacing the old one only once the new one is complete.

    Raises:
        LineFileError: If the file cannot be written
    """
    file_path = Path(file_path)
    temp_path = file_path.with_name(f".{file_path.name}.tmp")
    try:
        temp_path.write_text(
            document.model_dump_json(indent=2) + "\n", encoding="utf-8"
        )
        os.replace(temp_path, file_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise LineFileError(f"Cannot write {file_path}: {e}") from e
    logger.info(f"Saved {len(document.segments)} segments to {file_path}")
