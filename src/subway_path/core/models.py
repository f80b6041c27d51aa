"""Data models for line paths."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


class Station(BaseModel):
    """Represents a station referenced by a line.

    Stations are owned by an external collaborator. Two instances with the
    same ``id`` are the same station, whatever their other fields say.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str = Field(..., description="Stable station identifier")
    name: str = Field("", description="Station display name")

    def same_as(self, other: "Station") -> bool:
        """Compare with another station by identifier."""
        return self.id == other.id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.same_as(other)

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.name or str(self.id)


class LineRef(BaseModel):
    """Reference to the line owning a path."""

    model_config = ConfigDict(frozen=True)

    id: int | str = Field(..., description="Stable line identifier")
    name: str = Field("", description="Line name")
    color: str | None = Field(None, description="Line color, e.g. 'bg-red-600'")

    def __str__(self) -> str:
        return self.name or str(self.id)


class Segment(BaseModel):
    """Directed, weighted edge between two stations of one line."""

    model_config = ConfigDict(frozen=True)

    upstream: Station = Field(..., description="Origin station")
    downstream: Station = Field(..., description="Destination station")
    distance: PositiveInt = Field(..., description="Length of the segment")
    line: LineRef = Field(..., description="Owning line")

    @model_validator(mode="after")
    def check_endpoints(self) -> "Segment":
        if self.upstream == self.downstream:
            raise ValueError("upstream and downstream must be different stations")
        return self

    def endpoints(self) -> tuple[Station, Station]:
        """Return the ``(upstream, downstream)`` pair."""
        return self.upstream, self.downstream

    def touches(self, station: Station) -> bool:
        """Check whether the station is one of this segment's endpoints."""
        return station == self.upstream or station == self.downstream

    def __str__(self) -> str:
        return f"{self.upstream} → {self.downstream} ({self.distance})"
