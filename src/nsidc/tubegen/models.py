"""
Data models for the tubegen package.

This module contains the immutable dataclasses that flow through the tube
construction pipeline: raw observations supplied by the caller, the
normalized records the builders work on, and the tube segments they emit.
"""

import dataclasses
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from nsidc.tubegen import constants


class GapFill(Enum):
    """Specifies how temporal gaps between observations are filled."""

    NONE = "nofill"  # Buffer and bin only
    LINE = "line"  # Connect consecutive observations with lines


def instant(timestamp: datetime) -> datetime:
    """
    Return a timezone-aware version of the timestamp for ordering purposes.

    Naive datetimes are read as UTC so that they compare with aware ones.
    """
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def format_timestamp(timestamp: datetime) -> str:
    return (
        instant(timestamp)
        .astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@dataclasses.dataclass(frozen=True)
class Observation:
    """
    A single spatiotemporal observation as supplied by the caller.

    The geometry is the observation's default geometry; every other value,
    including the date, lives in the attributes mapping under its field name.
    """

    id: str
    geometry: BaseGeometry
    attributes: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def attribute(self, name: str) -> Any:
        return self.attributes.get(name)


@dataclasses.dataclass(frozen=True)
class ObservationCollection:
    """
    A finite batch of observations plus the schema's date field, if known.
    """

    observations: List[Observation]
    dtg_field: Optional[str] = None

    @property
    def date_field(self) -> str:
        return self.dtg_field or constants.DEFAULT_DTG_FIELD

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def __len__(self) -> int:
        return len(self.observations)


@dataclasses.dataclass(frozen=True)
class NormalizedRecord:
    """
    Canonical intermediate form: a geometry with a start and optional end time.

    The end time stays None until a builder assigns an interval.
    """

    id: str
    geometry: BaseGeometry
    start: datetime
    end: Optional[datetime] = None


@dataclasses.dataclass(frozen=True)
class TubeSegment:
    """
    One segment of a tube: a WGS84 geometry covering a time interval.
    """

    id: str
    geometry: BaseGeometry
    start: datetime
    end: datetime

    def __post_init__(self):
        if instant(self.start) > instant(self.end):
            raise ValueError(
                f"Tube segment {self.id} starts after it ends: "
                f"{self.start} > {self.end}"
            )

    def attributes(self) -> tuple:
        """Segment values in schema order: geometry, start, end."""
        return (self.geometry, self.start, self.end)

    def as_dict(self) -> dict:
        return dict(zip(constants.TUBE_FIELDS, self.attributes()))

    def to_feature(self) -> dict:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": mapping(self.geometry),
            "properties": {
                constants.TUBE_START_FIELD: format_timestamp(self.start),
                constants.TUBE_END_FIELD: format_timestamp(self.end),
            },
        }
