"""Base Tube Builder Module.

This module provides the abstract interface shared by every tube builder:
normalization of the input observations, buffering of produced segments and
the create_tube entry point.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from nsidc.tubegen.geodesy import GeodesicBufferer
from nsidc.tubegen.models import NormalizedRecord, Observation, instant
from nsidc.tubegen.normalization import normalize

logger = logging.getLogger(__name__)


def sort_by_time(records: Iterable[NormalizedRecord]) -> List[NormalizedRecord]:
    """Sort records by start time; records with equal times keep input order."""
    return sorted(records, key=lambda r: instant(r.start))


class TubeBuilder(ABC):
    """Abstract base class for tube builders.

    Builders are configured once at construction and hold no state between
    calls, so a single instance may build any number of tubes.
    """

    def __init__(
        self,
        buffer_distance: float,
        max_bins: int,
        bufferer: Optional[GeodesicBufferer] = None,
    ):
        if buffer_distance < 0:
            raise ValueError(
                f"Buffer distance must not be negative: {buffer_distance}"
            )
        self._buffer_distance = float(buffer_distance)
        self._max_bins = int(max_bins)
        self._bufferer = bufferer or GeodesicBufferer()

    @property
    def buffer_distance(self) -> float:
        return self._buffer_distance

    @property
    def max_bins(self) -> int:
        return self._max_bins

    def transform(
        self, observations: Iterable[Observation], dtg_field: Optional[str] = None
    ) -> List[NormalizedRecord]:
        """Normalize observations into (geometry, start, end) records."""
        return normalize(observations, dtg_field)

    def buffer(self, items: Sequence, meters: float) -> list:
        """Return copies of records or segments with buffered geometries."""
        return [
            dataclasses.replace(item, geometry=self._bufferer.buffer(item.geometry, meters))
            for item in items
        ]

    def create_tube(self, observations: Iterable[Observation]) -> list:
        """
        Build a tube from raw observations.

        Args:
            observations: An ObservationCollection or iterable of Observation

        Returns:
            List of TubeSegment ordered by time

        Raises:
            TubeBuilderError: If any observation has a missing or invalid date
        """
        logger.debug(
            f"Creating tube with {type(self).__name__} "
            f"(buffer={self._buffer_distance}m, max_bins={self._max_bins})"
        )
        return self.build(self.transform(observations))

    @abstractmethod
    def build(self, records: Sequence[NormalizedRecord]) -> list:
        """Build tube segments from normalized records.

        Args:
            records: Normalized records in any order

        Returns:
            List of TubeSegment
        """
        pass
