"""
Tube builder with no gap filling.

Observations are buffered, ordered by time, grouped into at most max_bins
consecutive bins and each bin is unioned into a single tube segment.
"""

import logging
import math
from typing import List, Sequence

from funcy import first, last, lchunks
from shapely.ops import unary_union

from nsidc.tubegen.builders.base import TubeBuilder, sort_by_time
from nsidc.tubegen.models import NormalizedRecord, TubeSegment

logger = logging.getLogger(__name__)


def bin_size(count: int, max_bins: int) -> int:
    """
    Number of records per bin so that no more than max_bins bins are made.

    A max_bins of zero or less puts every record in a single bin.
    """
    if max_bins > 0:
        return math.ceil(count / max_bins)
    return count


def union_records(ordered_records: Sequence[NormalizedRecord], id: str) -> TubeSegment:
    """
    Union time-ordered records into one segment.

    The segment ends at the start time of the last record, not its end time.
    """
    geometry = unary_union([r.geometry for r in ordered_records])
    return TubeSegment(
        id,
        geometry,
        first(ordered_records).start,
        last(ordered_records).start,
    )


def time_bin_and_union(
    ordered_records: Sequence[NormalizedRecord], max_bins: int
) -> List[TubeSegment]:
    """Bin time-ordered records, keeping their order, then union each bin."""
    if not ordered_records:
        return []

    size = bin_size(len(ordered_records), max_bins)
    return [
        union_records(chunk, str(idx))
        for idx, chunk in enumerate(lchunks(size, ordered_records))
    ]


class NoGapTubeBuilder(TubeBuilder):
    """Build a tube with no gap filling - only buffering and binning."""

    def build(self, records: Sequence[NormalizedRecord]) -> List[TubeSegment]:
        logger.debug("Creating tube with no gap filling")

        buffered = self.buffer(records, self.buffer_distance)
        sorted_tube = sort_by_time(buffered)

        logger.debug(f"sorted tube size: {len(sorted_tube)}")
        return time_bin_and_union(sorted_tube, self.max_bins)
