"""
Tube builder that fills gaps with lines.

Time-ordered observations are reduced to their centroids and every pair of
consecutive centroids is joined by a line segment covering the time between
them. Segments are buffered only after all of them have been drawn.
"""

import logging
from itertools import count
from typing import List, Sequence

from funcy import pairwise
from shapely.geometry import LineString

from nsidc.tubegen.builders.base import TubeBuilder, sort_by_time
from nsidc.tubegen.geodesy import safe_centroid
from nsidc.tubegen.models import NormalizedRecord, TubeSegment
from nsidc.tubegen.normalization import TubeBuilderError

logger = logging.getLogger(__name__)


def connect(p1, p2):
    """Line between two points, or the point itself if they coincide."""
    if p1.equals(p2):
        return p1
    return LineString([p1.coords[0], p2.coords[0]])


def centroid(record: NormalizedRecord):
    point = safe_centroid(record.geometry)
    if point.is_empty:
        raise TubeBuilderError(
            f"Observation {record.id} has an empty geometry and cannot be connected"
        )
    return point


def fill_gaps(ordered_records: Sequence[NormalizedRecord]) -> List[TubeSegment]:
    """
    Connect consecutive time-ordered records.

    Produces n-1 segments for n records, a single degenerate point segment
    for one record, and nothing for no records. Segment ids count up from
    zero on every call.
    """
    points_and_times = [(centroid(r), r.start) for r in ordered_records]
    ids = count()

    if not points_and_times:
        return []

    if len(points_and_times) == 1:
        p1, t1 = points_and_times[0]
        logger.debug("Only a single result - can't create a line")
        return [TubeSegment(str(next(ids)), p1, t1, t1)]

    segments = []
    for (p1, t1), (p2, t2) in pairwise(points_and_times):
        geometry = connect(p1, p2)
        logger.debug(
            f"Created line-filled geom: {geometry.wkt} from {p1.wkt} and {p2.wkt}"
        )
        segments.append(TubeSegment(str(next(ids)), geometry, t1, t2))

    return segments


class LineGapFillTubeBuilder(TubeBuilder):
    """
    Build a tube with gap filling that draws a line between time-ordered
    observations.
    """

    def build(self, records: Sequence[NormalizedRecord]) -> List[TubeSegment]:
        logger.debug("Creating tube with line gap fill")

        line_segments = fill_gaps(sort_by_time(records))
        return self.buffer(line_segments, self.buffer_distance)
