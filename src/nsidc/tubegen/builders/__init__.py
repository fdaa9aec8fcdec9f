"""
Tube builders.

Two strategies turn normalized observations into tube segments:

1. **no_gap.NoGapTubeBuilder**: buffer each observation, bin by time and
   union each bin.
2. **line_gap_fill.LineGapFillTubeBuilder**: connect consecutive observation
   centroids with lines, then buffer each line.

Use registry.lookup() or registry.create_tube_builder() to select one by its
gap fill name ("nofill" or "line").
"""

from .base import TubeBuilder
from .line_gap_fill import LineGapFillTubeBuilder
from .no_gap import NoGapTubeBuilder
from .registry import create_tube_builder, lookup

__all__ = [
    "LineGapFillTubeBuilder",
    "NoGapTubeBuilder",
    "TubeBuilder",
    "create_tube_builder",
    "lookup",
]
