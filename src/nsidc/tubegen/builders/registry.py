from typing import Type, Union

from nsidc.tubegen.builders.base import TubeBuilder
from nsidc.tubegen.builders.line_gap_fill import LineGapFillTubeBuilder
from nsidc.tubegen.builders.no_gap import NoGapTubeBuilder
from nsidc.tubegen.models import GapFill


def lookup(gap_fill: Union[GapFill, str]) -> Type[TubeBuilder]:
    """
    Determine which tube builder to use for the given gap fill method.
    """
    builders = {
        GapFill.NONE: NoGapTubeBuilder,
        GapFill.LINE: LineGapFillTubeBuilder,
    }

    try:
        return builders[GapFill(gap_fill)]
    except ValueError:
        names = ", ".join(g.value for g in GapFill)
        raise ValueError(f"Unknown gap fill {gap_fill!r}, expected one of: {names}")


def create_tube_builder(
    gap_fill: Union[GapFill, str], buffer_distance: float, max_bins: int
) -> TubeBuilder:
    """
    Return a new tube builder; builders are never shared between calls.
    """
    return lookup(gap_fill)(buffer_distance, max_bins)
