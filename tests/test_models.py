from datetime import datetime, timedelta, timezone

import pytest
from shapely.geometry import Point

from nsidc.tubegen.models import (
    GapFill,
    Observation,
    ObservationCollection,
    TubeSegment,
    format_timestamp,
    instant,
)


class TestTubeSegment:
    """Tests for the TubeSegment dataclass."""

    def test_is_frozen_dataclass(self):
        segment = TubeSegment("0", Point(0, 0), datetime(2020, 1, 1), datetime(2020, 1, 1))

        with pytest.raises(AttributeError):
            segment.id = "1"

    def test_start_must_not_follow_end(self):
        with pytest.raises(ValueError):
            TubeSegment("0", Point(0, 0), datetime(2020, 1, 2), datetime(2020, 1, 1))

    def test_attributes_are_in_schema_order(self):
        start = datetime(2020, 1, 1)
        end = datetime(2020, 1, 2)
        point = Point(1, 2)

        assert TubeSegment("0", point, start, end).attributes() == (point, start, end)

    def test_to_feature(self):
        segment = TubeSegment(
            "3",
            Point(1, 2),
            datetime(2017, 2, 14, 18, 30, tzinfo=timezone.utc),
            datetime(2017, 2, 14, 19, 30, tzinfo=timezone.utc),
        )

        feature = segment.to_feature()

        assert feature["id"] == "3"
        assert feature["geometry"] == {"type": "Point", "coordinates": (1.0, 2.0)}
        assert feature["properties"] == {
            "start": "2017-02-14T18:30:00.000Z",
            "end": "2017-02-14T19:30:00.000Z",
        }


@pytest.mark.parametrize(
    "input,expected",
    [
        pytest.param(datetime(2001, 1, 1, 18), "2001-01-01T18:00:00.000Z", id="Naive"),
        pytest.param(
            datetime(2001, 1, 1, 18, tzinfo=timezone(timedelta(hours=2))),
            "2001-01-01T16:00:00.000Z",
            id="Offset",
        ),
    ],
)
def test_format_timestamp(input, expected):
    assert format_timestamp(input) == expected


def test_instant_compares_naive_and_aware():
    naive = datetime(2020, 1, 1, 12)
    aware = datetime(2020, 1, 1, 13, tzinfo=timezone(timedelta(hours=2)))

    assert instant(aware) < instant(naive)


def test_observation_attribute():
    observation = Observation("1", Point(0, 0), {"dtg": "x"})

    assert observation.attribute("dtg") == "x"
    assert observation.attribute("missing") is None


def test_observation_collection():
    observations = [Observation("1", Point(0, 0)), Observation("2", Point(1, 1))]
    collection = ObservationCollection(observations, "when")

    assert len(collection) == 2
    assert list(collection) == observations
    assert collection.date_field == "when"


def test_gap_fill_values():
    assert GapFill("nofill") is GapFill.NONE
    assert GapFill("line") is GapFill.LINE


def test_segment_as_dict_uses_schema_field_names():
    start = datetime(2020, 1, 1)
    segment = TubeSegment("0", Point(1, 2), start, start)

    assert list(segment.as_dict()) == ["geometry", "start", "end"]
