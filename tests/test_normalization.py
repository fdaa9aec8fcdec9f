from datetime import datetime, timedelta, timezone

import pytest
from shapely.geometry import Point

from nsidc.tubegen.models import Observation, ObservationCollection
from nsidc.tubegen.normalization import (
    DateParseError,
    MissingDateFieldError,
    TubeBuilderError,
    normalize,
    parse_date,
)

# Unit tests for the 'normalization' module functions.
#
# The test boundary is the normalization module's interface with caller-supplied
# observations; no geometry operations are involved beyond carrying the
# observation's geometry through unchanged.


@pytest.fixture
def observations():
    return [
        Observation("b", Point(1, 1), {"dtg": "2017-02-14T18:31:00.000+0000"}),
        Observation("a", Point(0, 0), {"dtg": "2017-02-14T18:30:00.000+0000"}),
        Observation("c", Point(2, 2), {"dtg": datetime(2017, 2, 14, 18, 32)}),
    ]


@pytest.mark.parametrize(
    "input,expected",
    [
        pytest.param(
            "2017-02-14T18:30:00.000+0000",
            datetime(2017, 2, 14, 18, 30, tzinfo=timezone.utc),
            id="Numeric UTC offset",
        ),
        pytest.param(
            "2017-02-14T18:30:00.000Z",
            datetime(2017, 2, 14, 18, 30, tzinfo=timezone.utc),
            id="Zulu suffix",
        ),
        pytest.param(
            "2017-02-14T18:30:00.250-0700",
            datetime(
                2017, 2, 14, 18, 30, 0, 250000, tzinfo=timezone(timedelta(hours=-7))
            ),
            id="Negative offset with milliseconds",
        ),
    ],
)
def test_parse_date_parses_strings(input, expected):
    assert parse_date(input) == expected


@pytest.mark.parametrize(
    "input",
    [
        "2017-02-14",
        "2017-02-14 18:30:00",
        "14/02/2017T18:30:00.000+0000",
        "not a date",
        "",
        "2017-02-14T18:30:00.5Z",
        "2017-02-14T18:30:00.123456+00:00",
        " 2017-02-14T18:30:00.000Z ",
    ],
)
def test_parse_date_rejects_other_formats(input):
    with pytest.raises(DateParseError) as exc_info:
        parse_date(input, "when")

    assert exc_info.value.dtg_field == "when"
    assert exc_info.value.value == input


def test_parse_date_passes_datetimes_through():
    value = datetime(2020, 1, 1, 12, 0)
    assert parse_date(value) is value


def test_parse_date_rejects_unsupported_types():
    with pytest.raises(DateParseError):
        parse_date(1487097000, "dtg")


def test_parse_date_missing_value():
    with pytest.raises(MissingDateFieldError) as exc_info:
        parse_date(None, "when")

    assert exc_info.value.dtg_field == "when"
    assert '"when"' in str(exc_info.value)


def test_errors_are_value_errors():
    assert issubclass(MissingDateFieldError, TubeBuilderError)
    assert issubclass(DateParseError, TubeBuilderError)
    assert issubclass(TubeBuilderError, ValueError)


def test_normalize_preserves_input_order(observations):
    records = normalize(observations)

    assert [r.id for r in records] == ["b", "a", "c"]


def test_normalize_builds_canonical_records(observations):
    records = normalize(observations)

    assert records[1].geometry.equals(Point(0, 0))
    assert records[1].start == datetime(2017, 2, 14, 18, 30, tzinfo=timezone.utc)
    assert records[2].start == datetime(2017, 2, 14, 18, 32)
    assert all(r.end is None for r in records)


def test_normalize_uses_collection_date_field():
    collection = ObservationCollection(
        [Observation("1", Point(0, 0), {"time": "2017-02-14T18:30:00.000Z"})],
        dtg_field="time",
    )

    records = normalize(collection)

    assert len(records) == 1
    assert records[0].start.year == 2017


def test_normalize_defaults_to_dtg_field():
    collection = ObservationCollection(
        [Observation("1", Point(0, 0), {"dtg": "2017-02-14T18:30:00.000Z"})]
    )

    assert collection.date_field == "dtg"
    assert len(normalize(collection)) == 1


def test_normalize_explicit_field_wins(observations):
    with pytest.raises(MissingDateFieldError) as exc_info:
        normalize(observations, "time")

    assert exc_info.value.dtg_field == "time"


def test_normalize_missing_date_fails_whole_batch(observations):
    observations.insert(1, Observation("bad", Point(5, 5), {"other": "x"}))

    with pytest.raises(MissingDateFieldError) as exc_info:
        normalize(observations)

    assert exc_info.value.observation_id == "bad"


def test_normalize_unparseable_date_fails_whole_batch(observations):
    observations.append(Observation("bad", Point(5, 5), {"dtg": "yesterday"}))

    with pytest.raises(DateParseError):
        normalize(observations)


def test_normalize_empty_input():
    assert normalize([]) == []
