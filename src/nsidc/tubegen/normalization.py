"""
Observation normalization.

This module maps heterogeneous input observations into the canonical
three-field record (geometry, start, end) used by the tube builders. Date
values are resolved by field name; strings are parsed with a fixed
ISO 8601 pattern and native datetimes pass through untouched.
"""

import logging
import re
from datetime import datetime
from typing import Any, Iterable, List, Optional

from nsidc.tubegen import constants
from nsidc.tubegen.models import NormalizedRecord, Observation, ObservationCollection

logger = logging.getLogger(__name__)


class TubeBuilderError(ValueError):
    """Raised when input observations cannot be turned into a tube."""

    pass


class MissingDateFieldError(TubeBuilderError):
    """Raised when an observation has no value for the date field."""

    def __init__(self, dtg_field: str, observation_id: Optional[str] = None):
        self.dtg_field = dtg_field
        self.observation_id = observation_id
        super().__init__(
            "Unable to retrieve date field from input observations...ensure "
            f'there is a field named "{dtg_field}"'
        )


class DateParseError(TubeBuilderError):
    """Raised when a date value does not match the expected format."""

    def __init__(self, dtg_field: str, value: Any):
        self.dtg_field = dtg_field
        self.value = value
        super().__init__(
            f'Unable to parse "{value}" from field "{dtg_field}" as a date '
            f"with the format {constants.DATE_PATTERN}"
        )


def parse_date(value: Any, dtg_field: str = constants.DEFAULT_DTG_FIELD) -> datetime:
    """
    Resolve a raw date value to a datetime.

    Args:
        value: The raw attribute value
        dtg_field: Name of the field the value came from (for error messages)

    Returns:
        The parsed or passed-through datetime

    Raises:
        MissingDateFieldError: If the value is None
        DateParseError: If a string does not match the date format, or the
            value is neither a string nor a datetime
    """
    if value is None:
        logger.error(
            "Unable to retrieve date field from input observations...ensure "
            f"there is a field named {dtg_field}"
        )
        raise MissingDateFieldError(dtg_field)

    if isinstance(value, datetime):
        return value

    if isinstance(value, str):
        if not re.fullmatch(constants.DATE_REGEX, value):
            raise DateParseError(dtg_field, value)
        try:
            return datetime.strptime(value, constants.DATE_FORMAT)
        except ValueError as e:
            raise DateParseError(dtg_field, value) from e

    raise DateParseError(dtg_field, value)


def normalize_observation(observation: Observation, dtg_field: str) -> NormalizedRecord:
    try:
        start = parse_date(observation.attribute(dtg_field), dtg_field)
    except MissingDateFieldError as e:
        raise MissingDateFieldError(dtg_field, observation.id) from e

    return NormalizedRecord(observation.id, observation.geometry, start, None)


def normalize(
    observations: Iterable[Observation], dtg_field: Optional[str] = None
) -> List[NormalizedRecord]:
    """
    Normalize every observation, preserving input order.

    The whole batch is materialized before returning, so a bad record
    anywhere in the input means no records are returned at all.

    Args:
        observations: An ObservationCollection or any iterable of Observation
        dtg_field: Date field name; defaults to the collection's date field,
            or "dtg" for plain iterables

    Returns:
        List of NormalizedRecord in input order
    """
    if dtg_field is None:
        if isinstance(observations, ObservationCollection):
            dtg_field = observations.date_field
        else:
            dtg_field = constants.DEFAULT_DTG_FIELD

    records = [normalize_observation(o, dtg_field) for o in observations]
    logger.debug(f"Normalized {len(records)} observations using field {dtg_field}")
    return records
