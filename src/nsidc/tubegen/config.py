import configparser
import dataclasses
import logging
import os.path
from typing import Optional

from nsidc.tubegen import constants
from nsidc.tubegen.models import GapFill

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Config:
    data_file: str
    geometry_column: str
    longitude_column: str
    latitude_column: str
    id_column: str
    dtg_field: Optional[str]
    output_file: str
    gap_fill: str
    buffer_distance: float
    max_bins: int

    def show(self):
        logger.info("")
        logger.info("Using configuration:")
        for k, v in self.__dict__.items():
            logger.info(f"  + {k}: {v}")


def config_parser_factory(configuration_file):
    """
    Returns a ConfigParser by reading the specified file.
    """
    if configuration_file is None or not os.path.exists(configuration_file):
        raise ValueError(f"Unable to find configuration file {configuration_file}")
    cfg_parser = configparser.ConfigParser(
        interpolation=configparser.ExtendedInterpolation()
    )
    cfg_parser.read(configuration_file)
    return cfg_parser


def _get_configuration_value(section, name, value_type, config_parser, overrides):
    """
    Returns a value from the provided config parser; any value for the key that
    is provided in the 'overrides' dictionary will take precedence.
    """
    if overrides.get(name) is not None:
        return overrides.get(name)

    if value_type is bool:
        return config_parser.getboolean(section, name)
    elif value_type is int:
        return config_parser.getint(section, name)
    elif value_type is float:
        return config_parser.getfloat(section, name)
    else:
        return config_parser.get(section, name)


def configuration(config_parser, overrides) -> Config:
    """
    Returns a valid Config object that is populated from the provided config
    parser, with values overriden with anything provided in 'overrides'.
    """
    config_parser["DEFAULT"] = {
        "geometry_column": constants.DEFAULT_GEOMETRY_COLUMN,
        "longitude_column": constants.DEFAULT_LONGITUDE_COLUMN,
        "latitude_column": constants.DEFAULT_LATITUDE_COLUMN,
        "id_column": constants.DEFAULT_ID_COLUMN,
        "dtg_field": constants.DEFAULT_DTG_FIELD,
        "output_file": constants.DEFAULT_OUTPUT_FILE,
        "gap_fill": constants.DEFAULT_GAP_FILL,
        "buffer_distance": constants.DEFAULT_BUFFER_DISTANCE,
        "max_bins": constants.DEFAULT_MAX_BINS,
    }
    for section in (
        constants.SOURCE_SECTION_NAME,
        constants.DESTINATION_SECTION_NAME,
        constants.TUBE_SECTION_NAME,
    ):
        if not config_parser.has_section(section):
            config_parser.add_section(section)

    source = constants.SOURCE_SECTION_NAME
    destination = constants.DESTINATION_SECTION_NAME
    tube = constants.TUBE_SECTION_NAME
    try:
        return Config(
            _get_configuration_value(source, "data_file", str, config_parser, overrides),
            _get_configuration_value(source, "geometry_column", str, config_parser, overrides),
            _get_configuration_value(source, "longitude_column", str, config_parser, overrides),
            _get_configuration_value(source, "latitude_column", str, config_parser, overrides),
            _get_configuration_value(source, "id_column", str, config_parser, overrides),
            _get_configuration_value(source, "dtg_field", str, config_parser, overrides),
            _get_configuration_value(destination, "output_file", str, config_parser, overrides),
            _get_configuration_value(tube, "gap_fill", str, config_parser, overrides),
            _get_configuration_value(tube, "buffer_distance", float, config_parser, overrides),
            _get_configuration_value(tube, "max_bins", int, config_parser, overrides),
        )
    except (configparser.Error, ValueError) as e:
        raise ValueError(f"Unable to read the configuration file: {e}") from e


def _known_gap_fill(name):
    return name in [g.value for g in GapFill]


def validate(configuration):
    """
    Validates each value in the configuration.
    """
    validations = [
        ["data_file", lambda f: os.path.exists(f), "The data_file does not exist."],
        [
            "buffer_distance",
            lambda d: d >= 0,
            "The buffer_distance must not be negative.",
        ],
        [
            "gap_fill",
            _known_gap_fill,
            "The gap_fill must be one of: "
            + ", ".join(g.value for g in GapFill)
            + ".",
        ],
    ]
    errors = [
        msg for name, fn, msg in validations if not fn(getattr(configuration, name))
    ]
    return len(errors) == 0, errors
