import configparser
import json
import logging
import os.path
import sys

from pyfiglet import Figlet
from rich.prompt import Confirm, Prompt

from nsidc.tubegen import config
from nsidc.tubegen import constants
from nsidc.tubegen.builders import registry
from nsidc.tubegen.models import TubeSegment
from nsidc.tubegen.readers import csv

LOGGER_NAME = "nsidc.tubegen"
CONSOLE_FORMAT = "%(message)s"
LOGFILE_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"


def init_logging(logfile="tubegen.log"):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    logfile_handler = logging.FileHandler(logfile, "w")
    logfile_handler.setLevel(logging.DEBUG)
    logfile_handler.setFormatter(logging.Formatter(LOGFILE_FORMAT))
    logger.addHandler(logfile_handler)

    return logger


def banner():
    """
    Displays the name of this utility using incredible ASCII-art.
    """
    f = Figlet(font="slant")
    return f.renderText("tubegen")


def init_config(configuration_file):
    """
    Prompts the user for configuration values and then creates a valid configuration file.
    """
    print(
        """This utility will create a tube configuration file by prompting """
        """you for values for each of the configuration parameters."""
    )
    print()
    if not configuration_file:
        configuration_file = Prompt.ask("configuration file name", default="tube.ini")
    else:
        print(f"Creating configuration file {configuration_file}")
        print()

    if os.path.exists(configuration_file):
        print(f"WARNING: The {configuration_file} already exists.")
        overwrite = Confirm.ask("Overwrite?")
        if not overwrite:
            print("Not overwriting existing file. Exiting.")
            exit(1)

    cfg_parser = configparser.ConfigParser()

    print()
    print(f"{constants.SOURCE_SECTION_NAME} Data Parameters")
    print("--------------------------------------------------")
    cfg_parser.add_section(constants.SOURCE_SECTION_NAME)
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "data_file", Prompt.ask("Observation CSV file", default="observations.csv"))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "geometry_column", Prompt.ask("WKT geometry column", default=constants.DEFAULT_GEOMETRY_COLUMN))
    cfg_parser.set(constants.SOURCE_SECTION_NAME, "dtg_field", Prompt.ask("Date field", default=constants.DEFAULT_DTG_FIELD))
    print()

    print(f"{constants.DESTINATION_SECTION_NAME} Parameters")
    print("--------------------------------------------------")
    cfg_parser.add_section(constants.DESTINATION_SECTION_NAME)
    cfg_parser.set(constants.DESTINATION_SECTION_NAME, "output_file", Prompt.ask("Tube output file", default=constants.DEFAULT_OUTPUT_FILE))
    print()

    print(f"{constants.TUBE_SECTION_NAME} Parameters")
    print("--------------------------------------------------")
    cfg_parser.add_section(constants.TUBE_SECTION_NAME)
    cfg_parser.set(constants.TUBE_SECTION_NAME, "gap_fill", Prompt.ask("Gap fill (nofill/line)", default=constants.DEFAULT_GAP_FILL))
    cfg_parser.set(constants.TUBE_SECTION_NAME, "buffer_distance", Prompt.ask("Buffer distance in meters", default=str(constants.DEFAULT_BUFFER_DISTANCE)))
    cfg_parser.set(constants.TUBE_SECTION_NAME, "max_bins", Prompt.ask("Maximum number of bins (0 for one bin)", default=str(constants.DEFAULT_MAX_BINS)))

    print()
    print(f"Saving new configuration: {configuration_file}")
    with open(configuration_file, "tw") as file:
        cfg_parser.write(file)

    return configuration_file


def process(configuration: config.Config) -> list[TubeSegment]:
    """
    Reads observations, builds a tube and writes it to the output file.
    """
    logger = logging.getLogger(LOGGER_NAME)

    valid, errors = config.validate(configuration)
    if not valid:
        logger.error("The configuration is invalid:")
        for msg in errors:
            logger.error(" * " + msg)
        raise Exception("Invalid configuration")

    observations = csv.read_observations(configuration.data_file, configuration)
    logger.info(f"Found {len(observations)} observations in {configuration.data_file}")

    builder = registry.create_tube_builder(
        configuration.gap_fill,
        configuration.buffer_distance,
        configuration.max_bins,
    )
    segments = builder.create_tube(observations)

    write_tube(segments, configuration.output_file)
    summarize_results(segments, configuration)

    return segments


def tube_feature_collection(segments: list[TubeSegment]) -> dict:
    return {
        "type": "FeatureCollection",
        "crs": {
            "type": "name",
            "properties": {"name": f"EPSG:{constants.TUBE_SRID}"},
        },
        "features": [s.to_feature() for s in segments],
    }


def write_tube(segments: list[TubeSegment], output_file: str) -> None:
    with open(output_file, "tw") as f:
        json.dump(tube_feature_collection(segments), f, indent=2)


def summarize_results(segments: list[TubeSegment], configuration: config.Config) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Processing Summary")
    logger.info("==================")
    logger.info(f"Gap fill: {configuration.gap_fill}")
    logger.info(f"Segments: {len(segments)}")
    if segments:
        logger.info(f"Start: {segments[0].start}")
        logger.info(f"End: {segments[-1].end}")
    logger.info(f"Output: {configuration.output_file}")
