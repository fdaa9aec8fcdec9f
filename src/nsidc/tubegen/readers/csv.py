"""CSV Observation Reader.

Reads observations from a CSV file. Geometries come from a WKT column when
the file has one, otherwise from a pair of longitude/latitude columns. All
other columns, including the date field, become observation attributes with
their raw (string) values.
"""

import logging

import pandas as pd
from shapely import wkt
from shapely.geometry import Point

from nsidc.tubegen.models import Observation, ObservationCollection

logger = logging.getLogger(__name__)


def read_observations(csv_path, configuration) -> ObservationCollection:
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=True)
    df = df.astype(object).where(pd.notna(df), None)

    geometries = geometry_values(df, configuration)
    ids = id_values(df, configuration)

    observations = [
        Observation(id, geometry, attributes)
        for id, geometry, attributes in zip(ids, geometries, df.to_dict("records"))
    ]
    logger.debug(f"Read {len(observations)} observations from {csv_path}")

    return ObservationCollection(observations, configuration.dtg_field)


def geometry_values(df, configuration) -> list:
    if configuration.geometry_column in df.columns:
        column = configuration.geometry_column
        return [
            wkt.loads(required_value(value, idx, column))
            for idx, value in df[column].items()
        ]

    lon_column = configuration.longitude_column
    lat_column = configuration.latitude_column
    return [
        Point(
            float(required_value(lon, idx, lon_column)),
            float(required_value(lat, idx, lat_column)),
        )
        for idx, lon, lat in zip(df.index, df[lon_column], df[lat_column])
    ]


def required_value(value, row, column):
    if value is None:
        raise ValueError(f"Row {row} has no value in the {column} column")
    return value


def id_values(df, configuration) -> list:
    if configuration.id_column in df.columns:
        return [str(value) for value in df[configuration.id_column]]

    return [str(idx) for idx in df.index]
