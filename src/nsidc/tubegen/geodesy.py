"""
Geodesic buffering for geometries in geographic coordinates.

Buffer distances arrive in meters while geometries are expressed in
longitude/latitude degrees. The conversion is a local linearization: the
distance is projected north from a reference point on the ellipsoid and the
planar length of that step, in degrees, becomes the buffer radius. This is
accurate enough for corridor-sized buffers (kilometers) but is not a
geodesic buffer in general.
"""

import logging
import math

from pyproj import Geod
from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry

from nsidc.tubegen import constants

logger = logging.getLogger(__name__)


def safe_centroid(geometry: BaseGeometry) -> Point:
    """
    Return the centroid of a geometry, falling back to its envelope centroid.

    Collapsed geometries can produce an empty or NaN centroid; the envelope
    centroid is always usable for a non-empty geometry.
    """
    centroid = geometry.centroid
    if centroid.is_empty or math.isnan(centroid.x) or math.isnan(centroid.y):
        return geometry.envelope.centroid
    return centroid


class GeodesicBufferer:
    """Buffers geographic geometries by a distance given in meters."""

    def __init__(self, ellps: str = constants.DEFAULT_ELLIPSOID):
        self.geod = Geod(ellps=ellps)

    def meters_to_degrees(self, meters: float, point: Point) -> float:
        """
        Convert a distance in meters to degrees at the given point.

        Args:
            meters: Distance in meters
            point: Reference point (lon, lat)

        Returns:
            Planar distance in degrees between the point and the point
            `meters` away along a fixed bearing
        """
        logger.debug(f"Buffering: {meters} {point.wkt}")

        lon, lat, _ = self.geod.fwd(point.x, point.y, constants.BUFFER_AZIMUTH, meters)
        return point.distance(Point(lon, lat))

    def buffer(self, geometry: BaseGeometry, meters: float) -> BaseGeometry:
        """
        Buffer a geometry by a distance in meters.

        A zero distance returns the geometry unchanged rather than the empty
        polygon a zero-width buffer of a point or line would produce.

        Raises:
            ValueError: If meters is negative
        """
        if meters < 0:
            raise ValueError(f"Buffer distance must not be negative: {meters}")

        if meters == 0 or geometry.is_empty:
            return geometry

        degrees = self.meters_to_degrees(meters, safe_centroid(geometry))
        if degrees == 0:
            return geometry

        return geometry.buffer(degrees)


_default_bufferer = GeodesicBufferer()


def buffer_geometry(geometry: BaseGeometry, meters: float) -> BaseGeometry:
    return _default_bufferer.buffer(geometry, meters)
