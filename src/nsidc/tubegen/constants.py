# Default configuration values
DEFAULT_DTG_FIELD = "dtg"
DEFAULT_GAP_FILL = "nofill"
DEFAULT_BUFFER_DISTANCE = 0.0  # meters
DEFAULT_MAX_BINS = 0
DEFAULT_GEOMETRY_COLUMN = "geometry"
DEFAULT_LONGITUDE_COLUMN = "LON"
DEFAULT_LATITUDE_COLUMN = "LAT"
DEFAULT_ID_COLUMN = "id"
DEFAULT_OUTPUT_FILE = "tube.geojson"

# Configuration sections
SOURCE_SECTION_NAME = "Source"
DESTINATION_SECTION_NAME = "Destination"
TUBE_SECTION_NAME = "Tube"

# Date strings look like 2017-02-14T18:30:00.000+0000
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSSZ"
DATE_REGEX = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}(Z|[+-]\d{2}:?\d{2})"

# Tube segment schema, in attribute order
TUBE_GEOMETRY_FIELD = "geometry"
TUBE_START_FIELD = "start"
TUBE_END_FIELD = "end"
TUBE_FIELDS = (TUBE_GEOMETRY_FIELD, TUBE_START_FIELD, TUBE_END_FIELD)
TUBE_SRID = 4326

# Geodetic calculations
DEFAULT_ELLIPSOID = "WGS84"
BUFFER_AZIMUTH = 0.0  # degrees
