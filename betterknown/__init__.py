"""
Betterknown
"""


#: WKT geometry keywords, in the order the scanner tries them.
WKT_GEOMETRY_TYPES = (
    "POINT",
    "LINESTRING",
    "POLYGON",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "GEOMETRYCOLLECTION",
)

#: Dimension suffixes. ``ZM`` has to be tried before ``Z``.
DIMENSIONS = ("ZM", "Z", "M")

EMPTY = "EMPTY"

#: The only reference system GeoJSON supports.
WGS84_CODE = 4326
WGS84_EPSG = "EPSG:4326"


from betterknown.crs import CRSError, UnknownCRSError  # noqa: E402
from betterknown.geometry import (  # noqa: E402
    from_geojson,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from betterknown.parser import parse  # noqa: E402
from betterknown.scanner import ParseError  # noqa: E402
from betterknown.writer import stringify  # noqa: E402
