from betterknown import EMPTY
from betterknown.geometry import (
    from_geojson,
    Geometry,
    GeometryCollection,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)


_DIMENSION_TOKENS = {3: " Z ", 4: " ZM "}


def stringify(geometry):
    """Serialize a geometry as WKT.

    ``geometry`` may be a :class:`betterknown.geometry.Geometry` or a
    GeoJSON mapping. GeoJSON is always WGS84, so no SRID prefix is written.
    Keywords are always upper case::

        stringify({"type": "Point", "coordinates": [1, 2.5]})
        # 'POINT (1 2.5)'

    """
    if not isinstance(geometry, Geometry):
        geometry = from_geojson(geometry)
    if geometry.is_empty:
        return "{} {}".format(geometry.keyword, EMPTY)
    if isinstance(geometry, GeometryCollection):
        return "{}({})".format(geometry.keyword,
                               ",".join(stringify(g)
                                        for g in geometry.geometries))
    return "{}{}({})".format(geometry.keyword,
                             _dimension(_first_position(geometry)),
                             _body(geometry))


def _body(geometry):
    if isinstance(geometry, Point):
        return _position(geometry.coordinates)
    if isinstance(geometry, (Polygon, MultiLineString)):
        return _rings(geometry.coordinates)
    if isinstance(geometry, MultiPolygon):
        return ",".join("({})".format(_rings(p))
                        for p in geometry.coordinates)
    return _positions(geometry.coordinates)


def _first_position(geometry):
    """The coordinate whose length decides the dimension token."""
    value = geometry.coordinates
    while value and isinstance(value[0], tuple):
        value = value[0]
    return value


def _dimension(position):
    return _DIMENSION_TOKENS.get(len(position), " ")


def _number(value):
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _position(position):
    return " ".join(_number(v) for v in position)


def _positions(positions):
    return ",".join(_position(p) for p in positions)


def _rings(rings):
    return ",".join("({})".format(_positions(r)) for r in rings)
