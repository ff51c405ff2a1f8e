from functools import partial

import attr


def position(value):
    """A converter for a single position: a tuple of floats."""
    return tuple(float(v) for v in value)


def positions(value, depth=1):
    """A converter for ``depth`` levels of nested position sequences."""
    if depth == 0:
        return position(value)
    return tuple(positions(v, depth - 1) for v in value)


def geometries(value):
    """A converter for the children of a geometry collection."""
    return tuple(v if isinstance(v, Geometry) else from_geojson(v)
                 for v in value)


def _listify(value):
    if isinstance(value, tuple):
        return [_listify(v) for v in value]
    return value


Coordinates = partial(attr.ib, factory=tuple)


class Geometry:
    """Base class for the seven geometry kinds.

    Geometries are immutable and compare structurally. Coordinates can be
    given as any nested sequence of numbers; they are stored as nested
    tuples of floats::

        Point([1, 2]) == Point((1.0, 2.0))  # True

    Every geometry exposes ``__geo_interface__``, so it can be handed to
    anything that understands that protocol.
    """
    #: GeoJSON type name
    type = None
    #: WKT keyword
    keyword = None

    @property
    def is_empty(self):
        return not self.coordinates

    def as_dict(self):
        """Return the geometry as a GeoJSON mapping.

        All tuples are converted to lists, so the result can be passed
        directly to ``json.dump``.
        """
        return {"type": self.type,
                "coordinates": _listify(self.coordinates)}

    @property
    def __geo_interface__(self):
        return self.as_dict()


@attr.s(frozen=True)
class Point(Geometry):
    type = "Point"
    keyword = "POINT"
    coordinates = Coordinates(converter=position)


@attr.s(frozen=True)
class LineString(Geometry):
    type = "LineString"
    keyword = "LINESTRING"
    coordinates = Coordinates(converter=positions)


@attr.s(frozen=True)
class MultiPoint(Geometry):
    type = "MultiPoint"
    keyword = "MULTIPOINT"
    coordinates = Coordinates(converter=positions)


@attr.s(frozen=True)
class Polygon(Geometry):
    type = "Polygon"
    keyword = "POLYGON"
    coordinates = Coordinates(converter=partial(positions, depth=2))


@attr.s(frozen=True)
class MultiLineString(Geometry):
    type = "MultiLineString"
    keyword = "MULTILINESTRING"
    coordinates = Coordinates(converter=partial(positions, depth=2))


@attr.s(frozen=True)
class MultiPolygon(Geometry):
    type = "MultiPolygon"
    keyword = "MULTIPOLYGON"
    coordinates = Coordinates(converter=partial(positions, depth=3))


@attr.s(frozen=True)
class GeometryCollection(Geometry):
    type = "GeometryCollection"
    keyword = "GEOMETRYCOLLECTION"
    geometries = attr.ib(factory=tuple, converter=geometries)

    @property
    def is_empty(self):
        return not self.geometries

    def as_dict(self):
        return {"type": self.type,
                "geometries": [g.as_dict() for g in self.geometries]}


GEOMETRIES = {cls.type: cls for cls in (Point, LineString, Polygon,
                                        MultiPoint, MultiLineString,
                                        MultiPolygon, GeometryCollection)}


def from_geojson(obj):
    """Create a geometry from a GeoJSON mapping.

    Factory function that accepts either a GeoJSON geometry mapping or any
    object implementing ``__geo_interface__``.
    """
    obj = getattr(obj, "__geo_interface__", obj)
    try:
        cls = GEOMETRIES[obj["type"]]
    except (KeyError, TypeError):
        raise ValueError("Unknown geometry type: {!r}".format(
                         obj.get("type") if hasattr(obj, "get") else obj))
    if cls is GeometryCollection:
        return cls(obj.get("geometries", ()))
    return cls(obj.get("coordinates", ()))
