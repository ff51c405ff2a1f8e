import math
import re

import attr
from attr import validators

from betterknown import EMPTY
from betterknown.crs import read_crs, WGS84
from betterknown.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from betterknown.scanner import Dimension, ParseError, Scanner


_number = r"([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
# Some writers emit "1, 2" for a single coordinate, so a comma stuck to a
# value is allowed inside a coordinate as long as whitespace follows it.
_coordinates = {n: re.compile(r",?\s+".join([_number] * n), re.ASCII)
                for n in (2, 3, 4)}


@attr.s(frozen=True)
class ParseOptions:
    """Settings shared by every production of one parse.

    ``crs`` is read once from the start of the document. ``dimension`` is
    replaced for each geometry, including the children of a collection.
    """
    empty_as_null = attr.ib(default=True)
    proj = attr.ib(default=None,
                   validator=validators.optional(validators.is_callable()))
    crs = attr.ib(default=WGS84)
    dimension = attr.ib(default=Dimension())


def parse(text, empty_as_null=True, proj=None):
    """Parse a WKT, EWKT or GeoSPARQL WKT string into a geometry.

    ``EMPTY`` geometries are returned as ``None`` and dropped from
    collections unless ``empty_as_null`` is false, in which case they come
    back as typed geometries with no coordinates.

    ``proj`` is needed for input in any reference system other than WGS84.
    It is called once per coordinate as ``proj(from_crs, to_crs, position)``
    and must return the reprojected position. See
    :func:`betterknown.proj.reproject` for one backed by pyproj.

    :param text: the WKT document
    :param empty_as_null: whether ``EMPTY`` geometries become ``None``
    :param proj: optional reprojection function
    :raises ParseError: if the text is not valid WKT
    :raises CRSError: if the coordinates cannot be brought into WGS84
    """
    scanner = Scanner(text)
    options = ParseOptions(empty_as_null=empty_as_null, proj=proj,
                           crs=read_crs(scanner))
    geometry = parse_geometry(scanner, options)
    if not scanner.at_end():
        raise ParseError("Unexpected trailing input", scanner.position)
    return geometry


def parse_geometry(scanner, options):
    """Read one tagged geometry at the scanner's position."""
    keyword = scanner.match_type()
    options = attr.evolve(options, dimension=scanner.match_dimension())
    return PRODUCTIONS[keyword](scanner, options)


def coordinate(scanner, options):
    dimension = options.dimension
    m = scanner.match_regex((_coordinates[dimension.arity],))
    if not m:
        raise ParseError("Expected coordinates", scanner.position)
    values = tuple(float(v) for v in m.groups())
    if not all(math.isfinite(v) for v in values):
        raise ParseError("Expected coordinates", m.start())
    if dimension.has_m and not dimension.has_z:
        # M without Z is not carried into GeoJSON
        values = values[:2]
    return options.crs.resolve(values, options.proj)


def coordinates(scanner, options):
    """A comma separated run of coordinates.

    Each coordinate may be wrapped in its own parentheses, which is how
    some writers emit ``MULTIPOINT ((1 2), (3 4))``.
    """
    positions = []
    while True:
        bracketed = scanner.is_match("(")
        positions.append(coordinate(scanner, options))
        if bracketed:
            scanner.expect_group_end()
        if not scanner.is_match(","):
            return positions


def rings(scanner, options):
    """A parenthesized, comma separated list of coordinate groups."""
    groups = []
    scanner.expect_group_start()
    while True:
        scanner.expect_group_start()
        groups.append(coordinates(scanner, options))
        scanner.expect_group_end()
        if not scanner.is_match(","):
            break
    scanner.expect_group_end()
    return groups


def _empty_result(cls, options):
    return None if options.empty_as_null else cls()


def point(scanner, options):
    if scanner.is_match(EMPTY):
        return _empty_result(Point, options)
    scanner.expect_group_start()
    position = coordinate(scanner, options)
    scanner.expect_group_end()
    return Point(position)


def _coordinate_list(cls):
    def production(scanner, options):
        if scanner.is_match(EMPTY):
            return _empty_result(cls, options)
        scanner.expect_group_start()
        positions = coordinates(scanner, options)
        scanner.expect_group_end()
        return cls(positions)
    return production


def _ring_list(cls):
    def production(scanner, options):
        if scanner.is_match(EMPTY):
            return _empty_result(cls, options)
        return cls(rings(scanner, options))
    return production


def multipolygon(scanner, options):
    if scanner.is_match(EMPTY):
        return _empty_result(MultiPolygon, options)
    polygons = []
    scanner.expect_group_start()
    while True:
        polygons.append(rings(scanner, options))
        if not scanner.is_match(","):
            break
    scanner.expect_group_end()
    return MultiPolygon(polygons)


def geometrycollection(scanner, options):
    if scanner.is_match(EMPTY):
        return _empty_result(GeometryCollection, options)
    children = []
    scanner.expect_group_start()
    while True:
        child = parse_geometry(scanner, options)
        if child is not None:
            children.append(child)
        if not scanner.is_match(","):
            break
    scanner.expect_group_end()
    return GeometryCollection(children)


PRODUCTIONS = {
    "POINT": point,
    "LINESTRING": _coordinate_list(LineString),
    "POLYGON": _ring_list(Polygon),
    "MULTIPOINT": _coordinate_list(MultiPoint),
    "MULTILINESTRING": _ring_list(MultiLineString),
    "MULTIPOLYGON": multipolygon,
    "GEOMETRYCOLLECTION": geometrycollection,
}
