"""Coordinate reference handling for EWKT and GeoSPARQL literals.

A WKT document may start with one of two reference prefixes:

* ``SRID=3857;``, the PostGIS EWKT form, naming an EPSG code.
* ``<http://www.opengis.net/def/crs/EPSG/0/3857>``, the GeoSPARQL form,
  naming a reference system by IRI.

The prefix applies to the whole document. Each coordinate read from the
document is handed to :meth:`resolve` on the descriptor, which returns it
in GeoJSON (WGS84, longitude/latitude) order. Anything that is not already
WGS84 is passed to a caller supplied ``proj`` function with the signature
``proj(from_crs, to_crs, position)``.
"""
import re

import attr

from betterknown import WGS84_CODE, WGS84_EPSG


_srid_prefix = re.compile(r"SRID=(\d+);", re.IGNORECASE | re.ASCII)
_iri_prefix = re.compile(r"<([^>]*)>")
EPSG_IRI = re.compile(r"http://www\.opengis\.net/def/crs/EPSG/0/(\d+)$",
                      re.ASCII)


def _position(value):
    return tuple(float(v) for v in value)


@attr.s(frozen=True)
class DefaultCRS:
    """No prefix was given, coordinates are WGS84 already."""

    def resolve(self, position, proj=None):
        return position


@attr.s(frozen=True)
class SRID:
    """An EWKT ``SRID=<code>;`` prefix."""
    code = attr.ib(converter=int)

    @property
    def epsg(self):
        return "EPSG:{}".format(self.code)

    def resolve(self, position, proj=None):
        if self.code == WGS84_CODE:
            return position
        if proj is None:
            raise CRSError("EWKT data in an unknown SRID ({}) was provided, "
                           "but a proj function was not".format(self.code))
        return _position(proj(self.epsg, WGS84_EPSG, position))


@attr.s(frozen=True)
class IRI:
    """A GeoSPARQL ``<iri>`` prefix.

    Only EPSG IRIs are understood. GeoSPARQL writes EPSG:4326 coordinates
    latitude first, so those are swapped into GeoJSON order here rather
    than handed to ``proj``.
    """
    iri = attr.ib()

    @property
    def code(self):
        m = EPSG_IRI.match(self.iri)
        return int(m.group(1)) if m else None

    def resolve(self, position, proj=None):
        code = self.code
        if code is None:
            raise UnknownCRSError(
                "Unrecognized coordinate reference system IRI: {}"
                .format(self.iri))
        if code == WGS84_CODE:
            return (position[1], position[0]) + position[2:]
        if proj is None:
            raise CRSError("GeoSPARQL data in an unknown CRS ({}) was "
                           "provided, but a proj function was not"
                           .format(self.iri))
        return _position(proj(self.iri, WGS84_EPSG, position))


WGS84 = DefaultCRS()


def read_crs(scanner):
    """Consume an optional reference prefix and return its descriptor."""
    m = scanner.match_regex((_srid_prefix,))
    if m:
        return SRID(m.group(1))
    m = scanner.match_regex((_iri_prefix,))
    if m:
        return IRI(m.group(1).strip())
    return WGS84


class CRSError(ValueError):
    """Coordinates could not be brought into WGS84."""
    pass


class UnknownCRSError(CRSError):
    """The reference system IRI is not one this library understands."""
    pass
