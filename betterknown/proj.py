"""A pyproj backed ``proj`` function for :func:`betterknown.parser.parse`.

EWKT SRIDs follow the PostGIS convention of x/y axis order, so they are
transformed with ``always_xy``. GeoSPARQL literals are written in the
axis order of their reference system, so those keep the authority order
and are transformed to ``OGC:CRS84`` (longitude/latitude) instead of
EPSG:4326 (latitude/longitude).
"""
from functools import lru_cache

from pyproj import Transformer

from betterknown import WGS84_EPSG
from betterknown.crs import EPSG_IRI


_LRU_CACHE_SIZE = 32
CRS84 = "OGC:CRS84"


@lru_cache(maxsize=_LRU_CACHE_SIZE)
def transformer(from_crs, to_crs, always_xy=True):
    return Transformer.from_crs(from_crs, to_crs, always_xy=always_xy)


def reproject(from_crs, to_crs, position):
    """Reproject ``position`` from ``from_crs`` to ``to_crs``.

    ``from_crs`` may be anything pyproj understands (``"EPSG:3857"``) or a
    GeoSPARQL EPSG IRI. Only the first two values are transformed; any
    further values are returned unchanged.
    """
    m = EPSG_IRI.match(from_crs)
    if m:
        from_crs = "EPSG:{}".format(m.group(1))
        if to_crs == WGS84_EPSG:
            to_crs = CRS84
        t = transformer(from_crs, to_crs, always_xy=False)
    else:
        t = transformer(from_crs, to_crs)
    x, y = t.transform(position[0], position[1])
    return (x, y) + tuple(position[2:])
