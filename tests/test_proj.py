import pytest
from pyproj.exceptions import ProjError

from betterknown.geometry import Point
from betterknown.parser import parse
from betterknown.proj import reproject


def test_reproject_transforms_web_mercator():
    x, y = reproject("EPSG:3857", "EPSG:4326", (-400004.3, 60000.1))
    assert x == pytest.approx(-3.5932997640353026)
    assert y == pytest.approx(0.5389821193537617)


def test_reproject_keeps_extra_values():
    res = reproject("EPSG:3857", "EPSG:4326", (0.0, 0.0, 12.0, 3.0))
    assert res[2:] == (12.0, 3.0)


def test_parse_ewkt_with_reproject(mercator_wkt):
    with open(mercator_wkt) as fp:
        wkt = fp.read()
    res = parse(wkt, proj=reproject)
    assert res.type == "Point"
    assert len(res.coordinates) == 2
    assert res.coordinates == pytest.approx((-3.593, 0.539), abs=1e-3)


def test_parse_geosparql_with_reproject():
    res = parse("<http://www.opengis.net/def/crs/EPSG/0/3857> "
                "POINT(-400004.3 60000.1)", proj=reproject)
    assert res.coordinates == pytest.approx((-3.593, 0.539), abs=1e-3)


def test_parse_geosparql_uses_authority_axis_order():
    # ETRS89 is defined latitude first
    res = parse("<http://www.opengis.net/def/crs/EPSG/0/4258> "
                "POINT(52.5 13.4)", proj=reproject)
    assert isinstance(res, Point)
    assert res.coordinates == pytest.approx((13.4, 52.5), abs=1e-3)


def test_parse_lets_pyproj_errors_through():
    with pytest.raises(ProjError):
        parse("SRID=999999;POINT(1 2)", proj=reproject)
