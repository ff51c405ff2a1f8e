import os

import pytest


@pytest.fixture
def big_multipolygon():
    ring = ",".join("{0}, {0}".format(i) for i in range(1000))
    return "MULTIPOLYGON ((({})))".format(ring)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def fake_proj(calls):
    """A reprojection function that records its arguments and scales x/y."""
    def proj(from_crs, to_crs, position):
        calls.append((from_crs, to_crs, position))
        return [position[0] / 10, position[1] / 10] + list(position[2:])
    return proj


@pytest.fixture
def mercator_wkt():
    return _data_file('fixtures/mercator.wkt')


@pytest.fixture
def polygon_geojson():
    return _data_file('fixtures/polygon.json')


def _data_file(name):
    cur_dir = os.path.dirname(os.path.realpath(__file__))
    return os.path.join(cur_dir, name)
