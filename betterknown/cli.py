import json

import click
from pyproj.exceptions import ProjError

from betterknown.parser import parse
from betterknown.proj import reproject
from betterknown.writer import stringify


@click.group()
@click.version_option()
def main():
    pass


@main.command('to-geojson')
@click.argument('wkt', default='-')
@click.option('--keep-empty', is_flag=True, envvar='BETTERKNOWN_KEEP_EMPTY',
              help="Return EMPTY geometries as typed geometries with no "
                   "coordinates instead of null.")
@click.option('--reproject/--no-reproject', 'use_proj', default=False,
              envvar='BETTERKNOWN_REPROJECT',
              help="Reproject EWKT and GeoSPARQL input that is not in "
                   "WGS84 using pyproj. Without this such input is an "
                   "error.")
@click.option('--indent', type=int, help="Indent the JSON output.")
def to_geojson(wkt, keep_empty, use_proj, indent):
    """Convert WKT to a GeoJSON geometry.

    The WKT can be given as an argument or, if omitted or ``-``, read from
    stdin. EWKT (``SRID=3857;POINT(...)``) and GeoSPARQL
    (``<http://www.opengis.net/def/crs/EPSG/0/4326> POINT(...)``) are also
    accepted.
    """
    if wkt == '-':
        wkt = click.get_text_stream('stdin').read()
    try:
        geometry = parse(wkt.strip(), empty_as_null=not keep_empty,
                         proj=reproject if use_proj else None)
    except (ValueError, ProjError) as e:
        raise click.ClickException(str(e))
    result = geometry.as_dict() if geometry is not None else None
    click.echo(json.dumps(result, indent=indent))


@main.command('to-wkt')
@click.argument('geojson', default='-')
def to_wkt(geojson):
    """Convert a GeoJSON geometry to WKT.

    A GeoJSON Feature can also be given, in which case its geometry is
    converted. Input is read from stdin if the argument is omitted or
    ``-``.
    """
    if geojson == '-':
        geojson = click.get_text_stream('stdin').read()
    try:
        obj = json.loads(geojson)
        if obj.get('type') == 'Feature':
            obj = obj['geometry']
        click.echo(stringify(obj))
    except (ValueError, AttributeError, KeyError, TypeError) as e:
        raise click.ClickException('Invalid GeoJSON geometry: {}'.format(e))
