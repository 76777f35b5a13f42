#!/usr/bin/env python3
"""Command-line interface for exporting conversions with geoconv.

Builds a conversion from a UTM zone or from a registry method with explicit
parameter values, optionally inverts it or re-expresses it under another
method, and prints it as WKT, a PROJ string or PROJJSON.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from geoconv.errors import ConstructionError, FormattingError
from geoconv.io.json_formatter import JSONFormatter
from geoconv.io.proj_formatter import PROJStringFormatter
from geoconv.io.wkt_formatter import WKTConvention, WKTFormatter
from geoconv.model.crs import BESSEL_1841, CLARKE_1866, GRS1980, WGS84, GeodeticCRS
from geoconv.model.method_spec import MethodSpec, get_method
from geoconv.model.units import DEFAULT_UNITS, Measure, get_unit
from geoconv.operation.conversion import Conversion
from geoconv.operation.factory import create_utm

FORMATS = ('wkt2', 'wkt1-gdal', 'wkt1-esri', 'proj', 'json')

_WKT_CONVENTIONS = {
    'wkt2': WKTConvention.WKT2_2019,
    'wkt1-gdal': WKTConvention.WKT1_GDAL,
    'wkt1-esri': WKTConvention.WKT1_ESRI,
}

ELLIPSOIDS = {
    "WGS84": WGS84,
    "GRS80": GRS1980,
    "clrk66": CLARKE_1866,
    "bessel": BESSEL_1841,
}


def _code_or_name(text: str):
    return int(text) if text.strip().isdigit() else text


def parse_param(text: str) -> tuple:
    """Split ``NAME=VALUE[:UNIT]`` into ``(name_or_code, value, unit_name)``."""
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE[:UNIT], got '{text}'")
    name, _, value = text.rpartition('=')
    unit = None
    if ':' in value:
        value, _, unit = value.partition(':')
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: '{value}'") from None
    return _code_or_name(name.strip()), number, unit


def build_from_method(method: MethodSpec, params: List[tuple]) -> Conversion:
    """
    Conversion of ``method`` with values given by name or EPSG code.

    Values without a unit are taken in the default unit of the parameter
    (degree, metre, unity).

    Raises
    ------
    ConstructionError
        If a parameter is unknown to the method or missing.
    """
    given: Dict[str, Measure] = {}
    for key, value, unit_name in params:
        spec = method.find_param(key)
        if spec is None:
            raise ConstructionError(f"{method.name} has no parameter '{key}'")
        unit = get_unit(unit_name) if unit_name else DEFAULT_UNITS[spec.unit_class]
        given[spec.name] = Measure(value, unit)

    missing = [p.name for p in method.params if p.name not in given]
    if missing:
        raise ConstructionError(f"Missing parameters for {method.name}: {', '.join(missing)}")
    return Conversion.create(None, method, [given[p.name] for p in method.params])


def export(conv: Conversion, fmt: str, multiline: bool = False) -> str:
    if fmt == 'proj':
        return conv.export_to_proj_string(PROJStringFormatter.create())
    if fmt == 'json':
        return conv.export_to_json(JSONFormatter.create())
    return conv.export_to_wkt(WKTFormatter.create(_WKT_CONVENTIONS[fmt], multiline))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for geoconv-export CLI."""
    parser = argparse.ArgumentParser(
        description="Export a coordinate conversion as WKT, PROJ or PROJJSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # UTM zone 31 north as a PROJ string
  geoconv-export --utm 31 --format proj

  # Inverse of UTM zone 33 south
  geoconv-export --utm 33 --south --inverse --format proj

  # Mercator (variant A) re-expressed as variant B, ESRI WKT
  geoconv-export --method 9804 --param 8801=0 --param 8802=10 \\
      --param 8805=0.9 --param 8806=0 --param 8807=0 \\
      --convert-to 9805 --format wkt1-esri
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--utm",
        type=int,
        metavar="ZONE",
        help="UTM zone number (1-60)"
    )
    source.add_argument(
        "--method",
        type=str,
        metavar="CODE_OR_NAME",
        help="EPSG method code or method name"
    )

    parser.add_argument(
        "--south",
        action="store_true",
        help="Southern hemisphere UTM zone"
    )

    parser.add_argument(
        "--param",
        type=parse_param,
        action="append",
        default=[],
        metavar="NAME=VALUE[:UNIT]",
        help="Parameter value by name or EPSG code, e.g. 8801=45 or "
             "'False easting=1000:foot' (repeatable)"
    )

    parser.add_argument(
        "--ellipsoid",
        choices=sorted(ELLIPSOIDS),
        default="WGS84",
        help="Ellipsoid used by --convert-to (default: WGS84)"
    )

    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="wkt2",
        help="Output format (default: wkt2)"
    )

    parser.add_argument(
        "--multiline",
        action="store_true",
        help="Indented WKT output"
    )

    parser.add_argument(
        "--inverse",
        action="store_true",
        help="Export the inverse conversion"
    )

    parser.add_argument(
        "--convert-to",
        type=str,
        metavar="CODE",
        help="Re-express the conversion under another method (EPSG code or name)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.utm is not None:
            conv = create_utm(None, args.utm, not args.south)
        else:
            method = get_method(_code_or_name(args.method))
            conv = build_from_method(method, args.param)

        if args.convert_to:
            # must outlive conv, which only holds a weak reference
            source_crs = GeodeticCRS(f"Geographic CRS on {args.ellipsoid}",
                                     ELLIPSOIDS[args.ellipsoid])
            conv.set_crss(source_crs, None)
            converted = conv.convert_to_other_method(_code_or_name(args.convert_to))
            if converted is None:
                print(f"Error: cannot express '{conv.method.name}' as "
                      f"'{args.convert_to}'", file=sys.stderr)
                return 1
            conv = converted

        if args.inverse:
            conv = conv.inverse()

        print(export(conv, args.format, args.multiline))
        return 0

    except (ConstructionError, FormattingError, ValueError) as e:
        # ValueError: unknown method or unit
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
