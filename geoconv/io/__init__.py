"""
geoconv I/O Module
==================

Formatters (token-level builders) and writers (conversion exporters) for
WKT, PROJ strings and PROJJSON.
"""

from geoconv.io.wkt_formatter import WKTConvention, WKTFormatter
from geoconv.io.proj_formatter import PROJ_4, PROJ_5, PROJStringFormatter
from geoconv.io.json_formatter import JSONFormatter

__all__ = [
    'WKTConvention',
    'WKTFormatter',
    'PROJ_4',
    'PROJ_5',
    'PROJStringFormatter',
    'JSONFormatter',
]
