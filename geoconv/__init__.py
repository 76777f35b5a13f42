"""geoconv: parameterized coordinate conversions.

Method registry, conversion entity, inversion, method equivalence
(Mercator A/B, Lambert Conic Conformal 1SP/2SP), UTM detection and export
to WKT2, WKT1 (GDAL and ESRI), PROJ strings and PROJJSON.
"""

from geoconv.errors import ConstructionError, FormattingError
from geoconv.operation.conversion import Conversion

__version__ = "0.1.0"

__all__ = [
    'Conversion',
    'ConstructionError',
    'FormattingError',
    '__version__',
]
