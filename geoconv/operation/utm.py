"""
UTM detection
=============

Recognizes Universal Transverse Mercator parameterizations in generic
Transverse Mercator conversions, and retrofits the canonical EPSG name and
code onto them. Construction of UTM conversions lives in
``geoconv.operation.factory.create_utm``.
"""

import math
from typing import Optional, Tuple

from geoconv.model.units import DEGREE, METRE, UNITY
from geoconv.operation.conversion import Conversion
from geoconv.operation.factory import get_utm_conversion_properties
from geoconv.utils import constants as C


def is_utm(conversion: Conversion) -> Optional[Tuple[int, bool]]:
    """
    Detect a UTM conversion.

    Parameters
    ----------
    conversion : Conversion
        Conversion to inspect

    Returns
    -------
    tuple of (int, bool) or None
        ``(zone, north)`` when the method is Transverse Mercator with latitude
        of origin 0, a central meridian on a zone centre (in degrees), scale
        0.9996, false easting 500000 m and false northing 0 m (north) or
        10000000 m (south). None otherwise.
    """
    if conversion.method.code != C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR:
        return None

    lat_origin_ok = scale_ok = easting_ok = northing_ok = False
    zone = 0
    north = True
    for opv in conversion.parameter_values:
        if not opv.value.is_measure:
            continue
        measure = opv.value.measure
        code = opv.code
        if code == C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN and \
                abs(measure.value) < 1e-10:
            lat_origin_ok = True
        elif code in (C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN,
                      C.EPSG_CODE_PARAMETER_LONGITUDE_OF_ORIGIN) and \
                measure.unit.is_equivalent_to(DEGREE):
            zone_value = (measure.value + 183.0) / 6.0
            nearest = math.floor(zone_value + 0.5)
            if 0.9 < zone_value < 60.1 and abs(zone_value - nearest) < 1e-10:
                zone = int(nearest)
        elif code == C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN and \
                measure.unit.is_equivalent_to(UNITY) and \
                abs(measure.value - C.UTM_SCALE_FACTOR) < 1e-10:
            scale_ok = True
        elif code == C.EPSG_CODE_PARAMETER_FALSE_EASTING and \
                measure.value == C.UTM_FALSE_EASTING and \
                measure.unit.is_equivalent_to(METRE):
            easting_ok = True
        elif code == C.EPSG_CODE_PARAMETER_FALSE_NORTHING and \
                measure.unit.is_equivalent_to(METRE):
            if abs(measure.value) < 1e-10:
                northing_ok, north = True, True
            elif abs(measure.value - C.UTM_FALSE_NORTHING_SOUTH) < 1e-10:
                northing_ok, north = True, False

    if lat_origin_ok and zone > 0 and scale_ok and easting_ok and northing_ok:
        return zone, north
    return None


def identify(conversion: Conversion) -> Conversion:
    """
    Copy of ``conversion``, renamed to its UTM zone when it is one.

    The copy keeps the CRS endpoints. Applying ``identify`` twice gives the
    same name and code as applying it once.
    """
    utm = is_utm(conversion)
    if utm is None:
        return conversion._clone()
    zone, north = utm
    return conversion._clone(get_utm_conversion_properties(None, zone, north))
