"""
Equivalence solver
==================

Derives a conversion that describes the same projection under another
method. Implemented pairs:

- Mercator (variant A) <-> Mercator (variant B)
- Lambert Conic Conformal (1SP) <-> Lambert Conic Conformal (2SP)

Notations (m0, t0, n, F, ...) follow the EPSG guidance note 7-2,
sections "Lambert Conic Conformal (2SP)" / "(1SP)", and Snyder pages
106-109. Every solver returns None when its preconditions are not met, and
copies the CRS endpoints of its input on success.
"""

import logging
import math
from typing import Optional, Union

from geoconv.model.crs import GeodeticCRS
from geoconv.model.method_spec import MethodSpec, get_method
from geoconv.model.units import DEGREE, METRE, RADIAN, UNITY, Measure
from geoconv.operation import factory
from geoconv.operation.conversion import Conversion
from geoconv.projections.auxiliary import msfn, tsfn
from geoconv.utils import constants as C

logger = logging.getLogger(__name__)


def _rad_to_deg(x: float) -> float:
    return x / math.pi * 180.0


def _deg_to_rad(x: float) -> float:
    return x / 180.0 * math.pi


def _round_to_thousandth(deg: float) -> float:
    """Snap to the 0.001 degree grid when within ROUNDING_TOLERANCE of it."""
    if abs(deg * 1000 - math.floor(deg * 1000 + 0.5)) < C.ROUNDING_TOLERANCE:
        return math.floor(deg * 1000 + 0.5) / 1000
    return deg


def lcc_1sp_to_2sp_f(sinphi: float, K: float, ec: float, n: float) -> float:
    """Function whose zeroes are the sines of the LCC 2SP standard parallels."""
    x = sinphi
    ecx = ec * x
    return (1 - x * x) / (1 - ecx * ecx) - \
        K * K * math.pow((1.0 - x) / (1.0 + x) * math.pow((1.0 + ecx) / (1.0 - ecx), ec), n)


def find_zero_lcc_1sp_to_2sp_f(sinphi0: float, north: bool, K: float, ec: float) -> float:
    """
    Bisection for the sine of one standard parallel.

    The function is positive at sin(phi0) and has exactly one zero in each of
    ]-1, sin(phi0)[ and ]sin(phi0), 1[. The search always runs
    ``BISECTION_ITERATIONS`` steps unless it hits an exact zero or the
    interval collapses below 1e-18.
    """
    if north:
        a, b = sinphi0, 1.0
        f_a = 1.0
    else:
        a, b = -1.0, sinphi0
        f_a = -1.0
    for _ in range(C.BISECTION_ITERATIONS):
        c = (a + b) / 2
        f_c = lcc_1sp_to_2sp_f(c, K, ec, sinphi0)
        if f_c == 0.0 or (b - a) < 1e-18:
            return c
        if (f_c > 0 and f_a > 0) or (f_c < 0 and f_a < 0):
            a = c
            f_a = f_c
        else:
            b = c
    return (a + b) / 2


def _mercator_a_to_b(conv: Conversion, e2: float) -> Optional[Conversion]:
    if conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN) != 0.0:
        return None
    k0 = conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN)
    if not (0 < k0 <= 1.0 + C.UNITY_TOLERANCE):
        return None
    phi1 = 0.0 if k0 >= 1.0 else math.acos(math.sqrt((1.0 - e2) / ((1.0 / (k0 * k0)) - e2)))
    return factory.create_mercator_variant_b(
        None,
        Measure(Measure(phi1, RADIAN).convert_to_unit(DEGREE), DEGREE),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_EASTING),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_NORTHING))


def _mercator_b_to_a(conv: Conversion, e2: float) -> Optional[Conversion]:
    phi1 = conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_LATITUDE_1ST_STD_PARALLEL)
    if not abs(phi1) < C.HALF_PI:
        return None
    k0 = float(msfn(phi1, e2))
    return factory.create_mercator_variant_a(
        None,
        Measure(0.0, DEGREE),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN),
        Measure(k0, UNITY),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_EASTING),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_NORTHING))


def _lcc_1sp_to_2sp(conv: Conversion, geod: GeodeticCRS, e2: float) -> Optional[Conversion]:
    lat_origin = conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN)
    longitude = conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN)
    false_easting = conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_EASTING)
    phi0 = lat_origin.get_si_value()
    k0 = conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN)
    if not abs(phi0) < C.HALF_PI:
        return None
    if not (0 < k0 <= 1.0 + C.UNITY_TOLERANCE):
        return None
    ec = math.sqrt(e2)
    m0 = float(msfn(phi0, e2))
    t0 = float(tsfn(phi0, ec))
    n = math.sin(phi0)
    if abs(n) < 1e-10:
        return None

    if abs(k0 - 1.0) <= C.UNITY_TOLERANCE:
        return factory.create_lambert_conic_conformal_2sp(
            None, lat_origin, longitude, lat_origin, lat_origin, false_easting,
            conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_FALSE_NORTHING))

    K = k0 * m0 / math.pow(t0, n)
    phi1 = math.asin(find_zero_lcc_1sp_to_2sp_f(n, True, K, ec))
    phi2 = math.asin(find_zero_lcc_1sp_to_2sp_f(n, False, K, ec))
    phi1_deg = _round_to_thousandth(_rad_to_deg(phi1))
    phi2_deg = _round_to_thousandth(_rad_to_deg(phi2))

    # A latitude of origin close to a half degree may come from a 2SP
    # definition whose false northing is an integer at that rounded origin.
    fn = conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_FALSE_NORTHING)
    lat_origin_deg = lat_origin.convert_to_unit(DEGREE)
    if abs(lat_origin_deg * 2 - math.floor(lat_origin_deg * 2 + 0.5)) < 0.2:
        rounded_lat_origin = math.floor(lat_origin_deg * 2 + 0.5) / 2
        m1 = float(msfn(phi1, e2))
        t1 = float(tsfn(phi1, ec))
        F = m1 / (n * math.pow(t1, n))
        a = geod.ellipsoid.semi_major_axis
        t_rounded = float(tsfn(_deg_to_rad(rounded_lat_origin), ec))
        fn_correction = a * F * (math.pow(t_rounded, n) - math.pow(t0, n))
        fn_corrected = fn - fn_correction
        fn_corrected_rounded = math.floor(fn_corrected + 0.5)
        if abs(fn_corrected - fn_corrected_rounded) < C.ROUNDING_TOLERANCE:
            logger.debug("LCC 1SP->2SP: snapped latitude of origin to %s",
                         rounded_lat_origin)
            return factory.create_lambert_conic_conformal_2sp(
                None, Measure(rounded_lat_origin, DEGREE), longitude,
                Measure(phi1_deg, DEGREE), Measure(phi2_deg, DEGREE),
                false_easting, Measure(fn_corrected_rounded, METRE))

    return factory.create_lambert_conic_conformal_2sp(
        None, lat_origin, longitude, Measure(phi1_deg, DEGREE),
        Measure(phi2_deg, DEGREE), false_easting, Measure(fn, METRE))


def _lcc_2sp_to_1sp(conv: Conversion, geod: GeodeticCRS, e2: float) -> Optional[Conversion]:
    phiF = conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LATITUDE_FALSE_ORIGIN).get_si_value()
    phi1 = conv.parameter_value_measure(
        C.EPSG_CODE_PARAMETER_LATITUDE_1ST_STD_PARALLEL).get_si_value()
    phi2 = conv.parameter_value_measure(
        C.EPSG_CODE_PARAMETER_LATITUDE_2ND_STD_PARALLEL).get_si_value()
    if not (abs(phiF) < C.HALF_PI and abs(phi1) < C.HALF_PI and abs(phi2) < C.HALF_PI):
        return None
    ec = math.sqrt(e2)
    m1 = float(msfn(phi1, e2))
    m2 = float(msfn(phi2, e2))
    t1 = float(tsfn(phi1, ec))
    t2 = float(tsfn(phi2, ec))
    n_denom = math.log(t1) - math.log(t2)
    n = math.sin(phi1) if abs(n_denom) < 1e-10 else (math.log(m1) - math.log(m2)) / n_denom
    if abs(n) < 1e-10:
        return None
    F = m1 / (n * math.pow(t1, n))
    phi0 = math.asin(n)
    m0 = float(msfn(phi0, e2))
    t0 = float(tsfn(phi0, ec))
    F0 = m0 / (n * math.pow(t0, n))
    k0 = F / F0
    a = geod.ellipsoid.semi_major_axis
    tF = float(tsfn(phiF, ec))
    fn_correction = a * F * (math.pow(tF, n) - math.pow(t0, n))

    phi0_deg = _round_to_thousandth(_rad_to_deg(phi0))
    northing = conv.parameter_value_numeric_as_si(C.EPSG_CODE_PARAMETER_NORTHING_FALSE_ORIGIN)
    if abs(fn_correction) > C.ROUNDING_TOLERANCE:
        northing += fn_correction

    return factory.create_lambert_conic_conformal_1sp(
        None, Measure(phi0_deg, DEGREE),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_LONGITUDE_FALSE_ORIGIN),
        Measure(k0, UNITY),
        conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_EASTING_FALSE_ORIGIN),
        Measure(northing, METRE))


_SOLVERS = {
    (C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A, C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B):
        lambda conv, geod, e2: _mercator_a_to_b(conv, e2),
    (C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B, C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A):
        lambda conv, geod, e2: _mercator_b_to_a(conv, e2),
    (C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP, C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_2SP):
        _lcc_1sp_to_2sp,
    (C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_2SP, C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP):
        _lcc_2sp_to_1sp,
}


def convert_to_other_method(conv: Conversion,
                            target: Union[MethodSpec, int, str]) -> Optional[Conversion]:
    """
    Equivalent conversion under the ``target`` method.

    Parameters
    ----------
    conv : Conversion
        Input conversion; its source CRS must be geodetic
    target : MethodSpec, int or str
        Target method or its EPSG code / name

    Returns
    -------
    Conversion or None
        ``conv`` itself when it already uses the target method, a new
        conversion for a supported pair, None otherwise.
    """
    target_code = target.code if isinstance(target, MethodSpec) else \
        target if isinstance(target, int) else get_method(target).code
    if conv.method.code == target_code:
        return conv

    geod = conv.source_crs
    if not isinstance(geod, GeodeticCRS):
        logger.debug("No equivalent for '%s': source CRS is not geodetic", conv.name)
        return None
    e2 = geod.ellipsoid.squared_eccentricity
    if e2 < 0:
        return None

    solver = _SOLVERS.get((conv.method.code, target_code))
    if solver is None:
        return None
    result = solver(conv, geod, e2)
    if result is None:
        logger.debug("No equivalent for '%s' under method %d: preconditions not met",
                     conv.name, target_code)
        return None
    result._copy_crss_from(conv)
    return result
