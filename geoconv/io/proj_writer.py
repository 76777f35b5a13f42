"""
PROJ String Exporter
====================

Translates a conversion into PROJ pipeline steps.

Outside of CRS export the projection step is surrounded by the steps that
bring the source CRS to radians/longitude-first and by the unit and axis
handling of the target CRS, so that the resulting pipeline works on the
coordinates as the CRSs define them. Methods whose semantics already cover
those steps (axis order reversal, vertical unit change, geographic/geocentric,
offsets, height/depth reversal) skip them.

Usage:
    from geoconv.io.proj_formatter import PROJStringFormatter
    from geoconv.io.proj_writer import export_conversion_to_proj

    formatter = PROJStringFormatter.create()
    export_conversion_to_proj(conv, formatter)
    formatter.to_string()
"""

import logging
from typing import Optional

from geoconv.errors import FormattingError
from geoconv.io.proj_formatter import PROJ_5, PROJStringFormatter
from geoconv.model.crs import (
    CRS,
    WGS84,
    GeodeticCRS,
    ProjectedCRS,
    extract_geodetic_crs,
    extract_vertical_crs,
    horizontal_component,
)
from geoconv.model.method_spec import MethodCategory
from geoconv.model.units import ARC_SECOND, DEGREE, METRE, UNIT_REGISTRY, UnitClass
from geoconv.utils import constants as C

logger = logging.getLogger(__name__)

_NO_CRS_MODIFIERS = (
    MethodCategory.VERTICAL_UNIT_CHANGE,
    MethodCategory.AXIS_ORDER_REVERSAL,
    MethodCategory.GEOGRAPHIC_GEOCENTRIC,
    MethodCategory.OFFSETS,
    MethodCategory.HEIGHT_DEPTH_REVERSAL,
)

_HOTINE_CODES = (C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
                 C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B)


def _deg(conv, name_or_code) -> float:
    return conv.parameter_value_numeric(name_or_code, DEGREE)


def _si(conv, name_or_code) -> float:
    return conv.parameter_value_numeric_as_si(name_or_code)


def _geodetic_only(crs: Optional[CRS]) -> Optional[GeodeticCRS]:
    horiz = horizontal_component(crs)
    return horiz if isinstance(horiz, GeodeticCRS) else None


def _unsupported(name: str) -> FormattingError:
    return FormattingError(f"Unsupported value for {name}")


# =============================================================================
# Shared with the WKT1 extension node
# =============================================================================

def write_web_mercator_proj4(conv, formatter: PROJStringFormatter) -> bool:
    """
    Spherical ``merc`` definition GDAL uses for Pseudo-Mercator CRSs.

    Returns False when the source CRS is not geographic or the target unit
    has no PROJ name.
    """
    source = conv.source_crs
    if not isinstance(source, GeodeticCRS) or not source.is_geographic:
        return False

    units = 'm'
    target = conv.target_crs
    if isinstance(target, ProjectedCRS) and not target.linear_unit.is_equivalent_to(METRE):
        if not target.linear_unit.proj_name:
            return False
        units = target.linear_unit.proj_name

    a = source.ellipsoid.semi_major_axis
    formatter.add_step('merc')
    formatter.add_param('a', a)
    formatter.add_param('b', a)
    formatter.add_param('lat_ts', 0.0)
    formatter.add_param('lon_0', _deg(conv, C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN))
    formatter.add_param('x_0', _si(conv, C.EPSG_CODE_PARAMETER_FALSE_EASTING))
    formatter.add_param('y_0', _si(conv, C.EPSG_CODE_PARAMETER_FALSE_NORTHING))
    formatter.add_param('k', 1.0)
    formatter.add_param('units', units)
    formatter.add_param('nadgrids', '@null')
    if isinstance(target, ProjectedCRS) and target.has_over:
        formatter.add_param('over')
    formatter.add_param('wktext')
    formatter.add_param('no_defs')
    return True


def write_custom_proj(conv, formatter: PROJStringFormatter,
                      for_extension_node: bool) -> bool:
    """
    Replay a ``PROJ <definition>`` method name as a PROJ step.

    Parameter values are appended after the definition, lengths in metres
    and angles in degrees.
    """
    tokens = [t for t in conv.method.name.split(' ') if t]
    formatter.add_step(tokens[1])

    if for_extension_node:
        source = conv.source_crs
        if not isinstance(source, GeodeticCRS) or not source.is_geographic:
            return False
        source.add_datum_info_to_proj_string(formatter)

    for token in tokens[2:]:
        kv = token.split('=')
        if len(kv) == 2:
            formatter.add_param(kv[0], kv[1])
        else:
            formatter.add_param(token)

    for opv in conv.parameter_values:
        if not opv.value.is_measure:
            continue
        measure = opv.value.measure
        if measure.unit.unit_class is UnitClass.LENGTH:
            formatter.add_param(opv.name, measure.get_si_value())
        elif measure.unit.unit_class is UnitClass.ANGLE:
            formatter.add_param(opv.name, measure.convert_to_unit(DEGREE))
        else:
            formatter.add_param(opv.name, measure.value)

    if for_extension_node:
        formatter.add_param('wktext')
        formatter.add_param('no_defs')
    return True


# =============================================================================
# Special cases
# =============================================================================

def _write_geocentric_latitude(conv, formatter: PROJStringFormatter) -> None:
    source = _geodetic_only(conv.source_crs)
    target = _geodetic_only(conv.target_crs)
    if source is not None and target is not None and (
            (source.spherical_planetocentric and target.is_geographic) or
            (source.is_geographic and target.spherical_planetocentric)):
        formatter.omit_proj_longlat_if_possible = True
        formatter.start_inversion()
        source.export_to_proj_string(formatter)
        formatter.stop_inversion()
        target.export_to_proj_string(formatter)
        formatter.omit_proj_longlat_if_possible = False
        return
    raise FormattingError(
        "Invalid nature of source and/or target CRS for "
        f"{C.PROJ_WKT2_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC_LATITUDE} conversion")


def _write_source_normalisation(source: CRS, formatter: PROJStringFormatter) -> Optional[GeodeticCRS]:
    """Steps bringing source coordinates to radians, longitude first.

    Returns the source CRS when it is geographic.
    """
    horiz = horizontal_component(source)
    if isinstance(horiz, GeodeticCRS) and (horiz.is_geographic or
                                           horiz.spherical_planetocentric):
        formatter.omit_proj_longlat_if_possible = True
        formatter.start_inversion()
        horiz.export_to_proj_string(formatter)
        formatter.stop_inversion()
        formatter.omit_proj_longlat_if_possible = False
        return horiz if horiz.is_geographic else None
    if isinstance(horiz, ProjectedCRS):
        formatter.start_inversion()
        horiz.add_unit_convert_and_axis_swap(formatter, False)
        formatter.stop_inversion()
    return None


def _length_unit_for_factor(factor: float):
    for unit in UNIT_REGISTRY.values():
        if unit.unit_class is UnitClass.LENGTH and unit.proj_name and \
                abs(unit.conversion_to_si - factor) <= 1e-10 * factor:
            return unit
    return None


def _write_vertical_unit_change(formatter: PROJStringFormatter, factor: float) -> None:
    """``unitconvert`` on z when the factor matches a named unit, else ``affine``."""
    unit = _length_unit_for_factor(factor)
    if unit is not None and unit.is_equivalent_to(METRE):
        return
    if unit is not None:
        formatter.add_step('unitconvert')
        formatter.add_param('z_in', unit.proj_name)
        formatter.add_param('z_out', 'm')
        return
    reverse_unit = _length_unit_for_factor(1.0 / factor) if factor != 0 else None
    if reverse_unit is not None:
        formatter.add_step('unitconvert')
        formatter.add_param('z_in', 'm')
        formatter.add_param('z_out', reverse_unit.proj_name)
        return
    formatter.add_step('affine')
    formatter.add_param('s33', factor)


def _vertical_unit_factor(conv) -> float:
    if conv.method.code == C.EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT:
        return _si(conv, C.EPSG_CODE_PARAMETER_UNIT_CONVERSION_SCALAR)
    source = extract_vertical_crs(conv.source_crs)
    target = extract_vertical_crs(conv.target_crs)
    if source is None or target is None:
        raise FormattingError(
            f"Export of {C.EPSG_NAME_METHOD_CHANGE_VERTICAL_UNIT_NO_CONV_FACTOR} "
            "to a PROJ string requires an input and output vertical CRS")
    return source.unit.conversion_to_si / target.unit.conversion_to_si


def _write_somerc(conv, formatter: PROJStringFormatter) -> None:
    """Hotine Oblique Mercator with right angles is the Swiss oblique Mercator."""
    variant_a = conv.method.code == C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A
    formatter.add_step('somerc')
    formatter.add_param('lat_0', _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_PROJECTION_CENTRE))
    formatter.add_param('lon_0', _deg(conv, C.EPSG_CODE_PARAMETER_LONGITUDE_PROJECTION_CENTRE))
    formatter.add_param('k_0', _si(conv, C.EPSG_CODE_PARAMETER_SCALE_FACTOR_INITIAL_LINE))
    if variant_a:
        formatter.add_param('x_0', _si(conv, C.EPSG_CODE_PARAMETER_FALSE_EASTING))
        formatter.add_param('y_0', _si(conv, C.EPSG_CODE_PARAMETER_FALSE_NORTHING))
    else:
        formatter.add_param('x_0', _si(conv, C.EPSG_CODE_PARAMETER_EASTING_PROJECTION_CENTRE))
        formatter.add_param('y_0', _si(conv, C.EPSG_CODE_PARAMETER_NORTHING_PROJECTION_CENTRE))


def _write_geographic_geocentric(conv, formatter: PROJStringFormatter) -> None:
    source = _geodetic_only(conv.source_crs)
    target = _geodetic_only(conv.target_crs)
    if source is None or target is None or source.geocentric == target.geocentric:
        raise FormattingError(
            f"Export of {C.EPSG_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC} to a PROJ string "
            "requires a geographic and a geocentric CRS")
    formatter.omit_proj_longlat_if_possible = True
    formatter.start_inversion()
    source.export_to_proj_string(formatter)
    formatter.stop_inversion()
    target.export_to_proj_string(formatter)
    formatter.omit_proj_longlat_if_possible = False


def _write_offsets(conv, formatter: PROJStringFormatter) -> None:
    formatter.add_step('geogoffset')
    for opv in conv.parameter_values:
        if not opv.value.is_measure:
            continue
        measure = opv.value.measure
        if opv.code == C.EPSG_CODE_PARAMETER_LATITUDE_OFFSET:
            formatter.add_param('dlat', measure.convert_to_unit(ARC_SECOND))
        elif opv.code == C.EPSG_CODE_PARAMETER_LONGITUDE_OFFSET:
            formatter.add_param('dlon', measure.convert_to_unit(ARC_SECOND))
        elif opv.code in (C.EPSG_CODE_PARAMETER_VERTICAL_OFFSET,
                          C.EPSG_CODE_PARAMETER_GEOID_UNDULATION):
            formatter.add_param('dh', measure.get_si_value())


def _write_generic(conv, formatter: PROJStringFormatter) -> bool:
    """Methods with no projection token. Returns False if none applies."""
    category = conv.method.category
    if category is MethodCategory.AXIS_ORDER_REVERSAL:
        formatter.add_step('axisswap')
        formatter.add_param('order', '2,1')
    elif category is MethodCategory.HEIGHT_DEPTH_REVERSAL:
        formatter.add_step('axisswap')
        formatter.add_param('order', '1,2,-3')
    elif category is MethodCategory.GEOGRAPHIC_GEOCENTRIC:
        _write_geographic_geocentric(conv, formatter)
    elif category is MethodCategory.OFFSETS:
        _write_offsets(conv, formatter)
    elif conv.method.code == C.EPSG_CODE_METHOD_GEOCENTRIC_TOPOCENTRIC:
        formatter.add_step('topocentric')
        for code, key in ((C.EPSG_CODE_PARAMETER_GEOCENTRIC_X_TOPOCENTRIC_ORIGIN, 'X_0'),
                          (C.EPSG_CODE_PARAMETER_GEOCENTRIC_Y_TOPOCENTRIC_ORIGIN, 'Y_0'),
                          (C.EPSG_CODE_PARAMETER_GEOCENTRIC_Z_TOPOCENTRIC_ORIGIN, 'Z_0')):
            formatter.add_param(key, _si(conv, code))
        geodetic = extract_geodetic_crs(conv.source_crs)
        if geodetic is not None:
            geodetic.ellipsoid.export_to_proj_string(formatter)
    elif category is MethodCategory.VERTICAL_UNIT_CHANGE:
        # no z unit step in PROJ_4 strings
        logger.debug("Skipping vertical unit change for %s convention",
                     formatter.convention)
    else:
        return False
    return True


def _write_mapped_projection(conv, formatter: PROJStringFormatter, use_approx: bool,
                             insert_axis_wsu: bool, negate_scale_factor: bool) -> bool:
    """Projection step from the registry PROJ names. Returns axis_spec_found."""
    method = conv.method
    code = method.code
    axis_spec_found = False

    formatter.add_step(method.proj_name_main)
    if use_approx:
        formatter.add_param('approx')

    aux = method.proj_name_aux
    if aux:
        add_aux = True
        if aux.startswith('axis='):
            if code == C.EPSG_CODE_METHOD_KROVAK:
                target = conv.target_crs
                if isinstance(target, ProjectedCRS) and \
                        target.axis_directions[:2] == ('west', 'south'):
                    formatter.add_param('czech')
                    add_aux = False
            axis_spec_found = True
        if aux in ('f=0', 'R_A'):
            source = _geodetic_only(conv.source_crs)
            if source is not None and source.is_geographic and source.ellipsoid.is_sphere:
                add_aux = False
        if add_aux:
            kv = aux.split('=')
            if len(kv) == 2:
                formatter.add_param(kv[0], kv[1])
            else:
                formatter.add_param(aux)

    if insert_axis_wsu:
        formatter.add_param('axis', 'wsu')

    if code == C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B:
        std_parallel = _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_STD_PARALLEL)
        formatter.add_param('lat_0', 90.0 if std_parallel >= 0 else -90.0)

    for param in method.params:
        if not param.proj_name:
            continue
        measure = conv.parameter_value_measure(param.code or param.name)
        if measure.is_null:
            # missing values
            value = 1.0 if param.code == C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN else 0.0
            if code in _HOTINE_CODES and \
                    param.code == C.EPSG_CODE_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID:
                continue
        elif param.unit_class is UnitClass.ANGLE:
            value = measure.convert_to_unit(DEGREE)
        else:
            value = measure.get_si_value()

        if code == C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP and param.proj_name == 'lat_1':
            formatter.add_param(param.proj_name, value)
            formatter.add_param('lat_0', value)
        elif negate_scale_factor and \
                param.code == C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN:
            formatter.add_param(param.proj_name, -value)
        else:
            formatter.add_param(param.proj_name, value)
    return axis_spec_found


def _write_target_modifiers(target: CRS, formatter: PROJStringFormatter,
                            ellipsoid_done: bool, axis_spec_found: bool) -> None:
    horiz = horizontal_component(target)
    if not ellipsoid_done and horiz is not None:
        geodetic = extract_geodetic_crs(horiz)
        if geodetic is not None:
            if not geodetic.is_geographic:
                geodetic.ellipsoid.export_to_proj_string(formatter)
            elif formatter.crs_export:
                geodetic.add_datum_info_to_proj_string(formatter)
            else:
                geodetic.ellipsoid.export_to_proj_string(formatter)
                geodetic.prime_meridian.export_to_proj_string(formatter)

    if isinstance(horiz, ProjectedCRS):
        horiz.add_unit_convert_and_axis_swap(formatter, axis_spec_found)
        if horiz.has_over:
            formatter.add_param('over')


# =============================================================================
# Entry point
# =============================================================================

def export_conversion_to_proj(conv, formatter: PROJStringFormatter) -> None:
    """
    Write ``conv`` as PROJ steps.

    Parameters
    ----------
    conv : Conversion
        Conversion to export
    formatter : PROJStringFormatter
        Target formatter

    Raises
    ------
    FormattingError
        If the parameters cannot be expressed with PROJ, or the method has
        no PROJ equivalent.
    """
    method = conv.method
    code = method.code
    category = method.category
    apply_source_modifiers = category not in _NO_CRS_MODIFIERS
    apply_target_modifiers = apply_source_modifiers

    if formatter.crs_export and category is MethodCategory.TOPOCENTRIC:
        raise FormattingError(
            "Transformation cannot be exported as a PROJ.4 string "
            "(but can be part of a PROJ pipeline)")

    if category is MethodCategory.GEOCENTRIC_LATITUDE:
        _write_geocentric_latitude(conv, formatter)
        return

    source = conv.source_crs
    target = conv.target_crs

    source_geographic = None
    if not formatter.crs_export and source is not None and apply_source_modifiers:
        source_geographic = _write_source_normalisation(source, formatter)

    conversion_done = False
    ellipsoid_done = False
    use_approx = False
    insert_axis_wsu = False
    negate_scale_factor = False

    if code == C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR:
        use_approx = formatter.use_approx_tmerc
        utm = conv.is_utm()
        if utm is not None:
            zone, north = utm
            conversion_done = True
            formatter.add_step('utm')
            if use_approx:
                formatter.add_param('approx')
            formatter.add_param('zone', zone)
            if not north:
                formatter.add_param('south')
        elif target is not None and \
                _si(conv, C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN) < 0 and \
                _si(conv, C.EPSG_CODE_PARAMETER_FALSE_EASTING) == 0 and \
                _si(conv, C.EPSG_CODE_PARAMETER_FALSE_NORTHING) == 0:
            # k < 0 encodes a westing/southing system
            if isinstance(target, ProjectedCRS) and \
                    target.axis_directions[:2] == ('east', 'north'):
                insert_axis_wsu = True
                negate_scale_factor = True

    elif code in _HOTINE_CODES:
        azimuth = _deg(conv, C.EPSG_CODE_PARAMETER_AZIMUTH_INITIAL_LINE)
        skew = _deg(conv, C.EPSG_CODE_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID)
        if abs(azimuth - 90) < C.HOTINE_RIGHT_ANGLE_TOLERANCE and \
                abs(skew - 90) < C.HOTINE_RIGHT_ANGLE_TOLERANCE:
            _write_somerc(conv, formatter)
            conversion_done = True

    elif code == C.EPSG_CODE_METHOD_KROVAK_NORTH_ORIENTED:
        colatitude = _deg(conv, C.EPSG_CODE_PARAMETER_COLATITUDE_CONE_AXIS)
        pseudo_parallel = _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_PSEUDO_STANDARD_PARALLEL)
        if abs(colatitude - C.KROVAK_COLATITUDE_CONE_AXIS_DEG) > 1e-7:
            raise _unsupported(C.EPSG_NAME_PARAMETER_COLATITUDE_CONE_AXIS)
        if abs(pseudo_parallel - C.KROVAK_LATITUDE_PSEUDO_STANDARD_PARALLEL_DEG) > 1e-8:
            raise _unsupported(C.EPSG_NAME_PARAMETER_LATITUDE_PSEUDO_STANDARD_PARALLEL)

    elif code == C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A:
        if _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN) != 0:
            raise _unsupported(C.EPSG_NAME_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN)

    elif code == C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B:
        scale = conv.parameter_value_measure(C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN)
        if not scale.is_null and abs(scale.get_si_value() - 1.0) > C.UNITY_TOLERANCE:
            raise FormattingError("Unexpected presence of scale factor in Mercator (variant B)")
        if _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN) != 0:
            raise _unsupported(C.EPSG_NAME_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN)

    elif code == C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR_SOUTH_ORIENTATED:
        # only expressible as tmerc +axis=wsu with a zero false origin
        if conv.parameter_value_numeric(C.EPSG_CODE_PARAMETER_FALSE_EASTING, METRE) != 0:
            raise _unsupported(C.EPSG_NAME_PARAMETER_FALSE_EASTING)
        if conv.parameter_value_numeric(C.EPSG_CODE_PARAMETER_FALSE_NORTHING, METRE) != 0:
            raise _unsupported(C.EPSG_NAME_PARAMETER_FALSE_NORTHING)

    elif formatter.crs_export and \
            code == C.EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR:
        if not write_web_mercator_proj4(conv, formatter):
            raise FormattingError(
                f"Cannot export {C.EPSG_NAME_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR} "
                "as PROJ.4 string outside of a ProjectedCRS context")
        conversion_done = True
        ellipsoid_done = True
        apply_target_modifiers = False

    elif conv.name.lower() == C.POPULAR_VISUALISATION_MERCATOR_NAME.lower():
        if formatter.crs_export:
            if not write_web_mercator_proj4(conv, formatter):
                raise FormattingError(
                    f"Cannot export {conv.name} as PROJ.4 string outside of a "
                    "ProjectedCRS context")
            apply_target_modifiers = False
        else:
            formatter.add_step('webmerc')
            if source is not None:
                WGS84.export_to_proj_string(formatter)
        conversion_done = True
        ellipsoid_done = True

    elif method.name.startswith(C.CUSTOM_PROJ_METHOD_PREFIX):
        write_custom_proj(conv, formatter, for_extension_node=False)
        conversion_done = True

    elif method.name.lower() == C.PROJ_WKT2_NAME_METHOD_POLE_ROTATION_GRIB_CONVENTION.lower():
        south_pole_lat = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_SOUTH_POLE_LATITUDE_GRIB_CONVENTION)
        south_pole_lon = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_SOUTH_POLE_LONGITUDE_GRIB_CONVENTION)
        rotation = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_AXIS_ROTATION_GRIB_CONVENTION)
        formatter.add_step('ob_tran')
        formatter.add_param('o_proj', 'longlat')
        formatter.add_param('o_lon_p', -rotation)
        formatter.add_param('o_lat_p', -south_pole_lat)
        formatter.add_param('lon_0', south_pole_lon)
        conversion_done = True

    elif method.name.lower() == C.PROJ_WKT2_NAME_METHOD_POLE_ROTATION_NETCDF_CF_CONVENTION.lower():
        pole_lat = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_GRID_NORTH_POLE_LATITUDE_NETCDF_CONVENTION)
        pole_lon = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_GRID_NORTH_POLE_LONGITUDE_NETCDF_CONVENTION)
        grid_lon = _deg(conv, C.PROJ_WKT2_NAME_PARAMETER_NORTH_POLE_GRID_LONGITUDE_NETCDF_CONVENTION)
        formatter.add_step('ob_tran')
        formatter.add_param('o_proj', 'longlat')
        formatter.add_param('o_lon_p', grid_lon)
        formatter.add_param('o_lat_p', pole_lat)
        formatter.add_param('lon_0', 180 + pole_lon)
        conversion_done = True

    elif formatter.convention == PROJ_5 and category is MethodCategory.VERTICAL_UNIT_CHANGE:
        _write_vertical_unit_change(formatter, _vertical_unit_factor(conv))
        conversion_done = True
        ellipsoid_done = True

    elif code == C.EPSG_CODE_METHOD_GEOGRAPHIC_TOPOCENTRIC:
        if source_geographic is None:
            raise FormattingError(
                "Export of Geographic/Topocentric conversion to a PROJ string "
                "requires an input geographic CRS")
        formatter.add_step('cart')
        source_geographic.ellipsoid.export_to_proj_string(formatter)
        formatter.add_step('topocentric')
        formatter.add_param('lat_0', _deg(conv, C.EPSG_CODE_PARAMETER_LATITUDE_TOPOGRAPHIC_ORIGIN))
        formatter.add_param('lon_0', _deg(conv, C.EPSG_CODE_PARAMETER_LONGITUDE_TOPOGRAPHIC_ORIGIN))
        formatter.add_param('h_0', conv.parameter_value_numeric(
            C.EPSG_CODE_PARAMETER_ELLIPSOIDAL_HEIGHT_TOPOCENTRIC_ORIGIN, METRE))
        conversion_done = True

    axis_spec_found = False
    if not conversion_done:
        if method.proj_name_main:
            axis_spec_found = _write_mapped_projection(
                conv, formatter, use_approx, insert_axis_wsu, negate_scale_factor)
        elif not _write_generic(conv, formatter):
            raise FormattingError(f"Unsupported conversion method: {method.name}")

    if target is not None and apply_target_modifiers:
        _write_target_modifiers(target, formatter, ellipsoid_done, axis_spec_found)
