"""Convenience constructors for common conversions.

Each function assembles the parameter list of one registry method and
forwards to ``Conversion.create``. Plain numbers are taken in degrees for
angles, metres for lengths and unity for scales; pass a ``Measure`` to use
another unit.
"""

from typing import Optional, Union

from geoconv.errors import ConstructionError
from geoconv.model.crs import CRS
from geoconv.model.units import DEGREE, METRE, UNITY, Measure
from geoconv.operation.conversion import Conversion, Properties, _normalize_properties
from geoconv.utils import constants as C

Number = Union[float, int, Measure]


def _angle(value: Number) -> Measure:
    return value if isinstance(value, Measure) else Measure(float(value), DEGREE)


def _length(value: Number) -> Measure:
    return value if isinstance(value, Measure) else Measure(float(value), METRE)


def _scale(value: Number) -> Measure:
    return value if isinstance(value, Measure) else Measure(float(value), UNITY)


def get_utm_conversion_properties(properties: Properties, zone: int, north: bool) -> dict:
    """Default name "UTM zone NN{N|S}" and EPSG code 16000+zone / 16100+zone."""
    props = _normalize_properties(properties)
    if not props.get("name"):
        props["name"] = f"UTM zone {zone}{'N' if north else 'S'}"
        props["code"] = (C.UTM_NORTH_BASE_CODE if north else C.UTM_SOUTH_BASE_CODE) + zone
        props["codespace"] = C.EPSG
    return props


def create_utm(properties: Properties, zone: int, north: bool) -> Conversion:
    """
    Universal Transverse Mercator conversion.

    Parameters
    ----------
    properties : dict or str, optional
        Name/identifier; defaults to the EPSG UTM zone conversion
    zone : int
        UTM zone, 1 to 60
    north : bool
        True for the northern hemisphere

    Raises
    ------
    ConstructionError
        If the zone is outside 1..60.
    """
    if zone < 1 or zone > 60:
        raise ConstructionError(f"Invalid zone number: {zone}")
    return create_transverse_mercator(
        get_utm_conversion_properties(properties, zone, north),
        0.0, zone * 6.0 - 183.0, C.UTM_SCALE_FACTOR,
        C.UTM_FALSE_EASTING, 0.0 if north else C.UTM_FALSE_NORTHING_SOUTH)


def create_transverse_mercator(properties: Properties, center_lat: Number, center_long: Number,
                               scale: Number, false_easting: Number,
                               false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR,
                             [_angle(center_lat), _angle(center_long), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_transverse_mercator_south_oriented(properties: Properties, center_lat: Number,
                                              center_long: Number, scale: Number,
                                              false_easting: Number,
                                              false_northing: Number) -> Conversion:
    return Conversion.create(properties,
                             C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR_SOUTH_ORIENTATED,
                             [_angle(center_lat), _angle(center_long), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_mercator_variant_a(properties: Properties, center_lat: Number, center_long: Number,
                              scale: Number, false_easting: Number,
                              false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A,
                             [_angle(center_lat), _angle(center_long), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_mercator_variant_b(properties: Properties, lat_first_parallel: Number,
                              center_long: Number, false_easting: Number,
                              false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B,
                             [_angle(lat_first_parallel), _angle(center_long),
                              _length(false_easting), _length(false_northing)])


def create_popular_visualisation_pseudo_mercator(properties: Properties, center_lat: Number,
                                                 center_long: Number, false_easting: Number,
                                                 false_northing: Number) -> Conversion:
    return Conversion.create(properties,
                             C.EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR,
                             [_angle(center_lat), _angle(center_long),
                              _length(false_easting), _length(false_northing)])


def create_lambert_conic_conformal_1sp(properties: Properties, center_lat: Number,
                                       center_long: Number, scale: Number,
                                       false_easting: Number,
                                       false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP,
                             [_angle(center_lat), _angle(center_long), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_lambert_conic_conformal_2sp(properties: Properties, lat_false_origin: Number,
                                       long_false_origin: Number,
                                       lat_first_parallel: Number,
                                       lat_second_parallel: Number,
                                       easting_false_origin: Number,
                                       northing_false_origin: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_2SP,
                             [_angle(lat_false_origin), _angle(long_false_origin),
                              _angle(lat_first_parallel), _angle(lat_second_parallel),
                              _length(easting_false_origin),
                              _length(northing_false_origin)])


def create_polar_stereographic_variant_a(properties: Properties, center_lat: Number,
                                         center_long: Number, scale: Number,
                                         false_easting: Number,
                                         false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A,
                             [_angle(center_lat), _angle(center_long), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_polar_stereographic_variant_b(properties: Properties, lat_standard_parallel: Number,
                                         long_of_origin: Number, false_easting: Number,
                                         false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B,
                             [_angle(lat_standard_parallel), _angle(long_of_origin),
                              _length(false_easting), _length(false_northing)])


def create_hotine_oblique_mercator_variant_a(properties: Properties, lat_centre: Number,
                                             long_centre: Number, azimuth: Number,
                                             angle_to_skew_grid: Number, scale: Number,
                                             false_easting: Number,
                                             false_northing: Number) -> Conversion:
    return Conversion.create(properties,
                             C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
                             [_angle(lat_centre), _angle(long_centre), _angle(azimuth),
                              _angle(angle_to_skew_grid), _scale(scale),
                              _length(false_easting), _length(false_northing)])


def create_hotine_oblique_mercator_variant_b(properties: Properties, lat_centre: Number,
                                             long_centre: Number, azimuth: Number,
                                             angle_to_skew_grid: Number, scale: Number,
                                             easting_centre: Number,
                                             northing_centre: Number) -> Conversion:
    return Conversion.create(properties,
                             C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
                             [_angle(lat_centre), _angle(long_centre), _angle(azimuth),
                              _angle(angle_to_skew_grid), _scale(scale),
                              _length(easting_centre), _length(northing_centre)])


def create_krovak_north_oriented(properties: Properties, lat_centre: Number,
                                 long_of_origin: Number, colatitude_cone_axis: Number,
                                 lat_pseudo_standard_parallel: Number,
                                 scale_pseudo_standard_parallel: Number,
                                 false_easting: Number,
                                 false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_KROVAK_NORTH_ORIENTED,
                             [_angle(lat_centre), _angle(long_of_origin),
                              _angle(colatitude_cone_axis),
                              _angle(lat_pseudo_standard_parallel),
                              _scale(scale_pseudo_standard_parallel),
                              _length(false_easting), _length(false_northing)])


def create_equidistant_cylindrical(properties: Properties, lat_first_parallel: Number,
                                   center_long: Number, false_easting: Number,
                                   false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL,
                             [_angle(lat_first_parallel), _angle(0.0), _angle(center_long),
                              _length(false_easting), _length(false_northing)])


def create_lambert_cylindrical_equal_area(properties: Properties, lat_first_parallel: Number,
                                          center_long: Number, false_easting: Number,
                                          false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA,
                             [_angle(lat_first_parallel), _angle(center_long),
                              _length(false_easting), _length(false_northing)])


def create_vertical_perspective(properties: Properties, topo_origin_lat: Number,
                                topo_origin_long: Number, topo_origin_height: Number,
                                view_point_height: Number, false_easting: Number,
                                false_northing: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_VERTICAL_PERSPECTIVE,
                             [_angle(topo_origin_lat), _angle(topo_origin_long),
                              _length(topo_origin_height), _length(view_point_height),
                              _length(false_easting), _length(false_northing)])


def create_pole_rotation_grib_convention(properties: Properties, south_pole_lat: Number,
                                         south_pole_long: Number,
                                         axis_rotation: Number) -> Conversion:
    return Conversion.create(properties, C.PROJ_WKT2_NAME_METHOD_POLE_ROTATION_GRIB_CONVENTION,
                             [_angle(south_pole_lat), _angle(south_pole_long),
                              _angle(axis_rotation)])


def create_pole_rotation_netcdf_cf_convention(properties: Properties,
                                              grid_north_pole_lat: Number,
                                              grid_north_pole_long: Number,
                                              north_pole_grid_long: Number) -> Conversion:
    return Conversion.create(properties,
                             C.PROJ_WKT2_NAME_METHOD_POLE_ROTATION_NETCDF_CF_CONVENTION,
                             [_angle(grid_north_pole_lat), _angle(grid_north_pole_long),
                              _angle(north_pole_grid_long)])


# =============================================================================
# Axis, unit and geodetic conversions
# =============================================================================

def create_change_vertical_unit(properties: Properties,
                                factor: Optional[Number] = None) -> Conversion:
    """
    Change of Vertical Unit, with a conversion factor (EPSG:1069) or
    without one (EPSG:1104, factor implied by the CRS units).
    """
    if factor is None:
        return Conversion.create(properties,
                                 C.EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT_NO_CONV_FACTOR, [])
    return Conversion.create(properties, C.EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT,
                             [_scale(factor)])


def create_height_depth_reversal(properties: Properties = None) -> Conversion:
    return Conversion.create(properties or C.EPSG_NAME_METHOD_HEIGHT_DEPTH_REVERSAL,
                             C.EPSG_CODE_METHOD_HEIGHT_DEPTH_REVERSAL, [])


def create_axis_order_reversal(is_3d: bool) -> Conversion:
    if is_3d:
        return Conversion.create("axis order change (geographic3D horizontal)",
                                 C.EPSG_CODE_METHOD_AXIS_ORDER_REVERSAL_3D, [])
    return Conversion.create("axis order change (2D)",
                             C.EPSG_CODE_METHOD_AXIS_ORDER_REVERSAL_2D, [])


def create_geographic_geocentric(properties: Properties = None) -> Conversion:
    return Conversion.create(properties or C.EPSG_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC,
                             C.EPSG_CODE_METHOD_GEOGRAPHIC_GEOCENTRIC, [])


def create_geographic_geocentric_latitude(source_crs: CRS, target_crs: CRS) -> Conversion:
    conv = Conversion.create(
        f"Conversion from {source_crs.name} to {target_crs.name}",
        C.PROJ_WKT2_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC_LATITUDE, [])
    conv.set_crss(source_crs, target_crs)
    return conv


def create_geographic_topocentric(properties: Properties, origin_lat: Number,
                                  origin_long: Number, origin_height: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_GEOGRAPHIC_TOPOCENTRIC,
                             [_angle(origin_lat), _angle(origin_long),
                              _length(origin_height)])


def create_geocentric_topocentric(properties: Properties, origin_x: Number,
                                  origin_y: Number, origin_z: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_GEOCENTRIC_TOPOCENTRIC,
                             [_length(origin_x), _length(origin_y), _length(origin_z)])


def create_geographic2d_offsets(properties: Properties, lat_offset: Number,
                                long_offset: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_GEOGRAPHIC2D_OFFSETS,
                             [_angle(lat_offset), _angle(long_offset)])


def create_geographic3d_offsets(properties: Properties, lat_offset: Number,
                                long_offset: Number, vertical_offset: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_GEOGRAPHIC3D_OFFSETS,
                             [_angle(lat_offset), _angle(long_offset),
                              _length(vertical_offset)])


def create_vertical_offset(properties: Properties, offset: Number) -> Conversion:
    return Conversion.create(properties, C.EPSG_CODE_METHOD_VERTICAL_OFFSET,
                             [_length(offset)])
