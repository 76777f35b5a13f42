"""
geoconv Operation Module
========================

The ``Conversion`` entity and the operations defined on it.

- conversion: entity, parameter accessors, export entry points
- factory: one constructor per supported method
- inverse: inverse conversions
- equivalence: re-expressing a conversion under another method
- utm: UTM detection and identification

Usage:
    from geoconv.operation import create_utm

    conv = create_utm(None, 31, True)
    conv.inverse().export_to_proj_string()
    # '+proj=pipeline +step +inv +proj=utm +zone=31'
"""

from geoconv.operation.conversion import Conversion
from geoconv.operation.inverse import InverseConversion, compute_inverse
from geoconv.operation.equivalence import convert_to_other_method
from geoconv.operation.utm import is_utm, identify
from geoconv.operation.factory import (
    get_utm_conversion_properties,
    create_utm,
    create_transverse_mercator,
    create_transverse_mercator_south_oriented,
    create_mercator_variant_a,
    create_mercator_variant_b,
    create_popular_visualisation_pseudo_mercator,
    create_lambert_conic_conformal_1sp,
    create_lambert_conic_conformal_2sp,
    create_polar_stereographic_variant_a,
    create_polar_stereographic_variant_b,
    create_hotine_oblique_mercator_variant_a,
    create_hotine_oblique_mercator_variant_b,
    create_krovak_north_oriented,
    create_equidistant_cylindrical,
    create_lambert_cylindrical_equal_area,
    create_vertical_perspective,
    create_pole_rotation_grib_convention,
    create_pole_rotation_netcdf_cf_convention,
    create_change_vertical_unit,
    create_height_depth_reversal,
    create_axis_order_reversal,
    create_geographic_geocentric,
    create_geographic_geocentric_latitude,
    create_geographic_topocentric,
    create_geocentric_topocentric,
    create_geographic2d_offsets,
    create_geographic3d_offsets,
    create_vertical_offset,
)
