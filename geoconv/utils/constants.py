"""Authority codes, canonical names and numeric constants for conversions.

Codes and names follow the EPSG geodetic parameter registry. Methods that are
not in the registry use code 0.
"""

import numpy as np

# === Angles ===

DEG_TO_RAD = np.pi / 180.0
"""Degrees to radians conversion factor"""

RAD_TO_DEG = 180.0 / np.pi
"""Radians to degrees conversion factor"""

HALF_PI = np.pi / 2.0

# === Tolerances ===

UNITY_TOLERANCE = 1e-10
"""Tolerance used when comparing scale factors against 1 (or 0.9996)"""

ROUNDING_TOLERANCE = 1e-8
"""Distance to the 0.001 degree grid below which derived latitudes are snapped"""

HOTINE_RIGHT_ANGLE_TOLERANCE = 1e-4
"""Azimuth / skew angle tolerance (degrees) for the Swiss oblique Mercator case"""

BISECTION_ITERATIONS = 100
"""Fixed number of bisection steps used to recover LCC standard parallels"""

# === UTM ===

UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500000.0
UTM_FALSE_NORTHING_SOUTH = 10000000.0
UTM_NORTH_BASE_CODE = 16000
UTM_SOUTH_BASE_CODE = 16100

# === Authority ===

EPSG = "EPSG"

# === Method codes ===

EPSG_CODE_METHOD_TRANSVERSE_MERCATOR = 9807
EPSG_CODE_METHOD_TRANSVERSE_MERCATOR_SOUTH_ORIENTATED = 9808
EPSG_CODE_METHOD_MERCATOR_VARIANT_A = 9804
EPSG_CODE_METHOD_MERCATOR_VARIANT_B = 9805
EPSG_CODE_METHOD_MERCATOR_SPHERICAL = 1026
EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR = 1024
EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP = 9801
EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_2SP = 9802
EPSG_CODE_METHOD_ALBERS_EQUAL_AREA = 9822
EPSG_CODE_METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA = 9820
EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A = 9810
EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B = 9829
EPSG_CODE_METHOD_OBLIQUE_STEREOGRAPHIC = 9809
EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A = 9812
EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B = 9815
EPSG_CODE_METHOD_KROVAK = 9819
EPSG_CODE_METHOD_KROVAK_NORTH_ORIENTED = 1041
EPSG_CODE_METHOD_CASSINI_SOLDNER = 9806
EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL = 1028
EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL = 1029
EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA = 9835
EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL = 9834
EPSG_CODE_METHOD_AMERICAN_POLYCONIC = 9818
EPSG_CODE_METHOD_VERTICAL_PERSPECTIVE = 9838
EPSG_CODE_METHOD_ORTHOGRAPHIC = 9840
EPSG_CODE_METHOD_EQUAL_EARTH = 1078
EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT = 1069
EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT_NO_CONV_FACTOR = 1104
EPSG_CODE_METHOD_HEIGHT_DEPTH_REVERSAL = 1068
EPSG_CODE_METHOD_AXIS_ORDER_REVERSAL_2D = 9843
EPSG_CODE_METHOD_AXIS_ORDER_REVERSAL_3D = 9844
EPSG_CODE_METHOD_GEOGRAPHIC_GEOCENTRIC = 9602
EPSG_CODE_METHOD_GEOCENTRIC_TOPOCENTRIC = 9836
EPSG_CODE_METHOD_GEOGRAPHIC_TOPOCENTRIC = 9837
EPSG_CODE_METHOD_GEOGRAPHIC2D_OFFSETS = 9619
EPSG_CODE_METHOD_GEOGRAPHIC3D_OFFSETS = 9660
EPSG_CODE_METHOD_GEOGRAPHIC2D_WITH_HEIGHT_OFFSETS = 9618
EPSG_CODE_METHOD_VERTICAL_OFFSET = 9616
EPSG_CODE_METHOD_VERTICAL_OFFSET_BY_TIN_INTERPOLATION_JSON = 1137

# Methods whose interpolation CRS is recorded as "EPSG code for Horizontal CRS"
METHODS_WITH_HORIZONTAL_CRS_PARAMETER = frozenset({
    EPSG_CODE_METHOD_VERTICAL_OFFSET_BY_TIN_INTERPOLATION_JSON,
})

# === Method names ===

EPSG_NAME_METHOD_TRANSVERSE_MERCATOR = "Transverse Mercator"
EPSG_NAME_METHOD_TRANSVERSE_MERCATOR_SOUTH_ORIENTATED = "Transverse Mercator (South Orientated)"
EPSG_NAME_METHOD_MERCATOR_VARIANT_A = "Mercator (variant A)"
EPSG_NAME_METHOD_MERCATOR_VARIANT_B = "Mercator (variant B)"
EPSG_NAME_METHOD_MERCATOR_SPHERICAL = "Mercator (Spherical)"
EPSG_NAME_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR = "Popular Visualisation Pseudo Mercator"
EPSG_NAME_METHOD_LAMBERT_CONIC_CONFORMAL_1SP = "Lambert Conic Conformal (1SP)"
EPSG_NAME_METHOD_LAMBERT_CONIC_CONFORMAL_2SP = "Lambert Conic Conformal (2SP)"
EPSG_NAME_METHOD_ALBERS_EQUAL_AREA = "Albers Equal Area"
EPSG_NAME_METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA = "Lambert Azimuthal Equal Area"
EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A = "Polar Stereographic (variant A)"
EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B = "Polar Stereographic (variant B)"
EPSG_NAME_METHOD_OBLIQUE_STEREOGRAPHIC = "Oblique Stereographic"
EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A = "Hotine Oblique Mercator (variant A)"
EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B = "Hotine Oblique Mercator (variant B)"
EPSG_NAME_METHOD_KROVAK = "Krovak"
EPSG_NAME_METHOD_KROVAK_NORTH_ORIENTED = "Krovak (North Orientated)"
EPSG_NAME_METHOD_CASSINI_SOLDNER = "Cassini-Soldner"
EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL = "Equidistant Cylindrical"
EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL = "Equidistant Cylindrical (Spherical)"
EPSG_NAME_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA = "Lambert Cylindrical Equal Area"
EPSG_NAME_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL = "Lambert Cylindrical Equal Area (Spherical)"
EPSG_NAME_METHOD_AMERICAN_POLYCONIC = "American Polyconic"
EPSG_NAME_METHOD_VERTICAL_PERSPECTIVE = "Vertical Perspective"
EPSG_NAME_METHOD_ORTHOGRAPHIC = "Orthographic"
EPSG_NAME_METHOD_EQUAL_EARTH = "Equal Earth"
EPSG_NAME_METHOD_CHANGE_VERTICAL_UNIT = "Change of Vertical Unit"
EPSG_NAME_METHOD_CHANGE_VERTICAL_UNIT_NO_CONV_FACTOR = "Change of Vertical Unit"
EPSG_NAME_METHOD_HEIGHT_DEPTH_REVERSAL = "Height Depth Reversal"
EPSG_NAME_METHOD_AXIS_ORDER_REVERSAL_2D = "Axis Order Reversal (2D)"
EPSG_NAME_METHOD_AXIS_ORDER_REVERSAL_3D = "Axis Order Reversal (Geographic3D horizontal)"
EPSG_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC = "Geographic/geocentric conversions"
EPSG_NAME_METHOD_GEOCENTRIC_TOPOCENTRIC = "Geocentric/topocentric conversions"
EPSG_NAME_METHOD_GEOGRAPHIC_TOPOCENTRIC = "Geographic/topocentric conversions"
EPSG_NAME_METHOD_GEOGRAPHIC2D_OFFSETS = "Geographic2D offsets"
EPSG_NAME_METHOD_GEOGRAPHIC3D_OFFSETS = "Geographic3D offsets"
EPSG_NAME_METHOD_GEOGRAPHIC2D_WITH_HEIGHT_OFFSETS = "Geographic2D with Height Offsets"
EPSG_NAME_METHOD_VERTICAL_OFFSET = "Vertical Offset"
EPSG_NAME_METHOD_VERTICAL_OFFSET_BY_TIN_INTERPOLATION_JSON = "Vertical Offset by TIN Interpolation (JSON)"

PROJ_WKT2_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC_LATITUDE = "Geographic latitude / Geocentric latitude"
PROJ_WKT2_NAME_METHOD_POLE_ROTATION_GRIB_CONVENTION = "Pole rotation (GRIB convention)"
PROJ_WKT2_NAME_METHOD_POLE_ROTATION_NETCDF_CF_CONVENTION = "Pole rotation (netCDF CF convention)"
PROJ_WKT2_NAME_METHOD_MOLLWEIDE = "Mollweide"
PROJ_WKT2_NAME_METHOD_ROBINSON = "Robinson"
PROJ_WKT2_NAME_METHOD_SINUSOIDAL = "Sinusoidal"

CUSTOM_PROJ_METHOD_PREFIX = "PROJ "
"""Methods whose name starts with this prefix carry a raw PROJ definition"""

POPULAR_VISUALISATION_MERCATOR_NAME = "Popular Visualisation Mercator"

# === Parameter codes ===

EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN = 8801
EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN = 8802
EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN = 8805
EPSG_CODE_PARAMETER_FALSE_EASTING = 8806
EPSG_CODE_PARAMETER_FALSE_NORTHING = 8807
EPSG_CODE_PARAMETER_LATITUDE_PROJECTION_CENTRE = 8811
EPSG_CODE_PARAMETER_LONGITUDE_PROJECTION_CENTRE = 8812
EPSG_CODE_PARAMETER_AZIMUTH_INITIAL_LINE = 8813
EPSG_CODE_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID = 8814
EPSG_CODE_PARAMETER_SCALE_FACTOR_INITIAL_LINE = 8815
EPSG_CODE_PARAMETER_EASTING_PROJECTION_CENTRE = 8816
EPSG_CODE_PARAMETER_NORTHING_PROJECTION_CENTRE = 8817
EPSG_CODE_PARAMETER_LATITUDE_PSEUDO_STANDARD_PARALLEL = 8818
EPSG_CODE_PARAMETER_SCALE_FACTOR_PSEUDO_STANDARD_PARALLEL = 8819
EPSG_CODE_PARAMETER_LATITUDE_FALSE_ORIGIN = 8821
EPSG_CODE_PARAMETER_LONGITUDE_FALSE_ORIGIN = 8822
EPSG_CODE_PARAMETER_LATITUDE_1ST_STD_PARALLEL = 8823
EPSG_CODE_PARAMETER_LATITUDE_2ND_STD_PARALLEL = 8824
EPSG_CODE_PARAMETER_EASTING_FALSE_ORIGIN = 8826
EPSG_CODE_PARAMETER_NORTHING_FALSE_ORIGIN = 8827
EPSG_CODE_PARAMETER_LATITUDE_STD_PARALLEL = 8832
EPSG_CODE_PARAMETER_LONGITUDE_OF_ORIGIN = 8833
EPSG_CODE_PARAMETER_COLATITUDE_CONE_AXIS = 1036
EPSG_CODE_PARAMETER_LATITUDE_TOPOGRAPHIC_ORIGIN = 8834
EPSG_CODE_PARAMETER_LONGITUDE_TOPOGRAPHIC_ORIGIN = 8835
EPSG_CODE_PARAMETER_ELLIPSOIDAL_HEIGHT_TOPOCENTRIC_ORIGIN = 8836
EPSG_CODE_PARAMETER_GEOCENTRIC_X_TOPOCENTRIC_ORIGIN = 8837
EPSG_CODE_PARAMETER_GEOCENTRIC_Y_TOPOCENTRIC_ORIGIN = 8838
EPSG_CODE_PARAMETER_GEOCENTRIC_Z_TOPOCENTRIC_ORIGIN = 8839
EPSG_CODE_PARAMETER_VIEWPOINT_HEIGHT = 8840
EPSG_CODE_PARAMETER_UNIT_CONVERSION_SCALAR = 1051
EPSG_CODE_PARAMETER_LATITUDE_OFFSET = 8601
EPSG_CODE_PARAMETER_LONGITUDE_OFFSET = 8602
EPSG_CODE_PARAMETER_VERTICAL_OFFSET = 8603
EPSG_CODE_PARAMETER_GEOID_UNDULATION = 8604
EPSG_CODE_PARAMETER_EPSG_CODE_FOR_HORIZONTAL_CRS = 1037
EPSG_CODE_PARAMETER_EPSG_CODE_FOR_INTERPOLATION_CRS = 1048

# === Parameter names ===

EPSG_NAME_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN = "Latitude of natural origin"
EPSG_NAME_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN = "Longitude of natural origin"
EPSG_NAME_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN = "Scale factor at natural origin"
EPSG_NAME_PARAMETER_FALSE_EASTING = "False easting"
EPSG_NAME_PARAMETER_FALSE_NORTHING = "False northing"
EPSG_NAME_PARAMETER_LATITUDE_PROJECTION_CENTRE = "Latitude of projection centre"
EPSG_NAME_PARAMETER_LONGITUDE_PROJECTION_CENTRE = "Longitude of projection centre"
EPSG_NAME_PARAMETER_AZIMUTH_INITIAL_LINE = "Azimuth of initial line"
EPSG_NAME_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID = "Angle from Rectified to Skew Grid"
EPSG_NAME_PARAMETER_SCALE_FACTOR_INITIAL_LINE = "Scale factor on initial line"
EPSG_NAME_PARAMETER_EASTING_PROJECTION_CENTRE = "Easting at projection centre"
EPSG_NAME_PARAMETER_NORTHING_PROJECTION_CENTRE = "Northing at projection centre"
EPSG_NAME_PARAMETER_LATITUDE_PSEUDO_STANDARD_PARALLEL = "Latitude of pseudo standard parallel"
EPSG_NAME_PARAMETER_SCALE_FACTOR_PSEUDO_STANDARD_PARALLEL = "Scale factor on pseudo standard parallel"
EPSG_NAME_PARAMETER_LATITUDE_FALSE_ORIGIN = "Latitude of false origin"
EPSG_NAME_PARAMETER_LONGITUDE_FALSE_ORIGIN = "Longitude of false origin"
EPSG_NAME_PARAMETER_LATITUDE_1ST_STD_PARALLEL = "Latitude of 1st standard parallel"
EPSG_NAME_PARAMETER_LATITUDE_2ND_STD_PARALLEL = "Latitude of 2nd standard parallel"
EPSG_NAME_PARAMETER_EASTING_FALSE_ORIGIN = "Easting at false origin"
EPSG_NAME_PARAMETER_NORTHING_FALSE_ORIGIN = "Northing at false origin"
EPSG_NAME_PARAMETER_LATITUDE_STD_PARALLEL = "Latitude of standard parallel"
EPSG_NAME_PARAMETER_LONGITUDE_OF_ORIGIN = "Longitude of origin"
EPSG_NAME_PARAMETER_COLATITUDE_CONE_AXIS = "Co-latitude of cone axis"
EPSG_NAME_PARAMETER_LATITUDE_TOPOGRAPHIC_ORIGIN = "Latitude of topocentric origin"
EPSG_NAME_PARAMETER_LONGITUDE_TOPOGRAPHIC_ORIGIN = "Longitude of topocentric origin"
EPSG_NAME_PARAMETER_ELLIPSOIDAL_HEIGHT_TOPOCENTRIC_ORIGIN = "Ellipsoidal height of topocentric origin"
EPSG_NAME_PARAMETER_GEOCENTRIC_X_TOPOCENTRIC_ORIGIN = "Geocentric X of topocentric origin"
EPSG_NAME_PARAMETER_GEOCENTRIC_Y_TOPOCENTRIC_ORIGIN = "Geocentric Y of topocentric origin"
EPSG_NAME_PARAMETER_GEOCENTRIC_Z_TOPOCENTRIC_ORIGIN = "Geocentric Z of topocentric origin"
EPSG_NAME_PARAMETER_VIEWPOINT_HEIGHT = "Viewpoint height"
EPSG_NAME_PARAMETER_UNIT_CONVERSION_SCALAR = "Unit conversion scalar"
EPSG_NAME_PARAMETER_LATITUDE_OFFSET = "Latitude offset"
EPSG_NAME_PARAMETER_LONGITUDE_OFFSET = "Longitude offset"
EPSG_NAME_PARAMETER_VERTICAL_OFFSET = "Vertical Offset"
EPSG_NAME_PARAMETER_GEOID_UNDULATION = "Geoid undulation"
EPSG_NAME_PARAMETER_EPSG_CODE_FOR_HORIZONTAL_CRS = "EPSG code for Horizontal CRS"
EPSG_NAME_PARAMETER_EPSG_CODE_FOR_INTERPOLATION_CRS = "EPSG code for Interpolation CRS"

PROJ_WKT2_NAME_PARAMETER_SOUTH_POLE_LATITUDE_GRIB_CONVENTION = "Latitude of the southern pole (GRIB convention)"
PROJ_WKT2_NAME_PARAMETER_SOUTH_POLE_LONGITUDE_GRIB_CONVENTION = "Longitude of the southern pole (GRIB convention)"
PROJ_WKT2_NAME_PARAMETER_AXIS_ROTATION_GRIB_CONVENTION = "Axis rotation (GRIB convention)"
PROJ_WKT2_NAME_PARAMETER_GRID_NORTH_POLE_LATITUDE_NETCDF_CONVENTION = "Grid north pole latitude (netCDF CF convention)"
PROJ_WKT2_NAME_PARAMETER_GRID_NORTH_POLE_LONGITUDE_NETCDF_CONVENTION = "Grid north pole longitude (netCDF CF convention)"
PROJ_WKT2_NAME_PARAMETER_NORTH_POLE_GRID_LONGITUDE_NETCDF_CONVENTION = "North pole grid longitude (netCDF CF convention)"

# === Krovak constants ===

KROVAK_COLATITUDE_CONE_AXIS_DEG = 30.2881397
KROVAK_LATITUDE_PSEUDO_STANDARD_PARALLEL_DEG = 78.5
