"""
ESRI Alias Registry
===================

Maps canonical method identities to the method and parameter names used by
the ESRI flavour of WKT1. Several ESRI names can exist for one EPSG method;
``resolve_esri_method`` picks one from contextual hints (conversion name,
target CRS name, parameter values).

Usage:
    from geoconv.model.esri_mapping import get_esri_mappings

    mappings = get_esri_mappings(9807)
    [m.esri_name for m in mappings]  # ['Transverse_Mercator', 'Gauss_Kruger']
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from geoconv.model.units import DEGREE
from geoconv.utils import constants as C


@dataclass(frozen=True)
class EsriParam:
    """
    One ESRI parameter.

    Attributes
    ----------
    esri_name : str
        Parameter name written in ESRI WKT
    code : int
        EPSG code of the parameter the value comes from, 0 when fixed
    fixed_value : float, optional
        Constant written regardless of the conversion values
    """
    esri_name: str
    code: int = 0
    fixed_value: Optional[float] = None


@dataclass(frozen=True)
class EsriMethodMapping:
    esri_name: str
    epsg_code: int
    wkt2_name: str
    params: Tuple[EsriParam, ...]


_FE = EsriParam("False_Easting", C.EPSG_CODE_PARAMETER_FALSE_EASTING)
_FN = EsriParam("False_Northing", C.EPSG_CODE_PARAMETER_FALSE_NORTHING)
_CM = EsriParam("Central_Meridian", C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN)
_SF = EsriParam("Scale_Factor", C.EPSG_CODE_PARAMETER_SCALE_FACTOR_AT_NATURAL_ORIGIN)
_LO = EsriParam("Latitude_Of_Origin", C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN)
_SP1 = EsriParam("Standard_Parallel_1", C.EPSG_CODE_PARAMETER_LATITUDE_1ST_STD_PARALLEL)
_SP2 = EsriParam("Standard_Parallel_2", C.EPSG_CODE_PARAMETER_LATITUDE_2ND_STD_PARALLEL)

_FE_FO = EsriParam("False_Easting", C.EPSG_CODE_PARAMETER_EASTING_FALSE_ORIGIN)
_FN_FO = EsriParam("False_Northing", C.EPSG_CODE_PARAMETER_NORTHING_FALSE_ORIGIN)
_CM_FO = EsriParam("Central_Meridian", C.EPSG_CODE_PARAMETER_LONGITUDE_FALSE_ORIGIN)
_LO_FO = EsriParam("Latitude_Of_Origin", C.EPSG_CODE_PARAMETER_LATITUDE_FALSE_ORIGIN)

_SF_IL = EsriParam("Scale_Factor", C.EPSG_CODE_PARAMETER_SCALE_FACTOR_INITIAL_LINE)
_AZ = EsriParam("Azimuth", C.EPSG_CODE_PARAMETER_AZIMUTH_INITIAL_LINE)
_LON_C = EsriParam("Longitude_Of_Center", C.EPSG_CODE_PARAMETER_LONGITUDE_PROJECTION_CENTRE)
_LAT_C = EsriParam("Latitude_Of_Center", C.EPSG_CODE_PARAMETER_LATITUDE_PROJECTION_CENTRE)
_ROT = EsriParam("XY_Plane_Rotation", C.EPSG_CODE_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID)
_FE_PC = EsriParam("False_Easting", C.EPSG_CODE_PARAMETER_EASTING_PROJECTION_CENTRE)
_FN_PC = EsriParam("False_Northing", C.EPSG_CODE_PARAMETER_NORTHING_PROJECTION_CENTRE)

_TM_PARAMS = (_FE, _FN, _CM, _SF, _LO)
_LON_ONLY_PARAMS = (_FE, _FN, _CM)
_KROVAK_COMMON = (
    _FE, _FN,
    EsriParam("Pseudo_Standard_Parallel_1",
              C.EPSG_CODE_PARAMETER_LATITUDE_PSEUDO_STANDARD_PARALLEL),
    EsriParam("Scale_Factor",
              C.EPSG_CODE_PARAMETER_SCALE_FACTOR_PSEUDO_STANDARD_PARALLEL),
    EsriParam("Azimuth", C.EPSG_CODE_PARAMETER_COLATITUDE_CONE_AXIS),
    EsriParam("Longitude_Of_Center", C.EPSG_CODE_PARAMETER_LONGITUDE_OF_ORIGIN),
    _LAT_C,
)
_POLAR_B_PARAMS = (
    _FE, _FN,
    EsriParam("Central_Meridian", C.EPSG_CODE_PARAMETER_LONGITUDE_OF_ORIGIN),
    EsriParam("Standard_Parallel_1", C.EPSG_CODE_PARAMETER_LATITUDE_STD_PARALLEL),
)


def _m(esri_name, code, wkt2_name, params):
    return EsriMethodMapping(esri_name, code, wkt2_name, tuple(params))


ESRI_METHOD_MAPPINGS: Tuple[EsriMethodMapping, ...] = (
    _m("Transverse_Mercator", C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR,
       C.EPSG_NAME_METHOD_TRANSVERSE_MERCATOR, _TM_PARAMS),
    _m("Gauss_Kruger", C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR,
       C.EPSG_NAME_METHOD_TRANSVERSE_MERCATOR, _TM_PARAMS),
    _m("Mercator", C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B,
       C.EPSG_NAME_METHOD_MERCATOR_VARIANT_B, (_FE, _FN, _CM, _SP1)),
    _m("Mercator_Auxiliary_Sphere",
       C.EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR,
       C.EPSG_NAME_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR,
       (_FE, _FN, _CM,
        EsriParam("Standard_Parallel_1",
                  C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN),
        EsriParam("Auxiliary_Sphere_Type", fixed_value=0.0))),
    _m("Lambert_Conformal_Conic", C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_1SP,
       C.EPSG_NAME_METHOD_LAMBERT_CONIC_CONFORMAL_1SP,
       (_FE, _FN, _CM,
        EsriParam("Standard_Parallel_1",
                  C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN),
        _SF, _LO)),
    _m("Lambert_Conformal_Conic", C.EPSG_CODE_METHOD_LAMBERT_CONIC_CONFORMAL_2SP,
       C.EPSG_NAME_METHOD_LAMBERT_CONIC_CONFORMAL_2SP,
       (_FE_FO, _FN_FO, _CM_FO, _SP1, _SP2, _LO_FO)),
    _m("Albers", C.EPSG_CODE_METHOD_ALBERS_EQUAL_AREA,
       C.EPSG_NAME_METHOD_ALBERS_EQUAL_AREA,
       (_FE_FO, _FN_FO, _CM_FO, _SP1, _SP2, _LO_FO)),
    _m("Lambert_Azimuthal_Equal_Area", C.EPSG_CODE_METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA,
       C.EPSG_NAME_METHOD_LAMBERT_AZIMUTHAL_EQUAL_AREA, (_FE, _FN, _CM, _LO)),
    _m("Stereographic", C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A,
       C.EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A, _TM_PARAMS),
    _m("Polar_Stereographic_Variant_A",
       C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A,
       C.EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A, _TM_PARAMS),
    _m("Stereographic_North_Pole", C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B,
       C.EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B, _POLAR_B_PARAMS),
    _m("Stereographic_South_Pole", C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B,
       C.EPSG_NAME_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B, _POLAR_B_PARAMS),
    _m("Double_Stereographic", C.EPSG_CODE_METHOD_OBLIQUE_STEREOGRAPHIC,
       C.EPSG_NAME_METHOD_OBLIQUE_STEREOGRAPHIC, _TM_PARAMS),
    _m("Hotine_Oblique_Mercator_Azimuth_Natural_Origin",
       C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
       C.EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
       (_FE, _FN, _SF_IL, _AZ, _LON_C, _LAT_C)),
    _m("Rectified_Skew_Orthomorphic_Natural_Origin",
       C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
       C.EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
       (_FE, _FN, _SF_IL, _AZ, _LON_C, _LAT_C, _ROT)),
    _m("Hotine_Oblique_Mercator_Azimuth_Center",
       C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
       C.EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
       (_FE_PC, _FN_PC, _SF_IL, _AZ, _LON_C, _LAT_C)),
    _m("Rectified_Skew_Orthomorphic_Center",
       C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
       C.EPSG_NAME_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B,
       (_FE_PC, _FN_PC, _SF_IL, _AZ, _LON_C, _LAT_C, _ROT)),
    _m("Krovak", C.EPSG_CODE_METHOD_KROVAK, C.EPSG_NAME_METHOD_KROVAK,
       _KROVAK_COMMON + (EsriParam("X_Scale", fixed_value=1.0),
                         EsriParam("Y_Scale", fixed_value=1.0),
                         EsriParam("XY_Plane_Rotation", fixed_value=0.0))),
    _m("Krovak", C.EPSG_CODE_METHOD_KROVAK_NORTH_ORIENTED,
       C.EPSG_NAME_METHOD_KROVAK_NORTH_ORIENTED,
       _KROVAK_COMMON + (EsriParam("X_Scale", fixed_value=-1.0),
                         EsriParam("Y_Scale", fixed_value=1.0),
                         EsriParam("XY_Plane_Rotation", fixed_value=90.0))),
    _m("Cassini", C.EPSG_CODE_METHOD_CASSINI_SOLDNER,
       C.EPSG_NAME_METHOD_CASSINI_SOLDNER,
       (_FE, _FN, _CM, EsriParam("Scale_Factor", fixed_value=1.0), _LO)),
    _m("Equidistant_Cylindrical", C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL,
       C.EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL, (_FE, _FN, _CM, _SP1)),
    _m("Plate_Carree", C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL,
       C.EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL, _LON_ONLY_PARAMS),
    _m("Equidistant_Cylindrical", C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL,
       C.EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL, (_FE, _FN, _CM, _SP1)),
    _m("Plate_Carree", C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL,
       C.EPSG_NAME_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL, _LON_ONLY_PARAMS),
    _m("Cylindrical_Equal_Area", C.EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA,
       C.EPSG_NAME_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA, (_FE, _FN, _CM, _SP1)),
    _m("Behrmann", C.EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA,
       C.EPSG_NAME_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA, _LON_ONLY_PARAMS),
    _m("Polyconic", C.EPSG_CODE_METHOD_AMERICAN_POLYCONIC,
       C.EPSG_NAME_METHOD_AMERICAN_POLYCONIC, (_FE, _FN, _CM, _LO)),
    _m("Orthographic", C.EPSG_CODE_METHOD_ORTHOGRAPHIC,
       C.EPSG_NAME_METHOD_ORTHOGRAPHIC,
       (_FE, _FN,
        EsriParam("Longitude_Of_Center", C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN),
        EsriParam("Latitude_Of_Center", C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN))),
    _m("Equal_Earth", C.EPSG_CODE_METHOD_EQUAL_EARTH,
       C.EPSG_NAME_METHOD_EQUAL_EARTH, _LON_ONLY_PARAMS),
    _m("Mollweide", 0, C.PROJ_WKT2_NAME_METHOD_MOLLWEIDE, _LON_ONLY_PARAMS),
    _m("Robinson", 0, C.PROJ_WKT2_NAME_METHOD_ROBINSON, _LON_ONLY_PARAMS),
    _m("Sinusoidal", 0, C.PROJ_WKT2_NAME_METHOD_SINUSOIDAL, _LON_ONLY_PARAMS),
)

_UPS_TARGET_NAMES = ("WGS 84 / UPS North (E,N)", "WGS 84 / UPS South (E,N)")


def get_esri_mappings(code: int, wkt2_name: Optional[str] = None) -> List[EsriMethodMapping]:
    """
    All ESRI mappings for a method, in registry order.

    Methods with an EPSG code are matched by code, others by canonical name.
    """
    if code:
        return [m for m in ESRI_METHOD_MAPPINGS if m.epsg_code == code]
    if wkt2_name is None:
        return []
    key = wkt2_name.lower()
    return [m for m in ESRI_METHOD_MAPPINGS
            if m.epsg_code == 0 and m.wkt2_name.lower() == key]


def find_esri_mapping(esri_name: str, code: int,
                      wkt2_name: Optional[str] = None) -> Optional[EsriMethodMapping]:
    for mapping in get_esri_mappings(code, wkt2_name):
        if mapping.esri_name == esri_name:
            return mapping
    return None


def resolve_esri_method(conversion) -> Optional[EsriMethodMapping]:
    """
    Pick the ESRI method mapping that applies to a conversion.

    Parameters
    ----------
    conversion : Conversion
        Conversion to name. Its name, the name of its target CRS and some
        parameter values disambiguate between ESRI names.

    Returns
    -------
    EsriMethodMapping or None
        None when the method has no ESRI equivalent.
    """
    method = conversion.method
    mappings = get_esri_mappings(method.code, method.name)
    if not mappings:
        return None
    code = method.code
    target = conversion.target_crs
    target_name = target.name if target is not None else ""
    esri_name = mappings[0].esri_name

    if code == C.EPSG_CODE_METHOD_TRANSVERSE_MERCATOR:
        lower_target = target_name.lower()
        if "gauss kruger" in conversion.name.lower() or \
                "gauss" in lower_target or "gk_" in lower_target:
            esri_name = "Gauss_Kruger"
        else:
            esri_name = "Transverse_Mercator"
    elif code in (C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL,
                  C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL):
        lat_origin = conversion.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN)
        if "plate carree" in target_name.lower() and lat_origin == 0.0:
            esri_name = "Plate_Carree"
        else:
            esri_name = "Equidistant_Cylindrical"
    elif code in (C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A,
                  C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_B):
        azimuth = conversion.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_AZIMUTH_INITIAL_LINE)
        skew = conversion.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_ANGLE_RECTIFIED_TO_SKEW_GRID)
        variant_a = code == C.EPSG_CODE_METHOD_HOTINE_OBLIQUE_MERCATOR_VARIANT_A
        if abs(azimuth - skew) < 1e-15:
            esri_name = ("Hotine_Oblique_Mercator_Azimuth_Natural_Origin"
                         if variant_a else "Hotine_Oblique_Mercator_Azimuth_Center")
        else:
            esri_name = ("Rectified_Skew_Orthomorphic_Natural_Origin"
                         if variant_a else "Rectified_Skew_Orthomorphic_Center")
    elif code == C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_A:
        if target_name in _UPS_TARGET_NAMES:
            esri_name = "Polar_Stereographic_Variant_A"
        else:
            esri_name = "Stereographic"
    elif code == C.EPSG_CODE_METHOD_POLAR_STEREOGRAPHIC_VARIANT_B:
        std_parallel = conversion.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_LATITUDE_STD_PARALLEL)
        esri_name = ("Stereographic_North_Pole" if std_parallel > 0
                     else "Stereographic_South_Pole")
    elif code == C.EPSG_CODE_METHOD_LAMBERT_CYLINDRICAL_EQUAL_AREA:
        std_parallel = conversion.parameter_value_numeric(
            C.EPSG_CODE_PARAMETER_LATITUDE_1ST_STD_PARALLEL, DEGREE)
        if abs(std_parallel - 30.0) < 1e-10:
            esri_name = "Behrmann"
        else:
            esri_name = "Cylindrical_Equal_Area"

    return find_esri_mapping(esri_name, code, method.name)
