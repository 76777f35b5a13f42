"""
geoconv Model Module
====================

Static data the conversions are built from:

- MethodSpec / ParamSpec: method identities and parameter schemas
- EsriMethodMapping: ESRI names for methods and parameters
- UnitOfMeasure / Measure: units and values
- CRS, GeodeticCRS, ProjectedCRS...: the CRS collaborators exporters query

Usage:
    from geoconv.model.method_spec import get_method, MethodCategory
    from geoconv.model.units import Measure, DEGREE
"""

from .units import (
    UnitClass,
    UnitOfMeasure,
    Measure,
    METRE,
    KILOMETRE,
    FOOT,
    US_FOOT,
    RADIAN,
    DEGREE,
    ARC_SECOND,
    GRAD,
    UNITY,
    PARTS_PER_MILLION,
    get_unit,
)

from .parameter_value import (
    ParameterValue,
    ParameterValueType,
    OperationParameterValue,
)

from .method_spec import (
    MethodCategory,
    MethodSpec,
    ParamSpec,
    ALL_METHODS,
    find_method_by_code,
    find_method_by_name,
    get_method,
    list_methods_by_category,
    list_method_codes,
    create_ad_hoc_method,
)

from .esri_mapping import (
    EsriParam,
    EsriMethodMapping,
    get_esri_mappings,
    find_esri_mapping,
    resolve_esri_method,
)

from .crs import (
    Ellipsoid,
    CRS,
    GeodeticCRS,
    ProjectedCRS,
    VerticalCRS,
    CompoundCRS,
    WGS84,
    GRS1980,
    PrimeMeridian,
    GREENWICH,
    PARIS,
)

__all__ = [
    'UnitClass', 'UnitOfMeasure', 'Measure',
    'METRE', 'KILOMETRE', 'FOOT', 'US_FOOT', 'RADIAN', 'DEGREE',
    'ARC_SECOND', 'GRAD', 'UNITY', 'PARTS_PER_MILLION', 'get_unit',
    'ParameterValue', 'ParameterValueType', 'OperationParameterValue',
    'MethodCategory', 'MethodSpec', 'ParamSpec', 'ALL_METHODS',
    'find_method_by_code', 'find_method_by_name', 'get_method',
    'list_methods_by_category', 'list_method_codes', 'create_ad_hoc_method',
    'EsriParam', 'EsriMethodMapping', 'get_esri_mappings',
    'find_esri_mapping', 'resolve_esri_method',
    'Ellipsoid', 'CRS', 'GeodeticCRS', 'ProjectedCRS', 'VerticalCRS',
    'CompoundCRS', 'WGS84', 'GRS1980',
    'PrimeMeridian', 'GREENWICH', 'PARIS',
]
