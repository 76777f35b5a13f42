"""Export of conversions to WKT.

WKT2 writes the full ``CONVERSION`` node. WKT1 has no conversion node: the
GDAL flavour writes ``PROJECTION`` followed by one ``PARAMETER`` per value
using the legacy names, the ESRI flavour does the same with ESRI names.
``add_wkt_extension_node`` writes the ``EXTENSION["PROJ4", ...]`` node WKT1
needs for methods it cannot describe.
"""

import logging

from geoconv.errors import FormattingError
from geoconv.io.proj_formatter import PROJStringFormatter
from geoconv.io.proj_writer import write_custom_proj, write_web_mercator_proj4
from geoconv.io.wkt_formatter import WKTFormatter
from geoconv.model.esri_mapping import resolve_esri_method
from geoconv.model.method_spec import HORIZONTAL_CRS_CODE, INTERPOLATION_CRS_CODE
from geoconv.model.parameter_value import (
    OperationParameterValue,
    ParameterValue,
    ParameterValueType,
)
from geoconv.model.units import DEGREE, UnitClass
from geoconv.utils import constants as C

logger = logging.getLogger(__name__)

_UNIT_KEYWORDS = {
    UnitClass.LENGTH: 'LENGTHUNIT',
    UnitClass.ANGLE: 'ANGLEUNIT',
    UnitClass.SCALE: 'SCALEUNIT',
}

_EQC_CODES = (C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL,
              C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL)


def _write_id(formatter: WKTFormatter, codespace: str, code: int) -> None:
    formatter.start_node('ID')
    formatter.add_quoted_string(codespace)
    formatter.add(code)
    formatter.end_node()


def _write_method(conv, formatter: WKTFormatter) -> None:
    method = conv.method
    if formatter.is_wkt2:
        formatter.start_node('METHOD', bool(method.code))
        formatter.add_quoted_string(method.name)
        if method.code and formatter.output_id:
            _write_id(formatter, C.EPSG, method.code)
        formatter.end_node()
    else:
        formatter.start_node('PROJECTION')
        formatter.add_quoted_string(method.wkt1_name or method.name)
        formatter.end_node()


def _wkt1_value(value: ParameterValue, formatter: WKTFormatter) -> float:
    measure = value.measure
    unit_class = measure.unit.unit_class
    if unit_class is UnitClass.LENGTH:
        return measure.convert_to_unit(formatter.axis_linear_unit)
    if unit_class is UnitClass.ANGLE:
        return measure.convert_to_unit(formatter.axis_angular_unit)
    return measure.get_si_value()


def _write_parameter(opv: OperationParameterValue, formatter: WKTFormatter) -> None:
    param, value = opv.parameter, opv.value

    if value.type is ParameterValueType.STRING:
        if not formatter.is_wkt2:
            logger.debug("Skipping file parameter '%s' in WKT1", param.name)
            return
        formatter.start_node('PARAMETERFILE', bool(param.code))
        formatter.add_quoted_string(param.name)
        formatter.add_quoted_string(value.string_value)
        if param.code and formatter.output_id:
            _write_id(formatter, C.EPSG, param.code)
        formatter.end_node()
        return

    formatter.start_node('PARAMETER', bool(param.code))
    if formatter.is_wkt2:
        formatter.add_quoted_string(param.name)
    else:
        formatter.add_quoted_string(param.wkt1_name or param.name)

    if value.type is ParameterValueType.INTEGER:
        formatter.add(value.integer_value)
    elif formatter.is_wkt2:
        measure = value.measure
        formatter.add(measure.value)
        keyword = _UNIT_KEYWORDS.get(measure.unit.unit_class)
        if keyword and formatter.output_unit:
            formatter.start_node(keyword, measure.unit.code is not None)
            formatter.add_quoted_string(measure.unit.name)
            formatter.add(measure.unit.conversion_to_si)
            formatter.end_node()
    else:
        formatter.add(_wkt1_value(value, formatter))

    if param.code and formatter.output_id:
        _write_id(formatter, C.EPSG, param.code)
    formatter.end_node()


def _is_suppressed_zero(method_code: int, opv: OperationParameterValue) -> bool:
    """Zero-valued parameters some methods do not have in their usual form."""
    if not opv.value.is_measure or opv.value.get_si_value() != 0:
        return False
    if method_code in _EQC_CODES:
        return opv.code == C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN
    if method_code == C.EPSG_CODE_METHOD_VERTICAL_PERSPECTIVE:
        return opv.code in (C.EPSG_CODE_PARAMETER_FALSE_EASTING,
                            C.EPSG_CODE_PARAMETER_FALSE_NORTHING)
    return False


def _write_esri_parameters(conv, mapping, formatter: WKTFormatter) -> None:
    formatter.start_node('PROJECTION')
    formatter.add_quoted_string(mapping.esri_name)
    formatter.end_node()

    for esri_param in mapping.params:
        formatter.start_node('PARAMETER')
        formatter.add_quoted_string(esri_param.esri_name)
        if esri_param.fixed_value is not None:
            formatter.add(esri_param.fixed_value)
        else:
            value = conv.parameter_value(esri_param.code)
            if value is not None and value.is_measure:
                unit_class = value.measure.unit.unit_class
                if unit_class is UnitClass.LENGTH:
                    formatter.add(value.measure.convert_to_unit(formatter.axis_linear_unit))
                elif unit_class is UnitClass.ANGLE:
                    angular_unit = formatter.axis_angular_unit
                    val = value.measure.convert_to_unit(angular_unit)
                    if angular_unit == DEGREE:
                        if val > 180.0:
                            val -= 360.0
                        elif val < -180.0:
                            val += 360.0
                    formatter.add(val)
                else:
                    formatter.add(value.get_si_value())
            elif 'scale' in esri_param.esri_name.lower():
                formatter.add(1.0)
            else:
                formatter.add(0.0)
        formatter.end_node()


def _write_pseudo_mercator_wkt1(conv, formatter: WKTFormatter) -> None:
    lat_origin = conv.parameter_value_numeric(
        C.EPSG_CODE_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN, DEGREE)
    if lat_origin != 0:
        raise FormattingError(
            f"Unsupported value for {C.EPSG_NAME_PARAMETER_LATITUDE_OF_NATURAL_ORIGIN}")

    formatter.start_node('PROJECTION')
    formatter.add_quoted_string('Mercator_1SP')
    formatter.end_node()

    values = (
        ('central_meridian', conv.parameter_value_numeric(
            C.EPSG_CODE_PARAMETER_LONGITUDE_OF_NATURAL_ORIGIN, DEGREE)),
        ('scale_factor', 1.0),
        ('false_easting', conv.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_FALSE_EASTING)),
        ('false_northing', conv.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_FALSE_NORTHING)),
    )
    for name, value in values:
        formatter.start_node('PARAMETER')
        formatter.add_quoted_string(name)
        formatter.add(value)
        formatter.end_node()


def _write_schema_parameters(conv, formatter: WKTFormatter) -> None:
    method_code = conv.method.code
    has_interpolation_param = False
    for opv in conv.parameter_values:
        if _is_suppressed_zero(method_code, opv):
            continue
        if opv.code in (C.EPSG_CODE_PARAMETER_EPSG_CODE_FOR_INTERPOLATION_CRS,
                        C.EPSG_CODE_PARAMETER_EPSG_CODE_FOR_HORIZONTAL_CRS):
            has_interpolation_param = True
        _write_parameter(opv, formatter)

    interpolation_crs = conv.interpolation_crs
    if not has_interpolation_param and interpolation_crs is not None \
            and interpolation_crs.code:
        _write_parameter(interpolation_crs_parameter(method_code, interpolation_crs.code),
                         formatter)


def interpolation_crs_parameter(method_code: int, crs_code: int) -> OperationParameterValue:
    """
    Integer parameter carrying the EPSG code of an interpolation CRS.

    Methods listed in ``METHODS_WITH_HORIZONTAL_CRS_PARAMETER`` name it
    "EPSG code for Horizontal CRS", others "EPSG code for Interpolation CRS".
    """
    param = (HORIZONTAL_CRS_CODE if method_code in C.METHODS_WITH_HORIZONTAL_CRS_PARAMETER
             else INTERPOLATION_CRS_CODE)
    return OperationParameterValue(param, ParameterValue.create(int(crs_code)))


def export_conversion_to_wkt(conv, formatter: WKTFormatter) -> None:
    """
    Write ``conv`` to a WKT formatter.

    Parameters
    ----------
    conv : Conversion
        Conversion to export
    formatter : WKTFormatter
        Target formatter; its convention selects the WKT flavour

    Raises
    ------
    FormattingError
        If a value cannot be expressed in the selected flavour.
    """
    method = conv.method
    is_wkt2 = formatter.is_wkt2

    if formatter.use_esri_dialect and \
            method.code == C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A:
        equivalent = conv.convert_to_other_method(C.EPSG_CODE_METHOD_MERCATOR_VARIANT_B)
        if equivalent is not None:
            logger.debug("Writing '%s' as Mercator (variant B) for ESRI WKT", conv.name)
            export_conversion_to_wkt(equivalent, formatter)
            return

    if is_wkt2:
        formatter.start_node(
            'DERIVINGCONVERSION' if formatter.use_deriving_conversion else 'CONVERSION',
            conv.has_id)
        formatter.add_quoted_string(conv.name or 'unnamed')
    else:
        formatter.push_output_unit(False)
        formatter.push_output_id(False)

    already_written = False
    if formatter.use_esri_dialect:
        mapping = resolve_esri_method(conv)
        if mapping is not None:
            _write_esri_parameters(conv, mapping, formatter)
            already_written = True
    elif not is_wkt2:
        if method.code == C.EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR:
            _write_pseudo_mercator_wkt1(conv, formatter)
            already_written = True
        elif method.name.startswith(C.CUSTOM_PROJ_METHOD_PREFIX):
            formatter.start_node('PROJECTION')
            formatter.add_quoted_string('custom_proj4')
            formatter.end_node()
            already_written = True

    if not already_written:
        _write_method(conv, formatter)
        _write_schema_parameters(conv, formatter)

    if is_wkt2:
        if formatter.output_id and conv.has_id:
            _write_id(formatter, conv.codespace, conv.code)
        formatter.end_node()
    else:
        formatter.pop_output_unit()
        formatter.pop_output_id()


# =============================================================================
# PROJ4 extension node
# =============================================================================

def add_wkt_extension_node(conv, formatter: WKTFormatter) -> bool:
    """
    Write ``EXTENSION["PROJ4","..."]`` for conversions WKT1 cannot describe.

    Returns
    -------
    bool
        True if a node was written. Always False for WKT2.
    """
    if formatter.is_wkt2:
        return False

    proj_formatter = PROJStringFormatter.create(crs_export=True)
    if conv.method.code == C.EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR or \
            conv.name == C.POPULAR_VISUALISATION_MERCATOR_NAME:
        written = write_web_mercator_proj4(conv, proj_formatter)
    elif conv.method.name.startswith(C.CUSTOM_PROJ_METHOD_PREFIX):
        written = write_custom_proj(conv, proj_formatter, for_extension_node=True)
    else:
        written = False

    if not written:
        return False
    formatter.start_node('EXTENSION')
    formatter.add_quoted_string('PROJ4')
    formatter.add_quoted_string(proj_formatter.to_string())
    formatter.end_node()
    return True
