"""
PROJJSON Exporter
=================

Writes a conversion as a PROJJSON ``Conversion`` object::

    {
      "type": "Conversion",
      "name": "UTM zone 31N",
      "method": {"name": "Transverse Mercator",
                 "id": {"authority": "EPSG", "code": 9807}},
      "parameters": [
        {"name": "Latitude of natural origin", "value": 0, "unit": "degree",
         "id": {"authority": "EPSG", "code": 8801}},
        ...
      ],
      "id": {"authority": "EPSG", "code": 16031}
    }

Units are written as plain strings for metre, degree and unity, and as
objects for every other unit.
"""

import logging

from geoconv.io.json_formatter import JSONFormatter
from geoconv.io.wkt_writer import interpolation_crs_parameter
from geoconv.model.parameter_value import OperationParameterValue, ParameterValueType
from geoconv.model.units import DEGREE, METRE, UNITY, UnitClass, UnitOfMeasure
from geoconv.utils import constants as C

logger = logging.getLogger(__name__)

_UNIT_TYPES = {
    UnitClass.LENGTH: 'LinearUnit',
    UnitClass.ANGLE: 'AngularUnit',
    UnitClass.SCALE: 'ScaleUnit',
}
_SHORT_UNITS = (METRE, DEGREE, UNITY)


def _write_id(formatter: JSONFormatter, codespace: str, code: int) -> None:
    formatter.add_obj_key('id')
    with formatter.object_context():
        formatter.add_obj_key('authority')
        formatter.add(codespace)
        formatter.add_obj_key('code')
        formatter.add(code)


def _write_unit(formatter: JSONFormatter, unit: UnitOfMeasure) -> None:
    if unit in _SHORT_UNITS:
        formatter.add(unit.name)
        return
    with formatter.object_context(_UNIT_TYPES.get(unit.unit_class, 'Unit')):
        formatter.add_obj_key('name')
        formatter.add(unit.name)
        formatter.add_obj_key('conversion_factor')
        formatter.add(unit.conversion_to_si)
        if unit.code and formatter.output_id:
            _write_id(formatter, C.EPSG, unit.code)


def _write_parameter(formatter: JSONFormatter, opv: OperationParameterValue) -> None:
    value = opv.value
    with formatter.object_context('ParameterValue'):
        formatter.add_obj_key('name')
        formatter.add(opv.name)
        formatter.add_obj_key('value')
        if value.type is ParameterValueType.MEASURE:
            formatter.add(value.measure.value)
            if value.measure.unit.unit_class in _UNIT_TYPES:
                formatter.add_obj_key('unit')
                _write_unit(formatter, value.measure.unit)
        elif value.type is ParameterValueType.INTEGER:
            formatter.add(value.integer_value)
        else:
            formatter.add(value.string_value)
        if opv.code and formatter.output_id:
            _write_id(formatter, C.EPSG, opv.code)


def export_conversion_to_json(conv, formatter: JSONFormatter) -> None:
    """
    Write ``conv`` as a PROJJSON ``Conversion`` object.

    Parameters
    ----------
    conv : Conversion
        Conversion to export
    formatter : JSONFormatter
        Target formatter
    """
    parameters = list(conv.parameter_values)
    interpolation_crs = conv.interpolation_crs
    if interpolation_crs is not None and interpolation_crs.code and not any(
            opv.code in (C.EPSG_CODE_PARAMETER_EPSG_CODE_FOR_INTERPOLATION_CRS,
                         C.EPSG_CODE_PARAMETER_EPSG_CODE_FOR_HORIZONTAL_CRS)
            for opv in parameters):
        parameters.append(interpolation_crs_parameter(conv.method.code, interpolation_crs.code))

    with formatter.object_context('Conversion'):
        formatter.add_obj_key('name')
        formatter.add(conv.name or 'unnamed')

        formatter.add_obj_key('method')
        with formatter.object_context():
            formatter.add_obj_key('name')
            formatter.add(conv.method.name)
            if conv.method.code and formatter.output_id:
                _write_id(formatter, C.EPSG, conv.method.code)

        if parameters:
            formatter.add_obj_key('parameters')
            with formatter.array_context():
                for opv in parameters:
                    _write_parameter(formatter, opv)

        if formatter.output_id and conv.has_id:
            _write_id(formatter, conv.codespace, conv.code)

    logger.debug("Exported '%s' to JSON with %d parameters",
                 conv.name, len(parameters))
