"""
Inversion engine
================

Computes the inverse of a conversion. Direction-symmetric methods (axis
order reversal, height/depth reversal, geographic/geocentric, ...) and the
vertical unit change get a closed-form inverse. Every other method, i.e. all
map projections, is wrapped in an ``InverseConversion`` that keeps a strong
reference to the forward conversion and reuses its parameters unchanged.

In every case the CRS endpoints of the result are those of the input with
source and target swapped.
"""

import logging

from geoconv.errors import ConstructionError
from geoconv.model.method_spec import MethodCategory, MethodSpec
from geoconv.model.units import UNITY, Measure
from geoconv.operation import factory
from geoconv.operation.conversion import Conversion
from geoconv.utils import constants as C

logger = logging.getLogger(__name__)

INVERSE_OF = "Inverse of "


def inverse_name(name: str) -> str:
    """"Inverse of X" for X, and X for "Inverse of X"."""
    if not name:
        return ""
    if name.startswith(INVERSE_OF):
        return name[len(INVERSE_OF):]
    return INVERSE_OF + name


def _inverse_properties(conversion: Conversion) -> dict:
    return {"name": inverse_name(conversion.name)}


class InverseConversion(Conversion):
    """
    Inverse of a conversion that has no closed-form inverse.

    The method is "Inverse of <forward method>", with the forward schema and
    parameter values. ``inverse()`` gives back the forward conversion.
    """

    def __init__(self, forward: Conversion):
        method = MethodSpec(
            name=inverse_name(forward.method.name),
            code=0,
            category=forward.method.category,
            params=forward.method.params,
        )
        super().__init__(_inverse_properties(forward), method, forward.parameter_values)
        self.forward = forward
        self._copy_crss_from(forward, swap=True)

    def inverse(self) -> Conversion:
        return self.forward

    def _export_to_proj_string(self, formatter) -> None:
        formatter.start_inversion()
        self.forward._export_to_proj_string(formatter)
        formatter.stop_inversion()


def compute_inverse(conversion: Conversion) -> Conversion:
    """
    Inverse of ``conversion``.

    Raises
    ------
    ConstructionError
        For a Change of Vertical Unit whose factor is zero.
    """
    method = conversion.method
    code = method.code

    if code == C.EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT:
        factor = conversion.parameter_value_numeric_as_si(
            C.EPSG_CODE_PARAMETER_UNIT_CONVERSION_SCALAR)
        if factor == 0:
            raise ConstructionError("Invalid conversion factor")
        result = factory.create_change_vertical_unit(
            _inverse_properties(conversion), Measure(1.0 / factor, UNITY))
    elif code == C.EPSG_CODE_METHOD_CHANGE_VERTICAL_UNIT_NO_CONV_FACTOR:
        result = factory.create_change_vertical_unit(_inverse_properties(conversion))
    elif method.category is MethodCategory.AXIS_ORDER_REVERSAL:
        result = factory.create_axis_order_reversal(
            code == C.EPSG_CODE_METHOD_AXIS_ORDER_REVERSAL_3D)
    elif code == C.EPSG_CODE_METHOD_GEOGRAPHIC_GEOCENTRIC:
        result = factory.create_geographic_geocentric(_inverse_properties(conversion))
    elif code == C.EPSG_CODE_METHOD_HEIGHT_DEPTH_REVERSAL:
        result = factory.create_height_depth_reversal(_inverse_properties(conversion))
    elif method.name == C.PROJ_WKT2_NAME_METHOD_GEOGRAPHIC_GEOCENTRIC_LATITUDE:
        result = Conversion.create(_inverse_properties(conversion), method, [])
    else:
        logger.debug("Wrapping '%s' in an inverse conversion", conversion.name)
        return InverseConversion(conversion)

    result._copy_crss_from(conversion, swap=True)
    return result
