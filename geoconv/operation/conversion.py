"""
Conversion entity
=================

A conversion is a coordinate operation whose parameters are fully known: a
map projection, an axis swap, a vertical unit change... It is made of a
method identity (see ``geoconv.model.method_spec``), the ordered values for
that method's parameter schema, and optional weak references to its source,
target and interpolation CRS.

Usage:
    from geoconv.operation.conversion import Conversion
    from geoconv.model.units import Measure, DEGREE, UNITY, METRE

    conv = Conversion.create(
        {"name": "UTM zone 31N", "code": 16031},
        9807,
        [Measure(0, DEGREE), Measure(3, DEGREE), Measure(0.9996, UNITY),
         Measure(500000, METRE), Measure(0, METRE)],
    )
    conv.is_utm()                 # (31, True)
    conv.export_to_proj_string()  # '+proj=utm +zone=31'
"""

import logging
import weakref
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from geoconv.errors import ConstructionError
from geoconv.model.crs import CRS
from geoconv.model.method_spec import (
    MethodSpec,
    ParamSpec,
    create_ad_hoc_method,
    get_method,
)
from geoconv.model.parameter_value import OperationParameterValue, ParameterValue
from geoconv.model.units import Measure, NULL_MEASURE, UnitClass, UnitOfMeasure
from geoconv.utils.constants import EPSG

logger = logging.getLogger(__name__)

Properties = Optional[Union[Dict[str, Any], str]]
NameOrCode = Union[str, int]

UNNAMED = "unnamed"


def _normalize_properties(properties: Properties) -> Dict[str, Any]:
    if properties is None:
        return {}
    if isinstance(properties, str):
        return {"name": properties}
    return dict(properties)


def _to_parameter_value(value) -> ParameterValue:
    if isinstance(value, ParameterValue):
        return value
    return ParameterValue.create(value)


class Conversion:
    """
    Parameterized coordinate conversion.

    Parameters
    ----------
    properties : dict or str, optional
        ``name``, ``code`` and ``codespace`` of the conversion (a plain string
        is taken as the name)
    method : MethodSpec
        Method identity
    parameter_values : sequence of OperationParameterValue
        Values in schema order

    Notes
    -----
    Use ``Conversion.create`` to build instances; it validates the values
    against the method schema. The parameter set never changes after
    construction. CRS endpoints are attached once through ``set_crss``.
    """

    def __init__(self, properties: Properties, method: MethodSpec,
                 parameter_values: Sequence[OperationParameterValue]):
        props = _normalize_properties(properties)
        self._name: str = props.get("name") or ""
        self.code: Optional[int] = props.get("code")
        self.codespace: str = props.get("codespace", EPSG)
        self.method = method
        self._parameter_values: Tuple[OperationParameterValue, ...] = tuple(parameter_values)
        self._source_ref = None
        self._target_ref = None
        self._interpolation_ref = None
        self._crss_set = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, properties: Properties,
               method: Union[MethodSpec, NameOrCode],
               values: Sequence[Union[ParameterValue, Measure, str, int]]) -> 'Conversion':
        """
        Build a conversion for a method of the registry.

        Parameters
        ----------
        properties : dict or str, optional
            Name and identifier of the conversion
        method : MethodSpec, int or str
            Method, or its EPSG code / name
        values : sequence
            One value per schema entry, in schema order. Measures, strings
            and integers are wrapped into ``ParameterValue``.

        Raises
        ------
        ConstructionError
            If the number of values does not match the schema.
        """
        if not isinstance(method, MethodSpec):
            method = get_method(method)
        if len(values) != len(method.params):
            raise ConstructionError(
                f"{method.name}: expected {len(method.params)} parameter "
                f"values, got {len(values)}"
            )
        parameter_values = [
            OperationParameterValue(param, _to_parameter_value(value))
            for param, value in zip(method.params, values)
        ]
        return cls(properties, method, parameter_values)

    @classmethod
    def create_from_ad_hoc_schema(cls, properties: Properties, method_name: str,
                                  parameters: Sequence[Union[ParamSpec, str]],
                                  values: Sequence[Union[ParameterValue, Measure, str, int]],
                                  method_code: int = 0) -> 'Conversion':
        """Build a conversion for a method that is not in the registry."""
        method = create_ad_hoc_method(method_name, parameters, method_code)
        return cls.create(properties, method, values)

    def set_crss(self, source_crs: Optional[CRS], target_crs: Optional[CRS],
                 interpolation_crs: Optional[CRS] = None) -> None:
        """
        Attach the CRS endpoints. Only weak references are kept.

        Raises
        ------
        ConstructionError
            If the endpoints were already attached.
        """
        if self._crss_set:
            raise ConstructionError(f"CRS endpoints of '{self.name}' are already set")
        self._source_ref = weakref.ref(source_crs) if source_crs is not None else None
        self._target_ref = weakref.ref(target_crs) if target_crs is not None else None
        self._interpolation_ref = (weakref.ref(interpolation_crs)
                                   if interpolation_crs is not None else None)
        self._crss_set = True

    def _copy_crss_from(self, other: 'Conversion', swap: bool = False) -> None:
        source, target = other.source_crs, other.target_crs
        if swap:
            source, target = target, source
        self.set_crss(source, target, other.interpolation_crs)

    def _clone(self, properties: Properties = None) -> 'Conversion':
        props = {"name": self._name, "code": self.code, "codespace": self.codespace}
        props.update(_normalize_properties(properties))
        clone = Conversion(props, self.method, self._parameter_values)
        clone._copy_crss_from(self)
        return clone

    # ------------------------------------------------------------------
    # Identity and endpoints
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def has_id(self) -> bool:
        return self.code is not None

    @staticmethod
    def _deref(ref) -> Optional[CRS]:
        return ref() if ref is not None else None

    @property
    def source_crs(self) -> Optional[CRS]:
        return self._deref(self._source_ref)

    @property
    def target_crs(self) -> Optional[CRS]:
        return self._deref(self._target_ref)

    @property
    def interpolation_crs(self) -> Optional[CRS]:
        return self._deref(self._interpolation_ref)

    def __repr__(self):
        return f"Conversion({self._name or UNNAMED!r}, method={self.method.name!r})"

    # ------------------------------------------------------------------
    # Parameter accessors
    # ------------------------------------------------------------------

    @property
    def parameter_values(self) -> Tuple[OperationParameterValue, ...]:
        return self._parameter_values

    def parameter_value(self, name_or_code: NameOrCode) -> Optional[ParameterValue]:
        """
        Value of a parameter looked up by EPSG code or by name.

        Codes are tried first; names are compared case-insensitively.
        Returns None when the parameter is absent.
        """
        if isinstance(name_or_code, int):
            for opv in self._parameter_values:
                if opv.code == name_or_code:
                    return opv.value
            return None
        key = name_or_code.lower()
        for opv in self._parameter_values:
            if opv.name.lower() == key:
                return opv.value
        return None

    def parameter_value_measure(self, name_or_code: NameOrCode) -> Measure:
        """Measure of a parameter, ``NULL_MEASURE`` when absent or not a measure."""
        value = self.parameter_value(name_or_code)
        if value is None or not value.is_measure:
            return NULL_MEASURE
        return value.measure

    def parameter_value_numeric(self, name_or_code: NameOrCode,
                                unit: UnitOfMeasure) -> float:
        """Numeric value converted to ``unit``; 0.0 when absent."""
        measure = self.parameter_value_measure(name_or_code)
        if measure.is_null:
            return 0.0
        return measure.convert_to_unit(unit)

    def parameter_value_numeric_as_si(self, name_or_code: NameOrCode) -> float:
        """Numeric value in SI units; 0.0 when absent."""
        measure = self.parameter_value_measure(name_or_code)
        if measure.is_null:
            return 0.0
        return measure.get_si_value()

    def is_equivalent_to(self, other: 'Conversion', rel_tolerance: float = 1e-10) -> bool:
        """
        Same method and same parameter values (compared in SI).

        Names and identifiers are ignored.
        """
        if not isinstance(other, Conversion):
            return False
        if self.method.code != other.method.code:
            return False
        if not self.method.code and self.method.name.lower() != other.method.name.lower():
            return False
        if len(self._parameter_values) != len(other._parameter_values):
            return False
        for mine, theirs in zip(self._parameter_values, other._parameter_values):
            if mine.parameter.code != theirs.parameter.code or \
                    mine.name.lower() != theirs.name.lower():
                return False
            a, b = mine.value, theirs.value
            if a.type is not b.type:
                return False
            if a.is_measure:
                if a.measure.unit.unit_class != b.measure.unit.unit_class:
                    return False
                x, y = a.get_si_value(), b.get_si_value()
                if abs(x - y) > rel_tolerance * max(abs(x), abs(y), 1.0):
                    return False
            elif a != b:
                return False
        return True

    # ------------------------------------------------------------------
    # Alteration
    # ------------------------------------------------------------------

    def alter_linear_unit(self, unit: UnitOfMeasure, convert: bool) -> 'Conversion':
        """
        Re-express every length parameter in ``unit``.

        Parameters
        ----------
        unit : UnitOfMeasure
            New linear unit
        convert : bool
            If True, values are converted numerically. If False, only the
            unit label changes.

        Returns
        -------
        Conversion
            A new conversion named "unknown", or this conversion if no
            length parameter changes.
        """
        new_values = []
        changed = False
        for opv in self._parameter_values:
            value = opv.value
            if value.is_measure and value.measure.unit.unit_class is UnitClass.LENGTH \
                    and value.measure.unit != unit:
                new_values.append(OperationParameterValue(opv.parameter,
                                                          value.with_unit(unit, convert)))
                changed = True
            else:
                new_values.append(opv)
        if not changed:
            return self
        logger.debug("Altered linear unit of '%s' to %s (convert=%s)",
                     self._name, unit.name, convert)
        altered = Conversion({"name": "unknown"}, self.method, new_values)
        altered._copy_crss_from(self)
        return altered

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def inverse(self) -> 'Conversion':
        """Mathematical inverse, see ``geoconv.operation.inverse``."""
        from geoconv.operation.inverse import compute_inverse
        return compute_inverse(self)

    def convert_to_other_method(self, target: Union[MethodSpec, NameOrCode]) -> Optional['Conversion']:
        """Equivalent conversion under another method, or None."""
        from geoconv.operation.equivalence import convert_to_other_method
        return convert_to_other_method(self, target)

    def is_utm(self) -> Optional[Tuple[int, bool]]:
        """``(zone, north)`` when this is a UTM conversion, else None."""
        from geoconv.operation.utm import is_utm
        return is_utm(self)

    def identify(self) -> 'Conversion':
        """Copy carrying the well-known name and code this conversion matches."""
        from geoconv.operation.utm import identify
        return identify(self)

    def get_esri_method_name(self) -> Optional[str]:
        from geoconv.model.esri_mapping import resolve_esri_method
        mapping = resolve_esri_method(self)
        return mapping.esri_name if mapping else None

    def get_wkt1_gdal_method_name(self) -> Optional[str]:
        from geoconv.utils.constants import (
            EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR,
        )
        if self.method.code == EPSG_CODE_METHOD_POPULAR_VISUALISATION_PSEUDO_MERCATOR:
            return "Mercator_1SP"
        return self.method.wkt1_name

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_to_wkt(self, formatter=None) -> str:
        from geoconv.io.wkt_formatter import WKTFormatter
        from geoconv.io.wkt_writer import export_conversion_to_wkt
        if formatter is None:
            formatter = WKTFormatter.create()
        export_conversion_to_wkt(self, formatter)
        return formatter.to_string()

    def export_to_proj_string(self, formatter=None) -> str:
        from geoconv.io.proj_formatter import PROJStringFormatter
        if formatter is None:
            formatter = PROJStringFormatter.create()
        self._export_to_proj_string(formatter)
        return formatter.to_string()

    def _export_to_proj_string(self, formatter) -> None:
        from geoconv.io.proj_writer import export_conversion_to_proj
        export_conversion_to_proj(self, formatter)

    def export_to_json(self, formatter=None) -> str:
        from geoconv.io.json_formatter import JSONFormatter
        from geoconv.io.json_writer import export_conversion_to_json
        if formatter is None:
            formatter = JSONFormatter.create()
        export_conversion_to_json(self, formatter)
        return formatter.to_string()
