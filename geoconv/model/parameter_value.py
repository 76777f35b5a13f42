"""Parameter values attached to a conversion.

A ``ParameterValue`` is a tagged union over a measure, a string (e.g. a grid
file name) or an integer (e.g. an EPSG code). ``OperationParameterValue``
pairs one value with the schema entry it fills.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union, TYPE_CHECKING

from geoconv.model.units import Measure, UnitOfMeasure

if TYPE_CHECKING:
    from geoconv.model.method_spec import ParamSpec


class ParameterValueType(Enum):
    MEASURE = auto()
    STRING = auto()
    INTEGER = auto()


@dataclass(frozen=True)
class ParameterValue:
    """
    Value of a single operation parameter.

    Use ``ParameterValue.create`` rather than the constructor; it picks the
    variant from the Python type of its argument.
    """
    type: ParameterValueType
    measure: Optional[Measure] = None
    string_value: Optional[str] = None
    integer_value: Optional[int] = None

    @classmethod
    def create(cls, value: Union[Measure, str, int]) -> 'ParameterValue':
        if isinstance(value, Measure):
            return cls(ParameterValueType.MEASURE, measure=value)
        if isinstance(value, str):
            return cls(ParameterValueType.STRING, string_value=value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(ParameterValueType.INTEGER, integer_value=value)
        raise TypeError(
            f"Unsupported parameter value type: {type(value).__name__}"
        )

    @property
    def is_measure(self) -> bool:
        return self.type is ParameterValueType.MEASURE

    def get_si_value(self) -> float:
        if self.is_measure:
            return self.measure.get_si_value()
        if self.type is ParameterValueType.INTEGER:
            return float(self.integer_value)
        raise ValueError("String parameter values have no numeric value")

    def with_unit(self, unit: UnitOfMeasure, convert: bool) -> 'ParameterValue':
        """Re-express a measure in ``unit``, converting the number or not."""
        value = self.measure.convert_to_unit(unit) if convert else self.measure.value
        return ParameterValue.create(Measure(value, unit))


@dataclass(frozen=True)
class OperationParameterValue:
    """A schema entry together with the value supplied for it."""
    parameter: 'ParamSpec'
    value: ParameterValue

    @property
    def name(self) -> str:
        return self.parameter.name

    @property
    def code(self) -> int:
        return self.parameter.code
