"""
WKT Token Formatter
===================

Append-only builder for WKT text. Exporters only call ``start_node``,
``add_quoted_string``, ``add`` and ``end_node``; separators, quoting,
indentation and number formatting are handled here.

Usage:
    from geoconv.io.wkt_formatter import WKTFormatter

    f = WKTFormatter.create('WKT2_2019')
    f.start_node('ID')
    f.add_quoted_string('EPSG')
    f.add(9807)
    f.end_node()
    f.to_string()  # 'ID["EPSG",9807]'

A formatter instance serves a single export call.
"""

from enum import Enum
from typing import List, Optional, Union

from geoconv.model.units import DEGREE, METRE, UnitOfMeasure
from geoconv.utils.config import get_wkt_convention, is_wkt_multiline


class WKTConvention(Enum):
    WKT2_2019 = 'WKT2_2019'
    WKT1_GDAL = 'WKT1_GDAL'
    WKT1_ESRI = 'WKT1_ESRI'


def format_number(value: Union[int, float]) -> str:
    """
    Shortest faithful text for a number in WKT and PROJ strings.

    Integers are written without decimal point, floats with 15 significant
    digits (``0.0174532925199433`` for the degree).
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value == 0.0:
        # no "-0"
        return '0'
    return '%.15g' % value


class WKTFormatter:
    """
    WKT builder.

    Parameters
    ----------
    convention : WKTConvention
        Output flavour
    multiline : bool
        Put nested nodes on their own indented line
    indentation_width : int
        Spaces per nesting level in multiline mode

    Attributes
    ----------
    use_deriving_conversion : bool
        Write ``DERIVINGCONVERSION`` instead of ``CONVERSION`` (WKT2 only)
    axis_linear_unit, axis_angular_unit : UnitOfMeasure
        Units WKT1 parameter values are expressed in
    """

    def __init__(self, convention: WKTConvention = WKTConvention.WKT2_2019,
                 multiline: bool = False, indentation_width: int = 4):
        self.convention = convention
        self.multiline = multiline
        self.indentation_width = indentation_width
        self.use_deriving_conversion = False
        self.axis_linear_unit: UnitOfMeasure = METRE
        self.axis_angular_unit: UnitOfMeasure = DEGREE
        self._parts: List[str] = []
        self._child_counts: List[int] = [0]
        self._output_id_stack: List[bool] = [True]
        self._output_unit_stack: List[bool] = [True]

    @classmethod
    def create(cls, convention: Optional[Union[str, WKTConvention]] = None,
               multiline: Optional[bool] = None) -> 'WKTFormatter':
        """
        Formatter configured from arguments, falling back to the environment
        (GEOCONV_WKT_CONVENTION, GEOCONV_WKT_MULTILINE).
        """
        if not isinstance(convention, WKTConvention):
            convention = WKTConvention(get_wkt_convention(convention))
        return cls(convention, is_wkt_multiline(multiline))

    @property
    def is_wkt2(self) -> bool:
        return self.convention is WKTConvention.WKT2_2019

    @property
    def use_esri_dialect(self) -> bool:
        return self.convention is WKTConvention.WKT1_ESRI

    # Output switches (stacked so nested exporters can restore them)

    @property
    def output_id(self) -> bool:
        return self._output_id_stack[-1]

    def push_output_id(self, value: bool) -> None:
        self._output_id_stack.append(value)

    def pop_output_id(self) -> None:
        self._output_id_stack.pop()

    @property
    def output_unit(self) -> bool:
        return self._output_unit_stack[-1]

    def push_output_unit(self, value: bool) -> None:
        self._output_unit_stack.append(value)

    def pop_output_unit(self) -> None:
        self._output_unit_stack.pop()

    # Tokens

    def _begin_child(self, is_node: bool) -> None:
        if self._child_counts[-1] > 0:
            self._parts.append(',')
            if self.multiline and is_node:
                depth = len(self._child_counts) - 1
                self._parts.append('\n' + ' ' * (self.indentation_width * depth))
        self._child_counts[-1] += 1

    def start_node(self, keyword: str, has_id: bool = False) -> None:
        """Open ``KEYWORD[``. ``has_id`` tells whether an ID child will follow."""
        self._begin_child(is_node=True)
        self._parts.append(keyword + '[')
        self._child_counts.append(0)

    def end_node(self) -> None:
        if len(self._child_counts) == 1:
            raise RuntimeError("end_node() called without an open node")
        self._child_counts.pop()
        self._parts.append(']')

    def add_quoted_string(self, text: str) -> None:
        self._begin_child(is_node=False)
        self._parts.append('"' + text.replace('"', '""') + '"')

    def add(self, value: Union[int, float]) -> None:
        self._begin_child(is_node=False)
        self._parts.append(format_number(value))

    def to_string(self) -> str:
        if len(self._child_counts) != 1:
            raise RuntimeError("WKT output has unclosed nodes")
        return ''.join(self._parts)
