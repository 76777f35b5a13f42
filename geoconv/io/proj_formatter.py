"""
PROJ String Formatter
=====================

Collects pipeline steps (``+proj=<name> +key=value ...``) and renders them
as a PROJ string:

- no step: ``+proj=noop``
- a single forward step: ``+proj=utm +zone=31 +ellps=WGS84``
- otherwise: ``+proj=pipeline +step +proj=... +step +inv +proj=...``

``start_inversion`` / ``stop_inversion`` bracket steps that must be run
backwards: on ``stop_inversion`` the bracketed steps are reversed and each
one is inverted. Unit conversions and the lat/lon axis swap have a direct
inverse and stay forward steps.

Usage:
    from geoconv.io.proj_formatter import PROJStringFormatter

    f = PROJStringFormatter.create()
    f.add_step('utm')
    f.add_param('zone', 31)
    f.to_string()  # '+proj=utm +zone=31'
"""

from typing import List, Optional, Tuple, Union

from geoconv.io.wkt_formatter import format_number
from geoconv.utils.config import get_proj_convention, use_approx_tmerc

ParamValue = Optional[Union[str, int, float]]

PROJ_5 = 'PROJ_5'
PROJ_4 = 'PROJ_4'

_SELF_INVERSE_AXISSWAP = '2,1'
_SWAPPED_UNIT_KEYS = (('xy_in', 'xy_out'), ('z_in', 'z_out'))


class Step:
    """One pipeline step: operation name, inversion flag and parameters."""

    def __init__(self, name: str):
        self.name = name
        self.inverted = False
        self.params: List[Tuple[str, Optional[str]]] = []

    def get(self, key: str) -> Optional[str]:
        for k, v in self.params:
            if k == key:
                return v
        return None

    def invert(self) -> None:
        if self.name == 'unitconvert' and not self.inverted:
            values = dict(self.params)
            swapped = {}
            for a, b in _SWAPPED_UNIT_KEYS:
                if a in values or b in values:
                    swapped[a], swapped[b] = values.get(b), values.get(a)
            self.params = [(k, swapped.get(k, v)) for k, v in self.params]
            return
        if self.name == 'axisswap' and not self.inverted and \
                self.get('order') == _SELF_INVERSE_AXISSWAP:
            return
        self.inverted = not self.inverted

    def render(self) -> str:
        tokens = ['+proj=' + self.name]
        for key, value in self.params:
            tokens.append('+' + key if value is None else f'+{key}={value}')
        return ' '.join(tokens)

    def __repr__(self):
        return f"Step({'+inv ' if self.inverted else ''}{self.render()!r})"


class PROJStringFormatter:
    """
    Builder for PROJ strings.

    Parameters
    ----------
    convention : str
        'PROJ_5' (pipelines, vertical unit steps) or 'PROJ_4'
    crs_export : bool
        True when exporting the conversion as part of a standalone CRS
        definition (``+units=``, ``+axis=``, ``+datum=`` instead of extra
        steps)
    use_approx_tmerc : bool
        Emit ``+approx`` on tmerc/utm steps

    Attributes
    ----------
    omit_proj_longlat_if_possible : bool
        Set by exporters while writing CRS normalisation steps
    """

    def __init__(self, convention: str = PROJ_5, crs_export: bool = False,
                 use_approx_tmerc: bool = False):
        self.convention = convention
        self.crs_export = crs_export
        self.use_approx_tmerc = use_approx_tmerc
        self.omit_proj_longlat_if_possible = False
        self.steps: List[Step] = []
        self._inversion_starts: List[int] = []

    @classmethod
    def create(cls, convention: Optional[str] = None, crs_export: bool = False,
               approx: Optional[bool] = None) -> 'PROJStringFormatter':
        """
        Formatter configured from arguments, falling back to the environment
        (GEOCONV_PROJ_CONVENTION, GEOCONV_USE_APPROX_TMERC).
        """
        return cls(get_proj_convention(convention), crs_export, use_approx_tmerc(approx))

    def add_step(self, name: str) -> None:
        self.steps.append(Step(name))

    def add_param(self, key: str, value: ParamValue = None) -> None:
        """Add ``+key=value`` (or a bare ``+key`` flag) to the last step."""
        if not self.steps:
            raise RuntimeError(f"add_param('{key}') called before add_step()")
        if value is not None and not isinstance(value, str):
            value = format_number(value)
        self.steps[-1].params.append((key, value))

    def start_inversion(self) -> None:
        self._inversion_starts.append(len(self.steps))

    def stop_inversion(self) -> None:
        start = self._inversion_starts.pop()
        bracketed = self.steps[start:]
        bracketed.reverse()
        for step in bracketed:
            step.invert()
        self.steps[start:] = bracketed

    def to_string(self) -> str:
        if self._inversion_starts:
            raise RuntimeError("start_inversion() without stop_inversion()")
        if not self.steps:
            return '+proj=noop'
        if len(self.steps) == 1 and not self.steps[0].inverted:
            return self.steps[0].render()
        tokens = ['+proj=pipeline']
        for step in self.steps:
            tokens.append('+step')
            if step.inverted:
                tokens.append('+inv')
            tokens.append(step.render())
        return ' '.join(tokens)
