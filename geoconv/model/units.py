"""
Units of Measure
================

Units attached to conversion parameter values. Conversion factors to SI are
derived from ``astropy.units`` so that the catalogue stays consistent with the
rest of the scientific stack.

Key principle: SI for lengths is the metre, for angles the radian and for
scales the unity.

Usage:
    from geoconv.model.units import Measure, DEGREE, RADIAN

    lon = Measure(3.0, DEGREE)
    lon.get_si_value()           # 0.05235987755982989
    lon.convert_to_unit(RADIAN)  # same value, radians
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional

import numpy as np
import astropy.units as u
from astropy.units import imperial


class UnitClass(Enum):
    """Physical kind of a unit or a parameter."""
    ANGLE = auto()
    LENGTH = auto()
    SCALE = auto()
    SCALAR = auto()


_SI_BASE = {
    UnitClass.ANGLE: u.rad,
    UnitClass.LENGTH: u.m,
    UnitClass.SCALE: u.dimensionless_unscaled,
}

US_SURVEY_FOOT_UNIT = u.def_unit('us_survey_ft', (1200.0 / 3937.0) * u.m)
GRAD_UNIT = u.def_unit('grad', (np.pi / 200.0) * u.rad)
PPM_UNIT = u.def_unit('ppm_scale', 1e-6 * u.dimensionless_unscaled)


@dataclass(frozen=True)
class UnitOfMeasure:
    """
    A named unit with its factor to the SI unit of its class.

    Attributes
    ----------
    name : str
        Name as written in WKT (``metre``, ``degree``, ...)
    conversion_to_si : float
        Multiplicative factor to metre / radian / unity
    unit_class : UnitClass
        Physical kind
    code : int, optional
        EPSG unit code
    proj_name : str, optional
        Token understood by PROJ ``units=`` / ``unitconvert``
    """
    name: str
    conversion_to_si: float
    unit_class: UnitClass
    code: Optional[int] = None
    proj_name: Optional[str] = None

    def is_equivalent_to(self, other: 'UnitOfMeasure') -> bool:
        """True when both units have the same class and SI factor."""
        if self.unit_class != other.unit_class:
            return False
        return abs(self.conversion_to_si - other.conversion_to_si) <= \
            1e-10 * abs(self.conversion_to_si)


def _unit(name, astropy_unit, unit_class, code=None, proj_name=None) -> UnitOfMeasure:
    factor = float((1.0 * astropy_unit).to_value(_SI_BASE[unit_class]))
    return UnitOfMeasure(name, factor, unit_class, code, proj_name)


METRE = _unit('metre', u.m, UnitClass.LENGTH, 9001, 'm')
KILOMETRE = _unit('kilometre', u.km, UnitClass.LENGTH, 9036, 'km')
FOOT = _unit('foot', imperial.ft, UnitClass.LENGTH, 9002, 'ft')
US_FOOT = _unit('US survey foot', US_SURVEY_FOOT_UNIT, UnitClass.LENGTH, 9003, 'us-ft')

RADIAN = _unit('radian', u.rad, UnitClass.ANGLE, 9101, 'rad')
DEGREE = _unit('degree', u.deg, UnitClass.ANGLE, 9102, 'deg')
ARC_SECOND = _unit('arc-second', u.arcsec, UnitClass.ANGLE, 9104)
GRAD = _unit('grad', GRAD_UNIT, UnitClass.ANGLE, 9105, 'grad')

UNITY = _unit('unity', u.dimensionless_unscaled, UnitClass.SCALE, 9201)
PARTS_PER_MILLION = _unit('parts per million', PPM_UNIT, UnitClass.SCALE, 9202)

NONE = UnitOfMeasure('', 1.0, UnitClass.SCALAR)

UNIT_REGISTRY: Dict[str, UnitOfMeasure] = {
    unit.name.lower(): unit
    for unit in (METRE, KILOMETRE, FOOT, US_FOOT, RADIAN, DEGREE,
                 ARC_SECOND, GRAD, UNITY, PARTS_PER_MILLION)
}
_UNIT_ALIASES = {
    'm': 'metre', 'meter': 'metre', 'km': 'kilometre', 'ft': 'foot',
    'us-ft': 'us survey foot', 'rad': 'radian', 'deg': 'degree',
    'arcsec': 'arc-second', 'ppm': 'parts per million',
}

DEFAULT_UNITS = {
    UnitClass.ANGLE: DEGREE,
    UnitClass.LENGTH: METRE,
    UnitClass.SCALE: UNITY,
    UnitClass.SCALAR: NONE,
}


def get_unit(name: str) -> UnitOfMeasure:
    """
    Look up a unit by WKT name or short alias (case-insensitive).

    Raises
    ------
    ValueError
        If the unit is unknown.
    """
    key = name.strip().lower()
    key = _UNIT_ALIASES.get(key, key)
    try:
        return UNIT_REGISTRY[key]
    except KeyError:
        raise ValueError(
            f"Unknown unit: '{name}'. Available: {sorted(UNIT_REGISTRY)}"
        ) from None


@dataclass(frozen=True)
class Measure:
    """A numeric value with its unit."""
    value: float
    unit: UnitOfMeasure = NONE

    def get_si_value(self) -> float:
        return self.value * self.unit.conversion_to_si

    def convert_to_unit(self, other: UnitOfMeasure) -> float:
        """Return the value expressed in ``other`` (same unit class assumed)."""
        if other is self.unit or other == self.unit:
            return self.value
        return self.get_si_value() / other.conversion_to_si

    @property
    def is_null(self) -> bool:
        return self is NULL_MEASURE


NULL_MEASURE = Measure(0.0, NONE)
"""Returned by accessors when a parameter is absent"""
