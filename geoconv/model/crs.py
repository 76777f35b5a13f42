"""
Minimal CRS model
=================

Read-only coordinate reference system collaborators used by conversions:
ellipsoid metrics, geographic/geocentric discrimination, axis order and
units. Parsing and the full datum model are out of scope; these classes only
expose what the exporters and the equivalence solver query.

Conversions hold weak references to CRS objects, so callers keep CRS
instances alive for as long as the conversion needs its endpoints.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from geoconv.model.units import DEGREE, METRE, UnitOfMeasure


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid.

    Attributes
    ----------
    name : str
        Ellipsoid name
    semi_major_axis : float
        Semi-major axis in metres
    inverse_flattening : float
        1/f, 0 for a sphere
    proj_name : str, optional
        PROJ ``ellps=`` token when PROJ knows the ellipsoid
    """
    name: str
    semi_major_axis: float
    inverse_flattening: float = 0.0
    proj_name: Optional[str] = None

    @property
    def is_sphere(self) -> bool:
        return self.inverse_flattening == 0.0

    @property
    def flattening(self) -> float:
        return 0.0 if self.is_sphere else 1.0 / self.inverse_flattening

    @property
    def squared_eccentricity(self) -> float:
        f = self.flattening
        return f * (2.0 - f)

    @property
    def eccentricity(self) -> float:
        return float(np.sqrt(self.squared_eccentricity))

    def export_to_proj_string(self, formatter) -> None:
        if self.proj_name:
            formatter.add_param("ellps", self.proj_name)
        elif self.is_sphere:
            formatter.add_param("R", self.semi_major_axis)
        else:
            formatter.add_param("a", self.semi_major_axis)
            formatter.add_param("rf", self.inverse_flattening)


WGS84 = Ellipsoid("WGS 84", 6378137.0, 298.257223563, "WGS84")
GRS1980 = Ellipsoid("GRS 1980", 6378137.0, 298.257222101, "GRS80")
CLARKE_1866 = Ellipsoid("Clarke 1866", 6378206.4, 294.978698213898, "clrk66")
BESSEL_1841 = Ellipsoid("Bessel 1841", 6377397.155, 299.1528128, "bessel")
SPHERE_6378137 = Ellipsoid("Sphere 6378137", 6378137.0)


@dataclass(frozen=True)
class PrimeMeridian:
    """
    Prime meridian.

    Attributes
    ----------
    name : str
        Meridian name
    longitude : float
        Longitude from Greenwich, in degrees
    proj_name : str, optional
        PROJ ``pm=`` token when PROJ knows the meridian
    """
    name: str
    longitude: float = 0.0
    proj_name: Optional[str] = None

    def export_to_proj_string(self, formatter) -> None:
        if self.longitude == 0.0:
            return
        formatter.add_param("pm", self.proj_name or self.longitude)


GREENWICH = PrimeMeridian("Greenwich")
PARIS = PrimeMeridian("Paris", 2.33722917, "paris")

_AXIS_LETTERS = {"east": "e", "west": "w", "north": "n", "south": "s"}
_AXIS_ORDER = {"east": 1, "west": -1, "north": 2, "south": -2}


class CRS:
    """Base class: a named CRS with an optional EPSG code."""

    def __init__(self, name: str, code: Optional[int] = None):
        self.name = name
        self.code = code

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, code={self.code})"


class GeodeticCRS(CRS):
    """
    Geographic (latitude/longitude) or geocentric (cartesian) CRS.

    Parameters
    ----------
    name : str
        CRS name
    ellipsoid : Ellipsoid
        Reference ellipsoid
    code : int, optional
        EPSG code
    geocentric : bool
        True for a cartesian geocentric CRS
    lat_first : bool
        Axis order of a geographic CRS (EPSG:4326 is latitude first)
    angular_unit : UnitOfMeasure
        Unit of the geographic axes
    spherical_planetocentric : bool
        True for a CRS using geocentric latitude on a sphere
    datum_proj_name : str, optional
        PROJ ``datum=`` token used when exporting a full CRS
    prime_meridian : PrimeMeridian
        Origin of longitudes, Greenwich by default
    """

    def __init__(self, name: str, ellipsoid: Ellipsoid, code: Optional[int] = None,
                 geocentric: bool = False, lat_first: bool = True,
                 angular_unit: UnitOfMeasure = DEGREE,
                 spherical_planetocentric: bool = False,
                 datum_proj_name: Optional[str] = None,
                 prime_meridian: PrimeMeridian = GREENWICH):
        super().__init__(name, code)
        self.ellipsoid = ellipsoid
        self.geocentric = geocentric
        self.lat_first = lat_first
        self.angular_unit = angular_unit
        self.spherical_planetocentric = spherical_planetocentric
        self.datum_proj_name = datum_proj_name
        self.prime_meridian = prime_meridian

    @property
    def is_geographic(self) -> bool:
        return not self.geocentric and not self.spherical_planetocentric

    @property
    def is_geocentric(self) -> bool:
        return self.geocentric

    def add_datum_info_to_proj_string(self, formatter) -> None:
        if self.datum_proj_name:
            formatter.add_param("datum", self.datum_proj_name)
        else:
            self.ellipsoid.export_to_proj_string(formatter)
        self.prime_meridian.export_to_proj_string(formatter)

    def add_angular_unit_convert_and_axis_swap(self, formatter) -> None:
        formatter.add_step("unitconvert")
        formatter.add_param("xy_in", "rad")
        unit = self.angular_unit
        formatter.add_param("xy_out", unit.proj_name or unit.conversion_to_si)
        if self.lat_first:
            formatter.add_step("axisswap")
            formatter.add_param("order", "2,1")

    def export_to_proj_string(self, formatter) -> None:
        """Emit the steps normalising this CRS to radians, longitude first."""
        if self.geocentric:
            formatter.add_step("cart")
            self.ellipsoid.export_to_proj_string(formatter)
            return
        if self.spherical_planetocentric:
            formatter.add_step("geoc")
            self.ellipsoid.export_to_proj_string(formatter)
        elif not formatter.omit_proj_longlat_if_possible:
            formatter.add_step("longlat")
            self.add_datum_info_to_proj_string(formatter)
        self.add_angular_unit_convert_and_axis_swap(formatter)


class ProjectedCRS(CRS):
    """
    Projected CRS over a geodetic base.

    Parameters
    ----------
    name : str
        CRS name
    base_crs : GeodeticCRS
        Base geographic CRS
    code : int, optional
        EPSG code
    linear_unit : UnitOfMeasure
        Unit of the easting/northing axes
    axis_directions : sequence of str
        Directions of the first two axes, e.g. ('east', 'north')
    has_over : bool
        Whether longitudes wrap past +/-180 (PROJ ``+over``)
    """

    def __init__(self, name: str, base_crs: GeodeticCRS, code: Optional[int] = None,
                 linear_unit: UnitOfMeasure = METRE,
                 axis_directions: Sequence[str] = ("east", "north"),
                 has_over: bool = False):
        super().__init__(name, code)
        self.base_crs = base_crs
        self.linear_unit = linear_unit
        self.axis_directions: Tuple[str, ...] = tuple(d.lower() for d in axis_directions)
        self.has_over = has_over

    def add_unit_convert_and_axis_swap(self, formatter, axis_spec_found: bool) -> None:
        """Emit unit and axis handling of the projected axes."""
        unit = self.linear_unit
        if formatter.crs_export:
            if unit.is_equivalent_to(METRE):
                formatter.add_param("units", "m")
            elif unit.proj_name:
                formatter.add_param("units", unit.proj_name)
            else:
                formatter.add_param("to_meter", unit.conversion_to_si)
            if not axis_spec_found and self.axis_directions[:2] != ("east", "north"):
                letters = "".join(_AXIS_LETTERS.get(d, "") for d in self.axis_directions[:2])
                if len(letters) == 2:
                    formatter.add_param("axis", letters + "u")
            return

        if not unit.is_equivalent_to(METRE):
            formatter.add_step("unitconvert")
            formatter.add_param("xy_in", "m")
            formatter.add_param("xy_out", unit.proj_name or unit.conversion_to_si)
        if not axis_spec_found:
            order = [_AXIS_ORDER.get(d) for d in self.axis_directions[:2]]
            if None not in order and order != [1, 2]:
                formatter.add_step("axisswap")
                formatter.add_param("order", ",".join(str(o) for o in order))


class VerticalCRS(CRS):
    """Vertical CRS with a single height or depth axis."""

    def __init__(self, name: str, code: Optional[int] = None,
                 unit: UnitOfMeasure = METRE):
        super().__init__(name, code)
        self.unit = unit


class CompoundCRS(CRS):
    """Ordered combination of a horizontal and a vertical CRS."""

    def __init__(self, name: str, components: List[CRS], code: Optional[int] = None):
        super().__init__(name, code)
        self.components = list(components)


def horizontal_component(crs: Optional[CRS]) -> Optional[CRS]:
    """The CRS itself, or the first component of a compound CRS."""
    if isinstance(crs, CompoundCRS):
        return crs.components[0] if crs.components else None
    return crs


def extract_geodetic_crs(crs: Optional[CRS]) -> Optional[GeodeticCRS]:
    """Geodetic CRS underlying ``crs`` (itself, its base or its first component)."""
    crs = horizontal_component(crs)
    if isinstance(crs, GeodeticCRS):
        return crs
    if isinstance(crs, ProjectedCRS):
        return crs.base_crs
    return None


def extract_vertical_crs(crs: Optional[CRS]) -> Optional[VerticalCRS]:
    if isinstance(crs, CompoundCRS):
        for component in crs.components:
            if isinstance(component, VerticalCRS):
                return component
        return None
    return crs if isinstance(crs, VerticalCRS) else None
