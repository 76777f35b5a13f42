"""
Inversion Tests
===============

Tests for closed-form inverses, the generic inverse wrapper and the
endpoint swap.

Run with:
    pytest geoconv/tests/test_inverse.py -v
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.errors import ConstructionError
from geoconv.model.units import UNITY, Measure
from geoconv.operation.factory import (
    create_axis_order_reversal,
    create_change_vertical_unit,
    create_geographic_geocentric,
    create_geographic_geocentric_latitude,
    create_height_depth_reversal,
    create_utm,
)
from geoconv.operation.inverse import InverseConversion, inverse_name


class TestInverseName:
    """Tests for the "Inverse of" naming rule."""

    @pytest.mark.parametrize("name,expected", [
        ("UTM zone 31N", "Inverse of UTM zone 31N"),
        ("Inverse of UTM zone 31N", "UTM zone 31N"),
        ("", ""),
    ])
    def test_inverse_name(self, name, expected):
        """Test: the prefix is added or stripped."""
        assert inverse_name(name) == expected


class TestClosedFormInverses:
    """Tests for methods with a direct inverse."""

    def test_change_vertical_unit_factor(self):
        """Test: the inverse factor is the reciprocal."""
        conv = create_change_vertical_unit("ft to m", Measure(0.3048, UNITY))
        inv = conv.inverse()
        assert inv.method.code == 1069
        assert inv.name == "Inverse of ft to m"
        assert inv.parameter_value_numeric_as_si(1051) == pytest.approx(1 / 0.3048)

    def test_change_vertical_unit_zero_factor(self):
        """Test: a zero factor cannot be inverted."""
        conv = create_change_vertical_unit("broken", Measure(0.0, UNITY))
        with pytest.raises(ConstructionError, match='Invalid conversion factor'):
            conv.inverse()

    def test_change_vertical_unit_without_factor(self):
        """Test: EPSG:1104 inverts to itself."""
        inv = create_change_vertical_unit("no factor").inverse()
        assert inv.method.code == 1104
        assert not isinstance(inv, InverseConversion)

    @pytest.mark.parametrize("is_3d,code", [(False, 9843), (True, 9844)])
    def test_axis_order_reversal(self, is_3d, code):
        """Test: axis order reversal is self-inverse."""
        inv = create_axis_order_reversal(is_3d).inverse()
        assert inv.method.code == code
        assert not isinstance(inv, InverseConversion)

    def test_geographic_geocentric(self):
        """Test: geographic/geocentric is self-inverse, name prefixed."""
        inv = create_geographic_geocentric().inverse()
        assert inv.method.code == 9602
        assert inv.name.startswith("Inverse of ")

    def test_height_depth_reversal(self):
        """Test: height/depth reversal is self-inverse."""
        assert create_height_depth_reversal().inverse().method.code == 1068

    def test_geocentric_latitude(self, wgs84_geographic, wgs84_planetocentric):
        """Test: the geocentric latitude method inverts by swapping CRSs."""
        conv = create_geographic_geocentric_latitude(wgs84_geographic, wgs84_planetocentric)
        inv = conv.inverse()
        assert inv.method.name == conv.method.name
        assert inv.source_crs is wgs84_planetocentric
        assert inv.target_crs is wgs84_geographic


class TestInverseWrapper:
    """Tests for the generic inverse of map projections."""

    def test_wrapper(self):
        """Test: map projections are wrapped, parameters unchanged."""
        conv = create_utm(None, 31, True)
        inv = conv.inverse()
        assert isinstance(inv, InverseConversion)
        assert inv.method.name == "Inverse of Transverse Mercator"
        assert inv.method.code == 0
        assert inv.name == "Inverse of UTM zone 31N"
        assert inv.parameter_values == conv.parameter_values

    def test_double_inverse_is_forward(self):
        """Test: inverting twice gives back the same object."""
        conv = create_utm(None, 31, True)
        assert conv.inverse().inverse() is conv

    def test_endpoints_swapped(self, wgs84_geographic, utm31n_crs):
        """Test: the inverse goes from target to source."""
        conv = create_utm(None, 31, True)
        conv.set_crss(wgs84_geographic, utm31n_crs)
        inv = conv.inverse()
        assert inv.source_crs is utm31n_crs
        assert inv.target_crs is wgs84_geographic

    def test_closed_form_endpoints_swapped(self, height_metre_crs, height_us_foot_crs):
        """Test: closed-form inverses swap endpoints too."""
        conv = create_change_vertical_unit("m to ftUS")
        conv.set_crss(height_metre_crs, height_us_foot_crs)
        inv = conv.inverse()
        assert inv.source_crs is height_us_foot_crs
        assert inv.target_crs is height_metre_crs
