"""
Conversion Entity Tests
=======================

Tests for construction, parameter access, CRS endpoints and alteration of
conversions.

Run with:
    pytest geoconv/tests/test_conversion.py -v
"""

import gc
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.errors import ConstructionError
from geoconv.model.crs import WGS84, GeodeticCRS
from geoconv.model.units import DEGREE, FOOT, METRE, RADIAN, UNITY, Measure
from geoconv.operation.conversion import Conversion
from geoconv.operation.factory import (
    create_change_vertical_unit,
    create_mercator_variant_a,
    create_transverse_mercator,
    create_utm,
)


def _tm(**overrides):
    values = dict(lat=0.0, lon=3.0, k=0.9996, fe=500000.0, fn=0.0)
    values.update(overrides)
    return create_transverse_mercator(
        {"name": "TM"}, values['lat'], values['lon'], values['k'],
        values['fe'], values['fn'])


class TestConstruction:
    """Tests for Conversion.create."""

    def test_create_from_code(self):
        """Test: values are paired with the schema in order."""
        conv = Conversion.create(
            "My TM", 9807,
            [Measure(0, DEGREE), Measure(3, DEGREE), Measure(0.9996, UNITY),
             Measure(500000, METRE), Measure(0, METRE)])
        assert conv.name == "My TM"
        assert conv.method.code == 9807
        assert [opv.code for opv in conv.parameter_values] == [8801, 8802, 8805, 8806, 8807]

    def test_wrong_value_count(self):
        """Test: a value list that does not fit the schema is rejected."""
        with pytest.raises(ConstructionError, match='expected 5'):
            Conversion.create("bad", 9807, [Measure(0, DEGREE)])

    def test_construction_error_is_value_error(self):
        """Test: ConstructionError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Conversion.create("bad", 9807, [])

    def test_ad_hoc_schema(self):
        """Test: methods outside the registry keep their given schema."""
        conv = Conversion.create_from_ad_hoc_schema(
            None, "PROJ tpeqd", ["lat_1", "lon_1"],
            [Measure(10, DEGREE), Measure(20, DEGREE)])
        assert conv.method.name == "PROJ tpeqd"
        assert conv.parameter_value_numeric("lon_1", DEGREE) == 20

    def test_unnamed_by_default(self):
        """Test: no name and no identifier."""
        conv = create_mercator_variant_a(None, 0, 0, 1, 0, 0)
        assert conv.name == ""
        assert not conv.has_id


class TestParameterAccess:
    """Tests for parameter lookups."""

    def test_lookup_by_code_and_name(self):
        """Test: codes and case-insensitive names find the same value."""
        conv = _tm()
        assert conv.parameter_value(8802) == conv.parameter_value('longitude OF natural origin')

    def test_absent_parameter(self):
        """Test: missing parameters read as None / 0.0."""
        conv = _tm()
        assert conv.parameter_value(8823) is None
        assert conv.parameter_value_measure(8823).is_null
        assert conv.parameter_value_numeric(8823, DEGREE) == 0.0
        assert conv.parameter_value_numeric_as_si(8823) == 0.0

    def test_numeric_conversion(self):
        """Test: values convert to the requested unit."""
        conv = _tm(lon=Measure(3.0, DEGREE))
        assert conv.parameter_value_numeric(8802, RADIAN) == pytest.approx(0.0523598775598299)
        assert conv.parameter_value_numeric_as_si(8806) == 500000.0


class TestCRSEndpoints:
    """Tests for set_crss and weak references."""

    def test_set_once(self, wgs84_geographic, utm31n_crs):
        """Test: endpoints can be attached only once."""
        conv = _tm()
        conv.set_crss(wgs84_geographic, utm31n_crs)
        assert conv.source_crs is wgs84_geographic
        assert conv.target_crs is utm31n_crs
        assert conv.interpolation_crs is None
        with pytest.raises(ConstructionError):
            conv.set_crss(wgs84_geographic, utm31n_crs)

    def test_weak_reference(self):
        """Test: a conversion does not keep its CRSs alive."""
        conv = _tm()
        crs = GeodeticCRS("Transient", WGS84)
        conv.set_crss(crs, None)
        assert conv.source_crs is crs
        del crs
        gc.collect()
        assert conv.source_crs is None


class TestEquivalence:
    """Tests for is_equivalent_to."""

    def test_same_values_different_units(self):
        """Test: values are compared in SI, names ignored."""
        a = _tm(fe=Measure(500000.0, METRE))
        b = create_transverse_mercator("other name", 0, 3, 0.9996,
                                       Measure(500000.0 / 0.3048, FOOT), 0)
        assert a.is_equivalent_to(b)

    def test_different_values(self):
        """Test: a different central meridian breaks equivalence."""
        assert not _tm().is_equivalent_to(_tm(lon=9.0))

    def test_different_methods(self):
        """Test: different methods are never equivalent."""
        assert not _tm().is_equivalent_to(create_mercator_variant_a(None, 0, 3, 0.9996, 500000, 0))
        assert not _tm().is_equivalent_to("not a conversion")


class TestAlterLinearUnit:
    """Tests for alter_linear_unit."""

    def test_convert(self, wgs84_geographic, utm31n_feet_crs):
        """Test: length values are converted, the rest is kept."""
        conv = _tm()
        conv.set_crss(wgs84_geographic, utm31n_feet_crs)
        altered = conv.alter_linear_unit(FOOT, convert=True)
        assert altered.name == "unknown"
        fe = altered.parameter_value_measure(8806)
        assert fe.unit is FOOT
        assert fe.value == pytest.approx(500000.0 / 0.3048)
        assert altered.parameter_value_numeric(8805, UNITY) == 0.9996
        assert altered.source_crs is wgs84_geographic
        assert altered.target_crs is utm31n_feet_crs

    def test_relabel(self):
        """Test: convert=False only changes the unit label."""
        altered = _tm().alter_linear_unit(FOOT, convert=False)
        assert altered.parameter_value_measure(8806).value == 500000.0
        assert altered.parameter_value_measure(8806).unit is FOOT

    def test_nothing_to_change(self):
        """Test: the same object is returned when no length changes."""
        conv = _tm()
        assert conv.alter_linear_unit(METRE, convert=True) is conv


class TestFactory:
    """Tests for the convenience constructors."""

    @pytest.mark.parametrize("zone,north,name,code,lon,fn", [
        (31, True, "UTM zone 31N", 16031, 3.0, 0.0),
        (1, True, "UTM zone 1N", 16001, -177.0, 0.0),
        (60, False, "UTM zone 60S", 16160, 177.0, 10000000.0),
    ])
    def test_utm(self, zone, north, name, code, lon, fn):
        """Test: UTM zones get EPSG names, codes and parameters."""
        conv = create_utm(None, zone, north)
        assert conv.name == name
        assert conv.code == code
        assert conv.codespace == "EPSG"
        assert conv.parameter_value_numeric(8802, DEGREE) == lon
        assert conv.parameter_value_numeric(8807, METRE) == fn

    @pytest.mark.parametrize("zone", [0, 61, -3])
    def test_utm_invalid_zone(self, zone):
        """Test: zones outside 1..60 are rejected."""
        with pytest.raises(ConstructionError):
            create_utm(None, zone, True)

    def test_change_vertical_unit_variants(self):
        """Test: with factor is EPSG:1069, without is EPSG:1104."""
        assert create_change_vertical_unit("ft to m", 0.3048).method.code == 1069
        assert create_change_vertical_unit("ft to m").method.code == 1104
