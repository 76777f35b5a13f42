"""
ESRI Alias Registry Tests
=========================

Tests for the ESRI method table and the contextual choice between aliases.

Run with:
    pytest geoconv/tests/test_esri_mapping.py -v
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.io.wkt_formatter import WKTConvention, WKTFormatter
from geoconv.model.crs import ProjectedCRS
from geoconv.model.esri_mapping import (
    ESRI_METHOD_MAPPINGS,
    find_esri_mapping,
    get_esri_mappings,
    resolve_esri_method,
)
from geoconv.model.units import DEGREE, METRE, Measure
from geoconv.operation.conversion import Conversion
from geoconv.operation.factory import (
    create_axis_order_reversal,
    create_equidistant_cylindrical,
    create_hotine_oblique_mercator_variant_a,
    create_hotine_oblique_mercator_variant_b,
    create_lambert_cylindrical_equal_area,
    create_mercator_variant_a,
    create_polar_stereographic_variant_a,
    create_polar_stereographic_variant_b,
    create_transverse_mercator,
)
from geoconv.utils import constants as C


@pytest.fixture(scope="module")
def gk_crs(wgs84_geographic):
    return ProjectedCRS("Pulkovo 1942 / Gauss-Kruger zone 4", wgs84_geographic)


@pytest.fixture(scope="module")
def plate_carree_crs(wgs84_geographic):
    return ProjectedCRS("World Plate Carree", wgs84_geographic)


@pytest.fixture(scope="module")
def ups_north_crs(wgs84_geographic):
    return ProjectedCRS("WGS 84 / UPS North (E,N)", wgs84_geographic)


class TestRegistry:
    """Tests for the raw alias table."""

    def test_transverse_mercator_aliases(self):
        """Test: Transverse Mercator has two ESRI names, in order."""
        names = [m.esri_name for m in get_esri_mappings(9807)]
        assert names == ['Transverse_Mercator', 'Gauss_Kruger']

    def test_tm_parameter_order(self):
        """Test: ESRI parameters are written false origin first."""
        mapping = find_esri_mapping('Transverse_Mercator', 9807)
        assert [p.esri_name for p in mapping.params] == [
            'False_Easting', 'False_Northing', 'Central_Meridian',
            'Scale_Factor', 'Latitude_Of_Origin']

    def test_methods_without_code(self):
        """Test: non-EPSG methods are matched by name."""
        assert [m.esri_name for m in get_esri_mappings(0, 'mollweide')] == ['Mollweide']
        assert get_esri_mappings(0) == []

    def test_krovak_fixed_values(self):
        """Test: North Orientated Krovak is expressed with X_Scale = -1."""
        mapping = get_esri_mappings(C.EPSG_CODE_METHOD_KROVAK_NORTH_ORIENTED)[0]
        fixed = {p.esri_name: p.fixed_value for p in mapping.params if p.code == 0}
        assert fixed == {'X_Scale': -1.0, 'Y_Scale': 1.0, 'XY_Plane_Rotation': 90.0}

    def test_no_mercator_variant_a(self):
        """Test: ESRI only knows Mercator through variant B."""
        assert get_esri_mappings(C.EPSG_CODE_METHOD_MERCATOR_VARIANT_A) == []

    def test_every_entry_has_parameters(self):
        """Test: no mapping has an empty parameter list."""
        assert all(m.params for m in ESRI_METHOD_MAPPINGS)


class TestResolve:
    """Tests for resolve_esri_method / Conversion.get_esri_method_name."""

    def test_transverse_mercator(self, wgs84_geographic, utm31n_crs):
        """Test: plain TM maps to Transverse_Mercator."""
        conv = create_transverse_mercator("TM", 0, 3, 0.9996, 500000, 0)
        conv.set_crss(wgs84_geographic, utm31n_crs)
        assert conv.get_esri_method_name() == 'Transverse_Mercator'

    def test_gauss_kruger_from_conversion_name(self):
        """Test: a Gauss-Kruger conversion name selects Gauss_Kruger."""
        conv = create_transverse_mercator("Gauss Kruger zone 4", 0, 21, 1, 4500000, 0)
        assert conv.get_esri_method_name() == 'Gauss_Kruger'

    def test_gauss_kruger_from_target_name(self, wgs84_geographic, gk_crs):
        """Test: a Gauss-Kruger target CRS selects Gauss_Kruger."""
        conv = create_transverse_mercator(None, 0, 21, 1, 4500000, 0)
        conv.set_crss(wgs84_geographic, gk_crs)
        assert conv.get_esri_method_name() == 'Gauss_Kruger'

    @pytest.mark.parametrize("factory,azimuth,skew,expected", [
        (create_hotine_oblique_mercator_variant_a, 45, 45,
         'Hotine_Oblique_Mercator_Azimuth_Natural_Origin'),
        (create_hotine_oblique_mercator_variant_a, 45, 40,
         'Rectified_Skew_Orthomorphic_Natural_Origin'),
        (create_hotine_oblique_mercator_variant_b, 45, 45,
         'Hotine_Oblique_Mercator_Azimuth_Center'),
        (create_hotine_oblique_mercator_variant_b, 45, 40,
         'Rectified_Skew_Orthomorphic_Center'),
    ])
    def test_hotine(self, factory, azimuth, skew, expected):
        """Test: a skew angle different from the azimuth selects RSO."""
        conv = factory(None, 4, 115, azimuth, skew, 0.99984, 0, 0)
        mapping = resolve_esri_method(conv)
        assert mapping.esri_name == expected

    def test_rso_has_plane_rotation(self):
        """Test: the RSO flavour writes XY_Plane_Rotation."""
        conv = create_hotine_oblique_mercator_variant_a(None, 4, 115, 53.3, 53.1, 0.99984, 0, 0)
        names = [p.esri_name for p in resolve_esri_method(conv).params]
        assert names[-1] == 'XY_Plane_Rotation'

    @pytest.mark.parametrize("lat,expected", [
        (71, 'Stereographic_North_Pole'),
        (-71, 'Stereographic_South_Pole'),
    ])
    def test_polar_stereographic_b(self, lat, expected):
        """Test: the hemisphere of the standard parallel picks the pole."""
        conv = create_polar_stereographic_variant_b(None, lat, 0, 0, 0)
        assert conv.get_esri_method_name() == expected

    def test_polar_stereographic_a(self, wgs84_geographic, ups_north_crs):
        """Test: UPS targets keep the variant A name."""
        conv = create_polar_stereographic_variant_a(None, 90, 0, 0.994, 2000000, 2000000)
        assert conv.get_esri_method_name() == 'Stereographic'
        ups = create_polar_stereographic_variant_a(None, 90, 0, 0.994, 2000000, 2000000)
        ups.set_crss(wgs84_geographic, ups_north_crs)
        assert ups.get_esri_method_name() == 'Polar_Stereographic_Variant_A'

    @pytest.mark.parametrize("lat,expected", [
        (30, 'Behrmann'),
        (0, 'Cylindrical_Equal_Area'),
    ])
    def test_cylindrical_equal_area(self, lat, expected):
        """Test: a standard parallel at 30 degrees is Behrmann."""
        conv = create_lambert_cylindrical_equal_area(None, lat, 0, 0, 0)
        assert conv.get_esri_method_name() == expected

    def test_plate_carree(self, wgs84_geographic, plate_carree_crs):
        """Test: the target CRS name selects Plate_Carree."""
        conv = create_equidistant_cylindrical(None, 0, 0, 0, 0)
        assert conv.get_esri_method_name() == 'Equidistant_Cylindrical'
        conv.set_crss(wgs84_geographic, plate_carree_crs)
        assert conv.get_esri_method_name() == 'Plate_Carree'

    def test_spherical_equidistant_cylindrical(self, wgs84_geographic, plate_carree_crs):
        """Test: the spherical Equidistant Cylindrical has the same ESRI aliases."""
        conv = Conversion.create(
            None, C.EPSG_CODE_METHOD_EQUIDISTANT_CYLINDRICAL_SPHERICAL,
            [Measure(30, DEGREE), Measure(0, DEGREE), Measure(0, DEGREE),
             Measure(0, METRE), Measure(0, METRE)])
        assert [m.esri_name for m in get_esri_mappings(conv.method.code)] == [
            'Equidistant_Cylindrical', 'Plate_Carree']
        assert conv.get_esri_method_name() == 'Equidistant_Cylindrical'
        wkt = conv.export_to_wkt(WKTFormatter(WKTConvention.WKT1_ESRI))
        assert wkt.startswith('PROJECTION["Equidistant_Cylindrical"],')
        assert 'PARAMETER["Standard_Parallel_1",30]' in wkt
        conv.set_crss(wgs84_geographic, plate_carree_crs)
        assert conv.get_esri_method_name() == 'Plate_Carree'

    def test_mollweide(self):
        """Test: methods without EPSG code resolve by name."""
        conv = Conversion.create(None, C.PROJ_WKT2_NAME_METHOD_MOLLWEIDE,
                                 [Measure(0, DEGREE), Measure(0, METRE), Measure(0, METRE)])
        assert conv.get_esri_method_name() == 'Mollweide'

    @pytest.mark.parametrize("conv", [
        create_axis_order_reversal(False),
        create_mercator_variant_a(None, 0, 0, 1, 0, 0),
    ])
    def test_no_esri_name(self, conv):
        """Test: methods without ESRI equivalent give None."""
        assert conv.get_esri_method_name() is None
        assert resolve_esri_method(conv) is None
