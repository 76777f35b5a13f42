"""
PROJJSON Export Tests
=====================

Run with:
    pytest geoconv/tests/test_json_writer.py -v
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.io.json_formatter import JSONFormatter
from geoconv.io.json_writer import export_conversion_to_json
from geoconv.model.crs import GeodeticCRS, WGS84
from geoconv.model.units import FOOT, US_FOOT, Measure
from geoconv.operation.conversion import Conversion
from geoconv.operation.factory import (
    create_axis_order_reversal,
    create_change_vertical_unit,
    create_transverse_mercator,
    create_utm,
)


def _export(conv, output_id=True):
    formatter = JSONFormatter(indent=0)
    formatter.output_id = output_id
    export_conversion_to_json(conv, formatter)
    return formatter.to_dict()


@pytest.fixture(scope="module")
def interpolation_crs():
    return GeodeticCRS("WGS 84", WGS84, code=4979)


class TestConversionObject:
    """Tests for the Conversion object."""

    def test_utm(self):
        """Test: method, parameters and identifier of UTM zone 31N."""
        doc = _export(create_utm(None, 31, True))
        assert doc['type'] == 'Conversion'
        assert doc['name'] == 'UTM zone 31N'
        assert doc['method'] == {'name': 'Transverse Mercator',
                                 'id': {'authority': 'EPSG', 'code': 9807}}
        assert doc['id'] == {'authority': 'EPSG', 'code': 16031}
        assert [p['name'] for p in doc['parameters']] == [
            'Latitude of natural origin', 'Longitude of natural origin',
            'Scale factor at natural origin', 'False easting', 'False northing']

    def test_parameter(self):
        """Test: short unit names for degree, unity and metre."""
        params = _export(create_utm(None, 31, True))['parameters']
        assert params[1] == {'type': 'ParameterValue',
                             'name': 'Longitude of natural origin',
                             'value': 3, 'unit': 'degree',
                             'id': {'authority': 'EPSG', 'code': 8802}}
        assert params[2]['unit'] == 'unity'
        assert params[3]['unit'] == 'metre'

    def test_unit_object(self):
        """Test: other units are written as objects."""
        conv = create_transverse_mercator(None, 0, 3, 1, Measure(1000, US_FOOT), 0)
        unit = _export(conv)['parameters'][3]['unit']
        assert unit['type'] == 'LinearUnit'
        assert unit['name'] == 'US survey foot'
        assert unit['conversion_factor'] == pytest.approx(0.304800609601219)
        assert unit['id'] == {'authority': 'EPSG', 'code': 9003}

    def test_without_ids(self):
        """Test: output_id off drops every id member."""
        conv = create_transverse_mercator("TM", 0, 3, 1, Measure(1000, FOOT), 0)
        text = json.dumps(_export(conv, output_id=False))
        assert '"id"' not in text

    def test_no_parameters(self):
        """Test: methods without parameters have no parameters member."""
        doc = _export(create_axis_order_reversal(False))
        assert 'parameters' not in doc
        assert 'id' not in doc
        assert doc['method']['id'] == {'authority': 'EPSG', 'code': 9843}

    def test_unnamed(self):
        """Test: missing names are written as 'unnamed'."""
        conv = Conversion.create_from_ad_hoc_schema(None, "Foo", [], [])
        assert _export(conv) == {'type': 'Conversion', 'name': 'unnamed',
                                 'method': {'name': 'Foo'}}

    def test_interpolation_crs(self, height_metre_crs, height_us_foot_crs,
                               interpolation_crs):
        """Test: the interpolation CRS code is added as an integer parameter."""
        conv = create_change_vertical_unit("m to ftUS")
        conv.set_crss(height_metre_crs, height_us_foot_crs, interpolation_crs)
        param = _export(conv)['parameters'][-1]
        assert param['name'] == 'EPSG code for Interpolation CRS'
        assert param['value'] == 4979
        assert 'unit' not in param

    def test_horizontal_crs_parameter(self, height_metre_crs, interpolation_crs):
        """Test: TIN interpolation names the CRS parameter after the horizontal CRS."""
        conv = Conversion.create_from_ad_hoc_schema(
            None, "Vertical Offset by TIN Interpolation (JSON)",
            ["TIN offset file"], ["offsets.json"], method_code=1137)
        conv.set_crss(height_metre_crs, height_metre_crs, interpolation_crs)
        param = _export(conv)['parameters'][-1]
        assert param['name'] == 'EPSG code for Horizontal CRS'
        assert param['id'] == {'authority': 'EPSG', 'code': 1037}
        assert param['value'] == 4979

    def test_file_parameter(self):
        """Test: file names are written as string values."""
        conv = Conversion.create_from_ad_hoc_schema(
            None, "Geoid model", ["Geoid model file"], ["egm96_15.gtx"])
        assert _export(conv)['parameters'] == [
            {'type': 'ParameterValue', 'name': 'Geoid model file', 'value': 'egm96_15.gtx'}]


class TestExportToJson:
    """Tests for Conversion.export_to_json."""

    def test_compact(self):
        """Test: indent 0 gives a single line."""
        text = create_utm(None, 31, True).export_to_json(JSONFormatter(indent=0))
        assert '\n' not in text
        assert text.startswith('{"type": "Conversion", "name": "UTM zone 31N"')

    def test_indented(self, monkeypatch):
        """Test: the default indentation comes from the environment."""
        monkeypatch.setenv('GEOCONV_JSON_INDENT', '4')
        text = create_utm(None, 31, True).export_to_json()
        assert text.split('\n')[1] == '    "type": "Conversion",'
        assert json.loads(text)['name'] == 'UTM zone 31N'
