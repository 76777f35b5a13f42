"""
Command-Line Interface Tests
============================

Tests for geoconv-export.

Run with:
    pytest geoconv/tests/test_cli.py -v
"""

import argparse
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.errors import ConstructionError
from geoconv.model.method_spec import get_method
from geoconv.scripts.export_conversion import build_from_method, main, parse_param

MERCATOR_A_ARGS = ['--method', '9804', '--param', '8801=0', '--param', '8802=10',
                   '--param', '8805=0.9', '--param', '8806=0', '--param', '8807=0']


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('GEOCONV_WKT_CONVENTION', 'GEOCONV_WKT_MULTILINE', 'GEOCONV_PROJ_CONVENTION',
                 'GEOCONV_USE_APPROX_TMERC', 'GEOCONV_JSON_INDENT'):
        monkeypatch.delenv(name, raising=False)


class TestParseParam:
    """Tests for --param parsing."""

    @pytest.mark.parametrize("text,expected", [
        ('8801=45', (8801, 45.0, None)),
        ('False easting=1000:foot', ('False easting', 1000.0, 'foot')),
        ('8806=-5.5:m', (8806, -5.5, 'm')),
    ])
    def test_parse(self, text, expected):
        """Test: names, codes and optional units."""
        assert parse_param(text) == expected

    @pytest.mark.parametrize("text", ["8801", "8801=north", "=:foot"])
    def test_invalid(self, text):
        """Test: malformed values are argparse errors."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_param(text)


class TestBuildFromMethod:
    """Tests for build_from_method."""

    def test_default_units(self):
        """Test: unit-less values use degree / metre / unity."""
        conv = build_from_method(get_method(9804), [
            (8801, 0.0, None), (8802, 10.0, None), (8805, 0.9, None),
            ('False easting', 1000.0, 'foot'), (8807, 0.0, None)])
        assert conv.parameter_value_measure(8802).unit.name == 'degree'
        assert conv.parameter_value_measure(8805).unit.name == 'unity'
        assert conv.parameter_value_measure(8806).unit.name == 'foot'
        assert conv.parameter_value_measure(8807).unit.name == 'metre'

    def test_unknown_parameter(self):
        """Test: parameters outside the schema are rejected."""
        with pytest.raises(ConstructionError, match='no parameter'):
            build_from_method(get_method(9804), [(8823, 0.0, None)])

    def test_missing_parameter(self):
        """Test: every schema parameter must be given."""
        with pytest.raises(ConstructionError, match='Missing parameters'):
            build_from_method(get_method(9804), [(8801, 0.0, None)])


class TestMain:
    """Tests for the main entry point."""

    def test_utm_proj(self, capsys):
        """Test: UTM zone as a PROJ string."""
        assert main(['--utm', '31', '--format', 'proj']) == 0
        assert capsys.readouterr().out.strip() == '+proj=utm +zone=31'

    def test_inverse_south(self, capsys):
        """Test: inverse of a southern zone."""
        assert main(['--utm', '33', '--south', '--inverse', '--format', 'proj']) == 0
        assert capsys.readouterr().out.strip() == \
            '+proj=pipeline +step +inv +proj=utm +zone=33 +south'

    def test_default_wkt2(self, capsys):
        """Test: WKT2 is the default format."""
        assert main(['--utm', '31']) == 0
        out = capsys.readouterr().out
        assert out.startswith('CONVERSION["UTM zone 31N",')
        assert out.rstrip().endswith('ID["EPSG",16031]]')

    def test_multiline(self, capsys):
        """Test: --multiline indents nested nodes."""
        assert main(['--utm', '31', '--multiline']) == 0
        assert len(capsys.readouterr().out.strip().split('\n')) > 1

    def test_json(self, capsys):
        """Test: PROJJSON output parses back."""
        assert main(['--utm', '31', '--format', 'json']) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc['name'] == 'UTM zone 31N'
        assert doc['id'] == {'authority': 'EPSG', 'code': 16031}

    def test_convert_to(self, capsys):
        """Test: Mercator A re-expressed as B in ESRI WKT."""
        assert main(MERCATOR_A_ARGS + ['--convert-to', '9805', '--format', 'wkt1-esri']) == 0
        out = capsys.readouterr().out
        assert out.startswith('PROJECTION["Mercator"]')
        assert 'PARAMETER["Central_Meridian",10]' in out
        assert 'Standard_Parallel_1' in out

    def test_convert_to_impossible(self, capsys):
        """Test: an unsupported target method is an error."""
        assert main(MERCATOR_A_ARGS + ['--convert-to', '9802']) == 1
        assert "cannot express 'Mercator (variant A)'" in capsys.readouterr().err

    def test_unknown_method(self, capsys):
        """Test: unknown methods are reported on stderr."""
        assert main(['--method', 'Nonexistent projection']) == 1
        assert capsys.readouterr().err.startswith('Error:')

    def test_missing_param(self, capsys):
        """Test: incomplete parameter sets are reported on stderr."""
        assert main(['--method', '9804', '--param', '8801=0']) == 1
        assert 'Missing parameters' in capsys.readouterr().err

    def test_invalid_zone(self, capsys):
        """Test: zones outside 1..60 are reported on stderr."""
        assert main(['--utm', '61']) == 1
        assert capsys.readouterr().err.startswith('Error:')

    def test_source_required(self):
        """Test: --utm or --method is required."""
        with pytest.raises(SystemExit):
            main(['--format', 'proj'])
