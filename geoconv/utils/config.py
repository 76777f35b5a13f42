"""Environment driven defaults for the geoconv formatters.

Every function takes an explicit value that wins over the environment. When
the value is None the corresponding environment variable is consulted, and
an unknown value falls back to the built-in default with a warning.

Usage:
    from geoconv.utils.config import get_wkt_convention
    convention = get_wkt_convention()  # 'WKT2_2019' unless overridden

Environment Variables:
    GEOCONV_WKT_CONVENTION: WKT2_2019, WKT1_GDAL or WKT1_ESRI
    GEOCONV_WKT_MULTILINE: Set to "1" for indented WKT output
    GEOCONV_PROJ_CONVENTION: PROJ_5 or PROJ_4
    GEOCONV_USE_APPROX_TMERC: Set to "1" to emit +approx on tmerc/utm steps
    GEOCONV_JSON_INDENT: Indentation width of JSON output (0 for compact)
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

WKT_CONVENTIONS = ('WKT2_2019', 'WKT1_GDAL', 'WKT1_ESRI')
PROJ_CONVENTIONS = ('PROJ_5', 'PROJ_4')

DEFAULT_WKT_CONVENTION = 'WKT2_2019'
DEFAULT_PROJ_CONVENTION = 'PROJ_5'
DEFAULT_JSON_INDENT = 2


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in ('1', 'true', 'yes')


def _choice(value: Optional[str], env_name: str, choices, default: str) -> str:
    if value is None:
        value = os.environ.get(env_name, '').strip()
        if not value:
            return default
        source = env_name
    else:
        source = 'argument'
    value = value.upper()
    if value not in choices:
        logger.warning(
            "Ignoring %s=%r (expected one of %s), using %s",
            source, value, ', '.join(choices), default
        )
        return default
    return value


def get_wkt_convention(convention: Optional[str] = None) -> str:
    """Return the WKT convention to use.

    Parameters
    ----------
    convention : str, optional
        Explicit convention. If None, respects GEOCONV_WKT_CONVENTION.

    Returns
    -------
    str
        One of 'WKT2_2019', 'WKT1_GDAL' or 'WKT1_ESRI'.
    """
    return _choice(convention, 'GEOCONV_WKT_CONVENTION', WKT_CONVENTIONS,
                   DEFAULT_WKT_CONVENTION)


def get_proj_convention(convention: Optional[str] = None) -> str:
    """Return the PROJ string convention, 'PROJ_5' or 'PROJ_4'."""
    return _choice(convention, 'GEOCONV_PROJ_CONVENTION', PROJ_CONVENTIONS,
                   DEFAULT_PROJ_CONVENTION)


def is_wkt_multiline(multiline: Optional[bool] = None) -> bool:
    """Whether WKT output should be indented over several lines."""
    if multiline is not None:
        return multiline
    return _env_flag('GEOCONV_WKT_MULTILINE')


def use_approx_tmerc(approx: Optional[bool] = None) -> bool:
    """Whether tmerc/utm steps should carry the +approx flag."""
    if approx is not None:
        return approx
    return _env_flag('GEOCONV_USE_APPROX_TMERC')


def get_json_indent(indent: Optional[int] = None) -> int:
    """Return the JSON indentation width (0 means compact output)."""
    if indent is not None:
        return indent
    raw = os.environ.get('GEOCONV_JSON_INDENT', '').strip()
    if not raw:
        return DEFAULT_JSON_INDENT
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring GEOCONV_JSON_INDENT=%r, using %d", raw,
                       DEFAULT_JSON_INDENT)
        return DEFAULT_JSON_INDENT
    return max(value, 0)
