"""geoconv utilities module."""

from geoconv.utils.config import (
    get_wkt_convention,
    get_proj_convention,
    is_wkt_multiline,
    use_approx_tmerc,
    get_json_indent,
)

__all__ = [
    'get_wkt_convention',
    'get_proj_convention',
    'is_wkt_multiline',
    'use_approx_tmerc',
    'get_json_indent',
]
