"""Shared fixtures for the geoconv test suite.

Conversions only keep weak references to their CRS endpoints, so the CRS
objects are session fixtures: they stay alive for the whole run.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geoconv.model.crs import (
    CLARKE_1866,
    SPHERE_6378137,
    WGS84,
    CompoundCRS,
    GeodeticCRS,
    ProjectedCRS,
    VerticalCRS,
)
from geoconv.model.units import FOOT, METRE, US_FOOT


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def wgs84_ellipsoid():
    return WGS84


@pytest.fixture(scope="session")
def wgs84_geographic():
    """EPSG:4326, latitude first, degrees."""
    return GeodeticCRS("WGS 84", WGS84, code=4326, datum_proj_name="WGS84")


@pytest.fixture(scope="session")
def wgs84_geocentric():
    """EPSG:4978."""
    return GeodeticCRS("WGS 84", WGS84, code=4978, geocentric=True)


@pytest.fixture(scope="session")
def wgs84_planetocentric():
    return GeodeticCRS("WGS 84 (geocentric latitude)", WGS84,
                       spherical_planetocentric=True)


@pytest.fixture(scope="session")
def nad27_geographic():
    """EPSG:4267 on Clarke 1866."""
    return GeodeticCRS("NAD27", CLARKE_1866, code=4267, datum_proj_name="NAD27")


@pytest.fixture(scope="session")
def sphere_geographic():
    return GeodeticCRS("Unknown based on sphere", SPHERE_6378137, lat_first=False)


@pytest.fixture(scope="session")
def utm31n_crs(wgs84_geographic):
    """EPSG:32631."""
    return ProjectedCRS("WGS 84 / UTM zone 31N", wgs84_geographic, code=32631)


@pytest.fixture(scope="session")
def utm31n_feet_crs(wgs84_geographic):
    return ProjectedCRS("WGS 84 / UTM zone 31N (ft)", wgs84_geographic,
                        linear_unit=FOOT)


@pytest.fixture(scope="session")
def westing_southing_crs(wgs84_geographic):
    return ProjectedCRS("Westing/southing", wgs84_geographic,
                        axis_directions=("west", "south"))


@pytest.fixture(scope="session")
def height_metre_crs():
    return VerticalCRS("height (m)", unit=METRE)


@pytest.fixture(scope="session")
def height_us_foot_crs():
    return VerticalCRS("height (ftUS)", unit=US_FOOT)


@pytest.fixture(scope="session")
def compound_utm_height_crs(utm31n_crs, height_metre_crs):
    return CompoundCRS("UTM 31N + height", [utm31n_crs, height_metre_crs])
