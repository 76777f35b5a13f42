"""Auxiliary latitude functions of the projection engine.

Both follow Snyder (1987), "Map Projections: A Working Manual": ``msfn`` is
the ``m`` function (eq. 14-15) and ``tsfn`` the ``t`` function (eq. 15-9).
They accept scalars or numpy arrays.
"""

import numpy as np

from geoconv.utils.constants import HALF_PI


def msfn(phi, es):
    """
    Conformal latitude scale ``m = cos(phi) / sqrt(1 - e^2 sin^2(phi))``.

    Parameters
    ----------
    phi : float or array
        Latitude in radians
    es : float
        Squared eccentricity

    Returns
    -------
    float or array
    """
    sinphi = np.sin(phi)
    return np.cos(phi) / np.sqrt(1.0 - es * sinphi * sinphi)


def tsfn(phi, e):
    """
    Isometric latitude function ``t``.

    Parameters
    ----------
    phi : float or array
        Latitude in radians
    e : float
        Eccentricity (not squared)
    """
    sinphi = np.sin(phi)
    return np.tan(0.5 * (HALF_PI - phi)) / \
        np.power((1.0 - e * sinphi) / (1.0 + e * sinphi), 0.5 * e)
