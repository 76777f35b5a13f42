"""Numerical helpers shared with the projection engine."""

from geoconv.projections.auxiliary import msfn, tsfn

__all__ = ['msfn', 'tsfn']
