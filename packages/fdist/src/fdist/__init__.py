"""
F-distribution variance.

Closed-form second central moment of F(d1, d2):
- variance: scalar, returns NaN outside d1 > 0, d2 > 4
- variance_array: numpy-broadcast version, elementwise identical
- variance_limit: finite limit as d1 -> inf
"""

__version__ = '0.1.0'

from fdist.variance import variance, variance_array, variance_limit

__all__ = ['variance', 'variance_array', 'variance_limit']
