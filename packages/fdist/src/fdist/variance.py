"""
Variance of the F-distribution.

For X ~ F(d1, d2):

    Var[X] = 2 d2² (d1 + d2 - 2) / ( d1 (d2 - 2)² (d2 - 4) )

defined for d1 > 0 and d2 > 4. Anything else returns NaN. There is no
exception channel for the domain: callers test the result with isnan.

Arithmetic runs in float64 with floating-point warnings silenced, so
inf and underflow behave per IEEE-754 (d1 = +inf gives inf/inf = NaN).
"""

import logging

import numpy as np
from numpy.typing import ArrayLike

from fdist.config import CONFIG

logger = logging.getLogger(__name__)

# Bound once at import; the domain policy is not adjustable per call
D1_LOWER = float(CONFIG['domain']['d1_lower'])
D2_LOWER = float(CONFIG['domain']['d2_lower'])


def _evaluate(d1, d2):
    """Closed form, shared by the scalar and array paths."""
    d2m2 = d2 - 2.0
    return 2.0 * d2 * d2 * (d1 + d2 - 2.0) / (d1 * (d2m2 * d2m2) * (d2 - 4.0))


def variance(d1: float, d2: float) -> float:
    """
    Variance of an F-distribution.

    Parameters
    ----------
    d1 : float
        Numerator degrees of freedom.
    d2 : float
        Denominator degrees of freedom.

    Returns
    -------
    float
        Var[X], or NaN if d1 <= 0, d2 <= 4, or either input is NaN.

    Examples
    --------
    >>> round(variance(3.0, 5.0), 3)
    11.111
    >>> round(variance(4.0, 12.0), 2)
    1.26
    >>> variance(2.0, 4.0)
    nan
    """
    d1 = np.float64(d1)
    d2 = np.float64(d2)

    if np.isnan(d1) or np.isnan(d2):
        return np.nan
    if d1 <= D1_LOWER:
        return np.nan
    if d2 <= D2_LOWER:
        return np.nan

    with np.errstate(all='ignore'):
        return float(_evaluate(d1, d2))


def variance_array(d1: ArrayLike, d2: ArrayLike) -> np.ndarray:
    """
    Vectorised variance over broadcast d1, d2.

    Elementwise identical to :func:`variance`, including NaN placement.
    Returns a float64 array of the broadcast shape (0-d for scalars).
    Raises ValueError if the shapes do not broadcast.
    """
    d1 = np.asarray(d1, dtype=np.float64)
    d2 = np.asarray(d2, dtype=np.float64)
    d1, d2 = np.broadcast_arrays(d1, d2)

    with np.errstate(all='ignore'):
        # NaN compares False, so NaN inputs fail `valid` on their own
        valid = (d1 > D1_LOWER) & (d2 > D2_LOWER)
        out = np.where(valid, _evaluate(d1, d2), np.nan)

    logger.debug(
        "f variance: %d elements, %d outside domain",
        out.size, int(out.size - np.count_nonzero(valid)),
    )
    return out


def variance_limit(d2: float) -> float:
    """Limit of the variance as d1 -> inf: 2 d2² / ((d2 - 2)² (d2 - 4))."""
    d2 = np.float64(d2)
    if np.isnan(d2) or d2 <= D2_LOWER:
        return np.nan
    with np.errstate(all='ignore'):
        d2m2 = d2 - 2.0
        return float(2.0 * d2 * d2 / (d2m2 * d2m2 * (d2 - 4.0)))
