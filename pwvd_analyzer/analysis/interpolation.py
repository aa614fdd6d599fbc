"""Fractional-sample evaluation by dyadic refinement.

The polynomial kernel needs the signal at non-integer offsets.  They are
obtained in two stages:

1. ``log2(factor)`` passes of the four-point Deslauriers-Dubuc midpoint rule

       x[k + 1/2] = (-x[k-1] + 9 x[k] + 9 x[k+1] - x[k+2]) / 16

   Each pass keeps the existing samples and inserts one midpoint between each
   pair, so after the last pass the grid spacing is ``1/factor``.  The rule
   reproduces cubic polynomials exactly.  Samples beyond the ends of the input
   are taken as zero.
2. Linear interpolation between neighbouring refined samples for whatever
   fraction remains.

``factor`` must therefore be a power of two.
"""

from __future__ import annotations

import numpy as np


def _is_power_of_two(n: int) -> bool:
    return n >= 1 and (n & (n - 1)) == 0


def refine_midpoints(x: np.ndarray) -> np.ndarray:
    """One refinement pass: length ``L`` -> ``2L - 1``."""
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"Expected 1D array, got shape {x.shape}")
    L = x.size
    if L < 2:
        return x.copy()

    xp = np.pad(x, 2)  # xp[j] == x[j - 2], zeros beyond the ends
    mid = (-xp[1:L] + 9.0 * xp[2:L + 1] + 9.0 * xp[3:L + 2] - xp[4:L + 3]) / 16.0

    y = np.empty(2 * L - 1, dtype=np.result_type(x.dtype, np.float64))
    y[0::2] = x
    y[1::2] = mid
    return y


def refine_dyadic(x: np.ndarray, factor: int) -> np.ndarray:
    """Refine ``x`` to a grid of spacing ``1/factor``.

    The sample ``x[k]`` ends up at index ``k * factor`` of the result.
    """
    factor = int(factor)
    if not _is_power_of_two(factor):
        raise ValueError(f"factor must be a power of two >= 1, got {factor}")

    y = np.asarray(x)
    for _ in range(factor.bit_length() - 1):
        y = refine_midpoints(y)
    return y


def sample_at(refined: np.ndarray, center: int, offsets: np.ndarray, factor: int) -> np.ndarray:
    """Evaluate a refined sequence at fractional offsets from ``center``.

    Parameters
    ----------
    refined:
        Output of :func:`refine_dyadic`.
    center:
        Index of the reference sample in ``refined``.
    offsets:
        Offsets in units of the *original* sample spacing.
    factor:
        Refinement factor used to build ``refined``.

    Returns
    -------
    np.ndarray
        Linearly interpolated values; positions outside ``refined`` give zero.
    """
    y = np.asarray(refined)
    u = int(center) + np.asarray(offsets, dtype=np.float64) * float(factor)

    i0 = np.floor(u).astype(np.int64)
    frac = u - i0
    i1 = i0 + 1

    n = y.size
    ok0 = (i0 >= 0) & (i0 < n)
    ok1 = (i1 >= 0) & (i1 < n)
    y0 = np.where(ok0, y[np.clip(i0, 0, n - 1)], 0.0)
    y1 = np.where(ok1, y[np.clip(i1, 0, n - 1)], 0.0)

    return (1.0 - frac) * y0 + frac * y1
