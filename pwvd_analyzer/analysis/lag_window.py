from __future__ import annotations

import numpy as np


def extract_lag_window(signal: np.ndarray, instant: int, reach: int) -> np.ndarray:
    """Return the samples at offsets ``-reach..+reach`` around ``instant``.

    Parameters
    ----------
    signal:
        1D signal (real or complex).  Never modified.
    instant:
        Sample index of the analysis instant.
    reach:
        Offset extent; the result has ``2*reach + 1`` samples and index
        ``reach`` is the instant itself.

    Returns
    -------
    np.ndarray
        complex128 segment.  Offsets falling outside the signal are zero
        (zero padding, no wrap-around).  A real signal yields a zero
        imaginary channel.
    """
    x = np.asarray(signal)
    if x.ndim != 1:
        raise ValueError(f"Expected 1D signal, got shape {x.shape}")
    n = x.size
    t = int(instant)
    r = int(reach)
    if not (0 <= t < n):
        raise ValueError(f"instant must be in [0, {n - 1}], got {t}")
    if r < 0:
        raise ValueError(f"reach must be >= 0, got {r}")

    seg = np.zeros(2 * r + 1, dtype=np.complex128)

    lo = max(t - r, 0)
    hi = min(t + r, n - 1)
    seg[lo - (t - r): hi - (t - r) + 1] = x[lo: hi + 1]
    return seg
