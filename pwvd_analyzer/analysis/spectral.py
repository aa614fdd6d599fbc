"""Radix-2 spectral projection of PWVD kernel sequences.

Functions
---------
lag_plan
    Cached, read-only lag -> FFT index mapping for one ``(radix_length, half_window)``.
full_spectrum
    Complex FFT of a kernel sequence (diagnostics).
project_kernel
    Non-negative half of the spectrum, real part only.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np

from pwvd_analyzer.errors import TransformFailure
from pwvd_analyzer.models.parameters import PwvdParameters


def _is_power_of_two(n: int) -> bool:
    return n >= 1 and (n & (n - 1)) == 0


@lru_cache(maxsize=64)
def lag_plan(radix_length: int, half_window: int) -> Tuple[np.ndarray, np.ndarray]:
    """Lags ``-half_window..half_window`` and their positions in a length-``radix_length`` sequence.

    Negative lags wrap to the end of the sequence (``m -> radix_length + m``),
    the usual layout for Wigner-type kernels.  Both arrays are shared between
    calls and threads and are therefore flagged read-only.
    """
    R = int(radix_length)
    h = int(half_window)
    if not _is_power_of_two(R):
        raise ValueError(f"radix_length must be a power of two, got {R}")
    if h < 0 or 2 * h + 1 > R:
        raise ValueError(f"half_window={h} does not fit in radix_length={R}")

    lags = np.arange(-h, h + 1, dtype=np.int64)
    index = np.mod(lags, R)
    lags.setflags(write=False)
    index.setflags(write=False)
    return lags, index


def full_spectrum(kernel: np.ndarray) -> np.ndarray:
    """Complex FFT of a kernel sequence, bins ``0..len(kernel)-1``.

    Raises
    ------
    TransformFailure
        The transform could not be computed (length not a power of two, or out
        of memory).
    """
    k = np.asarray(kernel)
    if k.ndim != 1:
        raise TransformFailure(f"kernel must be 1D, got shape {k.shape}", label="transform")
    if not _is_power_of_two(k.size):
        raise TransformFailure(f"transform length must be a power of two, got {k.size}", label="transform")
    try:
        return np.fft.fft(k)
    except MemoryError as exc:
        raise TransformFailure(f"FFT of length {k.size} failed: out of memory", label="transform") from exc


def project_kernel(kernel: np.ndarray, params: PwvdParameters) -> np.ndarray:
    """Project one kernel sequence onto the frequency axis.

    Parameters
    ----------
    kernel:
        complex array of length ``params.radix_length``.
    params:
        Normalized parameters.

    Returns
    -------
    np.ndarray
        float64 array of length ``params.radix_length // 2``: the real part of
        bins ``0..radix_length/2 - 1``.  The imaginary part is dropped without
        inspection.
    """
    k = np.asarray(kernel)
    if k.shape != (params.radix_length,):
        raise ValueError(f"kernel must have shape ({params.radix_length},), got {k.shape}")
    spec = full_spectrum(k)
    return np.ascontiguousarray(spec[: params.n_freq].real, dtype=np.float64)
