"""Parameter normalization for the PWVD engine.

Turns a raw signal and the user's scalar parameters into a validated
:class:`~pwvd_analyzer.models.parameters.PwvdParameters`.  All checks run
before any computation, in the order window length, time step, polynomial
order, transform length.

Rounding rules
--------------
- ``poly_order`` is doubled from 1 until it reaches the request, so a request
  of 0 or 1 gives 1, 3 gives 4 and 5 gives 8.
- ``transform_length`` defaults to ``window_length``, is raised to it when
  smaller, and ``radix_length`` is the next power of two above it.
"""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from typing import Any, Optional, Tuple

import numpy as np

from pwvd_analyzer.errors import (
    InvalidParameterError,
    InvalidShapeError,
    ParameterOutOfRangeError,
    WindowTruncatedWarning,
)
from pwvd_analyzer.models.parameters import PwvdParameters

logger = logging.getLogger(__name__)


def as_signal_vector(signal: Any) -> np.ndarray:
    """Return ``signal`` as a read-only 1D float64 or complex128 array.

    Row and column vectors (shape ``(1, N)`` or ``(N, 1)``) are flattened.
    Anything with more than one non-singleton dimension, or fewer than two
    samples, raises :class:`InvalidShapeError`.
    """
    x = np.asarray(signal)
    if not np.issubdtype(x.dtype, np.number):
        raise InvalidShapeError(f"Input must be a numeric vector, got dtype {x.dtype}", label="signal")

    if x.ndim > 1:
        non_singleton = [d for d in x.shape if d != 1]
        if len(non_singleton) > 1:
            raise InvalidShapeError(f"Input must be a vector, got shape {x.shape}", label="signal")
        x = x.reshape(-1)
    elif x.ndim == 0:
        x = x.reshape(1)

    if x.size < 2:
        raise InvalidShapeError(f"Input must be a vector of length >= 2, got length {x.size}", label="signal")

    dtype = np.complex128 if np.iscomplexobj(x) else np.float64
    out = np.array(x, dtype=dtype, copy=True)
    out.setflags(write=False)
    return out


def _scalar(value: Any, *, name: str, what: str) -> int:
    """Validate a host-style scalar and truncate it toward zero."""
    if value is None:
        raise InvalidParameterError(f"{what} is missing", label=name)
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameterError(f"{what} must be a scalar, got {value!r}", label=name)

    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype == object:
        raise InvalidParameterError(f"{what} must be a scalar, got {value!r}", label=name)
    v = arr.reshape(()).item()
    if isinstance(v, complex) or not isinstance(v, numbers.Real):
        raise InvalidParameterError(f"{what} must be a real scalar, got {value!r}", label=name)
    if not math.isfinite(float(v)):
        raise InvalidParameterError(f"{what} must be finite, got {v!r}", label=name)
    return int(v)


def next_power_of_two(n: int) -> Tuple[int, int]:
    """Smallest power of two >= ``n`` (and its exponent), starting from 1."""
    order = 0
    r2 = 1
    while r2 < n:
        order += 1
        r2 <<= 1
    return r2, order


def normalize_parameters(
    signal_length: int,
    window_length: Any,
    time_step: Any,
    poly_order: Any,
    transform_length: Any = None,
) -> PwvdParameters:
    """Validate and round the user parameters.

    Parameters
    ----------
    signal_length:
        Number of samples in the signal (must be >= 2).
    window_length, time_step, poly_order:
        Required scalars.
    transform_length:
        Optional FFT length; ``None`` means "use window_length".

    Returns
    -------
    PwvdParameters

    Raises
    ------
    InvalidShapeError
        ``signal_length < 2``.
    InvalidParameterError
        Malformed scalar, ``window_length < 1``, ``time_step < 1`` or
        ``transform_length < 0``.
    ParameterOutOfRangeError
        ``time_step > signal_length``.

    A ``window_length`` above ``signal_length`` is clamped and reported through
    :class:`~pwvd_analyzer.errors.WindowTruncatedWarning`.
    """
    n = int(signal_length)
    if n < 2:
        raise InvalidShapeError(f"Input must be a vector of length >= 2, got length {n}", label="signal")

    notes = []

    wl = _scalar(window_length, name="window_length", what="Smoothing window length")
    if wl < 1:
        raise InvalidParameterError(f"Window length must be greater than zero, got {wl}", label="window_length")
    if wl > n:
        msg = f"Window length has been truncated to signal length ({wl} -> {n})"
        logger.warning(msg)
        warnings.warn(msg, WindowTruncatedWarning, stacklevel=2)
        notes.append(msg)
        wl = n

    ts = _scalar(time_step, name="time_step", what="Time resolution")
    if ts < 1:
        raise InvalidParameterError(f"Time resolution must be greater than zero, got {ts}", label="time_step")
    if ts > n:
        raise ParameterOutOfRangeError(
            f"Time resolution must be no greater than signal length ({ts} > {n})", label="time_step"
        )

    deg = _scalar(poly_order, name="poly_order", what="Interpolation degree")
    deg_r2, _ = next_power_of_two(deg)

    if transform_length is None:
        fl = wl
    else:
        fl = _scalar(transform_length, name="transform_length", what="FFT length")
    if fl < 0:
        raise InvalidParameterError(f"FFT length must be greater than zero, got {fl}", label="transform_length")
    if fl < wl:
        fl = wl

    radix_length, radix_order = next_power_of_two(fl)
    instant_count = int(math.ceil(n / ts))

    params = PwvdParameters(
        signal_length=n,
        window_length=wl,
        time_step=ts,
        poly_order=deg_r2,
        transform_length=fl,
        radix_length=radix_length,
        radix_order=radix_order,
        instant_count=instant_count,
        warnings=tuple(notes),
    )
    logger.debug(
        "normalized PWVD parameters: N=%d window=%d step=%d order=%d fft=%d radix=%d instants=%d",
        n, wl, ts, deg_r2, fl, radix_length, instant_count,
    )
    return params
