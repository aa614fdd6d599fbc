"""Polynomial Wigner-Ville distribution: per-instant pipeline and matrix assembly.

For each analysis instant ``t = 0, time_step, 2*time_step, ...``:

1) extract the zero-padded lag window around ``t``,
2) build the sixth-order polynomial kernel (dyadic interpolation of order
   ``poly_order``),
3) FFT to ``radix_length`` bins and keep the real part of the non-negative
   half,
4) store it as column ``t // time_step`` of the output matrix.

Instants are independent: :func:`distribution_column` is a pure function of
``(signal, params, instant_index)``, which is what the threaded path maps
over.  Either the full matrix is returned or an exception propagates; a
partially filled matrix is never returned.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Optional

import numpy as np
from scipy.signal import hilbert

from pwvd_analyzer.analysis.kernel import build_kernel
from pwvd_analyzer.analysis.lag_window import extract_lag_window
from pwvd_analyzer.analysis.normalize import as_signal_vector, normalize_parameters
from pwvd_analyzer.analysis.spectral import project_kernel
from pwvd_analyzer.errors import AllocationFailure, InvalidParameterError
from pwvd_analyzer.models.parameters import PwvdParameters, PwvdRequest
from pwvd_analyzer.models.results import DistributionResult

logger = logging.getLogger(__name__)


def prepare_signal(signal: Any, *, analytic: bool = False) -> np.ndarray:
    """Validate the signal and optionally replace it by its analytic associate."""
    x = as_signal_vector(signal)
    if not analytic:
        return x
    if np.iscomplexobj(x):
        raise InvalidParameterError(
            "analytic=True requires a real-valued signal; the input is already complex",
            label="analytic",
        )
    z = np.asarray(hilbert(x), dtype=np.complex128)
    z.setflags(write=False)
    return z


def worker_count(workers: Any) -> int:
    """Thread count for the per-instant loop; ``None`` means serial."""
    if workers is None:
        return 1
    if isinstance(workers, (bool, np.bool_)) or not isinstance(workers, (int, np.integer)):
        raise InvalidParameterError(f"workers must be an integer or None, got {workers!r}", label="workers")
    if workers < 1:
        raise InvalidParameterError(f"workers must be >= 1, got {workers}", label="workers")
    return int(workers)


def distribution_column(signal: np.ndarray, params: PwvdParameters, instant_index: int) -> np.ndarray:
    """Half-spectrum of one analysis instant.

    Parameters
    ----------
    signal:
        Prepared 1D signal of length ``params.signal_length``.
    params:
        Normalized parameters.
    instant_index:
        Column index in ``[0, params.instant_count)``; the instant is
        ``instant_index * params.time_step``.
    """
    j = int(instant_index)
    if not (0 <= j < params.instant_count):
        raise ValueError(f"instant_index must be in [0, {params.instant_count - 1}], got {j}")

    segment = extract_lag_window(signal, j * params.time_step, params.reach)
    kernel = build_kernel(segment, params)
    return project_kernel(kernel, params)


def assemble(signal: np.ndarray, params: PwvdParameters, *, workers: Optional[int] = None) -> np.ndarray:
    """Compute every column and return the ``(n_freq, instant_count)`` matrix.

    With ``workers`` > 1 the columns are computed on a thread pool.  Each task
    returns its own column; only this function writes into the matrix.

    Raises
    ------
    AllocationFailure
        The output matrix cannot be allocated.
    """
    x = np.asarray(signal)
    if x.ndim != 1 or x.size != params.signal_length:
        raise ValueError(f"signal must be 1D of length {params.signal_length}, got shape {x.shape}")
    n_workers = worker_count(workers)

    try:
        out = np.zeros(params.shape, dtype=np.float64)
    except MemoryError as exc:
        raise AllocationFailure(
            f"Memory allocation failed for a {params.shape[0]}x{params.shape[1]} distribution",
            label="result",
        ) from exc

    logger.debug(
        "assembling PWVD: %d instants x %d bins, %d worker(s)", params.instant_count, params.n_freq, n_workers
    )

    column = partial(distribution_column, x, params)
    if n_workers == 1:
        for j in range(params.instant_count):
            out[:, j] = column(j)
    else:
        with ThreadPoolExecutor(max_workers=n_workers) as pool:
            for j, col in enumerate(pool.map(column, range(params.instant_count))):
                out[:, j] = col
    return out


def pwvd(
    signal: Any,
    window_length: Any,
    time_step: Any,
    poly_order: Any,
    transform_length: Any = None,
    *,
    analytic: bool = False,
    workers: Optional[int] = None,
) -> DistributionResult:
    """Polynomial Wigner-Ville distribution of a 1D signal.

    Parameters
    ----------
    signal:
        Real or complex 1D sequence of length >= 2.
    window_length:
        Lag-window length; clamped (with a warning) to the signal length.
    time_step:
        Stride between analysed instants, ``1 <= time_step <= len(signal)``.
    poly_order:
        Interpolation order, rounded up to a power of two.
    transform_length:
        FFT length request; defaults to ``window_length`` and is rounded up to
        a power of two.
    analytic:
        Analyse the analytic associate of a real signal.
    workers:
        Thread count for the per-instant loop.

    Returns
    -------
    DistributionResult
        Matrix of shape ``(radix_length // 2, ceil(len(signal) / time_step))``.
    """
    worker_count(workers)
    x = prepare_signal(signal, analytic=analytic)
    params = normalize_parameters(x.size, window_length, time_step, poly_order, transform_length)
    matrix = assemble(x, params, workers=workers)
    return DistributionResult(matrix=matrix, params=params, analytic=bool(analytic))


def pwvd_from_request(signal: Any, request: PwvdRequest) -> DistributionResult:
    """Run :func:`pwvd` with the settings of a :class:`PwvdRequest`."""
    return pwvd(
        signal,
        request.window_length,
        request.time_step,
        request.poly_order,
        request.transform_length,
        analytic=request.analytic,
        workers=request.workers,
    )
