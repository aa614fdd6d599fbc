"""PWVD Analyzer -- polynomial Wigner-Ville time-frequency distributions.

This package provides tools for:
- Normalizing PWVD parameters (window, time step, interpolation order, FFT length)
- Building the sixth-order polynomial lag kernel with dyadic fractional-lag interpolation
- Projecting kernels onto a radix-2 frequency grid
- Assembling the time-frequency matrix, serially or on a thread pool
- Reading signals from disk, exporting results and plotting them

Key principles:
- The engine is a pure function of (signal, parameters): no state survives a call
- All validation happens before any computation
- A partially filled matrix is never returned

Main subpackages:
- analysis: Normalizer, lag-window extraction, kernel, spectral projection, assembly
- ingest: Signal file reader
- models: Parameter sets and result container
- presentation: Matplotlib rendering
- scripts: Command-line entry points
"""

from pwvd_analyzer.analysis import pwvd
from pwvd_analyzer.errors import (
    AllocationFailure,
    ArityError,
    InvalidParameterError,
    InvalidShapeError,
    ParameterOutOfRangeError,
    PwvdError,
    TransformFailure,
    WindowTruncatedWarning,
)
from pwvd_analyzer.models import DistributionResult, PwvdParameters, PwvdRequest

__all__ = [
    "pwvd",
    "DistributionResult",
    "PwvdParameters",
    "PwvdRequest",
    "PwvdError",
    "InvalidShapeError",
    "InvalidParameterError",
    "ParameterOutOfRangeError",
    "TransformFailure",
    "AllocationFailure",
    "ArityError",
    "WindowTruncatedWarning",
]
