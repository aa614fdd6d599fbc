"""PWVD engine.

Pipeline per analysis instant::

    extract_lag_window -> build_kernel -> project_kernel -> one matrix column

:func:`normalize_parameters` runs once before the loop and
:func:`assemble` owns the output matrix.
"""

from .normalize import as_signal_vector, normalize_parameters
from .lag_window import extract_lag_window
from .kernel import build_kernel
from .spectral import full_spectrum, lag_plan, project_kernel
from .distribution import assemble, distribution_column, pwvd, pwvd_from_request, worker_count

__all__ = [
    "as_signal_vector",
    "normalize_parameters",
    "extract_lag_window",
    "build_kernel",
    "full_spectrum",
    "lag_plan",
    "project_kernel",
    "assemble",
    "distribution_column",
    "pwvd",
    "pwvd_from_request",
    "worker_count",
]
