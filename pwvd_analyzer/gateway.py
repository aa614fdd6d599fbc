"""Host-style calling convention for the PWVD engine.

``pwvd6(signal, window_length, time_step, poly_order[, fft_length], nargout=1)``
mirrors the positional interface of numerical-environment toolboxes: it only
checks the call arity, then hands over to :func:`pwvd_analyzer.analysis.pwvd`
(which performs all parameter validation) and returns the bare matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pwvd_analyzer.analysis.distribution import pwvd
from pwvd_analyzer.errors import ArityError

GATEWAY_LABEL = "pwvd61"

MIN_PARAMS = 3
MAX_PARAMS = 4


def pwvd6(signal: Any, *params: Any, nargout: int = 1) -> np.ndarray:
    """Compute the PWVD matrix from positional host arguments.

    Raises
    ------
    ArityError
        Fewer than 3 or more than 4 parameters after the signal, or more than
        one requested output.
    """
    if len(params) < MIN_PARAMS:
        raise ArityError("Not enough input arguments", label=GATEWAY_LABEL)
    if len(params) > MAX_PARAMS:
        raise ArityError("Too many input arguments", label=GATEWAY_LABEL)
    if int(nargout) > 1:
        raise ArityError("Too many output arguments", label=GATEWAY_LABEL)

    return pwvd(signal, *params).matrix
