"""Sixth-order polynomial Wigner-Ville kernel.

For an analysis instant ``t`` and an integer lag ``m`` the kernel is

    K(t, m) = [z(t + a m) z*(t - a m)]^2  z*(t + b m) z(t - b m)

The coefficients satisfy

    2a - b = 1/2      (the first-order phase term is m phi'(t))
    2a^3 = b^3        (the cubic phase term cancels)

which gives ``a = 1 / (2 * (2 - 2**(1/3))) ~ 0.675`` and
``b = 2**(1/3) * a ~ 0.85``, the coefficients of
B. Boashash and P. O'Shea, "Polynomial Wigner-Ville distributions and their
relationship to time-varying higher order spectra", IEEE Trans. Signal
Processing 42(1), 1994.

For a signal whose phase is a polynomial of degree <= 3 the kernel phase is
``m phi'(t)``, so the distribution concentrates along the instantaneous
frequency and FFT bin ``k`` of ``radix_length`` is ``k / radix_length``
cycles/sample: the non-negative half spans 0 up to Nyquist.
``K(t, -m) = conj(K(t, m))``, hence the spectrum is real.
"""

from __future__ import annotations

import numpy as np

from pwvd_analyzer.analysis.interpolation import refine_dyadic, sample_at
from pwvd_analyzer.analysis.spectral import lag_plan
from pwvd_analyzer.models.parameters import PwvdParameters

_CBRT2 = 2.0 ** (1.0 / 3.0)
COEFF_A = 0.5 / (2.0 - _CBRT2)
COEFF_B = _CBRT2 * COEFF_A


def build_kernel(segment: np.ndarray, params: PwvdParameters) -> np.ndarray:
    """Build the kernel sequence for one instant.

    Parameters
    ----------
    segment:
        Output of :func:`~pwvd_analyzer.analysis.lag_window.extract_lag_window`
        with ``reach = params.reach``; the instant sits at index ``params.reach``.
    params:
        Normalized parameters.

    Returns
    -------
    np.ndarray
        complex128 array of length ``params.radix_length``.  Lag ``m`` is stored
        at index ``m mod radix_length``; lags with ``|m| > params.half_window``
        are zero.
    """
    seg = np.asarray(segment, dtype=np.complex128)
    if seg.ndim != 1 or seg.size != 2 * params.reach + 1:
        raise ValueError(f"segment must be 1D of length {2 * params.reach + 1}, got shape {seg.shape}")

    factor = params.poly_order
    refined = refine_dyadic(seg, factor)
    center = params.reach * factor

    lags, index = lag_plan(params.radix_length, params.half_window)
    m = lags.astype(np.float64)

    za_fwd = sample_at(refined, center, COEFF_A * m, factor)
    za_bwd = sample_at(refined, center, -(COEFF_A * m), factor)
    zb_fwd = sample_at(refined, center, COEFF_B * m, factor)
    zb_bwd = sample_at(refined, center, -(COEFF_B * m), factor)

    kernel = np.zeros(params.radix_length, dtype=np.complex128)
    pair = za_fwd * np.conj(za_bwd)
    kernel[index] = pair * pair * np.conj(zb_fwd) * zb_bwd
    return kernel
