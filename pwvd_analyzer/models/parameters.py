"""PWVD parameter sets.

Two frozen dataclasses describe the parameters of one computation:

- :class:`PwvdRequest` groups what the user asked for.  It can be
  overridden field-by-field via ``dataclasses.replace()`` and serialized
  to/from a dict for JSON provenance.
- :class:`PwvdParameters` is the normalized integer set produced by
  :func:`~pwvd_analyzer.analysis.normalize.normalize_parameters`.  Engine code
  only ever sees this one.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

# Half-width of the dyadic refinement stencil (four-point rule).
INTERP_MARGIN = 2


@dataclass(frozen=True)
class PwvdRequest:
    """Raw user configuration for one PWVD run.

    Required fields
    ---------------
    window_length : int
        Lag-window length in samples.
    time_step : int
        Stride between analysed instants.
    poly_order : int
        Interpolation order; rounded up to a power of two.

    Optional fields
    ---------------
    transform_length : int or None
        Requested FFT length.  ``None`` means "same as window_length".
    analytic : bool
        Replace a real signal by its analytic associate before analysis.
    workers : int or None
        Number of worker threads for the per-instant loop (``None`` or 1 is
        serial).
    """

    window_length: int
    time_step: int
    poly_order: int
    transform_length: Optional[int] = None

    analytic: bool = False
    workers: Optional[int] = None

    def normalize(self, signal_length: int) -> "PwvdParameters":
        """Validate this request against a signal length."""
        # Avoid circular import at module level
        from pwvd_analyzer.analysis.normalize import normalize_parameters

        return normalize_parameters(
            signal_length,
            self.window_length,
            self.time_step,
            self.poly_order,
            self.transform_length,
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> PwvdRequest:
        """Reconstruct from a dict (e.g. loaded from JSON).  Unknown keys are rejected."""
        d = dict(d)  # shallow copy
        return cls(**d)


@dataclass(frozen=True)
class PwvdParameters:
    """Normalized engine parameters.

    Attributes
    ----------
    signal_length:
        Number of samples in the analysed signal.
    window_length:
        Lag-window length after clamping to ``signal_length``.
    time_step:
        Stride between analysed instants.
    poly_order:
        Interpolation order, a power of two >= 1.
    transform_length:
        Requested FFT length after defaulting and raising to ``window_length``.
    radix_length, radix_order:
        ``radix_length = 2**radix_order`` is the smallest power of two
        >= ``transform_length``.
    instant_count:
        ``ceil(signal_length / time_step)``.
    warnings:
        Advisory messages produced during normalization.
    """

    signal_length: int
    window_length: int
    time_step: int
    poly_order: int
    transform_length: int
    radix_length: int
    radix_order: int
    instant_count: int

    warnings: Tuple[str, ...] = ()

    @property
    def half_window(self) -> int:
        """Largest lag magnitude used by the kernel."""
        return (self.window_length - 1) // 2

    @property
    def reach(self) -> int:
        """Sample offset extent extracted around each instant."""
        return self.window_length + INTERP_MARGIN

    @property
    def n_freq(self) -> int:
        return self.radix_length // 2

    @property
    def shape(self) -> Tuple[int, int]:
        """Output matrix shape ``(n_freq, instant_count)``."""
        return (self.n_freq, self.instant_count)

    def instants(self) -> range:
        """Sample indices of the analysed instants."""
        return range(0, self.instant_count * self.time_step, self.time_step)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["warnings"] = list(d["warnings"])
        return d
