"""Error and warning types raised by the PWVD engine.

Every engine error derives from :class:`PwvdError` and from the built-in
exception category it belongs to, so callers can catch either one.  Each
instance carries a short ``label`` naming the parameter (or stage) that
failed; the host adapter forwards it unchanged.
"""

from __future__ import annotations


class PwvdError(Exception):
    """Base class for all engine failures."""

    def __init__(self, message: str, *, label: str = "pwvd") -> None:
        super().__init__(message)
        self.label = label


class InvalidShapeError(PwvdError, ValueError):
    """The signal is not a one-dimensional sequence of length >= 2."""


class InvalidParameterError(PwvdError, ValueError):
    """A scalar parameter is missing, malformed or below its basic range."""


class ParameterOutOfRangeError(PwvdError, ValueError):
    """A well-formed parameter is inconsistent with another one."""


class TransformFailure(PwvdError, RuntimeError):
    """The spectral projection could not be computed."""


class AllocationFailure(PwvdError, MemoryError):
    """The output matrix could not be materialised."""


class ArityError(PwvdError, TypeError):
    """Wrong number of inputs or outputs at the host adapter."""


class WindowTruncatedWarning(UserWarning):
    """The lag window was longer than the signal and has been clamped."""


__all__ = [
    "PwvdError",
    "InvalidShapeError",
    "InvalidParameterError",
    "ParameterOutOfRangeError",
    "TransformFailure",
    "AllocationFailure",
    "ArityError",
    "WindowTruncatedWarning",
]
