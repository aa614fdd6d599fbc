"""Ingest package - signal file readers.

Readers return plain 1D numpy vectors; shape and parameter validation is left
to the engine.
"""

from .signal_reader import read_signal

__all__ = ["read_signal"]
