from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from pwvd_analyzer.models.parameters import PwvdParameters


@dataclass(frozen=True)
class DistributionResult:
    """Container for one computed time-frequency distribution.

    Attributes
    ----------
    matrix:
        Real distribution of shape ``(radix_length // 2, instant_count)``.
        Row ``k`` is frequency ``k / radix_length`` cycles/sample (row 0 is
        zero frequency, the rows stop just below Nyquist), column ``j`` is
        the instant ``j * time_step``.
    params:
        The normalized parameters the matrix was computed with.
    analytic:
        Whether the signal was replaced by its analytic associate.
    """

    matrix: np.ndarray
    params: PwvdParameters
    analytic: bool = False

    @property
    def shape(self) -> Tuple[int, int]:
        return tuple(self.matrix.shape)  # type: ignore[return-value]

    @property
    def warnings(self) -> Tuple[str, ...]:
        return self.params.warnings

    def frequency_axis(self, fs: float = 1.0) -> np.ndarray:
        """Frequency of each row, ``k * fs / radix_length``; the last row is below ``fs / 2``."""
        k = np.arange(self.params.n_freq, dtype=np.float64)
        return k * float(fs) / self.params.radix_length

    def time_axis(self, fs: float = 1.0) -> np.ndarray:
        """Time of each column, ``instant / fs``."""
        t = np.asarray(self.params.instants(), dtype=np.float64)
        return t / float(fs)

    def to_frame(self, fs: float = 1.0) -> pd.DataFrame:
        """Matrix as a DataFrame indexed by frequency, one column per instant."""
        return pd.DataFrame(
            self.matrix,
            index=pd.Index(self.frequency_axis(fs), name="frequency"),
            columns=pd.Index(self.time_axis(fs), name="time"),
        )

    def to_long_frame(self, fs: float = 1.0) -> pd.DataFrame:
        """One row per (time, frequency) cell, ordered by time then frequency."""
        f = self.frequency_axis(fs)
        t = self.time_axis(fs)
        tt, ff = np.meshgrid(t, f, indexing="ij")
        return pd.DataFrame(
            {
                "time": tt.ravel(),
                "frequency": ff.ravel(),
                "value": self.matrix.T.ravel(),
            }
        )
