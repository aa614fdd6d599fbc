"""Matplotlib rendering of time-frequency distributions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from pwvd_analyzer.models.results import DistributionResult


def _pyplot():
    """Import pyplot lazily (backend must already be configured)."""
    import matplotlib.pyplot as plt

    return plt


def plot_distribution(
    result: DistributionResult,
    ax=None,
    *,
    fs: float = 1.0,
    cmap: str = "viridis",
    clip_negative: bool = False,
    title: Optional[str] = None,
):
    """Draw the distribution matrix as a time-frequency image.

    Parameters
    ----------
    result : DistributionResult
    ax : matplotlib Axes, optional
        Created on a new figure when omitted.
    fs : float
        Sampling frequency used to label both axes.
    clip_negative : bool
        Show negative values (interference terms) as zero.

    Returns
    -------
    matplotlib Axes
    """
    if ax is None:
        fig = _pyplot().figure(figsize=(8.0, 4.8))
        ax = fig.add_subplot(1, 1, 1)

    data = np.asarray(result.matrix)
    if clip_negative:
        data = np.clip(data, 0.0, None)

    t = result.time_axis(fs)
    f = result.frequency_axis(fs)
    if data.size:
        ax.pcolormesh(t, f, data, shading="nearest", cmap=cmap)
    ax.set_xlabel("time [s]" if fs != 1.0 else "time [samples]")
    ax.set_ylabel("frequency [Hz]" if fs != 1.0 else "frequency [cycles/sample]")
    p = result.params
    ax.set_title(title or f"PWVD (window={p.window_length}, order={p.poly_order}, fft={p.radix_length})")
    return ax


def save_distribution_plot(result: DistributionResult, path: str | Path, *, fs: float = 1.0, dpi: int = 120) -> Path:
    """Render ``result`` to an image file and close the figure."""
    plt = _pyplot()
    fig = plt.figure(figsize=(8.0, 4.8))
    try:
        ax = fig.add_subplot(1, 1, 1)
        plot_distribution(result, ax, fs=fs)
        out = Path(path)
        fig.savefig(out, dpi=dpi)
    finally:
        plt.close(fig)
    return out
