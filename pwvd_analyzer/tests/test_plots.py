from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from pwvd_analyzer.analysis.distribution import pwvd  # noqa: E402
from pwvd_analyzer.presentation.plots import plot_distribution, save_distribution_plot  # noqa: E402


def _result():
    return pwvd(np.cos(2.0 * np.pi * 0.1 * np.arange(48)), 16, 4, 2, analytic=True)


def test_plot_labels_in_samples() -> None:
    res = _result()
    fig, ax = plt.subplots()
    try:
        out = plot_distribution(res, ax)
        assert out is ax
        assert ax.get_xlabel() == "time [samples]"
        assert ax.get_ylabel() == "frequency [cycles/sample]"
        assert "window=16" in ax.get_title()
        assert len(ax.collections) == 1
    finally:
        plt.close(fig)


def test_plot_labels_with_sampling_frequency() -> None:
    res = _result()
    fig, ax = plt.subplots()
    try:
        plot_distribution(res, ax, fs=500.0, clip_negative=True, title="chirp")
        assert ax.get_xlabel() == "time [s]"
        assert ax.get_ylabel() == "frequency [Hz]"
        assert ax.get_title() == "chirp"
        mesh = ax.collections[0]
        assert np.asarray(mesh.get_array()).min() >= 0.0
    finally:
        plt.close(fig)


def test_save_plot_closes_figure(tmp_path) -> None:
    before = len(plt.get_fignums())
    out = save_distribution_plot(_result(), tmp_path / "tfd.png")
    assert out.exists()
    assert len(plt.get_fignums()) == before
