"""Tests for PwvdRequest, PwvdParameters and DistributionResult."""

from __future__ import annotations

import dataclasses
import json

import numpy as np
import pytest

from pwvd_analyzer.analysis.distribution import pwvd
from pwvd_analyzer.models.parameters import INTERP_MARGIN, PwvdParameters, PwvdRequest


# -----------------------------------------------------------------------
# PwvdRequest
# -----------------------------------------------------------------------


def test_request_defaults() -> None:
    r = PwvdRequest(window_length=16, time_step=2, poly_order=4)
    assert r.transform_length is None
    assert r.analytic is False
    assert r.workers is None


def test_request_is_frozen() -> None:
    r = PwvdRequest(window_length=16, time_step=2, poly_order=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.window_length = 8  # type: ignore[misc]


def test_request_replace_overrides_one_field() -> None:
    r = PwvdRequest(window_length=16, time_step=2, poly_order=4)
    r2 = dataclasses.replace(r, transform_length=64)
    assert r2.transform_length == 64
    assert r2.window_length == 16
    assert r.transform_length is None


def test_request_dict_round_trip_through_json() -> None:
    r = PwvdRequest(window_length=16, time_step=2, poly_order=4, transform_length=32, analytic=True, workers=3)
    d = json.loads(json.dumps(r.to_dict()))
    assert PwvdRequest.from_dict(d) == r


def test_request_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(TypeError):
        PwvdRequest.from_dict({"window_length": 8, "time_step": 1, "poly_order": 1, "colour": "red"})


def test_request_normalize() -> None:
    p = PwvdRequest(window_length=12, time_step=3, poly_order=3).normalize(100)
    assert isinstance(p, PwvdParameters)
    assert (p.window_length, p.time_step, p.poly_order, p.radix_length) == (12, 3, 4, 16)
    assert p.instant_count == 34


# -----------------------------------------------------------------------
# PwvdParameters
# -----------------------------------------------------------------------


def test_parameters_derived_quantities() -> None:
    p = PwvdRequest(window_length=15, time_step=4, poly_order=2, transform_length=40).normalize(30)
    assert p.half_window == 7
    assert p.reach == 15 + INTERP_MARGIN
    assert p.n_freq == 32
    assert p.shape == (32, 8)
    assert list(p.instants()) == [0, 4, 8, 12, 16, 20, 24, 28]


def test_parameters_to_dict_is_json_ready() -> None:
    with pytest.warns(UserWarning):
        p = PwvdRequest(window_length=40, time_step=1, poly_order=1).normalize(20)
    d = p.to_dict()
    assert isinstance(d["warnings"], list)
    assert len(d["warnings"]) == 1
    assert d["window_length"] == 20
    json.dumps(d)


# -----------------------------------------------------------------------
# DistributionResult
# -----------------------------------------------------------------------


def test_result_axes() -> None:
    res = pwvd(np.cos(0.4 * np.arange(20)), 8, 5, 1)
    np.testing.assert_allclose(res.frequency_axis(), [0.0, 0.125, 0.25, 0.375])
    assert res.frequency_axis()[-1] < 0.5
    np.testing.assert_allclose(res.frequency_axis(fs=1000.0), [0.0, 125.0, 250.0, 375.0])
    np.testing.assert_allclose(res.time_axis(), [0, 5, 10, 15])
    np.testing.assert_allclose(res.time_axis(fs=10.0), [0.0, 0.5, 1.0, 1.5])


def test_result_to_frame() -> None:
    res = pwvd(np.cos(0.4 * np.arange(20)), 8, 5, 1)
    df = res.to_frame(fs=2.0)
    assert df.shape == res.shape
    assert df.index.name == "frequency"
    assert df.columns.name == "time"
    np.testing.assert_allclose(df.columns.to_numpy(), [0.0, 2.5, 5.0, 7.5])
    np.testing.assert_array_equal(df.to_numpy(), res.matrix)


def test_result_to_long_frame_is_time_major() -> None:
    res = pwvd(np.cos(0.4 * np.arange(20)), 8, 5, 1)
    long = res.to_long_frame()
    assert list(long.columns) == ["time", "frequency", "value"]
    assert len(long) == res.matrix.size
    # first n_freq rows belong to the first instant
    first = long.iloc[: res.params.n_freq]
    assert (first["time"] == 0.0).all()
    np.testing.assert_array_equal(first["value"].to_numpy(), res.matrix[:, 0])
    row = long.iloc[res.params.n_freq + 2]
    assert row["time"] == 5.0
    assert row["frequency"] == pytest.approx(2 / 8)
    assert row["value"] == res.matrix[2, 1]
