from __future__ import annotations

import numpy as np
import pytest

from pwvd_analyzer.analysis.distribution import pwvd
from pwvd_analyzer.errors import ArityError, InvalidParameterError, InvalidShapeError, PwvdError
from pwvd_analyzer.gateway import GATEWAY_LABEL, pwvd6


def _signal() -> np.ndarray:
    return np.sin(0.3 * np.arange(32))


@pytest.mark.parametrize("params", [(), (8,), (8, 1)])
def test_not_enough_inputs(params) -> None:
    with pytest.raises(ArityError, match="Not enough input arguments") as ei:
        pwvd6(_signal(), *params)
    assert ei.value.label == GATEWAY_LABEL == "pwvd61"


def test_too_many_inputs() -> None:
    with pytest.raises(ArityError, match="Too many input arguments"):
        pwvd6(_signal(), 8, 1, 1, 16, 99)


def test_too_many_outputs() -> None:
    with pytest.raises(ArityError, match="Too many output arguments"):
        pwvd6(_signal(), 8, 1, 1, nargout=2)


def test_arity_error_is_type_error() -> None:
    with pytest.raises(TypeError):
        pwvd6(_signal())


@pytest.mark.parametrize("params", [(8, 2, 2), (8, 2, 2, 32)])
def test_valid_call_returns_engine_matrix(params) -> None:
    x = _signal()
    got = pwvd6(x, *params)
    assert isinstance(got, np.ndarray)
    np.testing.assert_array_equal(got, pwvd(x, *params).matrix)


def test_nargout_zero_still_returns_matrix() -> None:
    assert pwvd6(_signal(), 8, 1, 1, nargout=0).shape == (4, 32)


def test_engine_errors_pass_through_unchanged() -> None:
    with pytest.raises(InvalidParameterError) as ei:
        pwvd6(_signal(), 8, 0, 1)
    assert ei.value.label == "time_step"

    with pytest.raises(InvalidShapeError) as ei2:
        pwvd6(np.ones((3, 3)), 8, 1, 1)
    assert isinstance(ei2.value, PwvdError)
    assert ei2.value.label == "signal"
