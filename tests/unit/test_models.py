"""
Tests for response decoding and result types.
"""

import warnings

import pytest

from radiothermostat.exceptions import MalformedResponseError
from radiothermostat.models.responses import (
    LockState,
    TargetTemperatures,
    ThermostatState,
    decode_response,
)
from radiothermostat.models.result import Acknowledged, Success, TransportFailure


def test_decode_minimal_state():
    """Test that tmode alone is enough for a ThermostatState."""
    state = decode_response(ThermostatState, "/tstat", {"tmode": 3})

    assert state.tmode == 3
    assert state.temp is None
    assert state.hold is None


def test_decode_rejects_non_object():
    """Test that a JSON array body is malformed."""
    with pytest.raises(MalformedResponseError) as exc_info:
        decode_response(LockState, "/tstat/lock", [0])

    assert exc_info.value.path == "/tstat/lock"
    assert exc_info.value.data == [0]
    assert "list" in exc_info.value.detail


def test_decode_rejects_wrong_type():
    """Test that a non-numeric tmode is malformed."""
    with pytest.raises(MalformedResponseError) as exc_info:
        decode_response(ThermostatState, "/tstat", {"tmode": "heat"})

    assert "tmode" in exc_info.value.detail


def test_target_temperatures_needs_one_value():
    """Test that TargetTemperatures requires at least one set point."""
    with pytest.raises(MalformedResponseError):
        decode_response(TargetTemperatures, "/tstat/ttemp", {"unrelated": 1})

    targets = decode_response(TargetTemperatures, "/tstat/ttemp", {"t_heat": 65})
    assert targets.t_heat == 65
    assert targets.t_cool is None


def test_malformed_error_is_value_error():
    """Test that MalformedResponseError can be caught as ValueError."""
    with pytest.raises(ValueError):
        decode_response(LockState, "/tstat/lock", {})


def test_result_truthiness():
    """Test that only successful results are truthy."""
    assert Success({"tmode": 0})
    assert Success(None)
    assert Acknowledged(True)
    assert not Acknowledged(False)
    assert not TransportFailure("Connection error: refused")


def test_result_ok():
    """Test the ok property on every variant."""
    assert Success([]).ok is True
    assert Acknowledged(True).ok is True
    assert Acknowledged(False).ok is False
    assert TransportFailure("500 response: Internal Server Error", 500).ok is False


def test_not_acknowledged_differs_from_failure():
    """Test that Acknowledged(False) and TransportFailure are distinguishable."""
    declined = Acknowledged(False)
    failed = TransportFailure("Connection error: refused")

    assert declined != failed
    assert isinstance(declined, Acknowledged)
    assert isinstance(failed, TransportFailure)


def test_models_keep_extra_fields_without_deprecated_config():
    """Test that every response model allows extra keys via model_config."""
    for model in (ThermostatState, TargetTemperatures, LockState):
        assert model.model_config["extra"] == "allow"

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        state = ThermostatState.model_validate({"tmode": 1, "program_mode": 2})

    assert state.model_extra == {"program_mode": 2}
