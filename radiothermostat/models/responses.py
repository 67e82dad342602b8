"""
Pydantic models for the thermostat's JSON responses.

Field names match the appliance's JSON keys. Required fields are the ones
this library reads; everything else is optional and unknown keys are kept,
so newer firmware fields pass through untouched.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from radiothermostat.exceptions import MalformedResponseError


class ThermostatState(BaseModel):
    """Full thermostat state from GET /tstat."""
    tmode: int  # 0 off, 1 heat, 2 cool, 3 auto
    temp: Optional[float] = None
    fmode: Optional[int] = None
    override: Optional[int] = None
    hold: Optional[int] = None
    t_heat: Optional[float] = None
    t_cool: Optional[float] = None
    it_heat: Optional[float] = None
    it_cool: Optional[float] = None
    a_heat: Optional[float] = None
    a_cool: Optional[float] = None
    a_mode: Optional[int] = None
    t_type_post: Optional[int] = None
    tstate: Optional[int] = None  # HVAC running state: 0 off, 1 heat, 2 cool
    fstate: Optional[int] = None
    time: Optional[Dict[str, int]] = None

    # Firmware versions add fields; keep them
    model_config = ConfigDict(extra="allow")


class TargetTemperatures(BaseModel):
    """Heating and cooling set points from GET /tstat/ttemp."""
    t_cool: Optional[float] = None
    t_heat: Optional[float] = None

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def require_a_set_point(self) -> "TargetTemperatures":
        if self.t_cool is None and self.t_heat is None:
            raise ValueError("neither t_cool nor t_heat present")
        return self


class RemoteTemperature(BaseModel):
    """Remote sensor override state from GET /tstat/remote_temp."""
    rem_mode: int
    rem_temp: Optional[float] = None

    model_config = ConfigDict(extra="allow")


class LockState(BaseModel):
    """Keypad lock level from GET /tstat/lock."""
    lock_mode: int

    model_config = ConfigDict(extra="allow")


class ThermostatModel(BaseModel):
    """Model/firmware string from GET /tstat/model, e.g. "CT50 V1.94"."""
    model: str

    model_config = ConfigDict(extra="allow")


ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


def decode_response(
    model: Type[ResponseModel],
    path: str,
    data: Any
) -> ResponseModel:
    """
    Decode a parsed JSON body into its response model.

    Args:
        model: Pydantic model class for the endpoint
        path: Endpoint path (used in the error message)
        data: Parsed JSON body

    Returns:
        Validated model instance

    Raises:
        MalformedResponseError: If the body is not an object or required
                                fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise MalformedResponseError(
            path,
            f"expected a JSON object, got {type(data).__name__}",
            data
        )

    try:
        return model.model_validate(data)
    except ValidationError as e:
        # Flatten pydantic's error list into "field: message" pairs
        details = []
        for error in e.errors():
            field = ".".join(str(loc) for loc in error.get("loc", [])) or "body"
            details.append(f"{field}: {error.get('msg', 'Invalid value')}")
        raise MalformedResponseError(path, "; ".join(details), data) from e
