"""
Configuration for building a thermostat client from the environment.

Environment variables (a .env file is loaded if present):
- RADIOTHERMOSTAT_ADDRESS: thermostat base URL (required unless SIM_MODE)
- RADIOTHERMOSTAT_TIMEOUT: seconds per request (default 10)
- SIM_MODE: "true" to use the in-memory simulated thermostat
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from radiothermostat.client import SIM_ADDRESS, RadioThermostat
from radiothermostat.exceptions import ConfigurationError
from radiothermostat.models.constants import DEFAULT_TIMEOUT


class ThermostatSettings(BaseModel):
    """Validated client settings."""
    address: str = Field(..., min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    sim_mode: bool = False


def load_settings(env: Optional[Mapping[str, str]] = None) -> ThermostatSettings:
    """
    Load client settings from environment variables.

    Args:
        env: Mapping to read instead of os.environ. When given, no .env
             file is loaded.

    Returns:
        Validated ThermostatSettings

    Raises:
        ConfigurationError: If the address is missing or a value is invalid
    """
    if env is None:
        load_dotenv()
        env = os.environ

    sim_mode = env.get("SIM_MODE", "false").lower() == "true"
    address = env.get("RADIOTHERMOSTAT_ADDRESS")

    if not address:
        if not sim_mode:
            raise ConfigurationError("RADIOTHERMOSTAT_ADDRESS environment variable not set")
        address = SIM_ADDRESS

    try:
        return ThermostatSettings(
            address=address,
            timeout=env.get("RADIOTHERMOSTAT_TIMEOUT", DEFAULT_TIMEOUT),
            sim_mode=sim_mode
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid thermostat settings: {e}") from e


def client_from_env(env: Optional[Mapping[str, str]] = None) -> RadioThermostat:
    """
    Build a RadioThermostat from environment variables.

    Args:
        env: Mapping to read instead of os.environ

    Returns:
        Configured RadioThermostat

    Raises:
        ConfigurationError: If settings are missing or invalid
    """
    settings = load_settings(env)
    return RadioThermostat(
        settings.address,
        timeout=settings.timeout,
        sim_mode=settings.sim_mode
    )
