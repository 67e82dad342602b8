"""
Endpoint paths and integer codes used by the thermostat's HTTP API.

Values come from the RTCOA WiFi API v1.3. The firmware is the only thing
that enforces valid ranges; these enums are a convenience for callers.
"""

from enum import IntEnum


# Endpoint paths, appended verbatim to the base address
TSTAT_PATH = "/tstat"
TARGETS_PATH = "/tstat/ttemp"
REMOTE_TEMP_PATH = "/tstat/remote_temp"
LOCK_PATH = "/tstat/lock"
USER_MESSAGE_PATH = "/tstat/uma"
PRICE_MESSAGE_PATH = "/tstat/pma"
MODEL_PATH = "/tstat/model"
LED_PATH = "/tstat/led"

# Seconds allowed for a single request/response exchange
DEFAULT_TIMEOUT = 10.0


class ThermostatMode(IntEnum):
    """Operating mode (tmode)."""
    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


class FanMode(IntEnum):
    """Fan operating mode (fmode)."""
    AUTO = 0
    CIRCULATE = 1
    ON = 2


class LockMode(IntEnum):
    """Keypad lock level (lock_mode)."""
    UNLOCKED = 0
    PARTIAL = 1
    FULL = 2
    UTILITY = 3


class EnergyLed(IntEnum):
    """Energy LED colour (energy_led)."""
    OFF = 0
    GREEN = 1
    YELLOW = 2
    RED = 4
