"""
Radio Thermostat (RTCOA / 3M-Filtrete) WiFi thermostat client.

One method per appliance capability, each a single call into the transport
with a fixed path and payload. get_target() and lock() are the only methods
that make more than one request.
"""

from typing import Optional, Tuple, Type, Union

import httpx

from radiothermostat.exceptions import ConfigurationError, MalformedResponseError
from radiothermostat.models.constants import (
    DEFAULT_TIMEOUT,
    LED_PATH,
    LOCK_PATH,
    MODEL_PATH,
    PRICE_MESSAGE_PATH,
    REMOTE_TEMP_PATH,
    TARGETS_PATH,
    TSTAT_PATH,
    USER_MESSAGE_PATH,
    ThermostatMode,
)
from radiothermostat.models.responses import (
    LockState,
    RemoteTemperature,
    ResponseModel,
    TargetTemperatures,
    ThermostatModel,
    ThermostatState,
    decode_response,
)
from radiothermostat.models.result import PostResult, TransportFailure
from radiothermostat.simulator import SimulatedThermostat
from radiothermostat.transport import ThermostatTransport
from radiothermostat.utils.logging import get_logger

logger = get_logger(__name__)

SIM_ADDRESS = "http://thermostat.sim"

Target = Union[float, Tuple[float, float]]


class RadioThermostat:
    """
    Client for a single WiFi thermostat.

    Features:
    - Status, set points, remote sensor and keypad lock reads
    - Mode, fan, hold and temporary set point writes
    - User and price message display
    - Active target resolution from the current mode
    - Sim mode (in-memory appliance, no network)

    GET methods return a typed model, or None when the request could not be
    completed. POST methods return Acknowledged or TransportFailure.
    Arguments are passed to the firmware as-is; it enforces valid ranges.
    """

    def __init__(
        self,
        address: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        sim_mode: bool = False,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize thermostat client.

        Args:
            address: Thermostat base URL, e.g. "http://192.168.1.20".
                     Paths are appended verbatim, so omit the trailing slash.
                     Optional only in sim mode.
            timeout: Seconds allowed per request
            sim_mode: If True, talk to an in-memory simulated thermostat
            transport: Optional httpx transport to send requests through

        Raises:
            ConfigurationError: If address is empty or missing. Sim mode is
                                the one exception: without an address it
                                uses SIM_ADDRESS.
        """
        if sim_mode and not address:
            address = SIM_ADDRESS
        if not address:
            raise ConfigurationError("Must pass address to RadioThermostat")

        self.sim_mode = sim_mode
        self.simulator: Optional[SimulatedThermostat] = None
        if sim_mode and transport is None:
            logger.info(f"[SIM] Using simulated thermostat at {address}")
            self.simulator = SimulatedThermostat()
            transport = self.simulator.transport()

        self._transport = ThermostatTransport(address, timeout=timeout, transport=transport)

    @property
    def address(self) -> str:
        """Thermostat base URL."""
        return self._transport.address

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._transport.close()

    def __enter__(self) -> "RadioThermostat":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RadioThermostat(address={self.address!r}, sim_mode={self.sim_mode})"

    # --- Status and set points ---

    def tstat(self) -> Optional[ThermostatState]:
        """
        Get full thermostat state.

        Returns:
            ThermostatState (temp, tmode, fmode, hold, t_heat, t_cool, ...),
            or None on failure

        Raises:
            MalformedResponseError: If tmode is missing
        """
        return self._get_model(TSTAT_PATH, ThermostatState)

    def set_mode(self, mode: Union[int, ThermostatMode]) -> PostResult:
        """
        Set operating mode.

        Args:
            mode: 0 off, 1 heat, 2 cool, 3 auto
        """
        # Appliance API key is tmode, not mode
        return self._transport.post(TSTAT_PATH, {"tmode": mode})

    def get_targets(self) -> Optional[TargetTemperatures]:
        """
        Get heating and cooling set points.

        Returns:
            TargetTemperatures with t_cool and t_heat, or None on failure
        """
        return self._get_model(TARGETS_PATH, TargetTemperatures)

    def get_target(self) -> Optional[Target]:
        """
        Get the set point(s) active in the current mode.

        Status and set points are two separate requests, so they are not
        guaranteed to be consistent with each other.

        Returns:
            - None if the mode is off or either request failed
            - t_heat in heat mode
            - t_cool in cool mode
            - (t_cool, t_heat) in any other mode (auto)

        Raises:
            MalformedResponseError: If the set point for the mode is missing
        """
        state = self.tstat()
        if state is None:
            return None

        mode = state.tmode
        if mode == ThermostatMode.OFF:
            return None

        targets = self.get_targets()
        if targets is None:
            return None

        if mode == ThermostatMode.HEAT:
            return self._require(targets.t_heat, "t_heat", targets)
        if mode == ThermostatMode.COOL:
            return self._require(targets.t_cool, "t_cool", targets)

        return (
            self._require(targets.t_cool, "t_cool", targets),
            self._require(targets.t_heat, "t_heat", targets),
        )

    def temp_heat(self, temp: float) -> PostResult:
        """
        Set a temporary heating set point.

        Also switches the thermostat to heat mode.
        """
        return self._transport.post(TSTAT_PATH, {"t_heat": temp})

    def temp_cool(self, temp: float) -> PostResult:
        """
        Set a temporary cooling set point.

        Also switches the thermostat to cool mode.
        """
        return self._transport.post(TSTAT_PATH, {"t_cool": temp})

    def set_fan_mode(self, mode: int) -> PostResult:
        """
        Set fan mode.

        Args:
            mode: 0 auto, 1 auto/circulate, 2 on
        """
        return self._transport.post(TSTAT_PATH, {"fmode": mode})

    def set_hold(self, enabled: bool) -> PostResult:
        """Enable or disable target temperature hold."""
        return self._transport.post(TSTAT_PATH, {"hold": 1 if enabled else 0})

    # --- Remote sensor ---

    def remote_temp(self) -> Optional[RemoteTemperature]:
        """
        Get remote sensor state.

        When rem_mode is 1 the thermostat runs off the temperature given to
        set_remote_temp() instead of its internal sensor.

        Returns:
            RemoteTemperature (rem_mode, optional rem_temp), or None on failure
        """
        return self._get_model(REMOTE_TEMP_PATH, RemoteTemperature)

    def disable_remote_temp(self) -> PostResult:
        """Revert to the thermostat's internal temperature sensor."""
        # Appliance API key is rem_mode, not remote_mode
        return self._transport.post(REMOTE_TEMP_PATH, {"rem_mode": 0})

    def set_remote_temp(self, temp: float) -> PostResult:
        """Feed a remote sensor reading to the thermostat."""
        # Appliance API key is rem_temp, not remote_temp
        return self._transport.post(REMOTE_TEMP_PATH, {"rem_temp": temp})

    # --- Keypad lock ---

    def lock(self, mode: Optional[int] = None) -> Optional[LockState]:
        """
        Get, or set then get, the keypad lock level.

        With a mode, the new level is POSTed first; if the thermostat does
        not acknowledge it, None is returned without reading the lock.

        Args:
            mode: 0 unlocked, 1 partial, 2 full, 3 utility. None to only read.

        Returns:
            Current LockState, or None on failure
        """
        if mode is not None:
            result = self._transport.post(LOCK_PATH, {"lock_mode": mode})
            if not result.ok:
                return None

        return self._get_model(LOCK_PATH, LockState)

    # --- Display ---

    def user_message(self, line: int, message: str) -> PostResult:
        """
        Show a message on the alphanumeric display (CT-80 only).

        Args:
            line: 0 or 1
            message: Text; long messages scroll
        """
        return self._transport.post(USER_MESSAGE_PATH, {"line": line, "message": message})

    def price_message(self, line: int, message: str) -> PostResult:
        """
        Show a numeric message in the price message area.

        Messages on different lines are rotated through.

        Args:
            line: 0 to 3
            message: Digits and decimal point only
        """
        return self._transport.post(PRICE_MESSAGE_PATH, {"line": line, "message": message})

    def set_energy_led(self, color: int) -> PostResult:
        """
        Set the energy LED.

        Args:
            color: 0 off, 1 green, 2 yellow, 4 red
        """
        return self._transport.post(LED_PATH, {"energy_led": color})

    # --- Device info ---

    def model(self) -> Optional[ThermostatModel]:
        """Get model and firmware string, or None on failure."""
        return self._get_model(MODEL_PATH, ThermostatModel)

    # --- Helpers ---

    def _get_model(
        self,
        path: str,
        model: Type[ResponseModel]
    ) -> Optional[ResponseModel]:
        """GET a path and decode it, or None if the request failed."""
        result = self._transport.get(path)
        if isinstance(result, TransportFailure):
            return None
        return decode_response(model, path, result.data)

    @staticmethod
    def _require(
        value: Optional[float],
        field: str,
        targets: TargetTemperatures
    ) -> float:
        if value is None:
            raise MalformedResponseError(TARGETS_PATH, f"{field} missing", targets.model_dump())
        return value
