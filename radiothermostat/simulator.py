"""
Simulated thermostat for sim mode.

Serves the thermostat API from in-memory state through httpx.MockTransport,
so a client in sim mode runs the same transport and decoding code as a real
one without touching the network.
"""

import json
from typing import Any, Dict

import httpx

from radiothermostat.models.constants import (
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
from radiothermostat.utils.logging import get_logger

logger = get_logger(__name__)

# Keys accepted on POST /tstat
WRITABLE_TSTAT_KEYS = ("tmode", "fmode", "hold", "t_heat", "t_cool")


class SimulatedThermostat:
    """
    In-memory stand-in for a CT50 thermostat.

    Defaults: auto mode, 72F inside, heat at 68F, cool at 78F.
    """

    def __init__(self):
        self.state: Dict[str, Any] = {
            "temp": 72.0,
            "tmode": int(ThermostatMode.AUTO),
            "fmode": 0,
            "override": 0,
            "hold": 0,
            "t_heat": 68.0,
            "t_cool": 78.0,
            "tstate": 0,
            "fstate": 0,
            "time": {"day": 0, "hour": 12, "minute": 0},
            "t_type_post": 0,
        }
        self.remote = {"rem_mode": 0}
        self.lock_mode = 0
        self.energy_led = 0
        self.user_messages: Dict[int, str] = {}
        self.price_messages: Dict[int, str] = {}

    def transport(self) -> httpx.MockTransport:
        """Build an httpx transport backed by this simulated thermostat."""
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Answer one request the way the appliance would."""
        path = request.url.path
        logger.info(f"[SIM] {request.method} {path}")

        if request.method == "GET":
            return self._handle_get(path)
        if request.method == "POST":
            try:
                payload = json.loads(request.content or b"{}")
            except ValueError:
                return httpx.Response(400, json={"error": "invalid JSON"})
            if not isinstance(payload, dict):
                return httpx.Response(400, json={"error": "expected object"})
            return self._handle_post(path, payload)

        return httpx.Response(405, json={"error": "method not allowed"})

    def _handle_get(self, path: str) -> httpx.Response:
        if path == TSTAT_PATH:
            return httpx.Response(200, json=self.state)
        if path == TARGETS_PATH:
            return httpx.Response(200, json={
                "t_cool": self.state["t_cool"],
                "t_heat": self.state["t_heat"],
            })
        if path == REMOTE_TEMP_PATH:
            return httpx.Response(200, json=self.remote)
        if path == LOCK_PATH:
            return httpx.Response(200, json={"lock_mode": self.lock_mode})
        if path == MODEL_PATH:
            return httpx.Response(200, json={"model": "CT50 V1.94 (SIM)"})
        return httpx.Response(404, json={"error": "not found"})

    def _handle_post(self, path: str, payload: Dict[str, Any]) -> httpx.Response:
        if path == TSTAT_PATH:
            updates = {k: v for k, v in payload.items() if k in WRITABLE_TSTAT_KEYS}
            if not updates:
                return httpx.Response(200, json={"error": "no valid keys"})
            self.state.update(updates)
            # A temporary set point also switches the operating mode
            if "t_heat" in payload and "tmode" not in payload:
                self.state["tmode"] = int(ThermostatMode.HEAT)
                self.state["override"] = 1
            if "t_cool" in payload and "tmode" not in payload:
                self.state["tmode"] = int(ThermostatMode.COOL)
                self.state["override"] = 1
            return self._success()

        if path == REMOTE_TEMP_PATH:
            if "rem_temp" in payload:
                self.remote = {"rem_mode": 1, "rem_temp": payload["rem_temp"]}
                return self._success()
            if payload.get("rem_mode") == 0:
                self.remote = {"rem_mode": 0}
                return self._success()
            return httpx.Response(200, json={"error": "no valid keys"})

        if path == LOCK_PATH:
            if payload.get("lock_mode") not in (0, 1, 2, 3):
                return httpx.Response(200, json={"error": "invalid lock_mode"})
            self.lock_mode = payload["lock_mode"]
            return self._success()

        if path in (USER_MESSAGE_PATH, PRICE_MESSAGE_PATH):
            lines = 2 if path == USER_MESSAGE_PATH else 4
            line = payload.get("line")
            if line not in range(lines) or "message" not in payload:
                return httpx.Response(200, json={"error": "invalid line"})
            target = self.user_messages if path == USER_MESSAGE_PATH else self.price_messages
            target[line] = payload["message"]
            return self._success()

        if path == LED_PATH:
            if "energy_led" not in payload:
                return httpx.Response(200, json={"error": "no valid keys"})
            self.energy_led = payload["energy_led"]
            return self._success()

        return httpx.Response(404, json={"error": "not found"})

    @staticmethod
    def _success() -> httpx.Response:
        return httpx.Response(200, json={"success": 0})
