"""
Pytest fixtures for testing.
Provides a scripted fake thermostat served through httpx.MockTransport.
"""

import json

import httpx
import pytest

from radiothermostat.client import RadioThermostat
from radiothermostat.transport import ThermostatTransport


BASE_ADDRESS = "http://thermostat.test"


class FakeAppliance:
    """
    Scripted HTTP responder that records every request it receives.

    Unscripted paths answer 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def respond(self, method, path, status_code=200, json_body=None, content=None):
        """Script the response for a method and path."""
        self.routes[(method, path)] = ("response", status_code, json_body, content)

    def fail(self, method, path, error_class=httpx.ConnectError, message="Connection refused"):
        """Script a transport-level error for a method and path."""
        self.routes[(method, path)] = ("error", error_class, message, None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))

        if route is None:
            return httpx.Response(404, json={"error": "not found"})

        if route[0] == "error":
            _, error_class, message, _ = route
            raise error_class(message, request=request)

        _, status_code, json_body, content = route
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_body)

    def calls(self, method=None, path=None):
        """Requests received, optionally filtered by method and path."""
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == path)
        ]

    def payloads(self, path=None):
        """Decoded JSON bodies of POST requests."""
        return [json.loads(r.content) for r in self.calls("POST", path)]


@pytest.fixture
def appliance():
    """Provides an empty FakeAppliance; script it per test."""
    return FakeAppliance()


@pytest.fixture
def transport(appliance):
    """Provides a ThermostatTransport wired to the fake appliance."""
    t = ThermostatTransport(BASE_ADDRESS, transport=httpx.MockTransport(appliance.handler))
    yield t
    t.close()


@pytest.fixture
def client(appliance):
    """Provides a RadioThermostat wired to the fake appliance."""
    c = RadioThermostat(BASE_ADDRESS, transport=httpx.MockTransport(appliance.handler))
    yield c
    c.close()
