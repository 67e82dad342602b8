"""
Exceptions raised by the thermostat client.

Transport and HTTP failures are never raised; they are returned as
TransportFailure results. Only configuration problems and responses that
cannot be decoded into their expected shape become exceptions.
"""

from typing import Optional


class RadioThermostatError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(RadioThermostatError, ValueError):
    """Client cannot be built from the given configuration."""


class MalformedResponseError(RadioThermostatError, ValueError):
    """A successful response is missing required fields or has the wrong shape."""

    def __init__(self, path: str, detail: str, data: Optional[object] = None):
        self.path = path
        self.detail = detail
        self.data = data
        super().__init__(f"Malformed response from {path}: {detail}")
