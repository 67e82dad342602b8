"""
HTTP transport for the thermostat API.

Performs single GET/POST exchanges against the thermostat's base address and
reduces every outcome to a Success, Acknowledged or TransportFailure result.
Connection, decoding and non-2xx failures are logged as warnings and returned,
never raised.
"""

from typing import Any, Dict, Optional, Union

import httpx

from radiothermostat.models.constants import DEFAULT_TIMEOUT
from radiothermostat.models.result import (
    Acknowledged,
    GetResult,
    PostResult,
    Success,
    TransportFailure,
)
from radiothermostat.utils.logging import get_logger

logger = get_logger(__name__)


class ThermostatTransport:
    """
    Owns one httpx.Client bound to a single thermostat.

    Paths are appended verbatim to the address, so "http://10.0.0.5" plus
    "/tstat" gives "http://10.0.0.5/tstat". No slash normalization is done.
    """

    def __init__(
        self,
        address: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize transport.

        Args:
            address: Thermostat base URL, e.g. "http://192.168.1.20"
            timeout: Seconds allowed per request
            transport: Optional httpx transport (sim mode and tests use
                       httpx.MockTransport)
        """
        self.address = address
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def get(self, path: str) -> GetResult:
        """
        GET a path and return its parsed JSON body.

        Args:
            path: Endpoint path, e.g. "/tstat"

        Returns:
            Success with the parsed body, or TransportFailure
        """
        url = f"{self.address}{path}"
        response = self._exchange("GET", url)
        if isinstance(response, TransportFailure):
            return response

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("invalid_json_response", method="GET", url=url, error=str(e))
            return TransportFailure(f"Invalid JSON response: {e}")

        return Success(data)

    def post(self, path: str, payload: Dict[str, Any]) -> PostResult:
        """
        POST a JSON payload and report whether the appliance acknowledged it.

        The appliance signals success with a "success" key in the response
        body; its value is not inspected. A completed exchange whose body is
        not JSON is not acknowledged.

        Args:
            path: Endpoint path, e.g. "/tstat"
            payload: JSON-serializable request body

        Returns:
            Acknowledged(True/False), or TransportFailure
        """
        url = f"{self.address}{path}"
        response = self._exchange("POST", url, payload)
        if isinstance(response, TransportFailure):
            return response

        try:
            data = response.json()
        except ValueError:
            logger.debug("post_not_acknowledged", url=url, reason="non-JSON body")
            return Acknowledged(False)

        return Acknowledged(isinstance(data, dict) and "success" in data)

    def _exchange(
        self,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None
    ) -> Union[httpx.Response, TransportFailure]:
        """
        Perform one request.

        Returns:
            The 2xx response, or TransportFailure
        """
        try:
            if payload is None:
                response = self._client.request(method, url)
            else:
                response = self._client.request(method, url, json=payload)
        except httpx.RequestError as e:
            # TransportError, DecodingError and TooManyRedirects
            error = str(e) or type(e).__name__
            if isinstance(e, httpx.TransportError):
                message = f"Connection error: {error}"
                event = "connection_error"
            else:
                message = f"Request error: {error}"
                event = "request_error"
            logger.warning(event, method=method, url=url, error=error)
            return TransportFailure(message)

        if not response.is_success:
            logger.warning(
                "request_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                error=response.reason_phrase
            )
            return TransportFailure(
                f"{response.status_code} response: {response.reason_phrase}",
                status_code=response.status_code
            )

        logger.debug("request_completed", method=method, url=url)
        return response

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
