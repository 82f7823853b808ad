"""API client for the Govee OpenAPI.

This module provides the exceptions raised by the client, helpers to build
requests and classify responses, and ``GoveeClient``, which lists devices and
queries device state over a single ``httpx.Client``.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import TYPE_CHECKING, Any, Self

import httpx

from .const import (
    BASE_URL,
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT,
    ENDPOINT_DEVICE_STATE,
    ENDPOINT_DEVICES,
    HEADER_API_KEY,
    HTTP_TOO_MANY_REQUESTS,
    HTTP_UNAUTHORIZED,
    REQUEST_LIMIT,
    USER_AGENT,
)
from .models import (
    Device,
    DeviceIdentifier,
    DeviceStateRequest,
    DeviceStateResponse,
    DiscoveryResponse,
)

if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


class GoveeError(Exception):
    """Base exception for Govee API client errors."""


class GoveeConfigurationError(GoveeError):
    """Exception raised when the client is missing required configuration."""


class GoveeValidationError(GoveeError, ValueError):
    """Exception raised when a call receives invalid arguments."""


class GoveeHTTPError(GoveeError):
    """Exception raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize the error with the HTTP status code."""
        super().__init__(message)
        self.status_code = status_code


class GoveeAuthError(GoveeHTTPError):
    """Exception raised when the API key is rejected."""


class GoveeRateLimitError(GoveeHTTPError):
    """Exception raised when the daily request quota is exhausted."""

    def __init__(
        self, message: str, status_code: int, daily_limit: int = REQUEST_LIMIT
    ) -> None:
        """Initialize the error with the documented daily limit."""
        super().__init__(message, status_code)
        self.daily_limit = daily_limit


class GoveeDecodeError(GoveeError):
    """Exception raised when a response body cannot be decoded."""


def create_headers(api_key: str) -> dict[str, str]:
    """Create HTTP headers for Govee API requests.

    Args:
        api_key: Govee API key sent in the ``Govee-API-Key`` header.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    return {
        HEADER_API_KEY: api_key,
        "Content-Type": CONTENT_TYPE_JSON,
        "User-Agent": USER_AGENT,
    }


def new_request_id() -> str:
    """Return a fresh identifier for a request body."""
    return str(uuid.uuid4())


def is_success(status: int) -> bool:
    """Check if HTTP status code is in the 2xx range."""
    return httpx.codes.is_success(status)


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates an authentication error."""
    return status == HTTP_UNAUTHORIZED


def is_rate_limit_error(status: int) -> bool:
    """Check if HTTP status code indicates the request quota is exhausted."""
    return status == HTTP_TOO_MANY_REQUESTS


def status_line(status: int) -> str:
    """Return the status line for a code, e.g. ``"404 Not Found"``."""
    reason = httpx.codes.get_reason_phrase(status)
    return f"{status} {reason}".rstrip()


def validate_response(response: httpx.Response) -> bytes:
    """Validate HTTP response and return its body.

    The response body is never inspected for error details; only the status
    code decides the outcome.

    Args:
        response: HTTP response object to validate.

    Returns:
        The raw response body.

    Raises:
        GoveeAuthError: On HTTP 401.
        GoveeRateLimitError: On HTTP 429.
        GoveeHTTPError: On any other non-2xx status.

    """
    status = response.status_code
    if is_success(status):
        return response.content

    line = status_line(status)
    _LOGGER.debug("Govee API request to %s failed: %s", response.url, line)

    if is_auth_error(status):
        auth_error = f"{line}: a valid Govee API key is required"
        raise GoveeAuthError(auth_error, status)

    if is_rate_limit_error(status):
        rate_error = f"{line}: accounts are limited to {REQUEST_LIMIT} requests a day"
        raise GoveeRateLimitError(rate_error, status)

    reason = httpx.codes.get_reason_phrase(status) or "Unknown Status"
    raise GoveeHTTPError(f"{line}: {reason}", status)


def _load_json(content: bytes | str) -> Any:
    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        error_msg = f"Failed to parse response body: {err}"
        raise GoveeDecodeError(error_msg) from err


def decode_discovery_response(content: bytes | str) -> DiscoveryResponse:
    """Decode the body of a device listing response.

    Args:
        content: Raw response body.

    Returns:
        The decoded response envelope.

    Raises:
        GoveeDecodeError: If the body is not valid JSON of the expected shape.

    """
    data = _load_json(content)
    try:
        return DiscoveryResponse.from_dict(data)
    except (TypeError, ValueError) as err:
        error_msg = f"Failed to decode devices response: {err}"
        raise GoveeDecodeError(error_msg) from err


def decode_device_state_response(content: bytes | str) -> DeviceStateResponse:
    """Decode the body of a device state response.

    Args:
        content: Raw response body.

    Returns:
        The decoded response envelope. Its payload is ``None`` when the
        server returned a null payload.

    Raises:
        GoveeDecodeError: If the body is not valid JSON of the expected shape.

    """
    data = _load_json(content)
    try:
        return DeviceStateResponse.from_dict(data)
    except (TypeError, ValueError) as err:
        error_msg = f"Failed to decode device state response: {err}"
        raise GoveeDecodeError(error_msg) from err


def create_device_state_request(
    device: Device | DeviceIdentifier, request_id: str | None = None
) -> DeviceStateRequest:
    """Build the body of a device state query.

    Args:
        device: Device to query. Only its sku and identifier are sent.
        request_id: Identifier for the request. A new UUID when omitted.

    Raises:
        GoveeValidationError: If the device has no sku or identifier.

    """
    if not device.sku or not device.device:
        error_msg = "Device state query requires a device with sku and identifier"
        raise GoveeValidationError(error_msg)
    return DeviceStateRequest(
        request_id=request_id or new_request_id(),
        payload=DeviceIdentifier(sku=device.sku, device=device.device),
    )


def create_session_client(
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create HTTP client for the Govee API.

    Args:
        timeout: Request timeout in seconds, or a full ``httpx.Timeout``.
        transport: Optional transport, e.g. with custom TLS or pool limits.

    Returns:
        Configured httpx Client.

    """
    return httpx.Client(timeout=timeout, transport=transport)


class GoveeClient:
    """Synchronous client for the Govee OpenAPI.

    Each call performs exactly one HTTP request. Nothing is retried or
    cached; network failures surface as ``httpx.TransportError``.
    """

    def __init__(
        self,
        api_key: str,
        session: httpx.Client | None = None,
        *,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.BaseTransport | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Govee API key. Must not be empty.
            session: HTTP client to send requests with. When omitted the
                client creates and owns one.
            timeout: Timeout for the session the client creates. Defaults to
                ``DEFAULT_TIMEOUT``; not allowed together with ``session``.
            transport: Transport for the session the client creates; not
                allowed together with ``session``.
            base_url: API root the endpoint paths are joined to.

        Raises:
            GoveeConfigurationError: If the API key is empty, or if
                ``timeout`` or ``transport`` is given with ``session``.

        """
        if not isinstance(api_key, str) or not api_key:
            config_error = "Missing Govee API key"
            raise GoveeConfigurationError(config_error)

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        if session is not None and (timeout is not None or transport is not None):
            config_error = "Configure timeout and transport on the injected session"
            raise GoveeConfigurationError(config_error)

        self._owns_session = session is None
        if session is None:
            session = create_session_client(
                DEFAULT_TIMEOUT if timeout is None else timeout, transport
            )
        self.session = session

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        """API root the endpoint paths are joined to."""
        return self._base_url

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint path to the base URL."""
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    def request(
        self,
        method: str,
        endpoint: str,
        body: dict[str, Any] | None = None,
    ) -> bytes:
        """Send one authenticated request and return the raw response body.

        Args:
            method: HTTP method.
            endpoint: Endpoint path relative to the base URL.
            body: Optional JSON body.

        Raises:
            GoveeAuthError: If the API key is rejected.
            GoveeRateLimitError: If the daily quota is exhausted.
            GoveeHTTPError: If the API answers with another non-2xx status.
            GoveeError: If the client has been closed.
            httpx.TransportError: If the request cannot be sent.

        """
        if self.session.is_closed:
            closed_error = "Cannot send a request, the Govee client has been closed"
            raise GoveeError(closed_error)

        url = self.url_for(endpoint)
        content = None if body is None else json.dumps(body).encode("utf-8")

        _LOGGER.debug("Sending %s request to %s", method, url)
        response = self.session.request(
            method,
            url,
            headers=create_headers(self._api_key),
            content=content,
        )
        _LOGGER.debug("Received HTTP %d from %s", response.status_code, url)
        return validate_response(response)

    def list_devices(self) -> list[Device]:
        """Fetch the devices associated with the API key.

        Returns:
            List of devices in the order the API returned them.

        """
        content = self.request("GET", ENDPOINT_DEVICES)
        response = decode_discovery_response(content)
        _LOGGER.debug("Retrieved %d devices from Govee API", len(response.data))
        return list(response.data)

    def get_device_state(
        self, device: Device | DeviceIdentifier, request_id: str | None = None
    ) -> Device | None:
        """Fetch the current state of a device.

        Args:
            device: Device to query; needs a sku and device identifier.
            request_id: Identifier sent with the request. A new UUID when
                omitted.

        Returns:
            Device snapshot with the current capability states, or ``None``
            when the API returned no payload.

        Raises:
            GoveeValidationError: If the device has no sku or identifier.

        """
        state_request = create_device_state_request(device, request_id)
        content = self.request(
            "POST", ENDPOINT_DEVICE_STATE, state_request.to_dict()
        )
        response = decode_device_state_response(content)
        if response.payload is None:
            _LOGGER.debug(
                "No state returned for device %s (%s)", device.device, device.sku
            )
        return response.payload

    def close(self) -> None:
        """Release the connections of the owned HTTP client.

        The client cannot send requests afterwards; further calls raise
        ``GoveeError``. Calling ``close`` again does nothing.
        """
        if self._owns_session:
            self.session.close()
