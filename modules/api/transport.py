"""
HTTP Transport for the hub API.

Provides an async HTTP client that attaches the bearer token to every
request and decodes JSON bodies into typed values. Status handling is left
to the caller: `ensure_success` is called explicitly after any status code
the caller treats specially.
"""

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from modules.core.config import get_api_base_url, get_app_config
from modules.core.exceptions import ApiStatusError, NetworkError, ParseError
from modules.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

T = TypeVar("T")


def _user_agent() -> str:
    app = get_app_config().application
    return f"{app.name}/{app.version}"


class HubTransport:
    """
    Bearer-authenticated HTTP client for the hub API.

    Features:
    - Base URL and timeout from application.yaml unless given explicitly
    - Authorization header fixed at construction
    - Structured logging of requests/responses
    - Network failures raised as NetworkError

    Usage:
        transport = HubTransport(token)
        response = await transport.get("/profiles/me")
        transport.ensure_success(response)
        profile = transport.decode(response, Profile)
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the transport.

        Args:
            token: Bearer token sent on every request.
            base_url: API base URL. If None, reads from config/settings/application.yaml.
            timeout: Request timeout in seconds. If None, uses the configured
                value, or the httpx default when none is configured.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        if base_url is None:
            base_url, config_timeout = get_api_base_url()
            if timeout is None:
                timeout = config_timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }
        try:
            headers["User-Agent"] = _user_agent()
        except (RuntimeError, FileNotFoundError) as e:
            # No project config available; keep the httpx default agent.
            log_with_source(
                logger, "internal", "debug", "User-Agent config unavailable", error=str(e),
            )
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {
                "base_url": self.base_url,
                "headers": self._headers(),
            }
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the hub API.

        Args:
            method: HTTP method (GET, PATCH, DELETE, ...)
            path: API path relative to the base URL (e.g., /profiles/me)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response, whatever its status code

        Raises:
            NetworkError: If the request could not be sent or no response arrived
        """
        client = await self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise NetworkError(f"Request failed: {e}", cause=e) from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a PATCH request."""
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)

    @staticmethod
    def ensure_success(response: httpx.Response) -> None:
        """Raise ApiStatusError unless the response status is 2xx."""
        if not response.is_success:
            log_with_source(
                logger,
                "api",
                "warning",
                "API error status",
                status_code=response.status_code,
            )
            raise ApiStatusError(response.status_code)

    @staticmethod
    def decode(response: httpx.Response, shape: type[T]) -> T:
        """
        Decode a JSON response body into the requested shape.

        Args:
            response: A successful response
            shape: Target type, e.g. Profile or list[HubVisit]

        Raises:
            ParseError: If the body is not JSON or does not match the shape
        """
        try:
            return TypeAdapter(shape).validate_json(response.content)
        except PydanticValidationError as e:
            raise ParseError(f"Failed to parse response: {e}") from e
