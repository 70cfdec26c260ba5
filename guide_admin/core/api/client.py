"""
REST backend client.

Thin async wrapper over httpx. Every endpoint answers with a JSON
envelope {"data": ...}; the client unwraps it and turns any failure
into an ApiError carrying the backend's "message" field.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from guide_admin.core.api.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    ApiError,
    NotFoundError,
    ServiceUnavailableError,
)
from guide_admin.core.config import get_backend_config

logger = logging.getLogger(__name__)

# Multipart part: (field name, (filename, content, content type)).
# Plain form fields are (field name, (None, value)).
FileField = tuple[str, tuple[str, bytes, str] | tuple[None, str]]


@dataclass
class ApiClientConfig:
    """Configuration for ApiClient."""
    base_url: str = "http://localhost:3333"
    timeout: float = 10.0
    token: str = ""

    @classmethod
    def from_config(cls) -> "ApiClientConfig":
        """Build from the 'backend' config section."""
        backend = get_backend_config()
        return cls(
            base_url=backend.get("base_url") or cls.base_url,
            timeout=float(backend.get("timeout_seconds", cls.timeout)),
            token=backend.get("token") or "",
        )


def extract_error_message(response: httpx.Response) -> str:
    """Pull the user-facing message out of an error response body."""
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return DEFAULT_ERROR_MESSAGE


class ApiClient:
    """
    Client for the guides REST backend.

    Usage:
        client = ApiClient(ApiClientConfig(base_url="http://api"))
        guides = await client.get("/guides/")
        await client.close()

    No retries: a failed request raises immediately.
    """

    def __init__(
        self,
        config: ApiClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or ApiClientConfig()
        headers = {"Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"

        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=headers,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and return the unwrapped "data" payload.

        Args:
            method: HTTP method.
            path: Path relative to the backend base URL.
            **kwargs: Passed through to httpx (json, data, files).

        Returns:
            The value of the response envelope's "data" key.

        Raises:
            ServiceUnavailableError: Backend unreachable or timed out.
            NotFoundError: Backend answered 404.
            ApiError: Any other non-2xx answer or malformed body.
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout calling {method} {path}: {e}")
            raise ServiceUnavailableError() from e
        except httpx.RequestError as e:
            logger.warning(f"Error calling {method} {path}: {e}")
            raise ServiceUnavailableError() from e

        if response.is_error:
            message = extract_error_message(response)
            logger.warning(
                f"{method} {path} failed: HTTP {response.status_code} ({message})"
            )
            if response.status_code == 404:
                raise NotFoundError(message, status_code=404)
            raise ApiError(message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body")
            raise ApiError(status_code=response.status_code) from e

        if not isinstance(body, dict) or "data" not in body:
            logger.error(f"{method} {path} returned a body without 'data'")
            raise ApiError(status_code=response.status_code)

        return body["data"]

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: list[FileField] | None = None,
    ) -> Any:
        return await self.request("POST", path, **_body(json, data, files))

    async def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: list[FileField] | None = None,
    ) -> Any:
        return await self.request("PUT", path, **_body(json, data, files))

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


def _body(
    json: dict[str, Any] | None,
    data: dict[str, Any] | None,
    files: list[FileField] | None,
) -> dict[str, Any]:
    """Build httpx body kwargs; form data with files goes out as multipart."""
    kwargs: dict[str, Any] = {}
    if json is not None:
        kwargs["json"] = json
    if data is not None:
        kwargs["data"] = data
    if files:
        kwargs["files"] = files
    return kwargs


# Singleton instance
_client: ApiClient | None = None


async def get_api_client() -> ApiClient:
    """Get the global backend client, created from config on first use."""
    global _client
    if _client is None:
        _client = ApiClient(ApiClientConfig.from_config())
        logger.info(f"Backend client created for {_client.config.base_url}")
    return _client


async def close_api_client() -> None:
    """Close and forget the global backend client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
