"""
REST backend access.

Provides the httpx-based ApiClient and the exceptions it raises.
"""

from guide_admin.core.api.client import (
    ApiClient,
    ApiClientConfig,
    close_api_client,
    get_api_client,
)
from guide_admin.core.api.exceptions import (
    ApiError,
    NotFoundError,
    ServiceUnavailableError,
)

__all__ = [
    "ApiClient",
    "ApiClientConfig",
    "ApiError",
    "NotFoundError",
    "ServiceUnavailableError",
    "close_api_client",
    "get_api_client",
]
