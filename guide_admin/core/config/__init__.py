"""Config module — loading and managing configuration."""

from guide_admin.core.config.loader import (
    get_backend_config,
    get_config,
    get_server_config,
    reload_config,
)

__all__ = [
    "get_config",
    "get_backend_config",
    "get_server_config",
    "reload_config",
]
