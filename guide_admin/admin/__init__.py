"""
Admin Web UI for managing guides, categories and digital content.

Provides a simple HTMX-based interface for CRUD operations
against the guides REST backend.
"""

from guide_admin.admin.app import create_admin_app

__all__ = ["create_admin_app"]
