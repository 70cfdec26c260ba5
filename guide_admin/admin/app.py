"""
Admin Web UI FastAPI application.

Provides the HTMX-based interface for managing guides, categories
and digital content. Mounted at /admin on the main app.
"""

from fastapi import FastAPI

from guide_admin.admin.entities import ENTITY_LISTS
from guide_admin.admin.routes import (
    build_list_router,
    categories_router,
    dashboard_router,
    digital_content_router,
    guides_router,
)


def create_admin_app() -> FastAPI:
    """
    Create and configure the admin FastAPI application.

    Returns:
        Configured FastAPI app for admin UI.
    """
    admin_app = FastAPI(
        title="Guide Admin",
        docs_url=None,  # Disable Swagger for admin
        redoc_url=None,
    )

    admin_app.include_router(dashboard_router)

    # One list router per entity: listar-guias, listar-categorias, ...
    for entity in ENTITY_LISTS.values():
        admin_app.include_router(build_list_router(entity))

    admin_app.include_router(guides_router)
    admin_app.include_router(categories_router)
    admin_app.include_router(digital_content_router)

    return admin_app


# Create app instance for mounting
admin_app = create_admin_app()
