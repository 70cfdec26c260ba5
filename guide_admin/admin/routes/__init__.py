"""Admin routes package."""

from guide_admin.admin.routes.categories import router as categories_router
from guide_admin.admin.routes.dashboard import router as dashboard_router
from guide_admin.admin.routes.digital_content import router as digital_content_router
from guide_admin.admin.routes.guides import router as guides_router
from guide_admin.admin.routes.listing import build_list_router

__all__ = [
    "build_list_router",
    "categories_router",
    "dashboard_router",
    "digital_content_router",
    "guides_router",
]
