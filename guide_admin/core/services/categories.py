"""Category service."""

from guide_admin.core.models import Category
from guide_admin.core.services.base import EntityService


class CategoryService(EntityService[Category]):
    """Categories have no attachments; writes are JSON."""

    resource = "categories"
    model = Category
