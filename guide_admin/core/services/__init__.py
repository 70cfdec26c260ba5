"""
Service layer for the Guide Admin.

One service per backend resource, all sharing EntityService.
"""

from guide_admin.core.services.base import EntityService, MultipartEntityService
from guide_admin.core.services.categories import CategoryService
from guide_admin.core.services.digital_content import DigitalContentService
from guide_admin.core.services.guides import GuideService

__all__ = [
    "CategoryService",
    "DigitalContentService",
    "EntityService",
    "GuideService",
    "MultipartEntityService",
]
