"""Digital content service."""

from guide_admin.core.models import DigitalContent
from guide_admin.core.services.base import MultipartEntityService


class DigitalContentService(MultipartEntityService[DigitalContent]):
    resource = "digital-content"
    model = DigitalContent
