"""Guide service."""

from guide_admin.core.models import Guide, GuideContent
from guide_admin.core.services.base import MultipartEntityService


class GuideService(MultipartEntityService[Guide]):
    """Guides carry one uploaded file, so writes are multipart."""

    resource = "guides"
    model = Guide

    async def get_with_categories_and_content(self, guide_id: str) -> GuideContent:
        """Fetch a guide together with everything it owns."""
        data = await self.client.get(f"/{self.resource}/categoriesAndContent/{guide_id}")
        return GuideContent.from_dict(data)
