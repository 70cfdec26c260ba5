"""
Domain models for the Guide Admin.

Plain dataclasses mirroring the records served by the REST backend.
"""

from guide_admin.core.models.content import (
    Category,
    CategoryRef,
    DigitalContent,
    FileReference,
    Guide,
    GuideContent,
    GuideRef,
)

__all__ = [
    "Category",
    "CategoryRef",
    "DigitalContent",
    "FileReference",
    "Guide",
    "GuideContent",
    "GuideRef",
]
