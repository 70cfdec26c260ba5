"""
Domain records for guides, categories and digital content.

Records are built from the JSON the REST backend returns. Field names
follow Python conventions; from_dict() maps the backend's camelCase keys.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FileReference:
    """A stored file: public path plus the storage provider's identifier."""

    file_path: str
    public_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileReference":
        return cls(
            file_path=data.get("filePath", ""),
            public_id=data.get("publicId", ""),
        )


@dataclass
class GuideRef:
    """
    Reference to a guide from a child record.

    List endpoints embed a guide summary; detail endpoints may return
    only the id. Both shapes are accepted.
    """

    id: str
    title: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "GuideRef | None":
        if value is None:
            return None
        if isinstance(value, dict):
            return cls(id=str(value.get("_id", "")), title=value.get("title"))
        return cls(id=str(value))


@dataclass
class CategoryRef:
    """Reference to a category from a digital content record."""

    id: str
    title: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "CategoryRef | None":
        if not value:
            return None
        if isinstance(value, dict):
            return cls(id=str(value.get("_id", "")), title=value.get("title"))
        return cls(id=str(value))


@dataclass
class Guide:
    """Top-level content aggregate."""

    id: str
    title: str
    content: str
    file: FileReference | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Guide":
        file_data = data.get("filePaths")
        return cls(
            id=str(data.get("_id", "")),
            title=data.get("title", ""),
            content=data.get("content", ""),
            file=FileReference.from_dict(file_data) if file_data else None,
        )


@dataclass
class Category:
    """A classification belonging to exactly one guide."""

    id: str
    title: str
    short_description: str
    guide: GuideRef | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        return cls(
            id=str(data.get("_id", "")),
            title=data.get("title", ""),
            short_description=data.get("shortDescription", ""),
            guide=GuideRef.from_value(data.get("guide")),
        )


@dataclass
class DigitalContent:
    """A media-bearing record of a guide, optionally in a category."""

    id: str
    short_description: str
    guide: GuideRef | None = None
    category: CategoryRef | None = None
    file_paths: list[FileReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DigitalContent":
        return cls(
            id=str(data.get("_id", "")),
            short_description=data.get("shortDescription", ""),
            guide=GuideRef.from_value(data.get("guide")),
            category=CategoryRef.from_value(data.get("category")),
            file_paths=[
                FileReference.from_dict(item) for item in data.get("filePaths") or []
            ],
        )

    @property
    def first_file(self) -> FileReference | None:
        """First attachment, the only one shown in lists."""
        return self.file_paths[0] if self.file_paths else None


@dataclass
class GuideContent:
    """A guide together with the categories and contents it owns."""

    guide: Guide
    categories: list[Category] = field(default_factory=list)
    digital_contents: list[DigitalContent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GuideContent":
        return cls(
            guide=Guide.from_dict(data),
            categories=[Category.from_dict(c) for c in data.get("categories") or []],
            digital_contents=[
                DigitalContent.from_dict(d) for d in data.get("digitalContents") or []
            ],
        )
