"""
Base entity service.

Every backend resource exposes the same five endpoints; EntityService
implements them once and concrete services only name the resource and
the record type.
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from guide_admin.core.api.client import ApiClient, FileField

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityService(Generic[T]):
    """
    CRUD access to one backend resource.

    Subclasses set `resource` (the URL segment) and `model`
    (a record class with a from_dict constructor).
    """

    resource: ClassVar[str]
    model: ClassVar[type]

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    @property
    def collection_path(self) -> str:
        return f"/{self.resource}/"

    def record_path(self, record_id: str) -> str:
        return f"/{self.resource}/{record_id}"

    async def list_all(self) -> list[T]:
        """Fetch the full collection."""
        data = await self.client.get(self.collection_path)
        records = [self.model.from_dict(item) for item in data or []]
        logger.debug(f"Fetched {len(records)} {self.resource}")
        return records

    async def get(self, record_id: str) -> T:
        """Fetch one record by id."""
        data = await self.client.get(self.record_path(record_id))
        return self.model.from_dict(data)

    async def create(
        self,
        fields: dict[str, Any],
        files: list[FileField] | None = None,
    ) -> T:
        """Create a record and return it as stored by the backend."""
        data = await self.client.post(self.collection_path, **self._payload(fields, files))
        record = self.model.from_dict(data)
        logger.info(f"Created {self.resource} record {getattr(record, 'id', '')}")
        return record

    async def update(
        self,
        record_id: str,
        fields: dict[str, Any],
        files: list[FileField] | None = None,
    ) -> T:
        """Update a record and return it as stored by the backend."""
        data = await self.client.put(
            self.record_path(record_id), **self._payload(fields, files)
        )
        logger.info(f"Updated {self.resource} record {record_id}")
        return self.model.from_dict(data)

    async def delete(self, record_id: str) -> None:
        """Delete a record."""
        await self.client.delete(self.record_path(record_id))
        logger.info(f"Deleted {self.resource} record {record_id}")

    def _payload(
        self,
        fields: dict[str, Any],
        files: list[FileField] | None,
    ) -> dict[str, Any]:
        """JSON body by default; subclasses with attachments send multipart."""
        return {"json": fields}


class MultipartEntityService(EntityService[T]):
    """Entity service whose create and update calls are multipart forms."""

    def _payload(
        self,
        fields: dict[str, Any],
        files: list[FileField] | None,
    ) -> dict[str, Any]:
        # Fields go out as filename-less parts so the body is multipart
        # whether or not a file is attached
        parts: list[FileField] = [
            (key, (None, str(value)))
            for key, value in fields.items()
            if value is not None
        ]
        return {"files": parts + list(files or [])}
