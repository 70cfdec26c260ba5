"""
Generic entity list for the Admin UI.

Every list page (guides, categories, digital content) is an EntityList:
the backend resource, its columns, and a projector turning records into
display rows. EntityListController runs the page workflow:

    load -> render grid -> request_delete -> confirm_delete
         -> DELETE -> notification -> reload (on success only)

List state and delete state are separate tagged unions, so a fetch
failure and a delete failure never overwrite each other.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, ClassVar

from guide_admin.core.api.exceptions import ApiError
from guide_admin.core.services.base import EntityService

logger = logging.getLogger(__name__)

TRUNCATE_AT = 30
ELLIPSIS = "..."
PAGE_SIZE = 10


def truncate(text: str | None) -> str:
    """Cut free text of TRUNCATE_AT chars or more down to TRUNCATE_AT plus an ellipsis."""
    if text is None:
        return ""
    if len(text) >= TRUNCATE_AT:
        return text[:TRUNCATE_AT] + ELLIPSIS
    return text


class ColumnKind(StrEnum):
    """How a grid cell is rendered."""
    TEXT = "text"
    IMAGE = "image"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class Column:
    """One grid column."""
    field: str
    header: str
    width: int
    kind: ColumnKind = ColumnKind.TEXT
    hidden: bool = False


# A projected row is a flat field -> display value mapping keyed by Column.field
ProjectedRow = dict[str, Any]


@dataclass(frozen=True)
class EntityList:
    """
    Definition of one list page.

    Attributes:
        slug: URL part after "listar-" (e.g. "categorias").
        service_class: Backend service for the entity.
        columns: Grid columns, including hidden id and action columns.
        project: Maps one record to a ProjectedRow.
        title: Page heading.
        list_label: Accessible label of the grid area.
        create_path: Admin path of the create form.
        confirm_title: Question shown in the delete dialog.
        success_message: Notification after a successful delete.
        fetch_error_message: Static text replacing the grid on fetch failure.
    """
    slug: str
    service_class: type[EntityService]
    columns: tuple[Column, ...]
    project: Callable[[Any], ProjectedRow]
    title: str
    list_label: str
    create_path: str
    confirm_title: str
    success_message: str
    fetch_error_message: str

    @property
    def list_path(self) -> str:
        return f"/admin/listar-{self.slug}"

    @property
    def visible_columns(self) -> tuple[Column, ...]:
        return tuple(c for c in self.columns if not c.hidden)


# --- List state -----------------------------------------------------------


class ListStatus(StrEnum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[ListStatus] = ListStatus.LOADING


@dataclass(frozen=True)
class Ready:
    rows: list[ProjectedRow] = field(default_factory=list)
    status: ClassVar[ListStatus] = ListStatus.READY


@dataclass(frozen=True)
class FetchFailed:
    status: ClassVar[ListStatus] = ListStatus.FAILED


ListState = Loading | Ready | FetchFailed


# --- Delete state ---------------------------------------------------------


class DeleteStatus(StrEnum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    DELETING = "deleting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    status: ClassVar[DeleteStatus] = DeleteStatus.IDLE


@dataclass(frozen=True)
class Confirming:
    record_id: str
    status: ClassVar[DeleteStatus] = DeleteStatus.CONFIRMING


@dataclass(frozen=True)
class Deleting:
    record_id: str
    status: ClassVar[DeleteStatus] = DeleteStatus.DELETING


@dataclass(frozen=True)
class Succeeded:
    record_id: str
    status: ClassVar[DeleteStatus] = DeleteStatus.SUCCEEDED


@dataclass(frozen=True)
class Failed:
    record_id: str
    message: str
    status: ClassVar[DeleteStatus] = DeleteStatus.FAILED


DeleteState = Idle | Confirming | Deleting | Succeeded | Failed


class InvalidTransitionError(Exception):
    """Delete flow step requested from a state that does not allow it."""

    pass


@dataclass(frozen=True)
class Notification:
    """Transient message shown after a delete."""
    message: str
    variant: str  # "success" or "error"


# --- Pagination -----------------------------------------------------------


@dataclass(frozen=True)
class Page:
    """A slice of already-fetched rows."""
    rows: list[ProjectedRow]
    number: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def paginate(rows: list[ProjectedRow], number: int = 1, size: int = PAGE_SIZE) -> Page:
    """Slice rows into a page; out-of-range page numbers are clamped."""
    total_pages = max(1, math.ceil(len(rows) / size))
    number = min(max(number, 1), total_pages)
    start = (number - 1) * size
    return Page(rows=rows[start:start + size], number=number, total_pages=total_pages)


# --- Controller -----------------------------------------------------------


class EntityListController:
    """
    State holder for one list page.

    Usage:
        controller = EntityListController(categories_list, CategoryService(client))
        await controller.load()
        controller.request_delete("5")
        await controller.confirm_delete()
        controller.notification  # success or error message
    """

    def __init__(self, entity: EntityList, service: EntityService) -> None:
        self.entity = entity
        self.service = service
        self.list_state: ListState = Loading()
        self.delete_state: DeleteState = Idle()

    @property
    def rows(self) -> list[ProjectedRow]:
        """Rows of the last successful fetch, empty otherwise."""
        if isinstance(self.list_state, Ready):
            return self.list_state.rows
        return []

    @property
    def pending_id(self) -> str | None:
        """Identifier awaiting confirmation, if any."""
        if isinstance(self.delete_state, Confirming):
            return self.delete_state.record_id
        return None

    @property
    def notification(self) -> Notification | None:
        """Notification for the last delete outcome, if not yet dismissed."""
        if isinstance(self.delete_state, Succeeded):
            return Notification(self.entity.success_message, "success")
        if isinstance(self.delete_state, Failed):
            return Notification(self.delete_state.message, "error")
        return None

    async def load(self) -> ListState:
        """
        Fetch the full collection and project it into rows.

        Any failure (backend error, unreachable backend, bad record)
        moves the list to FetchFailed; no detail is kept.
        """
        try:
            records = await self.service.list_all()
            rows = [self.entity.project(record) for record in records]
        except Exception as e:
            logger.error(f"Failed to load {self.entity.slug}: {e}")
            self.list_state = FetchFailed()
        else:
            self.list_state = Ready(rows)

        return self.list_state

    def request_delete(self, record_id: str) -> DeleteState:
        """Record the delete target and open the confirmation."""
        self.delete_state = Confirming(record_id)
        return self.delete_state

    def cancel_delete(self) -> DeleteState:
        """Close the confirmation without deleting."""
        if not isinstance(self.delete_state, Confirming):
            raise InvalidTransitionError(
                f"Cannot cancel delete from {self.delete_state.status}"
            )
        self.delete_state = Idle()
        return self.delete_state

    async def confirm_delete(self) -> DeleteState:
        """
        Delete the pending record.

        Issues exactly one delete call. On success the list is loaded
        again; on failure the grid is left as it was.

        Raises:
            InvalidTransitionError: If no delete is awaiting confirmation.
        """
        if not isinstance(self.delete_state, Confirming):
            raise InvalidTransitionError(
                f"Cannot confirm delete from {self.delete_state.status}"
            )

        record_id = self.delete_state.record_id
        self.delete_state = Deleting(record_id)

        try:
            await self.service.delete(record_id)
        except ApiError as e:
            logger.warning(f"Delete of {self.entity.slug} {record_id} failed: {e.message}")
            self.delete_state = Failed(record_id, e.message)
            return self.delete_state

        self.delete_state = Succeeded(record_id)
        await self.load()
        return self.delete_state

    def dismiss_notification(self) -> DeleteState:
        """Return to Idle once the outcome notification is closed."""
        if not isinstance(self.delete_state, (Succeeded, Failed)):
            raise InvalidTransitionError(
                f"No notification to dismiss in {self.delete_state.status}"
            )
        self.delete_state = Idle()
        return self.delete_state
