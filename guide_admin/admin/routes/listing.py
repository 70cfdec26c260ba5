"""
Entity list routes for Admin UI.

One router per EntityList, all built by build_list_router():

    GET    /listar-<slug>                  page shell, grid loads via HTMX
    GET    /listar-<slug>/tabela           grid fragment (fetches the collection)
    GET    /listar-<slug>/excluir/{id}     confirmation dialog (no backend call)
    DELETE /listar-<slug>/{id}             confirmed delete + notification
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from guide_admin.admin.listing import EntityList, EntityListController, paginate
from guide_admin.admin.templates_config import templates
from guide_admin.core.api.client import get_api_client

logger = logging.getLogger(__name__)


async def make_controller(entity: EntityList) -> EntityListController:
    """Build a controller bound to the shared backend client."""
    client = await get_api_client()
    return EntityListController(entity, entity.service_class(client))


def build_list_router(entity: EntityList) -> APIRouter:
    """
    Create the list, dialog and delete routes for one entity.

    Args:
        entity: List page definition.

    Returns:
        Router mounted under /listar-<slug>.
    """
    router = APIRouter(prefix=f"/listar-{entity.slug}")

    @router.get("", response_class=HTMLResponse)
    async def list_page(request: Request) -> HTMLResponse:
        """Page shell in the loading state; the grid is fetched on load."""
        return templates.TemplateResponse(
            request,
            "listing/page.html",
            {"entity": entity},
        )

    @router.get("/tabela", response_class=HTMLResponse)
    async def grid(request: Request, pagina: int = 1) -> HTMLResponse:
        """Fetch the collection and render the grid, or the failure message."""
        controller = await make_controller(entity)
        await controller.load()

        return templates.TemplateResponse(
            request,
            "listing/_grid.html",
            {
                "entity": entity,
                "controller": controller,
                "page": paginate(controller.rows, pagina),
            },
        )

    @router.get("/excluir/{record_id}", response_class=HTMLResponse)
    async def confirm_dialog(
        request: Request, record_id: str, pagina: int = 1
    ) -> HTMLResponse:
        """Open the confirmation for record_id, replacing any open one."""
        controller = await make_controller(entity)
        controller.request_delete(record_id)

        return templates.TemplateResponse(
            request,
            "listing/_confirm.html",
            {"entity": entity, "controller": controller, "pagina": pagina},
        )

    @router.delete("/{record_id}", response_class=HTMLResponse)
    async def delete_record(
        request: Request, record_id: str, pagina: int = 1
    ) -> HTMLResponse:
        """
        Delete a confirmed record.

        Returns the notification; on success also the refreshed grid
        as an out-of-band swap, kept on page `pagina` when it still exists.
        """
        controller = await make_controller(entity)
        controller.request_delete(record_id)
        await controller.confirm_delete()

        return templates.TemplateResponse(
            request,
            "listing/_delete_result.html",
            {
                "entity": entity,
                "controller": controller,
                "notification": controller.notification,
                "page": paginate(controller.rows, pagina),
            },
        )

    return router
