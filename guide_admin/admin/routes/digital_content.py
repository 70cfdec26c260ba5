"""Digital content form routes for Admin UI."""

import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, Response

from guide_admin.admin.entities import DIGITAL_CONTENTS
from guide_admin.admin.templates_config import templates
from guide_admin.admin.uploads import to_file_fields
from guide_admin.core.api import ApiClient, ApiError, get_api_client
from guide_admin.core.models import DigitalContent
from guide_admin.core.services import CategoryService, DigitalContentService, GuideService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _render_form(
    request: Request,
    client: ApiClient,
    content: DigitalContent | None,
) -> HTMLResponse:
    """Render the form with guide and category selects filled from the backend."""
    load_error = None
    try:
        guides = await GuideService(client).list_all()
        categories = await CategoryService(client).list_all()
    except ApiError as e:
        logger.warning(f"Could not load form options: {e.message}")
        guides, categories, load_error = [], [], e.message

    return templates.TemplateResponse(
        request,
        "forms/digital_content.html",
        {
            "content": content,
            "guides": guides,
            "categories": categories,
            "load_error": load_error,
            "list_path": DIGITAL_CONTENTS.list_path,
        },
    )


def _fields(
    short_description: str,
    guide: str,
    category: str,
    clear_category: bool = False,
) -> dict[str, str | None]:
    # On create an empty select is left out; on update it is sent empty
    # so the backend unsets the stored category
    return {
        "shortDescription": short_description,
        "guide": guide,
        "category": category if clear_category else category or None,
    }


@router.get("/cadastrar-conteudo-digital", response_class=HTMLResponse)
async def new_content_form(request: Request) -> HTMLResponse:
    """Display new digital content form."""
    return await _render_form(request, await get_api_client(), None)


@router.post("/cadastrar-conteudo-digital", response_class=HTMLResponse)
async def create_content(
    request: Request,
    short_description: str = Form(..., alias="shortDescription"),
    guide: str = Form(...),
    category: str = Form(""),
    files: list[UploadFile] | None = File(None),
) -> Response:
    """
    Create a digital content record with its attachments.

    Args:
        request: FastAPI request.
        short_description: Short description.
        guide: Owning guide id.
        category: Optional category id.
        files: Attachments, in display order.

    Returns:
        HTMX redirect to the content list, or the error fragment.
    """
    service = DigitalContentService(await get_api_client())
    parts = await to_file_fields("files", files)

    try:
        await service.create(_fields(short_description, guide, category), parts)
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": DIGITAL_CONTENTS.list_path}
    )


@router.get("/atualizar-conteudo-digital/{content_id}", response_class=HTMLResponse)
async def edit_content_form(request: Request, content_id: str) -> Response:
    """Display edit digital content form."""
    client = await get_api_client()

    try:
        content = await DigitalContentService(client).get(content_id)
    except ApiError as e:
        return Response(status_code=e.status_code or 502, content=e.message)

    return await _render_form(request, client, content)


@router.put("/atualizar-conteudo-digital/{content_id}", response_class=HTMLResponse)
async def update_content(
    request: Request,
    content_id: str,
    short_description: str = Form(..., alias="shortDescription"),
    guide: str = Form(...),
    category: str = Form(""),
    files: list[UploadFile] | None = File(None),
) -> Response:
    """
    Update a digital content record.

    New attachments replace the stored ones; none keeps them.
    """
    service = DigitalContentService(await get_api_client())
    parts = await to_file_fields("files", files)

    try:
        await service.update(
            content_id,
            _fields(short_description, guide, category, clear_category=True),
            parts,
        )
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": DIGITAL_CONTENTS.list_path}
    )
