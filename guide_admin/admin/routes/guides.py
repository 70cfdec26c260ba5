"""Guide form routes for Admin UI."""

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, Response

from guide_admin.admin.entities import GUIDES
from guide_admin.admin.templates_config import templates
from guide_admin.admin.uploads import to_file_fields
from guide_admin.core.api import ApiError, get_api_client
from guide_admin.core.services import GuideService

router = APIRouter()


@router.get("/cadastrar-guia", response_class=HTMLResponse)
async def new_guide_form(request: Request) -> HTMLResponse:
    """
    Display new guide form.

    Args:
        request: FastAPI request.

    Returns:
        New guide form HTML.
    """
    return templates.TemplateResponse(
        request,
        "forms/guide.html",
        {"guide": None, "list_path": GUIDES.list_path},
    )


@router.post("/cadastrar-guia", response_class=HTMLResponse)
async def create_guide(
    request: Request,
    title: str = Form(...),
    content: str = Form(...),
    file: UploadFile | None = File(None),
) -> Response:
    """
    Create a new guide.

    Args:
        request: FastAPI request.
        title: Guide title.
        content: Guide body text.
        file: Cover file.

    Returns:
        HTMX redirect to the guide list, or the error fragment.
    """
    service = GuideService(await get_api_client())
    files = await to_file_fields("file", [file] if file else [])

    try:
        await service.create({"title": title, "content": content}, files)
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": GUIDES.list_path}
    )


@router.get("/atualizar-guia/{guide_id}", response_class=HTMLResponse)
async def edit_guide_form(request: Request, guide_id: str) -> Response:
    """
    Display edit guide form.

    Args:
        request: FastAPI request.
        guide_id: Guide id.

    Returns:
        Edit guide form HTML.
    """
    service = GuideService(await get_api_client())

    try:
        guide = await service.get(guide_id)
    except ApiError as e:
        return Response(status_code=e.status_code or 502, content=e.message)

    return templates.TemplateResponse(
        request,
        "forms/guide.html",
        {"guide": guide, "list_path": GUIDES.list_path},
    )


@router.put("/atualizar-guia/{guide_id}", response_class=HTMLResponse)
async def update_guide(
    request: Request,
    guide_id: str,
    title: str = Form(...),
    content: str = Form(...),
    file: UploadFile | None = File(None),
) -> Response:
    """
    Update a guide.

    Args:
        request: FastAPI request.
        guide_id: Guide id.
        title: Updated title.
        content: Updated body text.
        file: Replacement file; omitted keeps the current one.

    Returns:
        HTMX redirect to the guide list, or the error fragment.
    """
    service = GuideService(await get_api_client())
    files = await to_file_fields("file", [file] if file else [])

    try:
        await service.update(guide_id, {"title": title, "content": content}, files)
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": GUIDES.list_path}
    )
