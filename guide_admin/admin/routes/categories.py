"""Category form routes for Admin UI."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, Response

from guide_admin.admin.entities import CATEGORIES
from guide_admin.admin.templates_config import templates
from guide_admin.core.api import ApiError, get_api_client
from guide_admin.core.models import Category, Guide
from guide_admin.core.services import CategoryService, GuideService

router = APIRouter()


async def _guide_options() -> tuple[list[Guide], str | None]:
    """Guides for the select, plus an error message if they could not be loaded."""
    try:
        return await GuideService(await get_api_client()).list_all(), None
    except ApiError as e:
        return [], e.message


def _render_form(request: Request, category: Category | None, guides: list[Guide],
                 load_error: str | None) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "forms/category.html",
        {
            "category": category,
            "guides": guides,
            "load_error": load_error,
            "list_path": CATEGORIES.list_path,
        },
    )


@router.get("/cadastrar-categoria", response_class=HTMLResponse)
async def new_category_form(request: Request) -> HTMLResponse:
    """Display new category form."""
    guides, load_error = await _guide_options()
    return _render_form(request, None, guides, load_error)


@router.post("/cadastrar-categoria", response_class=HTMLResponse)
async def create_category(
    request: Request,
    title: str = Form(...),
    short_description: str = Form(..., alias="shortDescription"),
    guide: str = Form(...),
) -> Response:
    """
    Create a new category.

    Args:
        request: FastAPI request.
        title: Category title.
        short_description: Short description.
        guide: Owning guide id.

    Returns:
        HTMX redirect to the category list, or the error fragment.
    """
    service = CategoryService(await get_api_client())

    try:
        await service.create(
            {"title": title, "shortDescription": short_description, "guide": guide}
        )
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": CATEGORIES.list_path}
    )


@router.get("/atualizar-categoria/{category_id}", response_class=HTMLResponse)
async def edit_category_form(request: Request, category_id: str) -> Response:
    """Display edit category form."""
    service = CategoryService(await get_api_client())

    try:
        category = await service.get(category_id)
    except ApiError as e:
        return Response(status_code=e.status_code or 502, content=e.message)

    guides, load_error = await _guide_options()
    return _render_form(request, category, guides, load_error)


@router.put("/atualizar-categoria/{category_id}", response_class=HTMLResponse)
async def update_category(
    request: Request,
    category_id: str,
    title: str = Form(...),
    short_description: str = Form(..., alias="shortDescription"),
    guide: str = Form(...),
) -> Response:
    """
    Update a category.

    Args:
        request: FastAPI request.
        category_id: Category id.
        title: Updated title.
        short_description: Updated short description.
        guide: Updated owning guide id.

    Returns:
        HTMX redirect to the category list, or the error fragment.
    """
    service = CategoryService(await get_api_client())

    try:
        await service.update(
            category_id,
            {"title": title, "shortDescription": short_description, "guide": guide},
        )
    except ApiError as e:
        return templates.TemplateResponse(
            request, "forms/_error.html", {"message": e.message}
        )

    return Response(
        status_code=200,
        headers={"HX-Redirect": CATEGORIES.list_path}
    )
