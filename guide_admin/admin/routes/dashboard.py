"""Dashboard routes for Admin UI."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from guide_admin.admin.entities import CATEGORIES, DIGITAL_CONTENTS, GUIDES
from guide_admin.admin.templates_config import templates

router = APIRouter()

SECTIONS = [
    ("Administrar Guia", GUIDES.list_path),
    ("Administrar Categorias", CATEGORIES.list_path),
    ("Administrar Conteúdo Digital", DIGITAL_CONTENTS.list_path),
]


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request) -> HTMLResponse:
    """
    Display the admin home with one entry per managed entity.

    Args:
        request: FastAPI request.

    Returns:
        Dashboard page HTML.
    """
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"sections": SECTIONS},
    )
