"""
Template configuration for Admin UI.

Provides a shared Jinja2Templates instance with the correct path.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from guide_admin.admin.listing import ColumnKind, DeleteStatus, ListStatus

_templates_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(_templates_dir))

# Enums used for branching inside templates
templates.env.globals.update(
    ColumnKind=ColumnKind,
    DeleteStatus=DeleteStatus,
    ListStatus=ListStatus,
)
