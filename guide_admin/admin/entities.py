"""
List page definitions: columns and row projectors per entity.
"""

from guide_admin.admin.listing import (
    Column,
    ColumnKind,
    EntityList,
    ProjectedRow,
    truncate,
)
from guide_admin.core.models import Category, CategoryRef, DigitalContent, Guide, GuideRef
from guide_admin.core.services import CategoryService, DigitalContentService, GuideService

GUIDE_UPDATE_PATH = "/admin/atualizar-guia/"
CATEGORY_UPDATE_PATH = "/admin/atualizar-categoria/"
DIGITAL_CONTENT_UPDATE_PATH = "/admin/atualizar-conteudo-digital/"


def _ref_title(ref: GuideRef | CategoryRef | None) -> str:
    """Title of an embedded reference, falling back to its id."""
    if ref is None:
        return ""
    return ref.title if ref.title is not None else ref.id


def project_guide(guide: Guide) -> ProjectedRow:
    return {
        "_id": guide.id,
        "title": truncate(guide.title),
        "content": truncate(guide.content),
        "filePath": guide.file.file_path if guide.file else "",
        "edit": GUIDE_UPDATE_PATH + guide.id,
        "delete": guide.id,
    }


def project_category(category: Category) -> ProjectedRow:
    return {
        "_id": category.id,
        "guide": _ref_title(category.guide),
        "title": category.title,
        "shortDescription": truncate(category.short_description),
        "edit": CATEGORY_UPDATE_PATH + category.id,
        "delete": category.id,
    }


def project_digital_content(content: DigitalContent) -> ProjectedRow:
    first_file = content.first_file
    return {
        "_id": content.id,
        "guide": truncate(_ref_title(content.guide)),
        "category": truncate(_ref_title(content.category)),
        "shortDescription": truncate(content.short_description),
        "filePaths": first_file.file_path if first_file else "",
        "edit": DIGITAL_CONTENT_UPDATE_PATH + content.id,
        "delete": content.id,
    }


ID_COLUMN = Column("_id", "ID", 300, hidden=True)
EDIT_COLUMN = Column("edit", "Editar", 100, ColumnKind.EDIT)
DELETE_COLUMN = Column("delete", "Excluir", 100, ColumnKind.DELETE)


GUIDES = EntityList(
    slug="guias",
    service_class=GuideService,
    columns=(
        ID_COLUMN,
        Column("title", "Título", 250),
        Column("content", "Conteúdo", 300),
        Column("filePath", "Arquivo", 120, ColumnKind.IMAGE),
        EDIT_COLUMN,
        DELETE_COLUMN,
    ),
    project=project_guide,
    title="LISTAGEM DE GUIAS",
    list_label="LISTA DE GUIAS",
    create_path="/admin/cadastrar-guia",
    confirm_title="Deseja excluir esse guia?",
    success_message="Guia deletado com sucesso!",
    fetch_error_message="Desculpe, não foi possível carregar a lista de guias!",
)

CATEGORIES = EntityList(
    slug="categorias",
    service_class=CategoryService,
    columns=(
        ID_COLUMN,
        Column("guide", "Guia", 250),
        Column("title", "Categoria", 200),
        Column("shortDescription", "Descrição", 300),
        EDIT_COLUMN,
        DELETE_COLUMN,
    ),
    project=project_category,
    title="LISTAGEM DE CATEGORIAS",
    list_label="LISTA DE CATEGORIAS",
    create_path="/admin/cadastrar-categoria",
    confirm_title="Deseja excluir essa categoria?",
    success_message="Categoria deletada com sucesso!",
    fetch_error_message="Desculpe, não foi possível carregar a lista de categorias!",
)

DIGITAL_CONTENTS = EntityList(
    slug="conteudo-digital",
    service_class=DigitalContentService,
    columns=(
        Column("_id", "ID", 50, hidden=True),
        Column("guide", "Guia", 250),
        Column("category", "Categoria", 250),
        Column("shortDescription", "Descrição", 280),
        Column("filePaths", "Arquivos", 120, ColumnKind.IMAGE),
        EDIT_COLUMN,
        DELETE_COLUMN,
    ),
    project=project_digital_content,
    title="LISTAGEM DE CONTEÚDO DIGITAL",
    list_label="LISTA DE CONTEÚDO DIGITAL",
    create_path="/admin/cadastrar-conteudo-digital",
    confirm_title="Deseja excluir esse conteúdo digital?",
    success_message="Conteúdo digital deletado com sucesso!",
    fetch_error_message="Desculpe, não foi possível carregar a lista de Conteúdo Digital!",
)

ENTITY_LISTS: dict[str, EntityList] = {
    entity.slug: entity for entity in (GUIDES, CATEGORIES, DIGITAL_CONTENTS)
}
