"""
Tests for Admin UI routes.

Routes run against the FakeBackend from conftest, so the exact backend
calls made by each page can be asserted.
"""

import re
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from guide_admin.admin.app import create_admin_app

ROUTE_MODULES = [
    "guide_admin.admin.routes.listing",
    "guide_admin.admin.routes.guides",
    "guide_admin.admin.routes.categories",
    "guide_admin.admin.routes.digital_content",
]

CATEGORIES = [
    {"_id": "1", "title": "A", "shortDescription": "Primeira", "guide": {"_id": "g1", "title": "Guia"}},
    {"_id": "2", "title": "B", "shortDescription": "Segunda", "guide": {"_id": "g1", "title": "Guia"}},
]


@pytest.fixture
def client(api_client):
    """TestClient whose routes all talk to the fake backend."""
    patches = [
        patch(f"{module}.get_api_client", new_callable=AsyncMock, return_value=api_client)
        for module in ROUTE_MODULES
    ]
    for p in patches:
        p.start()

    yield TestClient(create_admin_app())

    for p in patches:
        p.stop()


def _row_count(html: str) -> int:
    return html.count("data-row-id=")


class TestAdminApp:
    """Tests for admin app configuration."""

    def test_create_admin_app_returns_fastapi(self) -> None:
        """create_admin_app returns a FastAPI instance."""
        assert isinstance(create_admin_app(), FastAPI)

    def test_admin_app_has_routes(self) -> None:
        """Admin app has expected routes configured."""
        routes = [route.path for route in create_admin_app().routes]

        assert "/" in routes

        for slug in ("guias", "categorias", "conteudo-digital"):
            assert f"/listar-{slug}" in routes
            assert f"/listar-{slug}/tabela" in routes
            assert f"/listar-{slug}/excluir/{{record_id}}" in routes
            assert f"/listar-{slug}/{{record_id}}" in routes

        assert "/cadastrar-guia" in routes
        assert "/atualizar-guia/{guide_id}" in routes
        assert "/cadastrar-categoria" in routes
        assert "/atualizar-categoria/{category_id}" in routes
        assert "/cadastrar-conteudo-digital" in routes
        assert "/atualizar-conteudo-digital/{content_id}" in routes


class TestDashboard:
    """Tests for the admin home page."""

    def test_dashboard_links_each_entity(self, client, backend) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "Administrar Guia" in response.text
        assert "Administrar Categorias" in response.text
        assert "Administrar Conteúdo Digital" in response.text
        assert 'href="/admin/listar-guias"' in response.text
        assert 'href="/admin/listar-categorias"' in response.text
        assert 'href="/admin/listar-conteudo-digital"' in response.text
        assert backend.requests == []


class TestListPage:
    """Tests for the list shell and grid fragment."""

    def test_page_shows_loading_and_no_rows(self, client, backend) -> None:
        """Before the grid is fetched: loading indicator, zero rows."""
        response = client.get("/listar-categorias")

        assert response.status_code == 200
        assert "LISTAGEM DE CATEGORIAS" in response.text
        assert 'data-testid="loading"' in response.text
        assert 'hx-get="/admin/listar-categorias/tabela"' in response.text
        assert _row_count(response.text) == 0
        assert backend.requests == []

    def test_grid_renders_one_row_per_record(self, client, backend) -> None:
        backend.respond("GET", "/categories/", {"data": CATEGORIES})

        response = client.get("/listar-categorias/tabela")

        assert response.status_code == 200
        assert _row_count(response.text) == 2
        assert re.search(r"<td>\s*A\s*</td>", response.text)
        assert re.search(r"<td>\s*B\s*</td>", response.text)
        assert 'data-row-id="1"' in response.text
        assert 'data-row-id="2"' in response.text
        assert 'href="/admin/atualizar-categoria/1"' in response.text
        assert len(backend.calls("GET", "/categories/")) == 1

    def test_grid_shows_localized_headers(self, client, backend) -> None:
        backend.respond("GET", "/categories/", {"data": CATEGORIES})

        response = client.get("/listar-categorias/tabela")

        for header in ("Guia", "Categoria", "Descrição", "Editar", "Excluir"):
            assert f">{header}</th>" in response.text
        assert ">ID</th>" not in response.text

    def test_grid_fetch_failure_shows_fixed_message(self, client, backend) -> None:
        backend.respond("GET", "/categories/", {"message": "DB down"}, status=500)

        response = client.get("/listar-categorias/tabela")

        assert response.status_code == 200
        assert "Desculpe, não foi possível carregar a lista de categorias!" in response.text
        assert "DB down" not in response.text
        assert _row_count(response.text) == 0

    def test_grid_unreachable_backend(self, client, backend) -> None:
        backend.unreachable = True

        response = client.get("/listar-conteudo-digital/tabela")

        assert "Desculpe, não foi possível carregar a lista de Conteúdo Digital!" in response.text

    def test_digital_content_grid_has_thumbnail(self, client, backend) -> None:
        backend.respond("GET", "/digital-content/", {"data": [{
            "_id": "d1",
            "shortDescription": "Vídeo",
            "guide": {"_id": "g1", "title": "Guia"},
            "category": {"_id": "c1", "title": "Cat"},
            "filePaths": [
                {"filePath": "http://cdn/one.png", "publicId": "1"},
                {"filePath": "http://cdn/two.png", "publicId": "2"},
            ],
        }]})

        response = client.get("/listar-conteudo-digital/tabela")

        assert '<img src="http://cdn/one.png"' in response.text
        assert "two.png" not in response.text

    def test_grid_paginates_by_ten(self, client, backend) -> None:
        records = [
            {"_id": str(i), "title": f"T{i}", "shortDescription": "", "guide": "g1"}
            for i in range(12)
        ]
        backend.respond("GET", "/categories/", {"data": records})

        first = client.get("/listar-categorias/tabela")
        second = client.get("/listar-categorias/tabela?pagina=2")

        assert _row_count(first.text) == 10
        assert _row_count(second.text) == 2
        # Full collection requested both times, no paging parameters
        assert all(r.url.query == b"" for r in backend.requests)


class TestDeleteFlow:
    """Tests for the two-step delete."""

    def test_delete_click_makes_no_backend_call(self, client, backend) -> None:
        response = client.get("/listar-categorias/excluir/5")

        assert response.status_code == 200
        assert "Deseja excluir essa categoria?" in response.text
        assert 'hx-delete="/admin/listar-categorias/5?pagina=1"' in response.text
        assert backend.requests == []

    def test_dialog_carries_current_page(self, client, backend) -> None:
        response = client.get("/listar-categorias/excluir/5?pagina=3")

        assert 'hx-delete="/admin/listar-categorias/5?pagina=3"' in response.text

    def test_grid_delete_buttons_carry_current_page(self, client, backend) -> None:
        records = [
            {"_id": str(i), "title": f"T{i}", "shortDescription": "", "guide": "g1"}
            for i in range(12)
        ]
        backend.respond("GET", "/categories/", {"data": records})

        response = client.get("/listar-categorias/tabela?pagina=2")

        assert 'hx-get="/admin/listar-categorias/excluir/10?pagina=2"' in response.text

    def test_delete_refreshes_the_same_page(self, client, backend) -> None:
        """Deleting on page 3 re-renders page 3, not page 1."""
        records = [
            {"_id": str(i), "title": f"T{i}", "shortDescription": "", "guide": "g1"}
            for i in range(25)
        ]
        backend.respond("DELETE", "/categories/21", {"data": {"_id": "21"}})
        backend.respond("GET", "/categories/", {"data": records})

        response = client.delete("/listar-categorias/21?pagina=3")

        assert "3 de 3" in response.text
        assert _row_count(response.text) == 5
        assert 'data-row-id="20"' in response.text

    def test_confirm_deletes_once_then_refetches_once(self, client, backend) -> None:
        backend.respond("DELETE", "/categories/5", {"data": {"_id": "5"}})
        backend.respond("GET", "/categories/", {"data": CATEGORIES})

        response = client.delete("/listar-categorias/5")

        assert response.status_code == 200
        assert [(r.method, r.url.path) for r in backend.requests] == [
            ("DELETE", "/categories/5"),
            ("GET", "/categories/"),
        ]
        assert "Categoria deletada com sucesso!" in response.text
        assert 'class="notification success"' in response.text
        # Refreshed grid swapped in out of band
        assert 'id="grid"' in response.text
        assert _row_count(response.text) == 2

    def test_delete_failure_shows_server_message(self, client, backend) -> None:
        backend.respond("DELETE", "/categories/5", {"message": "Cannot delete"}, status=400)

        response = client.delete("/listar-categorias/5")

        assert response.status_code == 200
        assert "Cannot delete" in response.text
        assert 'class="notification error"' in response.text
        assert backend.calls("GET") == []
        assert 'id="grid"' not in response.text

    def test_delete_closes_dialog(self, client, backend) -> None:
        backend.respond("DELETE", "/digital-content/9", {"data": {"_id": "9"}})
        backend.respond("GET", "/digital-content/", {"data": []})

        response = client.delete("/listar-conteudo-digital/9")

        assert '<div id="confirmation" hx-swap-oob="true"></div>' in response.text
        assert "Conteúdo digital deletado com sucesso!" in response.text


class TestCategoryForms:
    """Tests for category create and update."""

    def test_new_form_lists_guides(self, client, backend) -> None:
        backend.respond("GET", "/guides/", {"data": [
            {"_id": "g1", "title": "Guia Um", "content": ""},
        ]})

        response = client.get("/cadastrar-categoria")

        assert response.status_code == 200
        assert '<option value="g1"' in response.text
        assert "Guia Um" in response.text

    def test_create_redirects_to_list(self, client, backend) -> None:
        backend.respond("POST", "/categories/", {"data": {"_id": "c1", "title": "Nova"}})

        response = client.post("/cadastrar-categoria", data={
            "title": "Nova",
            "shortDescription": "Desc",
            "guide": "g1",
        })

        assert response.status_code == 200
        assert response.headers["HX-Redirect"] == "/admin/listar-categorias"
        assert len(backend.calls("POST", "/categories/")) == 1

    def test_create_failure_shows_message(self, client, backend) -> None:
        backend.respond("POST", "/categories/", {"message": "Título já existe"}, status=409)

        response = client.post("/cadastrar-categoria", data={
            "title": "Nova",
            "shortDescription": "Desc",
            "guide": "g1",
        })

        assert "HX-Redirect" not in response.headers
        assert "Título já existe" in response.text

    def test_edit_form_prefilled(self, client, backend) -> None:
        backend.respond("GET", "/categories/c1", {"data": {
            "_id": "c1", "title": "Existente", "shortDescription": "Desc", "guide": "g1",
        }})
        backend.respond("GET", "/guides/", {"data": [{"_id": "g1", "title": "Guia", "content": ""}]})

        response = client.get("/atualizar-categoria/c1")

        assert response.status_code == 200
        assert 'value="Existente"' in response.text
        assert 'hx-put="/admin/atualizar-categoria/c1"' in response.text
        assert '<option value="g1" selected>' in response.text

    def test_edit_missing_category_returns_404(self, client, backend) -> None:
        response = client.get("/atualizar-categoria/missing")

        assert response.status_code == 404

    def test_update_sends_put(self, client, backend) -> None:
        backend.respond("PUT", "/categories/c1", {"data": {"_id": "c1", "title": "X"}})

        response = client.put("/atualizar-categoria/c1", data={
            "title": "X",
            "shortDescription": "Desc",
            "guide": "g1",
        })

        assert response.headers["HX-Redirect"] == "/admin/listar-categorias"
        assert len(backend.calls("PUT", "/categories/c1")) == 1


class TestGuideForms:
    """Tests for guide create and update."""

    def test_create_uploads_file(self, client, backend) -> None:
        backend.respond("POST", "/guides/", {"data": {"_id": "g1", "title": "G", "content": "C"}})

        response = client.post(
            "/cadastrar-guia",
            data={"title": "G", "content": "C"},
            files={"file": ("capa.png", b"\x89PNG", "image/png")},
        )

        assert response.headers["HX-Redirect"] == "/admin/listar-guias"
        request = backend.calls("POST", "/guides/")[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="capa.png"' in request.read()

    def test_edit_form_shows_current_file(self, client, backend) -> None:
        backend.respond("GET", "/guides/g1", {"data": {
            "_id": "g1", "title": "Guia", "content": "Texto",
            "filePaths": {"filePath": "http://cdn/capa.png", "publicId": "capa"},
        }})

        response = client.get("/atualizar-guia/g1")

        assert response.status_code == 200
        assert 'src="http://cdn/capa.png"' in response.text

    def test_update_without_new_file_sends_multipart(self, client, backend) -> None:
        """Keeping the current cover still sends a multipart form."""
        backend.respond("PUT", "/guides/g1", {"data": {"_id": "g1", "title": "G", "content": "C"}})

        response = client.put("/atualizar-guia/g1", data={"title": "G", "content": "C"})

        assert response.headers["HX-Redirect"] == "/admin/listar-guias"
        request = backend.calls("PUT", "/guides/g1")[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="title"' in body
        assert b"filename=" not in body

    def test_edit_unreachable_backend_returns_502(self, client, backend) -> None:
        backend.unreachable = True

        response = client.get("/atualizar-guia/g1")

        assert response.status_code == 502
        assert "Serviço não disponível" in response.text


class TestDigitalContentForms:
    """Tests for digital content create and update."""

    def test_new_form_lists_guides_and_categories(self, client, backend) -> None:
        backend.respond("GET", "/guides/", {"data": [{"_id": "g1", "title": "Guia", "content": ""}]})
        backend.respond("GET", "/categories/", {"data": CATEGORIES})

        response = client.get("/cadastrar-conteudo-digital")

        assert '<option value="g1"' in response.text
        assert '<option value="1"' in response.text
        assert '<option value="2"' in response.text

    def test_new_form_options_failure_shows_message(self, client, backend) -> None:
        backend.unreachable = True

        response = client.get("/cadastrar-conteudo-digital")

        assert response.status_code == 200
        assert "Serviço não disponível" in response.text

    def test_create_without_category(self, client, backend) -> None:
        backend.respond("POST", "/digital-content/", {"data": {"_id": "d1", "shortDescription": "x"}})

        response = client.post(
            "/cadastrar-conteudo-digital",
            data={"shortDescription": "x", "guide": "g1", "category": ""},
            files=[
                ("files", ("a.png", b"a", "image/png")),
                ("files", ("b.png", b"b", "image/png")),
            ],
        )

        assert response.headers["HX-Redirect"] == "/admin/listar-conteudo-digital"
        body = backend.calls("POST", "/digital-content/")[0].read()
        assert b'name="category"' not in body
        assert body.count(b'name="files"') == 2

    def test_update_without_files_clears_category(self, client, backend) -> None:
        backend.respond("PUT", "/digital-content/d1", {"data": {"_id": "d1", "shortDescription": "x"}})

        response = client.put(
            "/atualizar-conteudo-digital/d1",
            data={"shortDescription": "x", "guide": "g1", "category": ""},
        )

        assert response.headers["HX-Redirect"] == "/admin/listar-conteudo-digital"
        request = backend.calls("PUT", "/digital-content/d1")[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="category"' in body
        assert b'name="files"' not in body
