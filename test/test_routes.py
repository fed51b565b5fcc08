"""
Admin Locale Route Tests

Test classes:
    TestRouteRegistration  — paths mounted on the app
    TestListRoute          — listing + ?locale= filter
    TestFilterRoute        — filter definition
    TestFieldRoutes        — resolve + save locale field
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import TestSessionLocal


class TestRouteRegistration:
    def _path_for(self, name, **params):
        from main import app

        return app.url_path_for(name, **params)

    def test_list_path_registered(self):
        assert self._path_for("list_resource_records", resource="pages") == "/api/v1/admin/resources/pages"

    def test_filter_path_registered(self):
        assert self._path_for("get_locale_filter", resource="pages") == "/api/v1/admin/resources/pages/filters/locale"

    def test_field_path_registered(self):
        expected = "/api/v1/admin/resources/pages/1/fields/locale"
        assert self._path_for("get_locale_field", resource="pages", record_id="1") == expected
        assert self._path_for("update_locale_field", resource="pages", record_id="1") == expected

    def test_root(self):
        from main import app

        response = TestClient(app).get("/")
        assert response.status_code == 200
        assert "message" in response.json()


class TestListRoute:
    async def test_lists_all(self, api_client, page_group):
        page_a, page_b = page_group
        response = await api_client.get("/api/v1/admin/resources/pages")
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["label"] == "Pages"
        assert [item["id"] for item in body["items"]] == [page_a.id, page_b.id]
        assert body["items"][0]["title"] == "Home"

    async def test_locale_filter(self, api_client, page_group):
        _, page_b = page_group
        response = await api_client.get("/api/v1/admin/resources/pages", params={"locale": "fr"})
        assert response.status_code == 200
        assert [item["id"] for item in response.json()["items"]] == [page_b.id]

    async def test_locale_filter_no_match(self, api_client, page_group):
        response = await api_client.get("/api/v1/admin/resources/pages", params={"locale": "de"})
        assert response.status_code == 200
        assert response.json()["items"] == []

    async def test_unknown_resource(self, api_client):
        response = await api_client.get("/api/v1/admin/resources/widgets")
        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"


class TestFilterRoute:
    async def test_filter_definition(self, api_client):
        response = await api_client.get("/api/v1/admin/resources/pages/filters/locale")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Locale"
        assert body["currentValue"] == "en"
        assert {"label": "French", "value": "fr"} in body["options"]


class TestFieldRoutes:
    async def test_get_field_for_root(self, api_client, page_group):
        page_a, page_b = page_group
        response = await api_client.get(f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale")
        assert response.status_code == 200
        body = response.json()
        assert body["component"] == "locale-field"
        assert body["value"]["existingLocalisations"] == {"fr": page_b.id}
        assert body["resources"] == {str(page_a.id): "Home"}
        assert body["rules"] == ["required", "in:en,fr,de"]
        assert body["showOnIndex"] is True

    async def test_get_field_for_child(self, api_client, page_group):
        page_a, page_b = page_group
        response = await api_client.get(f"/api/v1/admin/resources/pages/{page_b.id}/fields/locale")
        assert response.status_code == 200
        assert response.json()["value"]["existingLocalisations"] == {"en": page_a.id}

    async def test_get_field_hidden_on_index_with_many_locales(self, api_client, page_group, locale_config):
        from conftest import FIVE_LOCALES

        locale_config.locales = dict(FIVE_LOCALES)
        page_a, _ = page_group
        response = await api_client.get(f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale")
        assert response.json()["showOnIndex"] is False

    async def test_get_missing_record(self, api_client):
        response = await api_client.get("/api/v1/admin/resources/pages/999/fields/locale")
        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource_type"] == "Page"

    async def test_put_links_record_into_group(self, api_client, page_group, make_page):
        from admin_locale.models.page import Page

        page_a, page_b = page_group
        page_c = await make_page("Startseite", "en")

        response = await api_client.put(
            f"/api/v1/admin/resources/pages/{page_c.id}/fields/locale",
            json={"locale": "de", "locale_parent_id": page_a.id},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["value"]["locale"] == "de"
        assert body["value"]["localeParentId"] == page_a.id
        assert body["value"]["existingLocalisations"] == {"en": page_a.id, "fr": page_b.id}

        async with TestSessionLocal() as session:
            saved = await session.get(Page, page_c.id)
            assert saved.locale == "de"
            assert saved.locale_parent_id == page_a.id

    async def test_put_rejects_unknown_locale(self, api_client, page_group):
        page_a, _ = page_group
        response = await api_client.put(
            f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale",
            json={"locale": "es"},
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["error_code"] == "VALIDATION_FAILED"
        assert error["details"]["field"] == "locale"

    async def test_put_requires_locale(self, api_client, page_group):
        page_a, _ = page_group
        response = await api_client.put(
            f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale",
            json={"locale_parent_id": None},
        )
        assert response.status_code == 400

    async def test_put_rejects_list_locale(self, api_client, page_group):
        page_a, _ = page_group
        response = await api_client.put(
            f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale",
            json={"locale": ["en"]},
        )
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "locale"

    async def test_put_rejects_non_integer_parent(self, api_client, page_group):
        from admin_locale.models.page import Page

        page_a, page_b = page_group
        response = await api_client.put(
            f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale",
            json={"locale": "en", "locale_parent_id": "abc"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "locale_parent_id"

        async with TestSessionLocal() as session:
            saved = await session.get(Page, page_a.id)
            assert saved.locale_parent_id is None

        response = await api_client.get(f"/api/v1/admin/resources/pages/{page_a.id}/fields/locale")
        assert response.json()["value"]["existingLocalisations"] == {"fr": page_b.id}
