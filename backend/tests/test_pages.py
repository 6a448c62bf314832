"""
PetDemo: Page, Fallback and Health Tests
========================================
"""

import pytest


class TestHome:

    @pytest.mark.asyncio
    async def test_unknown_without_cats(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert '<strong id="currentName">unknown</strong>' in response.text
        assert "Home Page" in response.text

    @pytest.mark.asyncio
    async def test_shows_most_recent_cat(self, test_client):
        await test_client.post("/setName", json={"firstname": "Tom", "lastname": "Cat", "beds": 1})

        response = await test_client.get("/")

        assert '<strong id="currentName">Tom Cat</strong>' in response.text

    @pytest.mark.asyncio
    async def test_store_error_still_renders(self, broken_client):
        response = await broken_client.get("/")

        assert response.status_code == 200
        assert '<strong id="currentName">unknown</strong>' in response.text


class TestListPages:

    @pytest.mark.asyncio
    async def test_page1_lists_cats(self, test_client):
        await test_client.post("/setName", json={"firstname": "Tom", "lastname": "Cat", "beds": 3})
        await test_client.post("/setName", json={"firstname": "Felix", "lastname": "Smith", "beds": 1})

        response = await test_client.get("/page1")

        assert response.status_code == 200
        assert response.text.count('<tr class="cat">') == 2
        assert "Tom Cat" in response.text
        assert "Felix Smith" in response.text

    @pytest.mark.asyncio
    async def test_page4_lists_dogs(self, test_client):
        await test_client.post("/setDogName", json={"name": "Rex", "breed": "Beagle", "age": 4})

        response = await test_client.get("/page4")

        assert response.status_code == 200
        assert response.text.count('<tr class="dog">') == 1
        assert "Beagle" in response.text

    @pytest.mark.asyncio
    async def test_page1_store_error(self, broken_client):
        response = await broken_client.get("/page1")

        assert response.status_code == 500
        assert response.json() == {"error": "failed to find cats"}

    @pytest.mark.asyncio
    async def test_page4_store_error(self, broken_client):
        response = await broken_client.get("/page4")

        assert response.status_code == 500
        assert response.json() == {"error": "failed to find dogs"}


class TestStaticPages:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/page2", "/page3"])
    async def test_static_pages_render(self, test_client, path):
        response = await test_client.get(path)

        assert response.status_code == 200
        assert 'class="api-form"' in response.text

    @pytest.mark.asyncio
    async def test_static_pages_ignore_store(self, broken_client):
        assert (await broken_client.get("/page2")).status_code == 200

    @pytest.mark.asyncio
    async def test_assets_served(self, test_client):
        response = await test_client.get("/assets/client.js")

        assert response.status_code == 200


class TestNotFound:

    @pytest.mark.asyncio
    async def test_unmatched_path(self, test_client):
        response = await test_client.get("/no/such/page")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "<code>/no/such/page</code>" in response.text

    @pytest.mark.asyncio
    async def test_query_string_is_shown(self, test_client):
        response = await test_client.get("/missing", params={"q": "cats"})

        assert "<code>/missing?q=cats</code>" in response.text

    @pytest.mark.asyncio
    async def test_get_on_post_route(self, test_client):
        response = await test_client.get("/setName")

        assert response.status_code == 404
        assert "<code>/setName</code>" in response.text

    @pytest.mark.asyncio
    async def test_post_on_page_route(self, test_client):
        response = await test_client.post("/page1")

        assert response.status_code == 404
        assert "<code>/page1</code>" in response.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/page1", "/page2", "/page3", "/page4"])
    async def test_head_on_pages(self, test_client, path):
        response = await test_client.head(path)

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]


class TestHealthAndHeaders:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy(self, broken_client):
        response = await broken_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/getName", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/page2")

        assert len(response.headers["X-Request-ID"]) == 8
