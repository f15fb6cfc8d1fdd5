"""
Healthy Breakfast Backend — Status Route Tests
==============================================

What we test:
    ✅ GET / returns the liveness text
    ✅ GET /api returns the greeting text
    ✅ Unknown paths fall through to the framework 404
    ✅ Wrong methods get 405, never the handler's body
    ✅ Repeated requests give identical responses
"""

import pytest


class TestStatusRoutes:
    """The two fixed text endpoints."""

    @pytest.mark.asyncio
    async def test_root_returns_running_message(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.text == "Backend is running"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_api_returns_greeting(self, test_client):
        response = await test_client.get("/api")

        assert response.status_code == 200
        assert response.text == "Hello from Backend"
        assert response.headers["content-type"].startswith("text/plain")


class TestFallthrough:
    """Requests no handler accepts."""

    @pytest.mark.asyncio
    async def test_unknown_path_is_404(self, test_client):
        response = await test_client.get("/unknown")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    @pytest.mark.asyncio
    async def test_nested_unknown_path_is_404(self, test_client):
        response = await test_client.get("/api/unknown")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_post_api_is_method_not_allowed(self, test_client):
        response = await test_client.post("/api")

        assert response.status_code == 405
        assert "Hello from Backend" not in response.text

    @pytest.mark.asyncio
    async def test_delete_root_is_method_not_allowed(self, test_client):
        response = await test_client.delete("/")

        assert response.status_code == 405
        assert "Backend is running" not in response.text


class TestIdempotence:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/api", "/api/menu"])
    async def test_repeated_requests_are_identical(self, test_client, path):
        responses = [await test_client.get(path) for _ in range(5)]

        assert {r.status_code for r in responses} == {200}
        assert len({r.content for r in responses}) == 1
