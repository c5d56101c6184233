"""Сборка приложения: health, статика и общий формат ошибок."""
import httpx

from editorcraft.main import create_app


async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "EditorCraft API is running"}


async def test_unknown_route(client):
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


async def test_method_not_allowed_uses_error_body(client):
    response = await client.delete("/api/health")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


async def test_embed_script_served(client):
    response = await client.get("/js/editorcraft-embed.js")

    assert response.status_code == 200
    assert "window.EditorCraft" in response.text
    assert "sanitizeHTML" in response.text


async def test_embed_script_uploads_to_its_own_origin(client):
    script = (await client.get("/js/editorcraft-embed.js")).text

    assert "document.currentScript" in script
    assert "SCRIPT_ORIGIN + UPLOAD_PATH" in script
    assert "options.uploadUrl" in script
    assert "'Bearer ' + self.uploadToken" in script


async def test_malformed_json_body(client, alice_headers):
    response = await client.post(
        "/api/editors",
        content=b"{not json",
        headers={**alice_headers, "Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


async def test_unhandled_error_does_not_leak():
    app = create_app()

    @app.get("/api/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/api/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!"}
    assert "hunter2" not in response.text
