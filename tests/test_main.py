"""Application assembly — lifespan initializes the store, routes use the real get_db."""

from httpx import ASGITransport, AsyncClient

import minimal_api.infrastructure.database as db_module
from minimal_api.config import Settings
from minimal_api.main import create_app


async def test_lifespan_serves_todo_crud_end_to_end(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    app = create_app(Settings(_env_file=None, log_format="text"))

    async with app.router.lifespan_context(app):
        assert db_module.db_manager is not None
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            assert (await c.get("/todoItems/")).status_code == 404
            assert (await c.post("/todoItems/", json={"title": "A"})).json() == "Created!"
            todo = (await c.get("/todoItems/")).json()[0]
            assert (await c.put(
                f"/todoItems/{todo['id']}", json={"title": "B", "isCompleted": True},
            )).json() == "Updated!"
            assert (await c.get(f"/todoItems/{todo['id']}")).json() == {
                "id": todo["id"], "title": "B", "isCompleted": True,
            }
            assert (await c.delete(f"/todoItems/{todo['id']}")).json() == "Deleted!"
            assert (await c.get(f"/todoItems/{todo['id']}")).status_code == 404


def test_create_app_uses_settings_for_metadata():
    app = create_app(Settings(_env_file=None, app_name="Todo Service", app_version="2.0.0"))
    assert app.title == "Todo Service"
    assert app.version == "2.0.0"
    paths = {route.path for route in app.routes}
    assert "/todoItems/" in paths
    assert "/todoItems/{entity_id}" in paths
    assert "/health/" in paths


async def test_liveness_reports_settings_given_to_create_app():
    app = create_app(Settings(_env_file=None, app_name="Todo Service", app_version="2.0.0"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/health/")
    assert res.json() == {
        "status": "healthy", "service": "Todo Service", "version": "2.0.0",
    }
