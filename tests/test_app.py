"""Tests for application assembly: entry points and CORS."""

import importlib

from mangum import Mangum

from task_manager.config import Settings
from task_manager.middleware.cors import allowed_origins


def test_wsgi_builds_app_from_environment(monkeypatch):
    monkeypatch.setenv("AUTH_SECRET", "wsgi-signing-secret-0123456789abcdef")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")

    import task_manager.wsgi as wsgi

    wsgi = importlib.reload(wsgi)
    assert isinstance(wsgi.handler, Mangum)
    assert wsgi.app.state.settings.database_url == "sqlite://"


def test_development_origins_include_localhost_and_frontend():
    settings = Settings(auth_secret="abc", frontend_url="https://tasks.example.com")
    origins = allowed_origins(settings)
    assert "http://localhost:3000" in origins
    assert "https://tasks.example.com" in origins


def test_production_origins_only_frontend():
    settings = Settings(
        auth_secret="abc",
        environment="production",
        frontend_url="https://tasks.example.com",
    )
    assert allowed_origins(settings) == ["https://tasks.example.com"]


def test_cors_preflight_allowed_for_frontend(client):
    response = client.options(
        "/tasks",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
