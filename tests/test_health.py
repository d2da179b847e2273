from types import SimpleNamespace
from unittest.mock import Mock

import pytest

pytest.importorskip("httpx", reason="httpx requis pour les tests client FastAPI")

from fastapi.testclient import TestClient

from app.main import app
from app.models.trivia import CategorySummary
from app.routes import health as health_routes
from app.services.errors import DataSourceUnavailable

client = TestClient(app)


def test_health_trivia_ok(monkeypatch):
    stub = SimpleNamespace(list_categories=Mock(return_value=[CategorySummary(id=1, title="potpourri")]))
    monkeypatch.setattr(health_routes, "build_client", lambda: stub)

    response = client.get("/health/trivia")

    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["sample"] == "potpourri"
    stub.list_categories.assert_called_once_with(1)


def test_health_trivia_down(monkeypatch):
    stub = SimpleNamespace(list_categories=Mock(side_effect=DataSourceUnavailable("trivia request failed")))
    monkeypatch.setattr(health_routes, "build_client", lambda: stub)

    response = client.get("/health/trivia")

    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is False
    assert payload["error"] == "trivia request failed"
