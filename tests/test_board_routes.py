import random

import pytest

pytest.importorskip("httpx", reason="httpx requis pour les tests client FastAPI")

from fastapi.testclient import TestClient

from app.config.settings import settings
from app.main import app
from app.services.game_lifecycle import NullListener
from app.services.game_store import build_game, reset_game

client = TestClient(app)


@pytest.fixture
def game(fake_client):
    lifecycle = build_game(client=fake_client, rng=random.Random(4), listener=NullListener())
    reset_game(lifecycle)
    yield lifecycle
    reset_game(None)


def test_root_ping():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_health_reports_phase(game):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["phase"] == "IDLE"


def test_board_empty_before_first_load(game):
    response = client.get("/board")
    assert response.status_code == 200
    payload = response.json()
    assert payload["phase"] == "IDLE"
    assert payload["categories"] == []


def test_restart_then_reveal_flow(game):
    restart = client.post("/board/restart")
    assert restart.status_code == 200
    payload = restart.json()
    assert payload["phase"] == "READY"
    assert payload["generation"] == 1
    assert len(payload["categories"]) == payload["category_count"] == 6
    for column in payload["categories"]:
        assert len(column["clues"]) == payload["clues_per_category"] == 5
        assert {cell["text"] for cell in column["clues"]} == {"?"}
        assert {cell["state"] for cell in column["clues"]} == {"hidden"}

    target = game.board.categories[2].clues[1]

    first = client.post("/board/2/1/reveal")
    assert first.status_code == 200
    assert first.json()["message"] == target.question
    assert first.json()["state"] == "question"

    second = client.post("/board/2/1/reveal")
    assert second.json()["message"] == target.answer
    assert second.json()["text"] == target.answer

    third = client.post("/board/2/1/reveal")
    assert third.status_code == 200
    assert third.json()["message"] is None
    assert third.json()["state"] == "answer"

    board = client.get("/board").json()
    cell = board["categories"][2]["clues"][1]
    assert cell == {"row": 1, "state": "answer", "text": target.answer}


def test_reveal_invalid_coordinate(game):
    client.post("/board/restart")

    response = client.post("/board/6/0/reveal")
    assert response.status_code == 404
    assert response.json()["detail"] == "invalid_coordinate"


def test_reveal_before_any_board(game):
    response = client.post("/board/0/0/reveal")
    assert response.status_code == 404


def test_restart_failure_keeps_previous_board(game, fake_client):
    client.post("/board/restart")
    before = client.get("/board").json()
    fake_client.fail_on = set(fake_client.categories)

    response = client.post("/board/restart")

    assert response.status_code == 502
    assert response.json()["detail"] == "data_source_unavailable"
    after = client.get("/board").json()
    assert after == before
    assert after["phase"] == "READY"


def test_restart_with_poor_source(make_client):
    reset_game(build_game(client=make_client(count=3), listener=NullListener()))
    try:
        response = client.post("/board/restart")
        assert response.status_code == 503
        assert response.json()["detail"] == "selection_exhausted"
    finally:
        reset_game(None)


def test_restart_conflict_while_loading(game, monkeypatch):
    monkeypatch.setattr(game, "setup_and_start", lambda: None)

    response = client.post("/board/restart")

    assert response.status_code == 409
    assert response.json()["detail"] == "loading_in_progress"


def test_websocket_snapshot_and_ping(game):
    client.post("/board/restart")

    with client.websocket_connect("/ws/board") as ws:
        first = ws.receive_json()
        assert first["type"] == "board_state"
        assert first["payload"]["phase"] == "READY"
        assert len(first["payload"]["categories"]) == 6

        ws.send_text('{"type": "ping"}')
        assert ws.receive_json() == {"type": "pong"}


def test_websocket_receives_restart_events(fake_client, monkeypatch):
    monkeypatch.setattr(settings, "AUTOSTART", False)
    reset_game(build_game(client=fake_client, rng=random.Random(8)))
    try:
        with TestClient(app) as live:
            with live.websocket_connect("/ws/board") as ws:
                snapshot = ws.receive_json()
                assert snapshot["type"] == "board_state"
                assert snapshot["payload"]["phase"] == "IDLE"

                restart = live.post("/board/restart")
                assert restart.status_code == 200

                assert ws.receive_json() == {"type": "loading_start", "payload": {"restart_enabled": False}}
                assert ws.receive_json()["type"] == "loading_end"
                ready = ws.receive_json()
                assert ready["type"] == "board_ready"
                assert ready["payload"]["categories"] == restart.json()["categories"]

                live.post("/board/0/0/reveal")
                revealed = ws.receive_json()
                assert revealed["type"] == "clue_revealed"
                assert revealed["payload"]["category_index"] == 0
                assert revealed["payload"]["state"] == "question"
    finally:
        reset_game(None)
