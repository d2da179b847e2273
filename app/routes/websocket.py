# app/routes/websocket.py
"""
WebSocket endpoints.

- /ws/board : flux des écrans de jeu. Premier message = snapshot `board_state`,
  puis les évènements du cycle de vie (loading_start, board_ready, clue_revealed...).
  Ping/pong pour heartbeat, ACK générique pour le reste.
"""
from __future__ import annotations

import json

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.services.board_view import public_board_view
from app.services.game_store import get_game
from app.services.ws_manager import WS

router = APIRouter()


@router.websocket("/ws/board")
async def websocket_board(ws: WebSocket):
    await WS.connect(ws)
    game = get_game()
    await WS.send_json(
        ws,
        {
            "type": "board_state",
            "payload": {"phase": game.phase, "categories": public_board_view(game.board)},
        },
    )
    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                # Message non JSON -> ignore
                continue

            if isinstance(msg, dict) and msg.get("type") == "ping":
                await WS.send_json(ws, {"type": "pong"})
            else:
                await WS.send_json(ws, {"type": "ack", "received": msg})
    except WebSocketDisconnect:
        pass
    finally:
        await WS.disconnect(ws)
