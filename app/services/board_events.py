"""
Service: board_events.py
Rôle :
- Implémentation WebSocket de la couche de présentation (`BoardListener`).
- Traduit chaque signal du cycle de vie en un message typé diffusé à tous les écrans.

Messages :
- {"type": "loading_start"}                      → le front affiche le spinner, désactive "Restart"
- {"type": "loading_end"}                        → spinner masqué, bouton "Restart Game" réactivé
- {"type": "board_ready", "payload": {...}}      → le front reconstruit sa grille
- {"type": "load_failed", "payload": {error}}    → message d'erreur utilisateur
- {"type": "clue_revealed", "payload": {...}}    → mise à jour d'une seule case
"""
import logging
from typing import Optional

from app.models.board import Board, Clue
from app.services.board_view import public_board_view, public_clue_view
from app.services.ws_manager import ws_broadcast_type_safe

logger = logging.getLogger(__name__)

RESTART_LABEL = "Restart Game"


class WebSocketListener:
    def on_loading_start(self) -> None:
        ws_broadcast_type_safe("loading_start", {"restart_enabled": False})

    def on_loading_end(self) -> None:
        ws_broadcast_type_safe("loading_end", {"restart_enabled": True, "restart_label": RESTART_LABEL})

    def on_board_ready(self, board: Board) -> None:
        ws_broadcast_type_safe("board_ready", {"categories": public_board_view(board)})

    def on_load_failed(self, error: Exception) -> None:
        logger.warning("Notifying screens of load failure", extra={"error": str(error)})
        ws_broadcast_type_safe(
            "load_failed",
            {"error": type(error).__name__, "detail": str(error)},
        )

    def on_clue_revealed(self, category_index: int, row_index: int, clue: Clue, message: Optional[str]) -> None:
        payload = public_clue_view(row_index, clue)
        payload["category_index"] = category_index
        ws_broadcast_type_safe("clue_revealed", payload)
