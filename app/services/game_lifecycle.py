"""
Service: game_lifecycle.py
Rôle:
- Orchestration du cycle de vie du plateau : IDLE → LOADING → READY, puis
  READY → LOADING → READY à chaque redémarrage.
- Seul chemin d'écriture "en bloc" du plateau (remplacement atomique).

Séquence `setup_and_start()`:
1) passe en LOADING et prévient la présentation (`on_loading_start`),
2) tire M ids distincts parmi le pool de catégories candidates,
3) charge chaque catégorie dans l'ordre, une par une (pas de parallélisme),
4) remplace le plateau courant par le nouveau (l'ancien est abandonné, pas modifié),
5) passe en READY (`on_loading_end` puis `on_board_ready`).

Échecs:
- Toute erreur annule la séquence : aucun plateau partiel n'est publié,
  l'ancien reste en place, la phase revient à READY (ou IDLE si premier chargement),
  la présentation reçoit `on_loading_end` + `on_load_failed`, et l'erreur est relancée.
- Un appel pendant LOADING est ignoré (retourne None).

API interne exposée aux routes:
- GAME.status(), GAME.board, GAME.phase
- GAME.setup_and_start()
- GAME.reveal(category_index, row_index)
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, Optional, Protocol

from app.models.board import Board, Clue
from app.services.category_loader import CategoryLoader
from app.services.clue_state import reveal_at
from app.utils.random_select import select_unique

logger = logging.getLogger(__name__)

# Phases du plateau
PHASE_IDLE = "IDLE"          # aucun plateau encore publié
PHASE_LOADING = "LOADING"    # construction en cours (redémarrage inerte)
PHASE_READY = "READY"        # plateau jouable


class BoardListener(Protocol):
    """Couche de présentation (front WS, terminal, harnais de test...)."""

    def on_loading_start(self) -> None: ...

    def on_loading_end(self) -> None: ...

    def on_board_ready(self, board: Board) -> None: ...

    def on_load_failed(self, error: Exception) -> None: ...

    def on_clue_revealed(self, category_index: int, row_index: int, clue: Clue, message: Optional[str]) -> None: ...


class NullListener:
    """Présentation muette (défaut)."""

    def on_loading_start(self) -> None:
        pass

    def on_loading_end(self) -> None:
        pass

    def on_board_ready(self, board: Board) -> None:
        pass

    def on_load_failed(self, error: Exception) -> None:
        pass

    def on_clue_revealed(self, category_index: int, row_index: int, clue: Clue, message: Optional[str]) -> None:
        pass


@dataclass
class GameLifecycle:
    client: Any  # expose list_category_ids(count, offset) et get_category(id)
    num_categories: int = 6
    clues_per_category: int = 5
    pool_size: int = 100
    pool_offset: int = 0
    rng: Optional[random.Random] = None
    listener: BoardListener = field(default_factory=NullListener)
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)
    _board: Board = field(default_factory=Board, init=False)
    _phase: str = field(default=PHASE_IDLE, init=False)
    _generation: int = field(default=0, init=False)

    # === état courant ===
    @property
    def board(self) -> Board:
        with self._lock:
            return self._board

    @property
    def phase(self) -> str:
        with self._lock:
            return self._phase

    def status(self) -> Dict[str, Any]:
        """Snapshot synthétique pour l'UI: phase, dimensions, numéro de plateau."""
        with self._lock:
            return {
                "phase": self._phase,
                "generation": self._generation,
                "category_count": self.num_categories,
                "clues_per_category": self.clues_per_category,
                "category_ids": self._board.category_ids(),
            }

    # === cycle ===
    def setup_and_start(self) -> Optional[Board]:
        """Construit et publie un plateau neuf ; None si un chargement est déjà en cours."""
        with self._lock:
            if self._phase == PHASE_LOADING:
                logger.info("Restart ignored, board is loading")
                return None
            previous_phase = self._phase
            self._phase = PHASE_LOADING
        logger.info("Board loading started", extra={"previous_phase": previous_phase})

        try:
            self.listener.on_loading_start()
            board = self._build_board()
        except Exception as exc:
            with self._lock:
                self._phase = PHASE_IDLE if self._board.is_empty() else PHASE_READY
                phase = self._phase
            logger.error(
                "Board loading failed",
                exc_info=True,
                extra={"phase": phase, "error_type": type(exc).__name__},
            )
            self._notify_quietly("on_loading_end")
            self._notify_quietly("on_load_failed", exc)
            raise

        with self._lock:
            self._board = board
            self._generation += 1
            self._phase = PHASE_READY
        logger.info("Board ready", extra={"category_ids": board.category_ids()})
        logger.debug("Board content: %s", board.model_dump(mode="json"))
        self.listener.on_loading_end()
        self.listener.on_board_ready(board)
        return board

    def _notify_quietly(self, hook: str, *args: Any) -> None:
        """Signal d'échec à la présentation ; une erreur ici ne masque pas l'erreur d'origine."""
        try:
            getattr(self.listener, hook)(*args)
        except Exception:
            logger.warning("Listener hook failed", exc_info=True, extra={"hook": hook})

    def _build_board(self) -> Board:
        pool = self.client.list_category_ids(self.pool_size, self.pool_offset)
        category_ids = select_unique(pool, self.num_categories, rng=self.rng)
        logger.debug("Categories selected", extra={"category_ids": category_ids})

        loader = CategoryLoader(self.client, self.clues_per_category, rng=self.rng)
        categories = []
        for category_id in category_ids:
            categories.append(loader.load(category_id))
        return Board(categories=categories)

    # === clics ===
    def reveal(self, category_index: int, row_index: int) -> tuple[Clue, Optional[str]]:
        """Clic sur une case du plateau publié ; InvalidCoordinate si hors plateau."""
        with self._lock:
            clue, message = reveal_at(self._board, category_index, row_index)
        if message is not None:
            self.listener.on_clue_revealed(category_index, row_index, clue, message)
        return clue, message
