"""
Game store
==========

Expose l'unique `GameLifecycle` du process, construit à la demande depuis `settings`
(client trivia, RNG éventuellement graine, présentation WebSocket).
`reset_game()` permet aux tests d'injecter un cycle de vie alimenté par un faux client.
"""
from __future__ import annotations

import random
from threading import RLock
from typing import Optional

from app.config.settings import settings
from .board_events import WebSocketListener
from .game_lifecycle import GameLifecycle
from .trivia_client import build_client

_GAME: Optional[GameLifecycle] = None
_LOCK = RLock()


def build_game(client=None, rng: Optional[random.Random] = None, listener=None) -> GameLifecycle:
    """Assemble un cycle de vie selon la configuration courante."""
    if rng is None and settings.RANDOM_SEED is not None:
        rng = random.Random(settings.RANDOM_SEED)
    return GameLifecycle(
        client=client or build_client(),
        num_categories=settings.NUM_CATEGORIES,
        clues_per_category=settings.NUM_CLUES_PER_CAT,
        pool_size=settings.CATEGORY_POOL_SIZE,
        pool_offset=settings.CATEGORY_POOL_OFFSET,
        rng=rng,
        listener=listener or WebSocketListener(),
    )


def get_game() -> GameLifecycle:
    """Garantit une unique instance `GameLifecycle` pour tout le backend (lazy-load)."""
    global _GAME
    with _LOCK:
        if _GAME is None:
            _GAME = build_game()
        return _GAME


def reset_game(game: Optional[GameLifecycle] = None) -> Optional[GameLifecycle]:
    """Remplace (ou oublie si None) l'instance courante."""
    global _GAME
    with _LOCK:
        _GAME = game
        return _GAME
