"""
Module routes/board.py
Rôle:
- Endpoints publics du plateau : lecture, redémarrage, clic sur une case.

Intégrations:
- get_game(): cycle de vie unique du plateau (phase + plateau publié).
- board_view: vue publique (cases cachées affichées "?").

Codes retour:
- 404 invalid_coordinate       : case inexistante (aucun état modifié)
- 409 loading_in_progress      : redémarrage pendant un chargement
- 502 data_source_unavailable  : source trivia injoignable / réponse invalide
- 503 selection_exhausted | insufficient_clues : source trop pauvre pour remplir le plateau
"""
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from app.services.board_view import cell_text, public_board_view
from app.services.errors import (
    BoardError,
    DataSourceUnavailable,
    InsufficientClues,
    InvalidCoordinate,
    LoadingInProgress,
    SelectionExhausted,
)
from app.services.game_lifecycle import GameLifecycle
from app.services.game_store import get_game

router = APIRouter(prefix="/board", tags=["board"])

_ERROR_STATUS = {
    InvalidCoordinate: (404, "invalid_coordinate"),
    LoadingInProgress: (409, "loading_in_progress"),
    DataSourceUnavailable: (502, "data_source_unavailable"),
    SelectionExhausted: (503, "selection_exhausted"),
    InsufficientClues: (503, "insufficient_clues"),
}


def _http_error(exc: BoardError) -> HTTPException:
    status, detail = _ERROR_STATUS.get(type(exc), (500, "board_error"))
    return HTTPException(status_code=status, detail=detail)


def _board_payload(game: GameLifecycle) -> Dict[str, Any]:
    status = game.status()
    return {
        "phase": status["phase"],
        "generation": status["generation"],
        "category_count": status["category_count"],
        "clues_per_category": status["clues_per_category"],
        "categories": public_board_view(game.board),
    }


def _start_or_conflict(game: GameLifecycle):
    board = game.setup_and_start()
    if board is None:
        raise LoadingInProgress("board is loading")
    return board


@router.get("")
def get_board():
    """Plateau publié (vide tant qu'aucun chargement n'a réussi) + phase courante."""
    return _board_payload(get_game())


@router.post("/restart")
def restart_board():
    """
    (Re)construit un plateau neuf puis le publie d'un bloc.
    - En cas d'échec, l'ancien plateau reste affiché.
    """
    game = get_game()
    try:
        _start_or_conflict(game)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return _board_payload(game)


@router.post("/{category_index}/{row_index}/reveal")
def reveal_clue(category_index: int, row_index: int):
    """
    Clic sur une case : hidden → question → answer.
    - `message` vaut null si la réponse est déjà affichée (clic ignoré).
    """
    game = get_game()
    try:
        clue, message = game.reveal(category_index, row_index)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return {
        "category_index": category_index,
        "row_index": row_index,
        "state": clue.reveal_state.value,
        "text": cell_text(clue),
        "message": message,
    }
