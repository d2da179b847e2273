"""
Service: clue_state.py
Rôle :
- Machine à états d'une case : hidden → question → answer.

Transitions (`reveal`) :
- HIDDEN   → QUESTION, message = question
- QUESTION → ANSWER,   message = réponse
- ANSWER   → ANSWER,   pas de message (clic ignoré)

`reveal` est pure (retourne une nouvelle `Clue`) ; `reveal_at` l'applique sur un
plateau à partir de coordonnées (colonne, ligne) et range la nouvelle case en place.
"""
from typing import Optional, Tuple

from app.models.board import Board, Clue, RevealState
from app.services.errors import InvalidCoordinate

_NEXT_STATE = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
}


def reveal(clue: Clue) -> Tuple[Clue, Optional[str]]:
    """Applique un clic sur `clue` ; retourne (nouvelle case, message à afficher | None)."""
    nxt = _NEXT_STATE.get(clue.reveal_state)
    if nxt is None:
        return clue, None
    message = clue.question if nxt is RevealState.QUESTION else clue.answer
    return clue.model_copy(update={"reveal_state": nxt}), message


def clue_at(board: Board, category_index: int, row_index: int) -> Clue:
    """Case aux coordonnées données ; les index négatifs ne sont pas acceptés."""
    if category_index < 0 or category_index >= len(board.categories):
        raise InvalidCoordinate(category_index, row_index)
    clues = board.categories[category_index].clues
    if row_index < 0 or row_index >= len(clues):
        raise InvalidCoordinate(category_index, row_index)
    return clues[row_index]


def reveal_at(board: Board, category_index: int, row_index: int) -> Tuple[Clue, Optional[str]]:
    """Clic sur la case (colonne, ligne) du plateau ; coordonnée invalide → aucun effet."""
    current = clue_at(board, category_index, row_index)
    updated, message = reveal(current)
    if updated is not current:
        board.categories[category_index].clues[row_index] = updated
    return updated, message
