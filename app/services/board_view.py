"""
Service: board_view.py
Rôle :
- Vue publique du plateau (ce que voit l'écran de jeu), partagée par REST et WS.

Règle d'affichage d'une case :
- hidden   → "?"
- question → texte de la question
- answer   → texte de la réponse
La réponse n'apparaît jamais avant d'avoir été révélée.
"""
from typing import Any, Dict

from app.models.board import Board, Clue, RevealState

HIDDEN_TEXT = "?"


def cell_text(clue: Clue) -> str:
    if clue.reveal_state is RevealState.QUESTION:
        return clue.question
    if clue.reveal_state is RevealState.ANSWER:
        return clue.answer
    return HIDDEN_TEXT


def public_clue_view(row: int, clue: Clue) -> Dict[str, Any]:
    return {"row": row, "state": clue.reveal_state.value, "text": cell_text(clue)}


def public_board_view(board: Board) -> list[Dict[str, Any]]:
    """Colonnes du plateau : [{index, id, title, clues: [{row, state, text}]}]."""
    return [
        {
            "index": idx,
            "id": category.id,
            "title": category.title,
            "clues": [public_clue_view(row, clue) for row, clue in enumerate(category.clues)],
        }
        for idx, category in enumerate(board.categories)
    ]
