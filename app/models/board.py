"""
Models / board.py
Rôle:
- Définir le plateau de jeu en mémoire : Board → Category → Clue.

Notes:
- `reveal_state` n'avance que dans un sens : hidden → question → answer.
  Seul `app.services.clue_state` le fait avancer.
- `Category.id` est l'identifiant source (unicité garantie sur l'id, pas sur le titre).
- Un plateau n'est jamais complété au fil de l'eau : `GameLifecycle` le construit
  entièrement puis remplace l'ancien d'un bloc.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class RevealState(str, Enum):
    """État d'affichage d'une case."""
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


class Clue(BaseModel):
    """Une paire question/réponse et son état d'affichage."""
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN  # toute case démarre cachée


class Category(BaseModel):
    """Une colonne du plateau : titre + exactement N indices."""
    id: int  # identifiant côté source trivia
    title: str
    clues: List[Clue] = Field(default_factory=list)


class Board(BaseModel):
    """Ensemble des M catégories affichées, dans l'ordre des colonnes."""
    categories: List[Category] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.categories

    def category_ids(self) -> List[int]:
        return [c.id for c in self.categories]
