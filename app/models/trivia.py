"""
Models / trivia.py
Rôle:
- Valider les réponses brutes de la source trivia (API compatible jService).

Notes:
- `extra="allow"` : la source renvoie bien plus de champs (value, airdate, ...) qu'on ignore.
- La source renvoie parfois une réponse numérique (ex: `4`) → convertie en texte.
- Une réponse qui ne valide pas ces modèles est traitée comme une source indisponible.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawClue(BaseModel):
    question: str
    answer: str

    model_config = ConfigDict(extra="allow")

    @field_validator("question", "answer", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class RawCategory(BaseModel):
    id: int
    title: str
    clues: List[RawClue] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class CategorySummary(BaseModel):
    """Entrée de `GET categories` (seul `id` est indispensable)."""
    id: int
    title: Optional[str] = None
    clues_count: Optional[int] = None

    model_config = ConfigDict(extra="allow")
