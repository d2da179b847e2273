"""
Service: clue_sampler.py
Rôle :
- Choisir `k` indices au hasard (sans remise) parmi tous ceux d'une catégorie
  et les projeter vers le modèle public `Clue` (état initial : caché).

Notes :
- `rng.sample` ne modifie pas la liste source et ne la parcourt qu'une fois.
- Moins de `k` indices bruts → `InsufficientClues` (pas d'échantillon bancal).
"""
import random
from typing import List, Optional, Sequence

from app.models.board import Clue, RevealState
from app.models.trivia import RawClue
from app.services.errors import InsufficientClues


def sample_clues(
    raw_clues: Sequence[RawClue],
    k: int,
    rng: Optional[random.Random] = None,
    category_id: Optional[int] = None,
) -> List[Clue]:
    """Retourne exactement `k` indices distincts, tous à l'état `HIDDEN`."""
    if len(raw_clues) < k:
        raise InsufficientClues(k, len(raw_clues), category_id=category_id)
    rng = rng or random
    picked = rng.sample(list(raw_clues), k)
    return [
        Clue(question=raw.question, answer=raw.answer, reveal_state=RevealState.HIDDEN)
        for raw in picked
    ]
