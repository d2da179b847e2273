"""
Utils: random_select.py
Rôle:
- Tirer `count` identifiants distincts dans un pool (ex: ids de catégories).

Comportement:
- Tirage par rejet : on pioche un index uniforme dans `pool` ; l'id est retenu
  s'il ne l'a pas déjà été, sinon la pioche est jetée et on recommence.
- L'ordre du résultat est l'ordre d'acceptation (aléatoire), pas l'ordre du pool.
- `rng` permet de rejouer le tirage (déterministe pour tests / démo).

Garde-fous:
- Pool avec moins de `count` ids distincts → `SelectionExhausted` immédiatement
  (sinon la boucle ne terminerait jamais).
- Pools très dupliqués : passé `count * DRAWS_PER_ID` pioches, le tirage se termine
  uniformément parmi les ids distincts pas encore retenus (résultat toujours complet).
- `max_draws` explicite : plafond strict, dépassement → `SelectionExhausted`.
"""
import random
from typing import Hashable, List, Optional, Sequence, TypeVar

from app.services.errors import SelectionExhausted

T = TypeVar("T", bound=Hashable)

# Pioches autorisées par id demandé (largement au-dessus de count·H(count))
DRAWS_PER_ID = 1000


def select_unique(
    pool: Sequence[T],
    count: int,
    rng: Optional[random.Random] = None,
    max_draws: Optional[int] = None,
) -> List[T]:
    """
    Tire `count` éléments distincts de `pool`, sans remise au niveau du résultat.

    Args:
        pool: candidats (doublons tolérés).
        count: nombre d'ids distincts voulus.
        rng: générateur injecté (module `random` par défaut).
        max_draws: plafond strict de pioches avant abandon (défaut: pas d'abandon).

    Returns:
        List[T]: `count` ids distincts, dans l'ordre de tirage.
    """
    if count <= 0:
        return []
    available = len(set(pool))
    if available < count:
        raise SelectionExhausted(count, available)

    rng = rng or random
    strict = max_draws is not None
    budget = max_draws if strict else count * DRAWS_PER_ID

    chosen: List[T] = []
    seen = set()
    draws = 0
    while len(chosen) < count:
        if draws >= budget:
            if strict:
                raise SelectionExhausted(count, len(chosen))
            # budget par défaut épuisé : on finit parmi les ids distincts restants
            remaining = [c for c in dict.fromkeys(pool) if c not in seen]
            candidate = rng.choice(remaining)
            seen.add(candidate)
            chosen.append(candidate)
            continue
        draws += 1
        candidate = pool[rng.randrange(len(pool))]
        if candidate in seen:
            continue  # déjà retenu → pioche jetée
        seen.add(candidate)
        chosen.append(candidate)
    return chosen
