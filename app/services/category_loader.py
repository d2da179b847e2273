"""
Service: category_loader.py
Rôle :
- Charger UNE catégorie depuis la source trivia et la réduire à N indices.

Notes :
- Seul composant qui fait de l'I/O réseau (via le client injecté).
- Appelé une fois par id retenu, séquentiellement, par `GameLifecycle`.
"""
import logging
import random
from typing import Optional

from app.models.board import Category
from app.services.clue_sampler import sample_clues

logger = logging.getLogger(__name__)


class CategoryLoader:
    def __init__(self, client, clues_per_category: int, rng: Optional[random.Random] = None):
        self.client = client
        self.clues_per_category = clues_per_category
        self.rng = rng

    def load(self, category_id: int) -> Category:
        """Récupère la catégorie brute puis échantillonne ses indices."""
        raw = self.client.get_category(category_id)
        clues = sample_clues(raw.clues, self.clues_per_category, rng=self.rng, category_id=category_id)
        logger.debug(
            "Category loaded",
            extra={"category_id": category_id, "title": raw.title, "clues_total": len(raw.clues)},
        )
        # l'id demandé fait foi (unicité du tirage), même si la source en renvoie un autre
        return Category(id=category_id, title=raw.title, clues=clues)
