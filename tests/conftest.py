from __future__ import annotations

import pytest

from app.models.trivia import RawCategory, RawClue
from app.services.errors import DataSourceUnavailable


class FakeTriviaClient:
    """Source trivia en mémoire : `count` catégories de `clues` indices chacune."""

    def __init__(self, count: int = 10, clues: int = 8, pool: list[int] | None = None):
        self.categories = {
            cid: RawCategory(
                id=cid,
                title=f"Category {cid}",
                clues=[RawClue(question=f"Q{cid}-{n}", answer=f"A{cid}-{n}") for n in range(clues)],
            )
            for cid in range(1, count + 1)
        }
        self.pool = pool
        self.fail_on: set[int] = set()
        self.pool_calls: list[tuple[int, int]] = []
        self.category_calls: list[int] = []

    def list_category_ids(self, count: int, offset: int = 0) -> list[int]:
        self.pool_calls.append((count, offset))
        if self.pool is not None:
            return list(self.pool)
        return list(self.categories)[offset:offset + count]

    def get_category(self, category_id: int) -> RawCategory:
        self.category_calls.append(category_id)
        if category_id in self.fail_on:
            raise DataSourceUnavailable(f"category {category_id} unreachable")
        return self.categories[category_id]


@pytest.fixture
def fake_client():
    return FakeTriviaClient()


@pytest.fixture
def make_client():
    """Fabrique de sources trivia paramétrables."""
    return FakeTriviaClient
