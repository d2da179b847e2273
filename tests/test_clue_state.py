import pytest

from app.models.board import Board, Category, Clue, RevealState
from app.services.clue_state import reveal, reveal_at
from app.services.errors import InvalidCoordinate


def _board() -> Board:
    return Board(
        categories=[
            Category(id=10, title="Math", clues=[Clue(question="2+2", answer="4"), Clue(question="1+1", answer="2")]),
            Category(id=20, title="Literature", clues=[Clue(question="Hamlet Author", answer="Shakespeare")]),
        ]
    )


def test_reveal_sequence_and_terminal_idempotence():
    clue = Clue(question="Hamlet Author", answer="Shakespeare")

    messages = []
    for _ in range(4):
        clue, message = reveal(clue)
        messages.append(message)

    assert messages == ["Hamlet Author", "Shakespeare", None, None]
    assert clue.reveal_state is RevealState.ANSWER


def test_reveal_is_pure():
    clue = Clue(question="Q", answer="A")

    updated, _ = reveal(clue)

    assert clue.reveal_state is RevealState.HIDDEN
    assert updated.reveal_state is RevealState.QUESTION


def test_reveal_answer_returns_same_clue():
    clue = Clue(question="Q", answer="A", reveal_state=RevealState.ANSWER)

    updated, message = reveal(clue)

    assert updated is clue
    assert message is None


def test_reveal_at_updates_only_target_cell():
    board = _board()

    clue, message = reveal_at(board, 0, 1)

    assert message == "1+1"
    assert board.categories[0].clues[1].reveal_state is RevealState.QUESTION
    assert board.categories[0].clues[0].reveal_state is RevealState.HIDDEN
    assert board.categories[1].clues[0].reveal_state is RevealState.HIDDEN

    _, message = reveal_at(board, 0, 1)
    assert message == "2"
    assert board.categories[0].clues[1].reveal_state is RevealState.ANSWER


@pytest.mark.parametrize("coords", [(2, 0), (1, 1), (-1, 0), (0, -1), (0, 5)])
def test_reveal_at_invalid_coordinate_leaves_board_untouched(coords):
    board = _board()
    before = board.model_dump()

    with pytest.raises(InvalidCoordinate):
        reveal_at(board, *coords)

    assert board.model_dump() == before


def test_reveal_at_on_empty_board():
    with pytest.raises(InvalidCoordinate):
        reveal_at(Board(), 0, 0)
