from __future__ import annotations

import io
from typing import Iterable, List, Optional

import pytest

from tictactoe_console.console import Console
from tictactoe_console.game_basics import Piece


class ScriptedPlayer:
    """Player that replays a fixed list of square indices."""

    def __init__(self, piece: Piece, moves: Iterable[int], journal: Optional[List] = None) -> None:
        self.piece = piece
        self._moves = iter(moves)
        self.journal = journal if journal is not None else []
        self.game = None

    def move(self) -> int:
        index = next(self._moves)
        turn = self.game.turn if self.game is not None else None
        self.journal.append((self.piece, index, turn))
        return index


def make_console(text: str = "") -> Console:
    return Console(stdin=io.StringIO(text), stdout=io.StringIO())


@pytest.fixture
def console() -> Console:
    return make_console()
