"""
Board state machine for tic-tac-toe.
Notes:
- States are IN_PROGRESS, WON and DRAWN; the last two are terminal.
- The winner is memoized: a completed line can never be undone, so once a
  winner is found it holds for the rest of the game.
- Move legality is checked by validate_move; place itself never validates.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .game_basics import (
    BOARD_CELLS,
    PLAYERS,
    WIN_PATTERNS,
    Piece,
    deserialize_board,
    serialize_board,
)

LAYOUT = (
    " {} | {} | {} \n"
    "---|---|---\n"
    " {} | {} | {} \n"
    "---|---|---\n"
    " {} | {} | {} \n"
)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class MoveError(ValueError):
    """A requested square cannot be played on the current board."""

    message = "Invalid move!"

    def __init__(self, index: int) -> None:
        super().__init__(self.message)
        self.index = index


class OutOfRangeError(MoveError):
    message = "Not a valid square!"


class SquareTakenError(MoveError):
    message = "That square is already taken!"


class Board:
    def __init__(self, cells: Optional[Iterable[Piece]] = None) -> None:
        if cells is None:
            self._cells: List[Piece] = [Piece.EMPTY] * BOARD_CELLS
        else:
            self._cells = [Piece(c) for c in cells]
            if len(self._cells) != BOARD_CELLS:
                raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(self._cells)}")
        self._winner: Optional[Piece] = None
        self._stale = True

    @classmethod
    def from_string(cls, board_str: str) -> "Board":
        """Build a board from its digit encoding, e.g. ``"100020000"``."""
        return cls(deserialize_board(board_str))

    @property
    def cells(self) -> Tuple[Piece, ...]:
        return tuple(self._cells)

    def place(self, piece: Piece, index: int) -> None:
        """Write ``piece`` into ``index``.

        This is a pure write: it does not check range or occupancy. Callers
        must run validate_move first. Calling it on an occupied square
        overwrites that square, which is outside the board's contract.
        """
        self._cells[index] = piece
        self._stale = True

    def validate_move(self, index: int) -> int:
        """Return ``index`` if a piece may be placed there.

        Raises OutOfRangeError for indices outside 0..8 and
        SquareTakenError for occupied squares.
        """
        if index < 0 or index >= BOARD_CELLS:
            raise OutOfRangeError(index)
        if self._cells[index] != Piece.EMPTY:
            raise SquareTakenError(index)
        return index

    def is_legal_move(self, index: int) -> bool:
        try:
            self.validate_move(index)
        except MoveError:
            return False
        return True

    def winner(self) -> Optional[Piece]:
        if self._winner is None and self._stale:
            self._winner = self._check_winner()
            self._stale = False
        return self._winner

    def _check_winner(self) -> Optional[Piece]:
        for piece in PLAYERS:
            for pattern in WIN_PATTERNS:
                if all(self._cells[i] == piece for i in pattern):
                    return piece
        return None

    def places_left(self) -> bool:
        return Piece.EMPTY in self._cells

    def is_game_over(self) -> bool:
        return self.winner() is not None or not self.places_left()

    def is_draw(self) -> bool:
        return self.winner() is None and not self.places_left()

    @property
    def status(self) -> GameStatus:
        if self.winner() is not None:
            return GameStatus.WON
        if not self.places_left():
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    def render(self) -> str:
        return LAYOUT.format(*(cell.symbol for cell in self._cells))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board.from_string({serialize_board(self._cells)!r})"
