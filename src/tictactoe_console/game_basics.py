"""
Game basics: pieces, winning lines, board serialization.
Notes:
- A board is a list of 9 cells, index = row * 3 + col.
- Cells hold a Piece: 0=empty, 1=X, 2=O. X always starts.
- The digit encoding ("100020000") is used for logs and test fixtures.
"""
from enum import IntEnum
from typing import Iterable, List


class Piece(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self is Piece.EMPTY else self.name


# Winner scan order: X's lines are checked before O's.
PLAYERS = (Piece.X, Piece.O)

WIN_PATTERNS_BY_TYPE = {
    'row': [[0, 1, 2], [3, 4, 5], [6, 7, 8]],
    'col': [[0, 3, 6], [1, 4, 7], [2, 5, 8]],
    'diag': [[0, 4, 8], [2, 4, 6]],
}

WIN_PATTERNS = [
    pattern
    for line_type in ('row', 'col', 'diag')
    for pattern in WIN_PATTERNS_BY_TYPE[line_type]
]

BOARD_CELLS = 9


def serialize_board(board: Iterable[Piece]) -> str:
    return ''.join(str(int(cell)) for cell in board)


def deserialize_board(board_str: str) -> List[Piece]:
    raw = board_str.strip()
    if len(raw) != BOARD_CELLS or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [Piece(int(cell)) for cell in raw]
