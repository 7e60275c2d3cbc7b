"""
Players: a piece plus a source of requested square indices.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .console import Console
from .game_basics import Piece
from .prompts import input_int

MOVE_PROMPT = "Enter the index of the square you want to move to (0 to 8): "


class Player(Protocol):
    piece: Piece

    def move(self) -> int:
        ...


@dataclass
class HumanPlayer:
    piece: Piece
    console: Console = field(default_factory=Console)

    def move(self) -> int:
        self.console.puts(f"PLAYER {self.piece.symbol}")
        return input_int(MOVE_PROMPT, self.console)
