"""tictactoe_console package.

Two-player tic-tac-toe on a text console: the board state machine,
the game loop, and the console collaborators it talks through.

Convenience imports are exposed for common workflows.
"""

from .board import Board, GameStatus, MoveError, OutOfRangeError, SquareTakenError
from .console import Console
from .game import TicTacToe
from .game_basics import Piece
from .players import HumanPlayer, Player

__all__ = [
    "Board",
    "GameStatus",
    "MoveError",
    "OutOfRangeError",
    "SquareTakenError",
    "Console",
    "TicTacToe",
    "Piece",
    "HumanPlayer",
    "Player",
]
