"""
Game loop: alternates two players over one Board until it is terminal.
Notes:
- The turn counter only advances once per ply; a rejected move is
  re-requested from the same player.
- Odd turns belong to player 1 (X), even turns to player 2 (O).
"""
from __future__ import annotations

import logging
from typing import Optional

from .board import Board, MoveError
from .console import Console
from .game_basics import Piece, serialize_board
from .players import HumanPlayer, Player


class TicTacToe:
    def __init__(
        self,
        player1: Optional[Player] = None,
        player2: Optional[Player] = None,
        board: Optional[Board] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self.player1 = player1 if player1 is not None else HumanPlayer(Piece.X, self.console)
        self.player2 = player2 if player2 is not None else HumanPlayer(Piece.O, self.console)
        self.board = board if board is not None else Board()
        self.turn = 0

    @property
    def current_player(self) -> Player:
        return self.player1 if self.turn % 2 != 0 else self.player2

    def play_game(self) -> Optional[Piece]:
        """Play until the board is won or drawn and return the winner, if any."""
        self.print_current_board()

        while not self.board.is_game_over():
            self.turn += 1
            self.take_turn(self.current_player)

            self.console.blank_line()
            self.print_current_board()

        self.console.blank_line()
        self.print_winner_info()
        logging.info("Game over after %d turns: %s", self.turn, self.board.status.value)
        return self.board.winner()

    def take_turn(self, player: Player) -> None:
        index = self.request_move(player)
        self.board.place(player.piece, index)
        logging.debug(
            "turn=%d piece=%s index=%d board=%s",
            self.turn,
            player.piece.symbol,
            index,
            serialize_board(self.board.cells),
        )

    def request_move(self, player: Player) -> int:
        while True:
            self.console.blank_line()
            requested = player.move()
            try:
                return self.board.validate_move(requested)
            except MoveError as exc:
                logging.debug("turn=%d rejected index %d: %s", self.turn, exc.index, exc.message)
                self.console.puts(exc.message)

    def print_winner_info(self) -> None:
        winner = self.board.winner()
        if winner is not None:
            self.console.puts(f"{winner.symbol} wins!")
        else:
            self.console.puts("Draw")

    def print_current_board(self) -> None:
        self.console.puts(self.board.render())
