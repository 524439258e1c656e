"""Interactive two-player turn loop over stdin/stdout."""

from __future__ import annotations

import logging
from collections.abc import Callable

from termchess.cli.art import BoardArt
from termchess.cli.input import QUIT, parse_promotion_input, parse_square_input
from termchess.cli.render import ALERT, BANNER, paint, render_board
from termchess.config import AppConfig
from termchess.core.enums import GameResult, MoveFlag
from termchess.core.move import Move
from termchess.core.types import Square
from termchess.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

EXIT_WORD = "exit"
UNDO_WORD = "undo"

_RESULT_BANNERS: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "-- WHITE HAS WON --",
    GameResult.BLACK_WINS: "-- BLACK HAS WON --",
    GameResult.DRAW: "-- STALEMATE: IT'S A DRAW --",
}


class SessionEnded(Exception):
    """The player typed 'exit' or input ran out."""


class TerminalGame:
    """Drives a :class:`GameController` from line-based input.

    ``read_line`` takes a prompt and returns the typed line (``input`` by
    default); ``write`` receives each block of output (``print`` by default).
    """

    def __init__(
        self,
        controller: GameController,
        art: BoardArt,
        config: AppConfig | None = None,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._controller = controller
        self._art = art
        self._config = config or AppConfig()
        self._read_line = read_line
        self._write = write

    # ── Public API ───────────────────────────────────────────────────────

    def run(self) -> GameResult:
        """Play turns until the game ends or the session is closed."""
        try:
            while True:
                result = self.play_turn()
                if result != GameResult.IN_PROGRESS:
                    return result
        except SessionEnded:
            _LOGGER.info("Session ended by the player")
            return self._controller.state.result

    def play_turn(self) -> GameResult:
        """One pass of the turn cycle; returns the result once decided."""
        state = self._controller.state
        self._write(state.fen)

        if state.is_game_over:
            self._show_board()
            self._write(paint(_RESULT_BANNERS[state.result], BANNER, self._color))
            return state.result

        self._show_board()
        self._write(f"{str(state.side_to_move).upper()} to move")

        selected = self._select_piece()
        if selected is None:
            return GameResult.IN_PROGRESS
        _, moves = selected

        self._show_board({m.to_sq for m in moves})
        move = self._select_destination(moves)
        if move is None:
            return GameResult.IN_PROGRESS

        if move.flag == MoveFlag.PROMOTION:
            flag = self._select_promotion()
            if flag is None:
                return GameResult.IN_PROGRESS
            move = Move(move.from_sq, move.to_sq, flag)

        if not self._controller.submit_move(move):
            # Moves come from the legal list, so this only trips on a bug
            _LOGGER.error("Controller rejected %s", move)
            self._alert("-- Move rejected! --")
        return GameResult.IN_PROGRESS

    # ── Prompts ──────────────────────────────────────────────────────────

    def _select_piece(self) -> tuple[Square, list[Move]] | None:
        """Ask for a piece; ``None`` means the turn restarts (after undo)."""
        side = self._controller.state.side_to_move
        while True:
            text = self._prompt("Select a piece (e.g. e2): ")
            if text.lower() == UNDO_WORD:
                if not self._controller.undo_move():
                    self._alert("-- Nothing to undo! --")
                    continue
                return None
            try:
                sq = parse_square_input(text)
            except ValueError:
                self._alert("-- Not a square! --")
                continue
            if sq == QUIT:
                self._alert("-- Not a square! --")
                continue

            if self._controller.state.position.board[sq].color != side:
                self._alert("-- Not Your Piece! --")
                continue
            moves = self._controller.legal_moves_from(sq)
            if not moves:
                self._alert("-- Piece has no moves to make! --")
                continue
            return sq, moves

    def _select_destination(self, moves: list[Move]) -> Move | None:
        while True:
            text = self._prompt("Select a destination (or 'quit'): ")
            try:
                target = parse_square_input(text)
            except ValueError:
                self._alert("-- Not a square! --")
                continue
            if target == QUIT:
                return None
            for move in moves:
                if move.to_sq == target:
                    return move
            self._alert("-- Not a move this piece can make! --")

    def _select_promotion(self) -> MoveFlag | None:
        while True:
            text = self._prompt("Promote to (rook/knight/bishop/queen): ")
            try:
                return parse_promotion_input(text)
            except ValueError:
                self._alert(f"-- Pawn cannot promote to {text}! --")

    def _prompt(self, message: str) -> str:
        try:
            text = self._read_line(message)
        except EOFError:
            raise SessionEnded from None
        text = text.strip()
        if text.lower() == EXIT_WORD:
            raise SessionEnded
        return text

    # ── Output ───────────────────────────────────────────────────────────

    @property
    def _color(self) -> bool:
        return self._config.use_color

    def _show_board(self, highlights: set[Square] | None = None) -> None:
        board = self._controller.state.position.board
        self._write(render_board(board, highlights or (), self._art, self._color))

    def _alert(self, message: str) -> None:
        self._write(paint(message, ALERT, self._color))
