"""Game state machine: tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from termchess.core.enums import Color, GameResult, MoveFlag
from termchess.core.move import Move
from termchess.core.move_generator import MoveGenerator
from termchess.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from termchess.core.position import Position
from termchess.core.rules import Rules
from termchess.core.types import Square
from termchess.game.interfaces import GameEndReason, GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    fen_after: str
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history.

    This is a pure data/logic class with no I/O. Positions are immutable, so
    undo simply restores the previous value from ``_previous``.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    _previous: list[Position] = field(default_factory=list, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game. Raises ``FenError`` on a bad FEN."""
        start_fen = fen or STARTING_FEN
        self.position = position_from_fen(start_fen)
        self.start_fen = start_fen
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.move_history.clear()
        self._previous.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        was_capture = (
            move.flag == MoveFlag.EN_PASSANT
            or not self.position.board[move.to_sq].is_empty
        )

        self._previous.append(self.position)
        self.position = self.position.make_move(move)

        gen = MoveGenerator(self.position)
        record = MoveRecord(
            move=move,
            fen_after=position_to_fen(self.position),
            was_check=gen.is_in_check(self.position.side_to_move),
            was_capture=was_capture,
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = self._previous.pop()

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = GameEndReason.NONE
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = (
            GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        )
        self.end_reason = GameEndReason.RESIGNATION
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*."""
        return MoveGenerator(self.position).legal_moves_from(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result == GameResult.IN_PROGRESS:
            return
        self.result = result
        self.end_reason = (
            GameEndReason.STALEMATE
            if result == GameResult.DRAW
            else GameEndReason.CHECKMATE
        )
        self.phase = GamePhase.GAME_OVER
