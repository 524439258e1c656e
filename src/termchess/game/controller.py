"""GameController: the central orchestrator of a chess game.

Coordinates GameState and the move generator, and emits events via simple
callbacks so the terminal front-end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from termchess.core.enums import Color, GameResult, MoveFlag
from termchess.core.move import Move
from termchess.core.types import Square, is_valid_square
from termchess.game.interfaces import GamePhase, IGameController
from termchess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full two-player game: validates moves, switches turns,
    notifies listeners.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        state = GameState()
        state.setup(fen)
        self._state = state

        self._emit_phase(state.phase)
        if state.is_game_over:
            self._emit_game_over(state.result)

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of *sq* if it holds a piece of the side to move."""
        if not is_valid_square(sq):
            return []
        piece = self._state.position.board[sq]
        if piece.color != self._state.side_to_move:
            return []
        return self._state.legal_moves_from(sq)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if move.flag == MoveFlag.PROMOTION:
            _LOGGER.debug("Rejected %s: promotion piece not chosen", move)
            return False

        # Validate legality; concrete promotions match the generic legal move
        legal = self.legal_moves_from(move.from_sq)
        if move.generic() not in legal:
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        record = self._state.apply_move(move)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over(self._state.result)

    def undo_move(self) -> bool:
        if not self._state.move_history:
            return False
        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
