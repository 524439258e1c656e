"""Tests for GameState."""

import pytest

from termchess.core.enums import Color, GameResult, MoveFlag
from termchess.core.move import Move
from termchess.core.notation import STARTING_FEN, FenError
from termchess.core.types import D4, D5, D7, E2, E3, E4, parse_square
from termchess.game.interfaces import GameEndReason, GamePhase
from termchess.game.state import GameState

FOOLS_MATE_SETUP = "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq -"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - -"


class TestGameStateSetup:
    def test_position_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert gs.fen == STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Color.BLACK
        assert gs.start_fen == fen

    def test_setup_bad_fen(self) -> None:
        with pytest.raises(FenError):
            GameState().setup("not a fen")

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE

    def test_setup_on_stalemate_ends_game(self) -> None:
        gs = GameState()
        gs.setup(STALEMATE)
        assert gs.is_game_over
        assert gs.result == GameResult.DRAW
        assert gs.end_reason == GameEndReason.STALEMATE


class TestGameStateMoves:
    def test_apply_move_records(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E4))
        assert record.fen_after == gs.fen
        assert not record.was_capture
        assert not record.was_check
        assert gs.side_to_move == Color.BLACK
        assert gs.ply_count == 1

    def test_capture_flagged(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        gs.apply_move(Move(D7, D5))
        record = gs.apply_move(Move(E4, D5))
        assert record.was_capture

    def test_en_passant_flagged_as_capture(self) -> None:
        gs = GameState()
        gs.setup("rnbqkbnr/ppp1pppp/8/8/3pP3/8/PPPP1PPP/RNBQKBNR b KQkq e3")
        record = gs.apply_move(Move(D4, E3, MoveFlag.EN_PASSANT))
        assert record.was_capture

    def test_checkmate_ends_game(self) -> None:
        gs = GameState()
        gs.setup(FOOLS_MATE_SETUP)
        record = gs.apply_move(Move(parse_square("d8"), parse_square("h4")))
        assert record.was_check
        assert gs.is_game_over
        assert gs.result == GameResult.BLACK_WINS
        assert gs.end_reason == GameEndReason.CHECKMATE

    def test_legal_moves(self) -> None:
        gs = GameState()
        gs.setup()
        assert len(gs.legal_moves()) == 20
        assert len(gs.legal_moves_from(parse_square("g1"))) == 2


class TestGameStateUndo:
    def test_undo_restores_position(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        undone = gs.undo_last_move()
        assert undone == Move(E2, E4)
        assert gs.fen == STARTING_FEN
        assert gs.ply_count == 0

    def test_undo_empty_history(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.undo_last_move() is None

    def test_undo_reopens_finished_game(self) -> None:
        gs = GameState()
        gs.setup(FOOLS_MATE_SETUP)
        gs.apply_move(Move(parse_square("d8"), parse_square("h4")))
        gs.undo_last_move()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.end_reason == GameEndReason.NONE
        assert gs.fen == FOOLS_MATE_SETUP


class TestResign:
    def test_white_resigns(self) -> None:
        gs = GameState()
        gs.setup()
        gs.resign(Color.WHITE)
        assert gs.result == GameResult.BLACK_WINS
        assert gs.end_reason == GameEndReason.RESIGNATION
        assert gs.is_game_over
