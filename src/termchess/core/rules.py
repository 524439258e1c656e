"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from termchess.core.board import Board
from termchess.core.enums import CastlingRights, Color, GameResult
from termchess.core.move import Move
from termchess.core.move_generator import (
    MoveGenerator,
    attacked_squares,
    side_legal_moves,
)
from termchess.core.position import KingLocations, Position
from termchess.core.types import Square, is_valid_square


def is_in_check(
    board: Board,
    en_passant: Square,
    kings: KingLocations,
    color: Color,
    castling: CastlingRights,
) -> bool:
    king_sq = kings.of(color)
    if not is_valid_square(king_sq):
        return False
    return king_sq in attacked_squares(board, en_passant, color.opposite, castling)


def has_no_legal_moves(
    board: Board,
    en_passant: Square,
    kings: KingLocations,
    color: Color,
    castling: CastlingRights,
) -> bool:
    """True when no *color* piece has a single legal move."""
    return not side_legal_moves(board, en_passant, kings, color, castling)


def is_checkmate(
    board: Board,
    en_passant: Square,
    kings: KingLocations,
    color: Color,
    castling: CastlingRights,
) -> bool:
    """*color* is in check and has no legal move."""
    return is_in_check(
        board, en_passant, kings, color, castling
    ) and has_no_legal_moves(board, en_passant, kings, color, castling)


def is_stalemate(
    board: Board,
    en_passant: Square,
    kings: KingLocations,
    color: Color,
    castling: CastlingRights,
) -> bool:
    """*color* has no legal move but is not in check."""
    return not is_in_check(
        board, en_passant, kings, color, castling
    ) and has_no_legal_moves(board, en_passant, kings, color, castling)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        return MoveGenerator(position).generate_legal_moves()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.legal_moves(position)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        gen = MoveGenerator(position)
        if gen.generate_legal_moves():
            return GameResult.IN_PROGRESS

        if gen.is_in_check(position.side_to_move):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
