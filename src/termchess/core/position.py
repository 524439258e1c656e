"""Position: complete game state (board + metadata) and the move transition."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from termchess.core.board import Board
from termchess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from termchess.core.move import Move
from termchess.core.piece import EMPTY, Piece
from termchess.core.types import (
    A1,
    A8,
    H1,
    H8,
    NO_SQUARE,
    Square,
    row_of,
)

_LOGGER = logging.getLogger(__name__)


class KingLocations(NamedTuple):
    """Squares of both kings, maintained incrementally by :func:`apply_move`."""

    white: Square
    black: Square

    def of(self, color: Color) -> Square:
        return self.white if color == Color.WHITE else self.black

    def moved(self, color: Color, sq: Square) -> KingLocations:
        if color == Color.WHITE:
            return self._replace(white=sq)
        return self._replace(black=sq)

    @classmethod
    def scan(cls, board: Board) -> KingLocations:
        return cls(board.find_king(Color.WHITE), board.find_king(Color.BLACK))


# Original rook corners: square -> (rook color, right lost when it leaves/dies)
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    A1: (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    H1: (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    A8: (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    H8: (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}

_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}

# [color] -> (forward step, pawn start row)
_PAWN_STEP: dict[Color, tuple[int, int]] = {
    Color.WHITE: (-8, 6),
    Color.BLACK: (8, 1),
}


def apply_move(
    board: Board,
    move: Move,
    en_passant: Square,
    kings: KingLocations,
    castling: CastlingRights,
) -> tuple[Board, Square, KingLocations, CastlingRights]:
    """Play *move* and return ``(board, en_passant, kings, castling)``.

    The input board is never modified; the result is a fresh copy. Only
    moves produced by the move generator are supported.
    """
    piece = board[move.from_sq]
    if piece.is_empty:
        raise ValueError(f"No piece on {move.from_sq}")
    captured = board[move.to_sq]

    new_board = board.copy()
    new_board[move.to_sq] = piece
    new_board[move.from_sq] = EMPTY

    step, start_row = _PAWN_STEP[piece.color]

    # The pawn taken en passant sits one row behind the destination
    if move.flag == MoveFlag.EN_PASSANT:
        new_board[move.to_sq - step] = EMPTY

    next_en_passant = NO_SQUARE
    if (
        piece.piece_type == PieceType.PAWN
        and row_of(move.from_sq) == start_row
        and move.to_sq == move.from_sq + 2 * step
    ):
        next_en_passant = move.to_sq - step

    promoted = move.flag.promotion_piece
    if promoted is not None:
        new_board[move.to_sq] = Piece(piece.color, promoted)

    next_kings = kings
    if piece.piece_type == PieceType.KING:
        next_kings = kings.moved(piece.color, move.to_sq)

    next_castling = _update_castling(castling, move, piece, captured)

    if move.flag == MoveFlag.CASTLING:
        _slide_castling_rook(new_board, move)

    return new_board, next_en_passant, next_kings, next_castling


def _update_castling(
    castling: CastlingRights, move: Move, piece: Piece, captured: Piece
) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~_KING_RIGHTS[piece.color]

    if piece.piece_type == PieceType.ROOK and move.from_sq in _ROOK_CORNERS:
        color, right = _ROOK_CORNERS[move.from_sq]
        if color == piece.color:
            castling &= ~right

    if captured.piece_type == PieceType.ROOK and move.to_sq in _ROOK_CORNERS:
        color, right = _ROOK_CORNERS[move.to_sq]
        if color == captured.color:
            castling &= ~right

    return castling


def _slide_castling_rook(board: Board, move: Move) -> None:
    row_start = row_of(move.from_sq) * 8
    if move.to_sq < move.from_sq:  # queenside
        rook_from = row_start
        rook_to = move.to_sq + 1
    else:
        rook_from = row_start + 7
        rook_to = move.to_sq - 1
    board[rook_to] = board[rook_from]
    board[rook_from] = EMPTY


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant.

    Positions are values: :meth:`make_move` returns the successor and leaves
    the receiver untouched, so a rejected or simulated move never corrupts
    the game that owns the position.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square = NO_SQUARE
    kings: KingLocations = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.kings is None:
            object.__setattr__(self, "kings", KingLocations.scan(self.board))

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> Position:
        """Apply *move* and hand the turn to the opponent."""
        board, en_passant, kings, castling = apply_move(
            self.board, move, self.en_passant, self.kings, self.castling
        )
        _LOGGER.debug("Applied %s (%s)", move, move.flag.name)
        return Position(
            board=board,
            side_to_move=self.side_to_move.opposite,
            castling=castling,
            en_passant=en_passant,
            kings=kings,
        )

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy sharing no mutable board storage."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            kings=self.kings,
        )
