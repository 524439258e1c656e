"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color. ``EMPTY`` is the color of an unoccupied square."""

    WHITE = 0
    BLACK = 1
    EMPTY = 2

    @property
    def opposite(self) -> Color:
        if self is Color.EMPTY:
            raise ValueError("Empty color has no opposite")
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds. ``EMPTY`` is the kind of an unoccupied square."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6
    EMPTY = 7


class MoveFlag(IntEnum):
    """Special move classification.

    The generator only ever emits the generic ``PROMOTION`` flag; one of the
    four concrete promotion flags replaces it once the piece is chosen.
    """

    NONE = 0
    EN_PASSANT = 1
    CASTLING = 2
    PROMOTION = 3
    ROOK_PROMO = 4
    KNIGHT_PROMO = 5
    BISHOP_PROMO = 6
    QUEEN_PROMO = 7

    @property
    def is_promotion(self) -> bool:
        return self >= MoveFlag.PROMOTION

    @property
    def promotion_piece(self) -> PieceType | None:
        """Piece kind a concrete promotion flag produces, else ``None``."""
        return _PROMOTION_PIECES.get(self)


_PROMOTION_PIECES: dict[MoveFlag, PieceType] = {
    MoveFlag.ROOK_PROMO: PieceType.ROOK,
    MoveFlag.KNIGHT_PROMO: PieceType.KNIGHT,
    MoveFlag.BISHOP_PROMO: PieceType.BISHOP,
    MoveFlag.QUEEN_PROMO: PieceType.QUEEN,
}

PROMOTION_FLAGS: dict[PieceType, MoveFlag] = {
    piece_type: flag for flag, piece_type in _PROMOTION_PIECES.items()
}


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
