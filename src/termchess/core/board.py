"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from termchess.core.enums import Color, PieceType
from termchess.core.piece import EMPTY, Piece
from termchess.core.types import NO_SQUARE, Square, make_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Fixed-size 64-square board, index = square (a8 = 0 .. h1 = 63)."""

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece] | None = None) -> None:
        if squares is None:
            self._squares: list[Piece] = [EMPTY] * 64
            return
        self._squares = list(squares)
        if len(self._squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(self._squares)}")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        self._squares[sq] = piece

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._squares)

    def __len__(self) -> int:
        return 64

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq].is_empty

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in enumerate(self._squares) if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def find_king(self, color: Color) -> Square:
        """Scan for *color*'s king; ``NO_SQUARE`` when it is missing."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else NO_SQUARE

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [EMPTY] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.BLACK, pt)
            b[make_square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [str(self[make_square(file, row)]) for file in range(8)]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
