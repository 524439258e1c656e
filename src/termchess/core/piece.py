"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from termchess.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "R": (Color.WHITE, PieceType.ROOK),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "r": (Color.BLACK, PieceType.ROOK),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for the content of one square.

    An empty square is ``Piece(Color.EMPTY, PieceType.EMPTY)``; the two
    empty variants never appear apart.
    """

    color: Color
    piece_type: PieceType

    def __post_init__(self) -> None:
        if (self.color == Color.EMPTY) != (self.piece_type == PieceType.EMPTY):
            raise ValueError(
                f"Empty color and kind must be paired: {self.color!r}, "
                f"{self.piece_type!r}"
            )

    @property
    def is_empty(self) -> bool:
        return self.piece_type == PieceType.EMPTY

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black, '.' = empty)."""
        if self.is_empty:
            return "."
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)


EMPTY = Piece(Color.EMPTY, PieceType.EMPTY)
