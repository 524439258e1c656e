"""Parsing of typed squares and promotion choices."""

from __future__ import annotations

from termchess.core.enums import MoveFlag
from termchess.core.types import NO_SQUARE, Square, parse_square

QUIT: Square = NO_SQUARE
QUIT_WORD = "quit"

_PROMOTION_WORDS: dict[str, MoveFlag] = {
    "rook": MoveFlag.ROOK_PROMO,
    "r": MoveFlag.ROOK_PROMO,
    "knight": MoveFlag.KNIGHT_PROMO,
    "n": MoveFlag.KNIGHT_PROMO,
    "bishop": MoveFlag.BISHOP_PROMO,
    "b": MoveFlag.BISHOP_PROMO,
    "queen": MoveFlag.QUEEN_PROMO,
    "q": MoveFlag.QUEEN_PROMO,
}


def parse_square_input(text: str) -> Square:
    """'e4' → square index, 'quit' → :data:`QUIT`; anything else is an error."""
    token = text.strip()
    if token.lower() == QUIT_WORD:
        return QUIT
    return parse_square(token)


def parse_promotion_input(text: str) -> MoveFlag | None:
    """Promotion flag for a typed piece name, ``None`` for 'quit'."""
    token = text.strip().lower()
    if token == QUIT_WORD:
        return None
    try:
        return _PROMOTION_WORDS[token]
    except KeyError:
        raise ValueError(f"Pawn cannot promote to {text.strip()!r}") from None
