"""Notation package: FEN parsing and serialization."""

from termchess.core.notation.fen import (
    STARTING_FEN,
    FenError,
    decode_fen,
    encode_fen,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "FenError",
    "decode_fen",
    "encode_fen",
    "position_from_fen",
    "position_to_fen",
]
