"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from termchess.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from termchess.core.board import Board
from termchess.core.enums import CastlingRights, Color, GameResult, MoveFlag, PieceType
from termchess.core.move import Move
from termchess.core.move_generator import (
    MoveGenerator,
    legal_moves,
    pseudo_legal_moves,
    side_legal_moves,
    side_moves,
)
from termchess.core.notation import (
    STARTING_FEN,
    FenError,
    decode_fen,
    encode_fen,
    position_from_fen,
    position_to_fen,
)
from termchess.core.piece import EMPTY, Piece
from termchess.core.position import KingLocations, Position, apply_move
from termchess.core.rules import Rules, is_checkmate, is_stalemate
from termchess.core.types import (
    NO_SQUARE,
    Square,
    file_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "NO_SQUARE",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "EMPTY",
    "KingLocations",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Engine functions
    "apply_move",
    "is_checkmate",
    "is_stalemate",
    "legal_moves",
    "pseudo_legal_moves",
    "side_legal_moves",
    "side_moves",
    # Notation
    "STARTING_FEN",
    "FenError",
    "decode_fen",
    "encode_fen",
    "position_from_fen",
    "position_to_fen",
]
