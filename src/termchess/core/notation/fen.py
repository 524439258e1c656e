"""FEN parsing and serialization.

Only the first four FEN fields are modelled (placement, side to move,
castling rights, en passant target); trailing move counters are accepted
on input and never written.
"""

from __future__ import annotations

from termchess.core.board import Board
from termchess.core.enums import CastlingRights, Color
from termchess.core.piece import EMPTY, Piece
from termchess.core.position import Position
from termchess.core.types import NO_SQUARE, Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


class FenError(ValueError):
    """Raised when a FEN string cannot be decoded."""


def decode_fen(fen: str) -> tuple[Board, Color, CastlingRights, Square]:
    """Parse *fen* into ``(board, side_to_move, castling, en_passant)``."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    squares: list[Piece] = []
    for ch in placement:
        if ch == "/":
            continue
        if ch in "12345678":
            squares.extend([EMPTY] * int(ch))
            continue
        try:
            squares.append(Piece.from_char(ch))
        except ValueError:
            raise FenError(f"Invalid FEN placement character {ch!r}: {fen!r}") from None
    if len(squares) != 64:
        raise FenError(
            f"Invalid FEN board (decodes to {len(squares)} squares): {fen!r}"
        )
    board = Board(squares)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling ('-' clears whatever was read before it)
    castling = CastlingRights.NONE
    for ch in castling_part:
        if ch == "-":
            castling = CastlingRights.NONE
            continue
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise FenError(f"Invalid FEN castling field: {castling_part!r}")
        castling |= right

    # 4. En passant
    ep: Square = NO_SQUARE
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None

    return board, side, castling, ep


def encode_fen(
    board: Board, side_to_move: Color, castling: CastlingRights, en_passant: Square
) -> str:
    """Serialise the four modelled FEN fields."""
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for file in range(8):
            piece = board[row * 8 + file]
            if piece.is_empty:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-" if en_passant == NO_SQUARE else square_name(en_passant)

    return f"{board_str} {side_str} {castling_str} {ep_str}"


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    board, side, castling, ep = decode_fen(fen)
    return Position(board, side, castling, ep)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    return encode_fen(pos.board, pos.side_to_move, pos.castling, pos.en_passant)
