"""Legal and pseudo-legal move generation + attack detection.

Legality is decided by simulation: every pseudo-legal candidate is played
on a scratch copy with :func:`apply_move`, and it survives only if no
opponent reply lands on the mover's king.
"""

from __future__ import annotations

import logging

from termchess.core.board import Board
from termchess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from termchess.core.geometry import (
    ALL_DIRECTIONS,
    DIAGONAL,
    DIRECTION_OFFSETS,
    ORTHOGONAL,
    distance_to_edge,
)
from termchess.core.move import Move
from termchess.core.piece import Piece
from termchess.core.position import KingLocations, Position, apply_move
from termchess.core.types import (
    E1,
    E8,
    Square,
    file_of,
    is_valid_square,
    make_square,
    row_of,
)

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_SLIDER_DIRECTIONS: dict[PieceType, range] = {
    PieceType.ROOK: ORTHOGONAL,
    PieceType.BISHOP: DIAGONAL,
    PieceType.QUEEN: ALL_DIRECTIONS,
}

# [color] -> (forward step, start row, promotion row, en passant row)
_PAWN_RULES: dict[Color, tuple[int, int, int, int]] = {
    Color.WHITE: (-8, 6, 0, 3),
    Color.BLACK: (8, 1, 7, 4),
}

_KING_HOME: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}

# [color] -> ((right, squares that must be empty and safe, rook corner offset), ...)
_CASTLE_SIDES: dict[Color, tuple[tuple[CastlingRights, tuple[int, ...], int], ...]] = {
    Color.WHITE: (
        (CastlingRights.WHITE_KINGSIDE, (1, 2), 3),
        (CastlingRights.WHITE_QUEENSIDE, (-1, -2, -3), -4),
    ),
    Color.BLACK: (
        (CastlingRights.BLACK_KINGSIDE, (1, 2), 3),
        (CastlingRights.BLACK_QUEENSIDE, (-1, -2, -3), -4),
    ),
}


# -- Pseudo-legal generation -----------------------------------------------


def pseudo_legal_moves(
    board: Board,
    sq: Square,
    en_passant: Square,
    castling: CastlingRights,
    allow_castling: bool = True,
) -> list[Move]:
    """Candidate moves for the piece on *sq*, ignoring own-king safety.

    Castling is the one exception: it is only produced when the king's
    square and the path to the rook are empty and unattacked.
    """
    piece = board[sq]
    moves: list[Move] = []

    if piece.piece_type in _SLIDER_DIRECTIONS:
        _gen_sliding(board, sq, piece, _SLIDER_DIRECTIONS[piece.piece_type], moves)
    elif piece.piece_type == PieceType.KNIGHT:
        _gen_stepping(board, sq, piece, KNIGHT_OFFSETS, moves)
    elif piece.piece_type == PieceType.PAWN:
        _gen_pawn(board, sq, piece, en_passant, moves)
    elif piece.piece_type == PieceType.KING:
        _gen_stepping(board, sq, piece, KING_OFFSETS, moves)
        if allow_castling:
            _gen_castling(board, sq, piece.color, en_passant, castling, moves)

    return moves


def _gen_sliding(
    board: Board, sq: Square, piece: Piece, directions: range, moves: list[Move]
) -> None:
    edges = distance_to_edge(sq)
    for dir_idx in directions:
        offset = DIRECTION_OFFSETS[dir_idx]
        to_sq = sq
        for _ in range(edges[dir_idx]):
            to_sq += offset
            target = board[to_sq]
            if target.color == piece.color:
                break
            moves.append(Move(sq, to_sq))
            if not target.is_empty:
                break


def _gen_stepping(
    board: Board,
    sq: Square,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    file_idx = file_of(sq)
    row_idx = row_of(sq)
    for df, dr in offsets:
        af = file_idx + df
        ar = row_idx + dr
        if not (0 <= af < 8 and 0 <= ar < 8):
            continue
        to_sq = make_square(af, ar)
        if board[to_sq].color != piece.color:
            moves.append(Move(sq, to_sq))


def _gen_pawn(
    board: Board, sq: Square, piece: Piece, en_passant: Square, moves: list[Move]
) -> None:
    step, start_row, promotion_row, en_passant_row = _PAWN_RULES[piece.color]
    opponent = piece.color.opposite

    one_step = sq + step
    if not is_valid_square(one_step):
        return

    if board.is_empty(one_step):
        flag = MoveFlag.PROMOTION if row_of(one_step) == promotion_row else MoveFlag.NONE
        moves.append(Move(sq, one_step, flag))

        two_step = one_step + step
        if (
            row_of(sq) == start_row
            and is_valid_square(two_step)
            and board.is_empty(two_step)
        ):
            moves.append(Move(sq, two_step))

    file_idx = file_of(sq)
    for side in (-1, 1):
        if not 0 <= file_idx + side < 8:
            continue
        cap_sq = one_step + side

        if board[cap_sq].color == opponent:
            flag = MoveFlag.PROMOTION if row_of(cap_sq) == promotion_row else MoveFlag.NONE
            moves.append(Move(sq, cap_sq, flag))

        if (
            cap_sq == en_passant
            and row_of(sq) == en_passant_row
            and board[sq + side].color == opponent
        ):
            moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))


def _gen_castling(
    board: Board,
    king_sq: Square,
    color: Color,
    en_passant: Square,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    if king_sq != _KING_HOME[color]:
        return

    rook = Piece(color, PieceType.ROOK)
    attacked: set[Square] | None = None

    for right, path, rook_offset in _CASTLE_SIDES[color]:
        if not castling & right:
            continue
        if board[king_sq + rook_offset] != rook:
            continue
        path_squares = [king_sq + offset for offset in path]
        if not all(board.is_empty(path_sq) for path_sq in path_squares):
            continue

        if attacked is None:
            attacked = attacked_squares(board, en_passant, color.opposite, castling)
        if king_sq in attacked or any(path_sq in attacked for path_sq in path_squares):
            continue

        direction = 1 if path[0] > 0 else -1
        moves.append(Move(king_sq, king_sq + 2 * direction, MoveFlag.CASTLING))


# -- Side aggregation / attack detection -------------------------------------


def side_moves(
    board: Board, en_passant: Square, color: Color, castling: CastlingRights
) -> list[Move]:
    """Pseudo-legal moves of every *color* piece, castling excluded."""
    moves: list[Move] = []
    for sq in board.all_pieces(color):
        moves.extend(
            pseudo_legal_moves(board, sq, en_passant, castling, allow_castling=False)
        )
    return moves


def attacked_squares(
    board: Board, en_passant: Square, color: Color, castling: CastlingRights
) -> set[Square]:
    """Squares *color* could land on next move, plus squares its pawns cover.

    Pawn diagonals are added explicitly because an empty square is never a
    pawn move destination even though the pawn attacks it.
    """
    attacked = {move.to_sq for move in side_moves(board, en_passant, color, castling)}

    step = _PAWN_RULES[color][0]
    for sq in board.pieces(color, PieceType.PAWN):
        ahead = sq + step
        if not is_valid_square(ahead):
            continue
        file_idx = file_of(sq)
        if file_idx > 0:
            attacked.add(ahead - 1)
        if file_idx < 7:
            attacked.add(ahead + 1)
    return attacked


# -- Legal filter --------------------------------------------------------------


def legal_moves(
    board: Board,
    sq: Square,
    en_passant: Square,
    kings: KingLocations,
    castling: CastlingRights,
) -> list[Move]:
    """Pseudo-legal moves of the piece on *sq* that keep its king safe.

    Asking for an empty or out-of-range square is a caller error; it is
    logged and answered with an empty list.
    """
    if not is_valid_square(sq):
        _LOGGER.error("Legal moves requested for out-of-range square %r", sq)
        return []

    piece = board[sq]
    if piece.is_empty:
        _LOGGER.error("Legal moves requested for empty square %d", sq)
        return []

    opponent = piece.color.opposite
    legal: list[Move] = []
    for move in pseudo_legal_moves(board, sq, en_passant, castling, allow_castling=True):
        next_board, next_en_passant, next_kings, next_castling = apply_move(
            board, move, en_passant, kings, castling
        )
        king_sq = next_kings.of(piece.color)
        replies = attacked_squares(next_board, next_en_passant, opponent, next_castling)
        if king_sq not in replies:
            legal.append(move)
    return legal


def side_legal_moves(
    board: Board,
    en_passant: Square,
    kings: KingLocations,
    color: Color,
    castling: CastlingRights,
) -> list[Move]:
    """Union of :func:`legal_moves` over every *color* piece."""
    moves: list[Move] = []
    for sq in board.all_pieces(color):
        moves.extend(legal_moves(board, sq, en_passant, kings, castling))
    return moves


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Thin object facade over the module functions; the position is only
    read, never modified.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        pos = self._pos
        return side_legal_moves(
            pos.board, pos.en_passant, pos.kings, pos.side_to_move, pos.castling
        )

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the single piece on *sq*."""
        pos = self._pos
        return legal_moves(pos.board, sq, pos.en_passant, pos.kings, pos.castling)

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._pos.kings.of(color)
        if not is_valid_square(king_sq):
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        pos = self._pos
        return sq in attacked_squares(pos.board, pos.en_passant, by_color, pos.castling)
