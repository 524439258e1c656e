"""Tests for Board, Piece and square helpers."""

import pytest

from termchess.core.board import Board
from termchess.core.enums import Color, PieceType
from termchess.core.piece import EMPTY, Piece
from termchess.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    NO_SQUARE,
    parse_square,
    square_name,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(48 <= sq < 56 for sq in pawns)  # rank 2

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(8 <= sq < 16 for sq in pawns)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] == EMPTY


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = EMPTY
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing(self) -> None:
        assert Board().find_king(Color.WHITE) == NO_SQUARE

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            Board([EMPTY] * 63)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(piece.is_empty for piece in board)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPiece:
    def test_empty_pairing_enforced(self) -> None:
        with pytest.raises(ValueError):
            Piece(Color.WHITE, PieceType.EMPTY)
        with pytest.raises(ValueError):
            Piece(Color.EMPTY, PieceType.KING)

    def test_from_char(self) -> None:
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "Q"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_empty_str(self) -> None:
        assert str(EMPTY) == "."


class TestSquares:
    def test_corners(self) -> None:
        assert square_name(0) == "a8"
        assert square_name(63) == "h1"

    def test_parse(self) -> None:
        assert parse_square("e4") == 36
        assert parse_square("E4") == 36
        assert parse_square("a1") == A1

    @pytest.mark.parametrize("text", ["", "e", "e9", "i4", "e44", "4e"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_square(text)

    def test_name_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            square_name(64)
