"""Tests for square and promotion input parsing."""

import pytest

from termchess.cli.input import QUIT, parse_promotion_input, parse_square_input
from termchess.core.enums import MoveFlag
from termchess.core.types import A1, H8, NO_SQUARE


class TestSquareInput:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("a1", A1), ("h8", H8), ("E4", 36), (" e4 ", 36)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_square_input(text) == expected

    @pytest.mark.parametrize("text", ["quit", "QUIT", " Quit "])
    def test_quit(self, text: str) -> None:
        assert parse_square_input(text) == QUIT
        assert QUIT == NO_SQUARE

    @pytest.mark.parametrize("text", ["", "e", "e0", "e9", "j4", "e4e5", "44"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_square_input(text)


class TestPromotionInput:
    @pytest.mark.parametrize(
        ("text", "flag"),
        [
            ("rook", MoveFlag.ROOK_PROMO),
            ("Knight", MoveFlag.KNIGHT_PROMO),
            ("BISHOP", MoveFlag.BISHOP_PROMO),
            ("queen", MoveFlag.QUEEN_PROMO),
            ("q", MoveFlag.QUEEN_PROMO),
            ("n", MoveFlag.KNIGHT_PROMO),
        ],
    )
    def test_valid(self, text: str, flag: MoveFlag) -> None:
        assert parse_promotion_input(text) == flag

    def test_quit(self) -> None:
        assert parse_promotion_input("quit") is None

    @pytest.mark.parametrize("text", ["king", "pawn", "", "x"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="cannot promote"):
            parse_promotion_input(text)
