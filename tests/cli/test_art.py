"""Tests for board art parsing and loading."""

from pathlib import Path

import pytest

from termchess.cli.art import ArtError, BoardArt, load_board_art, parse_board_art
from termchess.core.enums import PieceType

NAMES = ("empty", "pawn", "rook", "knight", "bishop", "queen", "king")


def _art_text(height: int = 2, width: int = 3, **overrides: list[str]) -> str:
    blocks = []
    for name in NAMES:
        rows = overrides.get(name, ["#" * width] * height)
        blocks.append("\n".join([f":{name}", *rows]))
    return "\n".join(blocks) + "\n"


class TestParseBoardArt:
    def test_dimensions(self) -> None:
        art = parse_board_art(_art_text(height=2, width=3))
        assert art.height == 2
        assert art.width == 3
        assert set(art.cells) == set(PieceType)

    def test_cell_rows_kept(self) -> None:
        art = parse_board_art(_art_text(king=["#■#", "■■■"]))
        assert art.cell(PieceType.KING) == ("#■#", "■■■")

    def test_blank_separator_lines_ignored(self) -> None:
        text = _art_text().replace(":pawn", "\n:pawn")
        assert parse_board_art(text).height == 2

    def test_unknown_name(self) -> None:
        with pytest.raises(ArtError, match="Unknown"):
            parse_board_art(_art_text() + ":dragon\n###\n###\n")

    def test_missing_cell(self) -> None:
        text = _art_text().split(":king")[0]
        with pytest.raises(ArtError, match="king"):
            parse_board_art(text)

    def test_duplicate_cell(self) -> None:
        with pytest.raises(ArtError, match="Duplicate"):
            parse_board_art(_art_text() + ":pawn\n###\n###\n")

    def test_ragged_cell(self) -> None:
        with pytest.raises(ArtError, match="queen"):
            parse_board_art(_art_text(queen=["###", "##"]))

    def test_rows_before_first_name(self) -> None:
        with pytest.raises(ArtError):
            parse_board_art("###\n" + _art_text())

    def test_art_error_is_value_error(self) -> None:
        assert issubclass(ArtError, ValueError)


class TestLoadBoardArt:
    def test_bundled_art(self, art: BoardArt) -> None:
        assert art.height == 4
        assert art.width == 9

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "art.txt"
        path.write_text(_art_text(), encoding="utf-8")
        assert load_board_art(path).width == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_board_art(tmp_path / "nope.txt")
