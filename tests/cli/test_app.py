"""Tests for command-line configuration and the entry point."""

from pathlib import Path

import pytest

from termchess import app
from termchess.config import AppConfig
from termchess.core.notation import STARTING_FEN

STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - -"


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig.from_args([])
        assert config == AppConfig()
        assert config.start_fen == STARTING_FEN
        assert config.art_path is None
        assert config.use_color

    def test_flags(self) -> None:
        config = AppConfig.from_args(
            ["--fen", STALEMATE, "--art", "x.txt", "--no-color", "--log-level", "debug"]
        )
        assert config.start_fen == STALEMATE
        assert config.art_path == Path("x.txt")
        assert not config.use_color
        assert config.log_level == "DEBUG"

    def test_bad_log_level(self) -> None:
        with pytest.raises(SystemExit):
            AppConfig.from_args(["--log-level", "loud"])


class TestMain:
    def test_bad_fen_exit_code(self) -> None:
        assert app.main(["--fen", "not a fen"]) == app.EXIT_BAD_FEN

    def test_missing_art_exit_code(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        assert app.main(["--art", str(missing)]) == app.EXIT_BAD_ART

    def test_malformed_art_exit_code(self, tmp_path: Path) -> None:
        path = tmp_path / "art.txt"
        path.write_text(":dragon\n###\n", encoding="utf-8")
        assert app.main(["--art", str(path)]) == app.EXIT_BAD_ART

    def test_finished_start_position(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert app.main(["--fen", STALEMATE, "--no-color"]) == 0
        assert "DRAW" in capsys.readouterr().out
