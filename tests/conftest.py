"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from termchess.cli.art import BoardArt, load_board_art
from termchess.game.controller import GameController
from termchess.runtime_assets import default_art_path


@pytest.fixture(scope="session")
def art() -> BoardArt:
    """The bundled board art."""
    return load_board_art(default_art_path())


@pytest.fixture
def controller() -> GameController:
    """A controller with a fresh game from the standard start."""
    ctrl = GameController()
    ctrl.new_game()
    return ctrl
