"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from termchess.cli.art import ArtError, load_board_art
from termchess.cli.loop import TerminalGame
from termchess.config import AppConfig
from termchess.core.notation import FenError
from termchess.game.controller import GameController
from termchess.runtime_assets import default_art_path

_LOGGER = logging.getLogger(__name__)

EXIT_BAD_ART = 1
EXIT_BAD_FEN = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Launch a terminal chess session. Returns the process exit status."""
    config = AppConfig.from_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = GameController()
    try:
        controller.new_game(config.start_fen)
    except FenError as exc:
        _LOGGER.error("Bad starting position: %s", exc)
        return EXIT_BAD_FEN

    art_path = config.art_path or default_art_path()
    try:
        art = load_board_art(art_path)
    except (ArtError, OSError) as exc:
        _LOGGER.error("Cannot load board art from %s: %s", art_path, exc)
        return EXIT_BAD_ART

    result = TerminalGame(controller, art, config).run()
    _LOGGER.info("Session finished: %s", result.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
