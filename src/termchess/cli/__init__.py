"""Terminal front-end: board art, rendering, input parsing, turn loop."""

from termchess.cli.art import ArtError, BoardArt, load_board_art, parse_board_art
from termchess.cli.input import QUIT, parse_promotion_input, parse_square_input
from termchess.cli.loop import SessionEnded, TerminalGame
from termchess.cli.render import render_board, render_cell

__all__ = [
    "ArtError",
    "BoardArt",
    "QUIT",
    "SessionEnded",
    "TerminalGame",
    "load_board_art",
    "parse_board_art",
    "parse_promotion_input",
    "parse_square_input",
    "render_board",
    "render_cell",
]
