"""Text-mode board renderer."""

from __future__ import annotations

from collections.abc import Iterable

from termchess.cli.art import BoardArt
from termchess.core.board import Board
from termchess.core.enums import Color
from termchess.core.piece import Piece
from termchess.core.types import Square, make_square

FILL = "#"
BODY = "■"
HOLLOW_BODY = "□"

# ANSI SGR codes
RESET = "\x1b[0m"
BLACK_PIECE = "\x1b[30m"
CAPTURE_HIGHLIGHT = "\x1b[32m"
QUIET_HIGHLIGHT = "\x1b[33m"
BANNER = "\x1b[42;30m"
ALERT = "\x1b[41m"


def paint(text: str, code: str, use_color: bool = True) -> str:
    if not use_color:
        return text
    return f"{code}{text}{RESET}"


def render_cell(
    art: BoardArt,
    piece: Piece,
    light: bool,
    highlighted: bool,
    use_color: bool = True,
) -> list[str]:
    """Rows of one board cell.

    Dark squares lose their fill; black pieces are drawn dark (or hollow
    without color); highlighted cells are speckled green on a capture and
    yellow on an empty destination.
    """
    rows: list[str] = []
    for row in art.cell(piece.piece_type):
        if not light:
            row = row.replace(FILL, " ")
        if piece.color == Color.BLACK:
            body = paint(BODY, BLACK_PIECE) if use_color else HOLLOW_BODY
            row = row.replace(BODY, body)
        if highlighted:
            code = QUIET_HIGHLIGHT if piece.is_empty else CAPTURE_HIGHLIGHT
            row = row.replace(FILL, paint("@", code, use_color))
            row = row.replace(" ", paint("*", code, use_color))
        rows.append(row)
    return rows


def render_board(
    board: Board,
    highlights: Iterable[Square],
    art: BoardArt,
    use_color: bool = True,
) -> str:
    """Whole board with rank digits on the left and file letters below."""
    targets = set(highlights)
    label_row = art.height // 2
    lines: list[str] = []

    for row in range(8):
        cell_rows: list[list[str]] = [[] for _ in range(art.height)]
        for file in range(8):
            sq = make_square(file, row)
            cell = render_cell(
                art,
                board[sq],
                light=(row + file) % 2 == 0,
                highlighted=sq in targets,
                use_color=use_color,
            )
            for i, text in enumerate(cell):
                cell_rows[i].append(text)

        for i, parts in enumerate(cell_rows):
            label = f"{8 - row} " if i == label_row else "  "
            lines.append(label + "".join(parts))

    lines.append("  " + "".join(letter.center(art.width) for letter in "abcdefgh"))
    return "\n".join(lines)
