"""Board art: per-piece text cells loaded from an asset file.

File format: each cell starts with a ``:name`` line followed by its rows.
``#`` marks background fill and ``■`` the piece body; every cell must have
the same height and width.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from termchess.core.enums import PieceType

_CELL_NAMES: dict[str, PieceType] = {
    "empty": PieceType.EMPTY,
    "pawn": PieceType.PAWN,
    "rook": PieceType.ROOK,
    "knight": PieceType.KNIGHT,
    "bishop": PieceType.BISHOP,
    "queen": PieceType.QUEEN,
    "king": PieceType.KING,
}


class ArtError(ValueError):
    """Raised for a malformed board art file."""


@dataclass(frozen=True, slots=True)
class BoardArt:
    cells: dict[PieceType, tuple[str, ...]]
    height: int
    width: int

    def cell(self, piece_type: PieceType) -> tuple[str, ...]:
        return self.cells[piece_type]


def parse_board_art(text: str) -> BoardArt:
    cells: dict[PieceType, list[str]] = {}
    current: list[str] | None = None

    for line in text.splitlines():
        if line.startswith(":"):
            name = line[1:].strip().lower()
            if name not in _CELL_NAMES:
                raise ArtError(f"Unknown art cell {name!r}")
            if _CELL_NAMES[name] in cells:
                raise ArtError(f"Duplicate art cell {name!r}")
            current = cells[_CELL_NAMES[name]] = []
        elif current is not None:
            current.append(line)
        elif line.strip():
            raise ArtError("Art rows found before the first ':name' line")

    missing = [name for name, pt in _CELL_NAMES.items() if pt not in cells]
    if missing:
        raise ArtError(f"Missing art cells: {', '.join(missing)}")

    # Trailing blank lines are separators, not rows
    for rows in cells.values():
        while rows and not rows[-1]:
            rows.pop()

    height = len(cells[PieceType.EMPTY])
    width = len(cells[PieceType.EMPTY][0]) if height else 0
    if not height or not width:
        raise ArtError("Empty art cell")
    for pt, rows in cells.items():
        if len(rows) != height or any(len(row) != width for row in rows):
            raise ArtError(
                f"Art cell {pt.name.lower()!r} is not {height} rows of {width} chars"
            )

    return BoardArt(
        cells={pt: tuple(rows) for pt, rows in cells.items()},
        height=height,
        width=width,
    )


def load_board_art(path: Path | str) -> BoardArt:
    """Read and parse a board art file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_board_art(text)
