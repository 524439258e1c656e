"""Runtime configuration built from command-line arguments."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from termchess.core.notation import STARTING_FEN

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings for one terminal session."""

    start_fen: str = STARTING_FEN
    art_path: Path | None = None  # None -> bundled art
    use_color: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppConfig:
        args = build_parser().parse_args(argv)
        return cls(
            start_fen=args.fen,
            art_path=Path(args.art) if args.art else None,
            use_color=not args.no_color,
            log_level=args.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchess", description="Two-player chess in the terminal"
    )
    parser.add_argument(
        "--fen",
        type=str,
        default=STARTING_FEN,
        help="Starting position (default: standard start)",
    )
    parser.add_argument(
        "--art", type=str, default=None, help="Board art file (default: bundled art)"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser
