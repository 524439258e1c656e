"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termchess.core.enums import PROMOTION_FLAGS, MoveFlag, PieceType
from termchess.core.types import Square, square_name

_PROMO_CHARS: dict[MoveFlag, str] = {
    MoveFlag.KNIGHT_PROMO: "n",
    MoveFlag.BISHOP_PROMO: "b",
    MoveFlag.ROOK_PROMO: "r",
    MoveFlag.QUEEN_PROMO: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NONE

    # ── Promotion helpers ────────────────────────────────────────────────

    def promote_to(self, piece_type: PieceType) -> Move:
        """Attach the concrete promotion flag for *piece_type*."""
        if not self.flag.is_promotion:
            raise ValueError(f"Move {self} is not a promotion")
        try:
            flag = PROMOTION_FLAGS[piece_type]
        except KeyError:
            raise ValueError(f"Cannot promote to {piece_type.name}") from None
        return replace(self, flag=flag)

    def generic(self) -> Move:
        """Same move with any concrete promotion replaced by ``PROMOTION``."""
        if self.flag.is_promotion and self.flag != MoveFlag.PROMOTION:
            return replace(self, flag=MoveFlag.PROMOTION)
        return self

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        return base + _PROMO_CHARS.get(self.flag, "")
