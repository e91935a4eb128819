"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from dropchess.core.enums import MoveType


@dataclass(frozen=True, slots=True)
class Move:
    """Candidate destination for a piece.

    A ``PUSH`` displaces the enemy at ``(x, y)`` one square further along the
    line of attack before the acting piece lands there.
    """

    type: MoveType
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.type!s}@{self.x},{self.y}"

    @property
    def is_push(self) -> bool:
        return self.type is MoveType.PUSH
