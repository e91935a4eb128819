"""Tile record and grid construction."""

from __future__ import annotations

from dataclasses import dataclass

from dropchess.core.enums import DropState
from dropchess.core.types import COLUMNS, ROWS


@dataclass(slots=True)
class Tile:
    """One grid cell. Only :attr:`drop_state` ever changes."""

    x: int
    y: int
    drop_state: DropState = DropState.STABLE

    def shake(self) -> bool:
        """``stable -> shaking``. Returns whether the state changed."""
        if self.drop_state is not DropState.STABLE:
            return False
        self.drop_state = DropState.SHAKING
        return True

    def collapse(self) -> bool:
        """``shaking -> dropped``. Returns whether the state changed."""
        if self.drop_state is not DropState.SHAKING:
            return False
        self.drop_state = DropState.DROPPED
        return True

    @property
    def is_dropped(self) -> bool:
        return self.drop_state is DropState.DROPPED


def create_tiles(columns: int = COLUMNS, rows: int = ROWS) -> list[Tile]:
    """Row-major list of stable tiles covering the whole grid."""
    return [Tile(x, y) for y in range(rows) for x in range(columns)]
