"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from dropchess.core.enums import DropState
from dropchess.core.game import Game
from dropchess.core.piece import Piece
from dropchess.core.tile import Tile

# Diagram cells: FEN piece letters on stable tiles, "." stable, "~" shaking,
# "#" dropped. Row 0 is the first line.
_TILE_CHARS: dict[str, DropState] = {
    ".": DropState.STABLE,
    "~": DropState.SHAKING,
    "#": DropState.DROPPED,
}


def build_game(diagram: str) -> Game:
    """Build a :class:`Game` from an 8-line board diagram.

    Piece ids follow row-major reading order starting at 0.
    """
    lines = [line.strip() for line in diagram.strip().splitlines()]
    if len(lines) != Game.rows or any(len(line) != Game.columns for line in lines):
        raise ValueError(f"Diagram must be {Game.columns}x{Game.rows}:\n{diagram}")

    tiles: list[Tile] = []
    pieces: list[Piece] = []
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            tiles.append(Tile(x, y, _TILE_CHARS.get(char, DropState.STABLE)))
            if char not in _TILE_CHARS:
                pieces.append(Piece.from_char(char, len(pieces), x, y))
    return Game(tiles, pieces)


@pytest.fixture
def make_game() -> Callable[[str], Game]:
    """Factory turning a board diagram into a fresh :class:`Game`."""
    return build_game
