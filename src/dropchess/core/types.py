"""Grid constants and point helpers.

Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row.
Row 0 is black's back rank; white advances towards decreasing ``y``::

    y=0   r n b q k b n r
    y=1   p p p p p p p p
    ...
    y=6   P P P P P P P P
    y=7   R N B Q K B N R
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

ROWS = 8
COLUMNS = 8


class PointLike(Protocol):
    """Anything carrying grid coordinates (points, tiles, pieces, moves)."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...


class Point(NamedTuple):
    x: int
    y: int


def sign(value: int) -> int:
    """-1, 0 or 1."""
    return (value > 0) - (value < 0)


def unit_direction(start: PointLike, end: PointLike) -> Point:
    """Per-axis sign of the vector from *start* to *end*."""
    return Point(sign(end.x - start.x), sign(end.y - start.y))


def in_bounds(point: PointLike, columns: int = COLUMNS, rows: int = ROWS) -> bool:
    return 0 <= point.x < columns and 0 <= point.y < rows
