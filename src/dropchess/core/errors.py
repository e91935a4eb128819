"""Exception hierarchy for the drop chess engine.

Illegal moves are not errors: they are simply absent from the generator's
output. Everything raised here signals a caller bug or bad input data.
"""

from __future__ import annotations

__all__ = [
    "ContractViolationError",
    "DropChessError",
    "InvalidBoardError",
    "RecordError",
]


class DropChessError(Exception):
    """Base class for all engine errors."""


class ContractViolationError(DropChessError, ValueError):
    """A precondition the caller should have established does not hold.

    Raised for off-grid ``get_tile_or_raise`` lookups, removing a piece that
    is no longer in play and pushing a point with nothing on it.
    """


class InvalidBoardError(DropChessError, ValueError):
    """Tiles and pieces handed to :class:`Game` are inconsistent."""


class RecordError(DropChessError, ValueError):
    """A serialized game record is malformed."""
