"""Piece record and the standard starting layout."""

from __future__ import annotations

from dataclasses import dataclass

from dropchess.core.enums import Color, PieceType
from dropchess.core.types import COLUMNS

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(eq=False, slots=True)
class Piece:
    """Mutable piece record.

    ``id`` is the only stable identity: position changes on every move and
    ``piece_type`` changes on promotion, so equality and hashing use the id
    alone.
    """

    id: int
    piece_type: PieceType
    color: Color
    x: int
    y: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, id: int, x: int, y: int) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(id, ptype, color, x, y)


def create_starting_pieces() -> list[Piece]:
    """The 32 pieces of the standard layout, ids assigned in row-major order."""
    layout: list[tuple[Color, PieceType, int, int]] = []
    for x, pt in enumerate(BACK_RANK):
        layout.append((Color.BLACK, pt, x, 0))
    for x in range(COLUMNS):
        layout.append((Color.BLACK, PieceType.PAWN, x, 1))
    for x in range(COLUMNS):
        layout.append((Color.WHITE, PieceType.PAWN, x, 6))
    for x, pt in enumerate(BACK_RANK):
        layout.append((Color.WHITE, pt, x, 7))

    return [
        Piece(piece_id, pt, color, x, y)
        for piece_id, (color, pt, x, y) in enumerate(layout)
    ]
