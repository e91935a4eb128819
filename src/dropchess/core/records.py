"""Plain-record serialization of a :class:`Game`.

Records hold only JSON-compatible values and share no references, so they
can be written to any document store and read back to rebuild the game::

    {
        "tiles": [{"x": 0, "y": 0, "dropState": "stable"}, ...],
        "pieces": [{"id": 0, "type": "rook", "color": "black",
                    "x": 0, "y": 0, "active": true}, ...],
        "turn": "white",
        "winner": null,
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from typing import Any, TypeVar

from dropchess.core.enums import Color, DropState, PieceType
from dropchess.core.errors import RecordError
from dropchess.core.game import Game
from dropchess.core.piece import Piece
from dropchess.core.tile import Tile

_E = TypeVar("_E", bound=IntEnum)


def _enum_from_name(enum_cls: type[_E], value: Any, field: str) -> _E:
    if not isinstance(value, str):
        raise RecordError(f"Invalid {field}: {value!r}")
    try:
        return enum_cls[value.upper()]
    except KeyError:
        raise RecordError(f"Invalid {field}: {value!r}") from None


def _int_field(record: Mapping[str, Any], field: str) -> int:
    try:
        value = record[field]
    except KeyError:
        raise RecordError(f"Missing field {field!r} in {dict(record)!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordError(f"Invalid {field}: {value!r}")
    return value


def _record_list(value: Any, field: str) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        raise RecordError(f"Invalid {field}: expected a list, got {value!r}")
    for entry in value:
        if not isinstance(entry, Mapping):
            raise RecordError(f"Invalid {field}: entry {entry!r} is not a mapping")
    return value


# ── Serialisation ────────────────────────────────────────────────────────────


def tile_to_record(tile: Tile) -> dict[str, Any]:
    return {"x": tile.x, "y": tile.y, "dropState": str(tile.drop_state)}


def piece_to_record(piece: Piece, active: bool = True) -> dict[str, Any]:
    return {
        "id": piece.id,
        "type": str(piece.piece_type),
        "color": str(piece.color),
        "x": piece.x,
        "y": piece.y,
        "active": active,
    }


def game_to_record(game: Game) -> dict[str, Any]:
    """Snapshot *game* as plain dicts and lists."""
    return {
        "tiles": [tile_to_record(tile) for tile in game.tiles],
        "pieces": [piece_to_record(p, game.is_active(p)) for p in game.pieces],
        "turn": str(game.turn),
        "winner": str(game.winner) if game.winner is not None else None,
    }


# ── Parsing ──────────────────────────────────────────────────────────────────


def tile_from_record(record: Mapping[str, Any]) -> Tile:
    drop_state = _enum_from_name(
        DropState, record.get("dropState", "stable"), "dropState"
    )
    return Tile(_int_field(record, "x"), _int_field(record, "y"), drop_state)


def piece_from_record(record: Mapping[str, Any]) -> tuple[Piece, bool]:
    """Parse a piece record. Returns the piece and whether it is in play."""
    piece = Piece(
        id=_int_field(record, "id"),
        piece_type=_enum_from_name(PieceType, record.get("type"), "type"),
        color=_enum_from_name(Color, record.get("color"), "color"),
        x=_int_field(record, "x"),
        y=_int_field(record, "y"),
    )
    active = record.get("active", True)
    if not isinstance(active, bool):
        raise RecordError(f"Invalid active: {active!r}")
    return piece, active


def game_from_record(record: Mapping[str, Any]) -> Game:
    """Rebuild a :class:`Game` from :func:`game_to_record` output.

    A record without ``winner`` gets one derived from its pieces: a king that
    is out of play means the other color has won.
    """
    try:
        tile_records = record["tiles"]
        piece_records = record["pieces"]
    except KeyError as exc:
        raise RecordError(f"Missing field {exc.args[0]!r}") from None

    tiles = [tile_from_record(r) for r in _record_list(tile_records, "tiles")]
    pieces: list[Piece] = []
    active_ids: list[int] = []
    for piece_record in _record_list(piece_records, "pieces"):
        piece, active = piece_from_record(piece_record)
        pieces.append(piece)
        if active:
            active_ids.append(piece.id)

    turn = _enum_from_name(Color, record.get("turn", "white"), "turn")

    if "winner" in record:
        raw_winner = record["winner"]
        winner = (
            _enum_from_name(Color, raw_winner, "winner")
            if raw_winner is not None
            else None
        )
    else:
        winner = _winner_from_pieces(pieces, set(active_ids))

    return Game(tiles, pieces, active_ids=active_ids, turn=turn, winner=winner)


def _winner_from_pieces(pieces: list[Piece], active_ids: set[int]) -> Color | None:
    # White's fallen king is checked first, so two fallen kings mean black won.
    for color in (Color.WHITE, Color.BLACK):
        for piece in pieces:
            if (
                piece.piece_type is PieceType.KING
                and piece.color == color
                and piece.id not in active_ids
            ):
                return color.opposite
    return None
