"""Game: tiles, pieces, board queries and move execution."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dropchess.core.enums import Color, DropState, PieceType
from dropchess.core.errors import ContractViolationError, InvalidBoardError
from dropchess.core.move import Move
from dropchess.core.move_generator import MoveGenerator
from dropchess.core.piece import Piece, create_starting_pieces
from dropchess.core.tile import Tile, create_tiles
from dropchess.core.types import (
    COLUMNS,
    ROWS,
    Point,
    PointLike,
    in_bounds,
    unit_direction,
)

_LOGGER = logging.getLogger(__name__)


class Game:
    """The whole game state as one mutable aggregate.

    ``pieces`` keeps every piece ever created, including those that fell out
    of play. Membership in play is tracked by id, so a piece's place in
    ``pieces`` never shifts. :meth:`play` is the only mutator.
    """

    __slots__ = (
        "tiles",
        "pieces",
        "turn",
        "winner",
        "_active_ids",
        "_pieces_by_id",
        "_move_generator",
    )

    rows = ROWS
    columns = COLUMNS

    def __init__(
        self,
        tiles: list[Tile] | None = None,
        pieces: list[Piece] | None = None,
        *,
        active_ids: Iterable[int] | None = None,
        turn: Color = Color.WHITE,
        winner: Color | None = None,
    ) -> None:
        self.tiles = self._ordered_tiles(tiles) if tiles is not None else create_tiles()
        self.pieces = pieces if pieces is not None else create_starting_pieces()
        # Never read or advanced here; turn discipline belongs to the caller.
        self.turn = turn
        self.winner = winner

        self._pieces_by_id: dict[int, Piece] = {}
        for piece in self.pieces:
            if piece.id in self._pieces_by_id:
                raise InvalidBoardError(f"Duplicate piece id: {piece.id}")
            self._pieces_by_id[piece.id] = piece

        if active_ids is None:
            self._active_ids = set(self._pieces_by_id)
        else:
            self._active_ids = set(active_ids)
            unknown = self._active_ids - self._pieces_by_id.keys()
            if unknown:
                raise InvalidBoardError(f"Unknown active piece ids: {sorted(unknown)}")

        occupied: set[tuple[int, int]] = set()
        for piece in self.active_pieces:
            tile = self.get_tile(piece)
            if tile is None or tile.is_dropped:
                raise InvalidBoardError(
                    f"Active piece {piece.id} has no tile to stand on at "
                    f"{piece.x}, {piece.y}"
                )
            if (piece.x, piece.y) in occupied:
                raise InvalidBoardError(
                    f"Two active pieces on {piece.x}, {piece.y}"
                )
            occupied.add((piece.x, piece.y))

        self._move_generator = MoveGenerator(self)

    @classmethod
    def _ordered_tiles(cls, tiles: list[Tile]) -> list[Tile]:
        ordered = sorted(tiles, key=lambda t: (t.y, t.x))
        expected = [(x, y) for y in range(cls.rows) for x in range(cls.columns)]
        if [(t.x, t.y) for t in ordered] != expected:
            raise InvalidBoardError(
                f"Tiles must cover the {cls.columns}x{cls.rows} grid exactly once"
            )
        return ordered

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def active_pieces(self) -> list[Piece]:
        """Pieces still in play, in creation order."""
        return [p for p in self.pieces if p.id in self._active_ids]

    def is_active(self, piece: Piece) -> bool:
        return piece.id in self._active_ids

    def get_piece_by_id(self, piece_id: int) -> Piece | None:
        return self._pieces_by_id.get(piece_id)

    def get_tile(self, point: PointLike) -> Tile | None:
        if in_bounds(point, self.columns, self.rows):
            return self.tiles[point.x + point.y * self.columns]
        return None

    def get_tile_or_raise(self, point: PointLike) -> Tile:
        tile = self.get_tile(point)
        if tile is None:
            raise ContractViolationError(f"There is no tile at {point.x}, {point.y}")
        return tile

    def get_piece(self, point: PointLike) -> Piece | None:
        """Active piece standing on *point*, if any."""
        for piece in self.pieces:
            if piece.x == point.x and piece.y == point.y and piece.id in self._active_ids:
                return piece
        return None

    def is_blocked(self, point: PointLike) -> bool:
        """Missing tile, collapsed tile or an active piece."""
        tile = self.get_tile(point)
        return tile is None or tile.is_dropped or self.get_piece(point) is not None

    def can_push(self, piece: Piece, direction: PointLike) -> bool:
        """Whether *piece* may be shoved one step along *direction*.

        Only another piece stops a push. Pushing off the grid or into a hole
        is allowed: that is how pieces leave play.
        """
        step = unit_direction(Point(0, 0), direction)
        return self.get_piece(Point(piece.x + step.x, piece.y + step.y)) is None

    def get_moves(self, piece: Piece) -> list[Move]:
        return self._move_generator.generate(piece)

    # ── Mutation ─────────────────────────────────────────────────────────

    def play(self, piece: Piece, move: Move) -> None:
        """Apply *move* for *piece*. Legality is the caller's responsibility."""
        _LOGGER.debug("Playing %s %d: %s", piece.piece_type, piece.id, move)
        if move.is_push:
            self._push_piece_at_point(piece, move)
        self._move_piece_to_point(piece, move)

    def _push_piece_at_point(self, pusher: Piece, point: PointLike) -> None:
        piece = self.get_piece(point)
        if piece is None:
            raise ContractViolationError(
                f"There is nothing to push at {point.x}, {point.y}"
            )
        step = unit_direction(pusher, point)
        destination = Point(point.x + step.x, point.y + step.y)
        _LOGGER.debug(
            "Piece %d pushes piece %d to %d, %d",
            pusher.id,
            piece.id,
            destination.x,
            destination.y,
        )
        self._move_piece_to_point(piece, destination, pushed=True)

    def _move_piece_to_point(
        self, piece: Piece, point: PointLike, pushed: bool = False
    ) -> None:
        start_tile = self.get_tile_or_raise(piece)
        end_tile = self.get_tile(point)

        # A shaking tile gives way once its occupant steps off.
        if start_tile.collapse():
            _LOGGER.debug("Tile %d, %d dropped", start_tile.x, start_tile.y)

        piece.x = point.x
        piece.y = point.y

        if end_tile is None or end_tile.drop_state is DropState.DROPPED:
            self._remove_piece(piece)
            return

        # Landing pawns and pushed pieces leave the tile intact
        if piece.piece_type is not PieceType.PAWN and not pushed:
            if end_tile.shake():
                _LOGGER.debug("Tile %d, %d is shaking", end_tile.x, end_tile.y)

        if (
            piece.piece_type is PieceType.PAWN
            and piece.y == self._promotion_row(piece.color)
        ):
            piece.piece_type = PieceType.QUEEN
            _LOGGER.info("Piece %d promoted to queen", piece.id)

    def _promotion_row(self, color: Color) -> int:
        return 0 if color == Color.WHITE else self.rows - 1

    def _remove_piece(self, piece: Piece) -> None:
        if piece.id not in self._active_ids:
            raise ContractViolationError(
                f"Trying to remove piece {piece.id} which is not in the game"
            )
        self._active_ids.discard(piece.id)
        _LOGGER.info(
            "%s %s %d left play at %d, %d",
            piece.color,
            piece.piece_type,
            piece.id,
            piece.x,
            piece.y,
        )

        if piece.piece_type is PieceType.KING:
            self.winner = piece.color.opposite
            _LOGGER.info("%s wins", self.winner)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self.rows):
            row = []
            for x in range(self.columns):
                tile = self.tiles[x + y * self.columns]
                piece = self.get_piece(tile)
                if tile.is_dropped:
                    row.append("#")
                elif piece is not None:
                    row.append(str(piece))
                elif tile.drop_state is DropState.SHAKING:
                    row.append("~")
                else:
                    row.append(".")
            rows.append(" ".join(row))
        return "\n".join(rows)
