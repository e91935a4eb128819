"""Per-piece move generation: movesets, ray casting and push resolution."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dropchess.core.enums import Color, MoveType, PieceType
from dropchess.core.move import Move
from dropchess.core.types import Point, PointLike, unit_direction

if TYPE_CHECKING:
    from dropchess.core.game import Game
    from dropchess.core.piece import Piece


EIGHTWAY_MOVESET: tuple[Point, ...] = (
    Point(-1, -1),
    Point(0, -1),
    Point(1, -1),
    Point(-1, 0),
    Point(1, 0),
    Point(-1, 1),
    Point(0, 1),
    Point(1, 1),
)

STRAIGHT_MOVESET: tuple[Point, ...] = (
    Point(0, -1),
    Point(-1, 0),
    Point(1, 0),
    Point(0, 1),
)

DIAGONAL_MOVESET: tuple[Point, ...] = (
    Point(-1, -1),
    Point(1, -1),
    Point(-1, 1),
    Point(1, 1),
)

KNIGHT_MOVESET: tuple[Point, ...] = (
    Point(-2, -1),
    Point(-2, 1),
    Point(2, -1),
    Point(2, 1),
    Point(-1, -2),
    Point(-1, 2),
    Point(1, -2),
    Point(1, 2),
)


class MoveGenerator:
    """Enumerates the moves available to a single piece on a :class:`Game`.

    The generator only reads the game. Every candidate square, whatever the
    piece type, goes through :meth:`resolve`, which decides between a plain
    move, a push, or nothing.
    """

    __slots__ = ("_game", "_generators")

    def __init__(self, game: Game) -> None:
        self._game = game
        self._generators: dict[PieceType, Callable[[Piece], list[Move]]] = {
            PieceType.KING: self._gen_king,
            PieceType.QUEEN: self._gen_queen,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.ROOK: self._gen_rook,
            PieceType.PAWN: self._gen_pawn,
        }

    # -- Public API ---------------------------------------------------------

    def generate(self, piece: Piece) -> list[Move]:
        """Legal moves for *piece*, in moveset order."""
        return self._generators[piece.piece_type](piece)

    def resolve(self, piece: Piece, point: PointLike) -> Move | None:
        """The move *piece* would make to reach *point*, or None."""
        game = self._game
        tile = game.get_tile(point)

        if tile is None or tile.is_dropped:
            return None

        target = game.get_piece(point)
        if target is None:
            return Move(MoveType.MOVE, point.x, point.y)

        if target.color == piece.color:
            return None

        direction = unit_direction(piece, point)
        if game.can_push(target, direction):
            return Move(MoveType.PUSH, point.x, point.y)

        return None

    def ray(self, start: PointLike, direction: PointLike) -> list[Point]:
        """Points from *start* along *direction* up to and including the
        first blocked one.
        """
        dx, dy = unit_direction(Point(0, 0), direction)
        x, y = start.x, start.y
        points: list[Point] = []
        for _ in range(max(self._game.columns, self._game.rows)):
            x += dx
            y += dy
            point = Point(x, y)
            points.append(point)
            if self._game.is_blocked(point):
                break
        return points

    # -- Piece-specific generators (private) -------------------------------

    def _gen_offsets(self, piece: Piece, offsets: tuple[Point, ...]) -> list[Move]:
        moves: list[Move] = []
        for dx, dy in offsets:
            move = self.resolve(piece, Point(piece.x + dx, piece.y + dy))
            if move is not None:
                moves.append(move)
        return moves

    def _gen_sliding(self, piece: Piece, directions: tuple[Point, ...]) -> list[Move]:
        moves: list[Move] = []
        for direction in directions:
            for point in self.ray(piece, direction):
                move = self.resolve(piece, point)
                if move is not None:
                    moves.append(move)
        return moves

    def _gen_king(self, piece: Piece) -> list[Move]:
        return self._gen_offsets(piece, EIGHTWAY_MOVESET)

    def _gen_knight(self, piece: Piece) -> list[Move]:
        return self._gen_offsets(piece, KNIGHT_MOVESET)

    def _gen_queen(self, piece: Piece) -> list[Move]:
        return self._gen_sliding(piece, EIGHTWAY_MOVESET)

    def _gen_rook(self, piece: Piece) -> list[Move]:
        return self._gen_sliding(piece, STRAIGHT_MOVESET)

    def _gen_bishop(self, piece: Piece) -> list[Move]:
        return self._gen_sliding(piece, DIAGONAL_MOVESET)

    def _gen_pawn(self, piece: Piece) -> list[Move]:
        rows = self._game.rows
        if piece.color == Color.WHITE:
            step = -1
            starting_row = rows - 2
        else:
            step = 1
            starting_row = 1

        single = self.resolve(piece, Point(piece.x, piece.y + step))
        double = self.resolve(piece, Point(piece.x, piece.y + step * 2))
        left = self.resolve(piece, Point(piece.x - 1, piece.y + step))
        right = self.resolve(piece, Point(piece.x + 1, piece.y + step))

        moves: list[Move] = []
        # Straight ahead: plain moves only, never a push
        if single is not None and single.type is MoveType.MOVE:
            moves.append(single)
            if (
                piece.y == starting_row
                and double is not None
                and double.type is MoveType.MOVE
            ):
                moves.append(double)

        # Diagonals: pushes only
        for diagonal in (left, right):
            if diagonal is not None and diagonal.type is MoveType.PUSH:
                moves.append(diagonal)
        return moves
