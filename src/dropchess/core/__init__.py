"""Core domain layer: drop chess rules with zero external dependencies.

Quick start::

    from dropchess.core import Game, Point

    game = Game()
    pawn = game.get_piece(Point(4, 6))
    moves = game.get_moves(pawn)
    game.play(pawn, moves[0])
"""

from dropchess.core.enums import Color, DropState, MoveType, PieceType
from dropchess.core.errors import (
    ContractViolationError,
    DropChessError,
    InvalidBoardError,
    RecordError,
)
from dropchess.core.game import Game
from dropchess.core.move import Move
from dropchess.core.move_generator import MoveGenerator
from dropchess.core.piece import Piece, create_starting_pieces
from dropchess.core.records import game_from_record, game_to_record
from dropchess.core.tile import Tile, create_tiles
from dropchess.core.types import COLUMNS, ROWS, Point, PointLike

__all__ = [
    # Enums
    "Color",
    "DropState",
    "MoveType",
    "PieceType",
    # Types / helpers
    "COLUMNS",
    "ROWS",
    "Point",
    "PointLike",
    # Domain objects
    "Game",
    "Move",
    "MoveGenerator",
    "Piece",
    "Tile",
    "create_starting_pieces",
    "create_tiles",
    # Records
    "game_from_record",
    "game_to_record",
    # Errors
    "ContractViolationError",
    "DropChessError",
    "InvalidBoardError",
    "RecordError",
]
