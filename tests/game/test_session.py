"""Tests for GameSession."""

from collections.abc import Callable

import pytest

from dropchess.core.enums import Color, MoveType
from dropchess.core.errors import ContractViolationError, RecordError
from dropchess.core.game import Game
from dropchess.core.move import Move
from dropchess.core.piece import Piece
from dropchess.core.types import Point
from dropchess.game.interfaces import GamePhase
from dropchess.game.session import GameSession

MakeGame = Callable[[str], Game]

KING_ON_EDGE = """
    ........
    ........
    ........
    ........
    .....R.k
    ........
    ........
    ....K...
"""


def piece_at(game: Game, x: int, y: int) -> Piece:
    piece = game.get_piece(Point(x, y))
    assert piece is not None, f"No piece at {x}, {y}"
    return piece


class TestSessionSetup:
    def test_default(self) -> None:
        session = GameSession()
        assert session.phase == GamePhase.AWAITING_MOVE
        assert session.selected_piece is None
        assert session.legal_moves() == []
        assert session.winner is None
        assert len(session.game.active_pieces) == 32

    def test_wraps_finished_game(self) -> None:
        game = Game(winner=Color.BLACK)
        session = GameSession(game)
        assert session.is_game_over
        assert session.winner == Color.BLACK

    def test_new_game_resets(self) -> None:
        session = GameSession()
        old_game = session.game
        session.select_piece(piece_at(old_game, 4, 6))
        session.new_game()
        assert session.game is not old_game
        assert session.selected_piece is None
        assert session.phase == GamePhase.AWAITING_MOVE


class TestSelection:
    def test_select_and_list_moves(self) -> None:
        session = GameSession()
        pawn = piece_at(session.game, 4, 6)
        session.select_piece(pawn)
        assert session.selected_piece is pawn
        assert session.legal_moves() == session.game.get_moves(pawn)

    def test_selection_callback(self) -> None:
        session = GameSession()
        seen: list[Piece | None] = []
        session.events.on_selection_changed.append(seen.append)
        pawn = piece_at(session.game, 4, 6)
        session.select_piece(pawn)
        session.select_piece(None)
        assert seen == [pawn, None]

    def test_cannot_select_fallen_piece(self, make_game: MakeGame) -> None:
        session = GameSession(make_game(KING_ON_EDGE))
        rook = piece_at(session.game, 5, 4)
        king = piece_at(session.game, 7, 4)
        session.select_piece(rook)
        session.play(Move(MoveType.PUSH, 7, 4))
        with pytest.raises(ContractViolationError):
            session.select_piece(king)


class TestPlay:
    def test_play_selected(self) -> None:
        session = GameSession()
        moves: list[tuple[Piece, Move]] = []
        session.events.on_move.append(lambda piece, move, game: moves.append((piece, move)))
        pawn = piece_at(session.game, 4, 6)
        session.select_piece(pawn)
        move = Move(MoveType.MOVE, 4, 4)
        assert session.play(move)
        assert (pawn.x, pawn.y) == (4, 4)
        assert session.selected_piece is None
        assert moves == [(pawn, move)]

    def test_no_selection(self) -> None:
        session = GameSession()
        assert not session.play(Move(MoveType.MOVE, 4, 4))

    def test_illegal_move_rejected(self) -> None:
        session = GameSession()
        pawn = piece_at(session.game, 4, 6)
        session.select_piece(pawn)
        assert not session.play(Move(MoveType.MOVE, 4, 3))
        assert not session.play(Move(MoveType.PUSH, 4, 5))
        assert (pawn.x, pawn.y) == (4, 6)
        assert session.selected_piece is pawn

    def test_turn_order_not_enforced(self) -> None:
        session = GameSession()
        session.select_piece(piece_at(session.game, 0, 1))
        assert session.play(Move(MoveType.MOVE, 0, 2))
        session.select_piece(piece_at(session.game, 0, 2))
        assert session.play(Move(MoveType.MOVE, 0, 3))

    def test_game_over(self, make_game: MakeGame) -> None:
        session = GameSession(make_game(KING_ON_EDGE))
        winners: list[Color] = []
        phases: list[GamePhase] = []
        session.events.on_game_over.append(winners.append)
        session.events.on_move.append(lambda *_: phases.append(session.phase))

        session.select_piece(piece_at(session.game, 5, 4))
        assert session.play(Move(MoveType.PUSH, 7, 4))
        assert winners == [Color.WHITE]
        assert session.is_game_over
        assert phases == [GamePhase.AWAITING_MOVE]

        session.select_piece(piece_at(session.game, 4, 7))
        assert not session.play(Move(MoveType.MOVE, 4, 6))
        assert winners == [Color.WHITE]


class TestSessionRecords:
    def test_round_trip_with_selection(self) -> None:
        session = GameSession()
        pawn = piece_at(session.game, 2, 6)
        session.select_piece(pawn)
        record = session.to_record()
        assert record["selectedPieceId"] == pawn.id

        restored = GameSession.from_record(record)
        selected = restored.selected_piece
        assert selected is not None
        assert selected.id == pawn.id
        assert restored.legal_moves() == session.legal_moves()

    def test_no_selection(self) -> None:
        record = GameSession().to_record()
        assert record["selectedPieceId"] is None
        assert GameSession.from_record(record).selected_piece is None

    def test_unknown_selection_rejected(self) -> None:
        record = GameSession().to_record()
        record["selectedPieceId"] = 1000
        with pytest.raises(RecordError):
            GameSession.from_record(record)

    def test_finished_game_restores_phase(self, make_game: MakeGame) -> None:
        session = GameSession(make_game(KING_ON_EDGE))
        session.select_piece(piece_at(session.game, 5, 4))
        session.play(Move(MoveType.PUSH, 7, 4))
        restored = GameSession.from_record(session.to_record())
        assert restored.is_game_over
        assert restored.winner == Color.WHITE
