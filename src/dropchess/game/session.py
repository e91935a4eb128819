"""GameSession: selection, move submission and change notification.

Sits between a front end and :class:`~dropchess.core.game.Game`. Turn order is
not enforced: either color may be selected and played at any
time, exactly as the core allows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from dropchess.core.enums import Color
from dropchess.core.errors import ContractViolationError, RecordError
from dropchess.core.game import Game
from dropchess.core.move import Move
from dropchess.core.piece import Piece
from dropchess.core.records import game_from_record, game_to_record
from dropchess.game.interfaces import GamePhase, IGameSession

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Piece, Move, Game], None]  # piece, move, game
GameOverCallback = Callable[[Color], None]  # winner
SelectionCallback = Callable[["Piece | None"], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Owns one :class:`Game` and the piece currently selected on it.

    Methods are meant to be called from a single thread.
    """

    __slots__ = ("_game", "_selected_id", "_phase", "events")

    def __init__(self, game: Game | None = None) -> None:
        self._game = game if game is not None else Game()
        self._selected_id: int | None = None
        self._phase = (
            GamePhase.GAME_OVER
            if self._game.winner is not None
            else GamePhase.AWAITING_MOVE
        )
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Color | None:
        return self._game.winner

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def selected_piece(self) -> Piece | None:
        if self._selected_id is None:
            return None
        return self._game.get_piece_by_id(self._selected_id)

    # ── IGameSession impl ────────────────────────────────────────────────

    def new_game(self) -> None:
        self._game = Game()
        self._phase = GamePhase.AWAITING_MOVE
        self.select_piece(None)

    def select_piece(self, piece: Piece | None) -> None:
        if piece is not None and not self._game.is_active(piece):
            raise ContractViolationError(
                f"Cannot select piece {piece.id}: it is not in the game"
            )
        self._selected_id = piece.id if piece is not None else None
        for cb in self.events.on_selection_changed:
            cb(piece)

    def legal_moves(self) -> list[Move]:
        piece = self.selected_piece
        if piece is None:
            return []
        return self._game.get_moves(piece)

    def play(self, move: Move) -> bool:
        piece = self.selected_piece
        if piece is None:
            _LOGGER.warning("Rejected %s: no piece selected", move)
            return False
        if self.is_game_over:
            _LOGGER.warning("Rejected %s: the game is over", move)
            return False
        if move not in self.legal_moves():
            _LOGGER.warning("Rejected %s: not legal for piece %d", move, piece.id)
            return False

        self._game.play(piece, move)
        self.select_piece(None)

        for cb in self.events.on_move:
            cb(piece, move, self._game)

        winner = self._game.winner
        if winner is not None:
            self._phase = GamePhase.GAME_OVER
            for cb_over in self.events.on_game_over:
                cb_over(winner)
        return True

    # ── Records ──────────────────────────────────────────────────────────

    def to_record(self) -> dict[str, Any]:
        """Game record plus the current selection."""
        record = game_to_record(self._game)
        record["selectedPieceId"] = self._selected_id
        return record

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> GameSession:
        session = cls(game_from_record(record))
        selected_id = record.get("selectedPieceId")
        if selected_id is not None:
            piece = session.game.get_piece_by_id(selected_id)
            if piece is None or not session.game.is_active(piece):
                raise RecordError(f"Invalid selectedPieceId: {selected_id!r}")
            session._selected_id = selected_id
        return session
