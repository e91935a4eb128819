"""Abstract interfaces for the session layer.

Front ends (local UI, document-sync loop) depend on :class:`IGameSession`,
not on the concrete session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dropchess.core.enums import Color
    from dropchess.core.move import Move
    from dropchess.core.piece import Piece


class GamePhase(IntEnum):
    """Session states."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class IGameSession(ABC):
    """Interface for the object a front end drives."""

    @abstractmethod
    def new_game(self) -> None:
        """Discard the current game and start from the default layout."""

    @abstractmethod
    def select_piece(self, piece: Piece | None) -> None:
        """Choose the piece the next :meth:`play` acts with."""

    @abstractmethod
    def legal_moves(self) -> list[Move]:
        """Moves available to the selected piece."""

    @abstractmethod
    def play(self, move: Move) -> bool:
        """Play *move* with the selected piece. Returns True if applied."""

    @property
    @abstractmethod
    def winner(self) -> Color | None: ...
