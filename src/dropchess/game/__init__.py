"""Session layer: piece selection, move submission, change notification.

Quick start::

    from dropchess.core import Point
    from dropchess.game import GameSession

    session = GameSession()
    session.events.on_game_over.append(lambda winner: print(winner, "wins"))
    session.select_piece(session.game.get_piece(Point(4, 6)))
    session.play(session.legal_moves()[0])
"""

from dropchess.game.interfaces import GamePhase, IGameSession
from dropchess.game.session import GameSession, SessionEvents

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameSession",
    # Concrete
    "GameSession",
    "SessionEvents",
]
