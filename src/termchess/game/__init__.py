"""Game management layer: controller and state machine.

Quick start::

    from termchess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(Move(E2, E4))
"""

from termchess.game.controller import GameController, GameEvents
from termchess.game.interfaces import GameEndReason, GamePhase, IGameController
from termchess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
