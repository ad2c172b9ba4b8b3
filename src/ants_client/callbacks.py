# Area: Bot Callbacks
"""
ants_client.callbacks — The 3 callback functions bots implement
===============================================================

Subclass Bot and implement decide(). configure() and finalize() are
optional.

The package calls these methods at the right time based on the engine's
input. Bots never see protocol lines.

Type Definitions
----------------
All input/output types are defined in types.py and can be imported:

    from ants_client import GameConfig, TurnInfo, EndInfo, Order, Direction
"""

from abc import ABC, abstractmethod
from typing import List

from .types import EndInfo, GameConfig, Order, TurnInfo


class Bot(ABC):
    """
    Abstract base class for an ants bot.

    One instance plays one game. The runner calls configure() once,
    decide() once per turn and finalize() once when the game is over.
    """

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 1: Game parameters
    # ──────────────────────────────────────────────────────────────
    def configure(self, config: GameConfig) -> None:
        """
        Called once, after the ``turn 0`` record was read and before the
        client acknowledges it with ``go``.

        Parameters
        ----------
        config : GameConfig
            Map size, time budgets, radii and the player seed.

        Example
        -------
        >>> def configure(self, config):
        ...     self.rng = random.Random(config.player_seed)
        """

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 2: Orders for one turn
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def decide(self, turn_info: TurnInfo) -> List[Order]:
        """
        Called once per turn with everything currently visible.

        Must return promptly: the engine enforces ``turn_time`` on its
        side. An exception raised here is logged and the turn is answered
        with no orders.

        Parameters
        ----------
        turn_info : TurnInfo
            water, food, ant_hill, ant, dead_ant. Your own objects have
            owner 0.

        Returns
        -------
        list of Order
            At most one order per ant. Sent in the returned order.

        Example
        -------
        >>> def decide(self, turn_info):
        ...     return [Order(a.pos, Direction.N) for a in turn_info.ants_of(0)]
        """
        ...

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 3: Game over
    # ──────────────────────────────────────────────────────────────
    def finalize(self, end_info: EndInfo) -> None:
        """
        Called once with the final scores and the last visible state.
        Not called when the input ends without an ``end`` record.

        Parameters
        ----------
        end_info : EndInfo
            scores (one per player, by player index) and turn_info.
        """
