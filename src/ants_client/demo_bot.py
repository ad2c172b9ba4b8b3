# Area: Bot Callbacks
"""
ants_client.demo_bot — Demo Bot Implementation
===============================================

A ready-to-use Bot that works out of the box: every one of its ants
takes one step in a uniformly random direction each turn.

Usage:
    from ants_client import RandomWalkBot, BotRunner

    runner = BotRunner(bot=RandomWalkBot(), lines=sys.stdin, output=write)
    runner.run()
"""

import logging
import random
from typing import List, Optional

from .callbacks import Bot
from .types import Direction, EndInfo, GameConfig, Order, TurnInfo

logger = logging.getLogger("ants_client.demo_bot")

DIRECTIONS = list(Direction)


class RandomWalkBot(Bot):
    """
    Unweighted random walk.

    The random generator is seeded with the game's player_seed, so a
    replayed game produces the same orders.
    """

    def __init__(self, player: int = 0, seed: Optional[int] = None):
        """
        Initialize RandomWalkBot.

        Args:
            player: Owner id of the ants to move. The engine always
                reports your own ants as player 0.
            seed: Fixed seed overriding the game's player_seed.
        """
        self.player = player
        self._seed = seed
        self._rng = random.Random(seed)
        self.final_scores: Optional[List[int]] = None

    def configure(self, config: GameConfig) -> None:
        seed = self._seed if self._seed is not None else config.player_seed
        self._rng = random.Random(seed)
        self.final_scores = None

    def decide(self, turn_info: TurnInfo) -> List[Order]:
        return [
            Order(pos=ant.pos, direction=self._rng.choice(DIRECTIONS))
            for ant in turn_info.ants_of(self.player)
        ]

    def finalize(self, end_info: EndInfo) -> None:
        self.final_scores = list(end_info.scores)
        logger.info(f"Final scores: {self.final_scores} (winner: player {end_info.winner})")
