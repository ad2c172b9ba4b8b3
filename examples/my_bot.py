"""
my_bot.py — YOUR BOT IMPLEMENTATION
====================================

This is the ONLY file you need to edit.

Implement decide() below (configure() and finalize() are optional).
The package handles everything else: reading the engine's records,
writing orders and the trailing ``go``, and logging.
"""

import logging

from ants_client import Bot, Direction, Order, Position

logger = logging.getLogger("my_bot")


class MyBot(Bot):
    """Send every ant one step towards the closest visible food."""

    def configure(self, config):
        """Called once with the GameConfig, before the first turn."""
        # ─── YOUR SETUP HERE ───
        self.rows = config.rows
        self.cols = config.cols

    def decide(self, turn_info):
        """Called every turn. Return a list of Order for your ants (owner 0)."""
        # ─── YOUR AI LOGIC HERE ───
        orders = []
        for ant in turn_info.ants_of(0):
            if not turn_info.food:
                continue
            target = min(turn_info.food, key=lambda f: self._distance(ant.pos, f))
            orders.append(Order(ant.pos, self._step_towards(ant.pos, target)))
        return orders

    def finalize(self, end_info):
        """Called once with the final scores."""
        logger.info(f"Final scores: {list(end_info.scores)}")

    def _distance(self, a: Position, b: Position) -> int:
        # The map wraps around at its edges
        d_row = abs(a.row - b.row)
        d_col = abs(a.col - b.col)
        return min(d_row, self.rows - d_row) + min(d_col, self.cols - d_col)

    def _step_towards(self, src: Position, dst: Position) -> Direction:
        best = None
        for direction in Direction:
            d_row, d_col = direction.delta
            nxt = Position((src.row + d_row) % self.rows, (src.col + d_col) % self.cols)
            dist = self._distance(nxt, dst)
            if best is None or dist < best[0]:
                best = (dist, direction)
        return best[1]
