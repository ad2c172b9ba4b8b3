# Area: Protocol
"""
ants_client._protocol.encoder — Order encoder
=============================================

Serializes orders into output lines:

    o <row> <col> <N|E|S|W>     one per order, in the given order
    go                          ends the turn (or acknowledges turn 0)
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..types import Order
from .._runner_config import GO, ORDER


def encode_order(order: Order) -> str:
    """Format one order as an ``o`` line."""
    return f"{ORDER} {order.pos.row} {order.pos.col} {order.direction.value}"


class OrderEncoder:
    """Writes protocol lines through a one-line-per-call output function."""

    def __init__(self, output: Callable[[str], None]):
        self._output = output

    def output_go(self) -> None:
        self._output(GO)

    def output_orders(self, orders: Iterable[Order]) -> int:
        """
        Emit one line per order followed by ``go``.

        Returns:
            Number of order lines written
        """
        count = 0
        for order in orders:
            self._output(encode_order(order))
            count += 1
        self._output(GO)
        return count
