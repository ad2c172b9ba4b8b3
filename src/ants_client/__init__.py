"""
ants_client — Client for the ants game engine's line protocol
=============================================================

Quick Start (no implementation needed):
    python -m ants_client --demo

Custom Implementation:
    from ants_client import Bot, Order, Direction, run
    class MyBot(Bot):
        def decide(self, turn_info):
            return [Order(a.pos, Direction.N) for a in turn_info.ants_of(0)]
    run(MyBot(), sys.stdin, write)

The engine sends a ``turn 0`` record with the game parameters, one
record per turn, and an ``end`` record with the scores. The client
answers each with ``go``, preceded by the bot's orders.

Type Definitions
----------------
All input/output types are available for import:

    from ants_client import (
        GameConfig, TurnInfo, EndInfo,
        Position, Entity, Order, Direction,
        Turn, TurnKind,
    )
"""

from .callbacks import Bot
from .demo_bot import RandomWalkBot
from .runner import BotRunner, run
from .errors import (
    AntsClientError,
    CannotParseGameConfig,
    CannotParseTurnInfo,
    CannotParseEndInfo,
    InvalidOrderError,
)
from .types import (
    Position,
    Direction,
    Entity,
    Order,
    GameConfig,
    TurnInfo,
    EndInfo,
    Turn,
    TurnKind,
)
from ._protocol import Parser, OrderEncoder

__all__ = [
    # Main classes
    "Bot",
    "RandomWalkBot",
    "BotRunner",
    "run",
    "Parser",
    "OrderEncoder",
    # Errors
    "AntsClientError",
    "CannotParseGameConfig",
    "CannotParseTurnInfo",
    "CannotParseEndInfo",
    "InvalidOrderError",
    # Types
    "Position",
    "Direction",
    "Entity",
    "Order",
    "GameConfig",
    "TurnInfo",
    "EndInfo",
    "Turn",
    "TurnKind",
]
__version__ = "1.0.0"
