# Area: Public Types
"""
ants_client.types — Value types exchanged with your bot
========================================================

This module documents the exact structure of the values passed to each
Bot callback and the values your bot returns.

All types are exported from the main package:

    from ants_client import GameConfig, TurnInfo, EndInfo, Order, Direction

Coordinates are always (row, col), with row 0 at the top of the map.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Optional, Tuple, Union, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .errors import AntsClientError


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ============================================
# Grid primitives
# ============================================

@dataclass(frozen=True)
class Position:
    """A grid cell."""
    row: int
    col: int


class Direction(Enum):
    """Compass direction of a move. The value is the protocol letter."""
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def delta(self) -> Tuple[int, int]:
        """(d_row, d_col) of one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}


@dataclass(frozen=True)
class Entity:
    """A positioned game object owned by a player (ant, hill or dead ant).

    Fields
    ------
    owner : int
        Player index. Your own objects are always owner 0.
    pos : Position
        Where the object was seen.
    """
    owner: int
    pos: Position


@dataclass(frozen=True)
class Order:
    """Move the ant standing on ``pos`` one step towards ``direction``."""
    pos: Position
    direction: Direction


# ============================================
# configure() input
# ============================================

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class GameConfig(BaseModel):
    """Game parameters announced once, before the first turn.

    Fields
    ------
    load_time : int
        Milliseconds allowed for configure().
    turn_time : int
        Milliseconds allowed per turn.
    rows, cols : int
        Map size.
    turns : int
        Maximum number of turns in the game.
    view_radius2, attack_radius2, food_gathering_radius2 : int
        Squared radii (``spawnradius2`` on the wire).
    player_seed : int
        64-bit seed handed to every player.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    load_time: Int32
    turn_time: Int32
    rows: Int32
    cols: Int32
    turns: Int32
    view_radius2: Int32
    attack_radius2: Int32
    food_gathering_radius2: Int32
    player_seed: Int64


# ============================================
# decide() input
# ============================================

@dataclass(frozen=True)
class TurnInfo:
    """Everything visible to your bot during one turn.

    Fields
    ------
    water : tuple of Position
    food : tuple of Position
    ant_hill : tuple of Entity
        Hills (bases) currently in view.
    ant : tuple of Entity
        Live ants currently in view, yours included.
    dead_ant : tuple of Entity
        Ants that died during the previous turn.

    Every collection keeps the order in which the engine listed it.
    """
    water: Tuple[Position, ...] = ()
    food: Tuple[Position, ...] = ()
    ant_hill: Tuple[Entity, ...] = ()
    ant: Tuple[Entity, ...] = ()
    dead_ant: Tuple[Entity, ...] = ()

    def ants_of(self, owner: int) -> Tuple[Entity, ...]:
        """Live ants belonging to ``owner``."""
        return tuple(a for a in self.ant if a.owner == owner)

    def hills_of(self, owner: int) -> Tuple[Entity, ...]:
        """Hills belonging to ``owner``."""
        return tuple(h for h in self.ant_hill if h.owner == owner)


# ============================================
# finalize() input
# ============================================

@dataclass(frozen=True)
class EndInfo:
    """Final scores (indexed by player) and the last visible state."""
    scores: Tuple[int, ...]
    turn_info: TurnInfo

    @property
    def player_count(self) -> int:
        return len(self.scores)

    @property
    def winner(self) -> Optional[int]:
        """Index of the best score; ties go to the lowest index."""
        if not self.scores:
            return None
        best = max(self.scores)
        return self.scores.index(best)


# ============================================
# Parser output
# ============================================

class TurnKind(Enum):
    """Which sentinel opened a record."""
    NORMAL = "NORMAL"
    END = "END"


@dataclass(frozen=True)
class Turn:
    """One record read by the parser.

    Exactly one of ``info`` and ``error`` is set. ``info`` is a TurnInfo for
    NORMAL records and an EndInfo for END records.
    """
    kind: TurnKind
    info: Union[TurnInfo, EndInfo, None] = None
    error: Optional["AntsClientError"] = None

    def __post_init__(self):
        if (self.info is None) == (self.error is None):
            raise ValueError("Turn needs exactly one of info or error")

    @property
    def is_end(self) -> bool:
        return self.kind is TurnKind.END

    @property
    def ok(self) -> bool:
        return self.error is None

    def result(self) -> Union[TurnInfo, EndInfo]:
        """Return the parsed record or raise its parse error."""
        if self.error is not None:
            raise self.error
        return self.info
