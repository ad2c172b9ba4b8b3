# Area: Shared
"""
ants_client._runner_config — Protocol constants and runner settings
====================================================================

Wire-level constants shared by the parser and encoder, plus validation
of the settings accepted by the CLI and BotRunner.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

# Sentinel tokens
TURN = "turn"
END = "end"
READY = "ready"
GO = "go"
START_TURN_LINE = "turn 0"

# Turn record tags
WATER = "w"
FOOD = "f"
ANT = "a"
HILL = "h"
DEAD = "d"

# End record tags
PLAYERS = "players"
SCORE = "score"

# Output tag
ORDER = "o"

# Wire key -> GameConfig field
CONFIG_KEYS = {
    "loadtime": "load_time",
    "turntime": "turn_time",
    "rows": "rows",
    "cols": "cols",
    "turns": "turns",
    "viewradius2": "view_radius2",
    "attackradius2": "attack_radius2",
    "spawnradius2": "food_gathering_radius2",
    "player_seed": "player_seed",
}

# Fields parsed as 64-bit integers (all others are 32-bit)
WIDE_CONFIG_FIELDS = {"player_seed"}

DEFAULT_LOG_FILE = None
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RunnerSettings(BaseModel):
    """Settings for one client process.

    Attributes:
        bot: ``module:ClassName`` import path of the Bot to run
        demo: Run the bundled RandomWalkBot instead of ``bot``
        log_file: JSON log file path, or None for terminal logging only
        log_level: Name of a ``logging`` level
        trace: Print a colored per-record protocol trace on stderr
    """

    model_config = ConfigDict(extra="forbid")

    bot: Optional[str] = None
    demo: bool = False
    log_file: Optional[str] = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    trace: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("bot")
    @classmethod
    def _import_path(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.count(":") != 1:
            raise ValueError(f"expected 'module:ClassName', got {value!r}")
        return value

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def validate_config(config: Dict[str, Any]) -> RunnerSettings:
    """
    Validate runner configuration.

    Args:
        config: Configuration dict

    Returns:
        The validated RunnerSettings

    Raises:
        ValueError: If any key is unknown or has an invalid value
    """
    try:
        return RunnerSettings(**config)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ValueError(f"Invalid runner config: {problems}") from e
