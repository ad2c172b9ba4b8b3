# Area: Protocol Tests
"""Tests for the game-config extractor."""

import pytest

from ants_client._protocol.config_extractor import extract_game_config
from ants_client.errors import CannotParseGameConfig
from ants_client.types import GameConfig


CONFIG_LINES = [
    "loadtime 3000",
    "turntime 1000",
    "rows 20",
    "cols 30",
    "turns 500",
    "viewradius2 55",
    "attackradius2 5",
    "spawnradius2 1",
    "player_seed 42",
    "ready",
]

KEYS = [line.split()[0] for line in CONFIG_LINES[:-1]]


class TestExtractGameConfig:
    """Tests for a well-formed config record."""

    def test_all_fields_read(self):
        config = extract_game_config(iter(CONFIG_LINES))

        assert config == GameConfig(
            load_time=3000,
            turn_time=1000,
            rows=20,
            cols=30,
            turns=500,
            view_radius2=55,
            attack_radius2=5,
            food_gathering_radius2=1,
            player_seed=42,
        )

    def test_reads_up_to_ready_only(self):
        lines = iter(["before ready", "ready", "after ready"])

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(lines)

        assert next(lines) == "after ready"

    def test_unknown_lines_interleaved(self):
        noisy = []
        for line in CONFIG_LINES:
            noisy.extend(["", "# comment", "foo bar baz", line])

        config = extract_game_config(iter(noisy))

        assert config.rows == 20
        assert config.player_seed == 42

    def test_end_of_input_acts_as_ready(self):
        config = extract_game_config(iter(CONFIG_LINES[:-1]))
        assert config.turns == 500

    def test_64_bit_seed(self):
        lines = [l if not l.startswith("player_seed") else "player_seed 9223372036854775807"
                 for l in CONFIG_LINES]
        config = extract_game_config(iter(lines))
        assert config.player_seed == 2 ** 63 - 1

    def test_repeated_key_last_reading_wins(self):
        lines = ["rows 99"] + CONFIG_LINES
        config = extract_game_config(iter(lines))
        assert config.rows == 20

    def test_config_is_immutable(self):
        config = extract_game_config(iter(CONFIG_LINES))
        with pytest.raises(Exception):
            config.rows = 1


class TestExtractGameConfigErrors:
    """Tests for incomplete or invalid config records."""

    @pytest.mark.parametrize("key", KEYS)
    def test_missing_parameter(self, key):
        lines = [l for l in CONFIG_LINES if not l.startswith(key + " ")]

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(iter(lines))

    @pytest.mark.parametrize("key", KEYS)
    def test_invalid_parameter_value(self, key):
        lines = [f"{key} INVALID_VALUE" if l.split()[0] == key else l
                 for l in CONFIG_LINES]

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(iter(lines))

    @pytest.mark.parametrize("key", [k for k in KEYS if k != "player_seed"])
    def test_32_bit_overflow(self, key):
        lines = [f"{key} 2147483648" if l.split()[0] == key else l
                 for l in CONFIG_LINES]

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(iter(lines))

    def test_huge_value_is_a_parse_error(self):
        lines = [f"rows {'9' * 5000}" if l.startswith("rows ") else l
                 for l in CONFIG_LINES]

        with pytest.raises(CannotParseGameConfig) as exc_info:
            extract_game_config(iter(lines))

        assert "rows" in exc_info.value.reason

    def test_later_bad_value_replaces_good_one(self):
        lines = CONFIG_LINES[:-1] + ["rows twenty", "ready"]

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(iter(lines))

    def test_key_without_value(self):
        lines = [l if not l.startswith("cols") else "cols" for l in CONFIG_LINES]

        with pytest.raises(CannotParseGameConfig):
            extract_game_config(iter(lines))

    def test_error_names_missing_fields(self):
        with pytest.raises(CannotParseGameConfig) as exc_info:
            extract_game_config(iter(["rows 1", "ready"]))

        assert "cols" in exc_info.value.reason
        assert "rows" not in exc_info.value.reason.split(": ")[1].split(", ")
        assert exc_info.value.lines == ["rows 1", "ready"]
