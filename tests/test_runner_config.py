# Area: Shared Tests
"""Tests for _runner_config constants and settings validation."""

import logging

import pytest

from ants_client._runner_config import (
    CONFIG_KEYS,
    WIDE_CONFIG_FIELDS,
    RunnerSettings,
    validate_config,
)
from ants_client.types import GameConfig


class TestConfigKeys:
    """Tests for the wire key -> field mapping."""

    def test_nine_keys(self):
        assert len(CONFIG_KEYS) == 9

    def test_fields_match_game_config(self):
        assert set(CONFIG_KEYS.values()) == set(GameConfig.model_fields)

    def test_spawnradius_is_food_gathering_radius(self):
        assert CONFIG_KEYS["spawnradius2"] == "food_gathering_radius2"

    def test_only_seed_is_wide(self):
        assert WIDE_CONFIG_FIELDS == {"player_seed"}


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_defaults(self):
        settings = validate_config({})
        assert settings == RunnerSettings()
        assert settings.log_file is None
        assert settings.level == logging.INFO
        assert settings.trace is False

    def test_level_normalized(self):
        assert validate_config({"log_level": "debug"}).level == logging.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="log_level"):
            validate_config({"log_level": "LOUD"})

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="poll_interval"):
            validate_config({"poll_interval": 5})

    def test_bot_import_path(self):
        assert validate_config({"bot": "my_bot:MyBot"}).bot == "my_bot:MyBot"
        with pytest.raises(ValueError):
            validate_config({"bot": "my_bot.MyBot"})
