# Area: Run Loop Tests
"""Tests for the BotRunner run loop."""

import json
import logging

import pytest

from ants_client import Bot, BotRunner, run
from ants_client._protocol.enums import RunState
from ants_client._shared import ProtocolLogger, disable_trace_mode, is_trace_mode_enabled
from ants_client.errors import (
    CannotParseEndInfo,
    CannotParseGameConfig,
    CannotParseTurnInfo,
)
from ants_client.types import Direction, Order, Position


CONFIG_INPUT = [
    "turn 0",
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

TURN_BODY = ["f 6 5", "w 7 6", "a 10 9 0", "h 7 12 0", "go"]

END_INPUT = ["end", "players 2", "score 11 12", "f 6 5", "d 7 8 1", "a 9 9 0", "go"]

GAME_INPUT = CONFIG_INPUT + ["turn 1"] + TURN_BODY + ["turn 2"] + TURN_BODY + END_INPUT


class RecordingBot(Bot):
    """Bot that records every callback into a shared event list."""

    def __init__(self, events, orders=None):
        self.events = events
        self.orders = orders or []

    def configure(self, config):
        self.events.append(("configure", config))

    def decide(self, turn_info):
        self.events.append(("decide", turn_info))
        return list(self.orders)

    def finalize(self, end_info):
        self.events.append(("finalize", end_info))


class TestBotRunner:
    """Tests for a complete game."""

    def make_runner(self, lines, orders=None):
        events = []
        output = lambda line: events.append(("output", line))
        bot = RecordingBot(events, orders)
        runner = BotRunner(
            bot=bot, lines=lines, output=output,
            protocol_logger=ProtocolLogger(enabled=False),
        )
        return runner, events

    def test_callback_sequence(self):
        runner, events = self.make_runner(GAME_INPUT)

        runner.run()

        names = [e[0] if e[0] != "output" else e[1] for e in events]
        assert names == [
            "configure", "go",
            "decide", "go",
            "decide", "go",
            "finalize",
        ]
        assert runner.state == RunState.FINISHED
        assert runner.turns_played == 2

    def test_orders_emitted_before_go(self):
        orders = [Order(Position(10, 9), Direction.E), Order(Position(1, 2), Direction.W)]
        runner, events = self.make_runner(
            CONFIG_INPUT + ["turn 1"] + TURN_BODY + END_INPUT, orders=orders
        )

        runner.run()

        outputs = [e[1] for e in events if e[0] == "output"]
        assert outputs == ["go", "o 10 9 E", "o 1 2 W", "go"]

    def test_callback_payloads(self):
        runner, events = self.make_runner(GAME_INPUT)

        end_info = runner.run()

        config = events[0][1]
        assert config.rows == 20
        assert runner.game_config == config
        turn_info = events[2][1]
        assert turn_info.ant[0].pos == Position(10, 9)
        assert events[-1][1] is end_info
        assert end_info.scores == (11, 12)

    def test_no_decide_after_end(self):
        lines = GAME_INPUT + ["turn 3"] + TURN_BODY + END_INPUT
        runner, events = self.make_runner(lines)

        runner.run()

        names = [e[0] for e in events]
        assert names.count("decide") == 2
        assert names.count("finalize") == 1
        assert names[-1] == "finalize"

    def test_truncated_input_finishes_without_finalize(self):
        runner, events = self.make_runner(CONFIG_INPUT + ["turn 1"] + TURN_BODY)

        result = runner.run()

        assert result is None
        assert "finalize" not in [e[0] for e in events]
        assert runner.state == RunState.FINISHED

    def test_go_sent_even_without_turns(self):
        runner, events = self.make_runner(CONFIG_INPUT)

        runner.run()

        assert events == [("configure", events[0][1]), ("output", "go")]

    def test_run_function(self):
        events = []
        result = run(RecordingBot(events), GAME_INPUT, lambda line: None)
        assert result.scores == (11, 12)


class TestBotRunnerErrors:
    """Tests for aborted sessions."""

    def make_runner(self, lines):
        events = []
        bot = RecordingBot(events)
        runner = BotRunner(
            bot=bot, lines=lines,
            output=lambda line: events.append(("output", line)),
            protocol_logger=ProtocolLogger(enabled=False),
        )
        return runner, events

    def test_bad_config_is_fatal(self):
        runner, events = self.make_runner(CONFIG_INPUT[:3] + ["ready"] + GAME_INPUT[11:])

        with pytest.raises(CannotParseGameConfig):
            runner.run()

        assert events == []
        assert runner.state == RunState.FAILED

    def test_missing_turn_0(self):
        runner, events = self.make_runner(["turn 1"] + TURN_BODY)

        with pytest.raises(CannotParseGameConfig):
            runner.run()

        assert events == []

    def test_truncated_turn_aborts(self):
        runner, events = self.make_runner(CONFIG_INPUT + ["turn 1", "f 6 5"])

        with pytest.raises(CannotParseTurnInfo):
            runner.run()

        assert [e[0] for e in events] == ["configure", "output"]
        assert runner.state == RunState.FAILED

    def test_bad_end_aborts(self):
        lines = CONFIG_INPUT + ["turn 1"] + TURN_BODY + ["end", "players 3", "score 1 2", "go"]
        runner, events = self.make_runner(lines)

        with pytest.raises(CannotParseEndInfo):
            runner.run()

        assert "finalize" not in [e[0] for e in events]
        assert runner.state == RunState.FAILED


class TestBotRunnerDecideFailures:
    """decide() has no error channel: failures cost the turn, not the game."""

    def test_decide_exception_absorbed(self):
        outputs = []

        class BrokenBot(Bot):
            def decide(self, turn_info):
                raise RuntimeError("bot bug")

        runner = BotRunner(
            bot=BrokenBot(), lines=GAME_INPUT, output=outputs.append,
            protocol_logger=ProtocolLogger(enabled=False),
        )

        end_info = runner.run()

        assert outputs == ["go", "go", "go"]
        assert end_info is not None
        assert runner.turns_played == 2

    def test_decide_generator_failing_midway_absorbed(self):
        outputs = []

        class YieldingBot(Bot):
            def decide(self, turn_info):
                yield Order(Position(1, 2), Direction.N)
                raise RuntimeError("boom")

        runner = BotRunner(
            bot=YieldingBot(), lines=GAME_INPUT, output=outputs.append,
            protocol_logger=ProtocolLogger(enabled=False),
        )

        end_info = runner.run()

        assert outputs == ["go", "go", "go"]
        assert end_info.scores == (11, 12)
        assert runner.turns_played == 2
        assert runner.state == RunState.FINISHED

    def test_invalid_entries_dropped(self):
        outputs = []
        good = Order(Position(1, 1), Direction.N)

        class SloppyBot(Bot):
            def decide(self, turn_info):
                return [good, "o 2 2 N", None]

        runner = BotRunner(
            bot=SloppyBot(), lines=CONFIG_INPUT + ["turn 1"] + TURN_BODY,
            output=outputs.append,
            protocol_logger=ProtocolLogger(enabled=False),
        )

        runner.run()

        assert outputs == ["go", "o 1 1 N", "go"]

    def test_configure_exception_propagates(self):
        class FailingSetupBot(Bot):
            def configure(self, config):
                raise RuntimeError("setup failed")

            def decide(self, turn_info):
                return []

        runner = BotRunner(
            bot=FailingSetupBot(), lines=GAME_INPUT, output=lambda line: None,
            protocol_logger=ProtocolLogger(enabled=False),
        )

        with pytest.raises(RuntimeError, match="setup failed"):
            runner.run()
        assert runner.state == RunState.FAILED


class TestBotRunnerConfig:
    """Tests for runner settings."""

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            BotRunner(
                bot=RecordingBot([]), lines=[], output=lambda line: None,
                config={"log_level": "LOUD"},
            )

    def test_trace_setting_applies_per_runner(self):
        plog = ProtocolLogger(enabled=False)

        try:
            BotRunner(
                bot=RecordingBot([]), lines=[], output=lambda line: None,
                config={"trace": True}, protocol_logger=plog,
            )
            assert is_trace_mode_enabled()
            assert plog.enabled

            BotRunner(
                bot=RecordingBot([]), lines=[], output=lambda line: None,
                config={"trace": False}, protocol_logger=plog,
            )
            assert not is_trace_mode_enabled()
            assert not plog.enabled
        finally:
            disable_trace_mode()
            pkg_logger = logging.getLogger("ants_client")
            for handler in pkg_logger.handlers:
                handler.close()
            pkg_logger.handlers.clear()
            pkg_logger.propagate = True

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / "logs" / "client.log"

        try:
            runner = BotRunner(
                bot=RecordingBot([]), lines=GAME_INPUT, output=lambda line: None,
                config={"log_file": str(log_file), "log_level": "DEBUG"},
                protocol_logger=ProtocolLogger(enabled=False),
            )
            runner.run()
        finally:
            pkg_logger = logging.getLogger("ants_client")
            for handler in pkg_logger.handlers:
                handler.close()
            pkg_logger.handlers.clear()
            pkg_logger.propagate = True

        assert log_file.exists()
        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        game_over = [e for e in entries if e["message"].startswith("Game over")]
        assert game_over[0]["record"] == "end"
        assert any(e.get("turn") == 2 for e in entries)
