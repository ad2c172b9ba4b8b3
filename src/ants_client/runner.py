# Area: Run Loop
"""
ants_client.runner — Main run loop
==================================

The BotRunner is what bot authors instantiate and call .run() on.
It reads records from the engine, calls the bot, and writes the
bot's orders back, one record at a time, until the game is over.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from .callbacks import Bot
from .callback_executor import execute_callback, execute_decide
from .types import EndInfo, GameConfig, TurnInfo
from ._protocol import OrderEncoder, Parser, RunEvent, RunStateMachine
from ._runner_config import validate_config
from ._shared import (
    ProtocolLogger,
    disable_trace_mode,
    enable_trace_mode,
    get_protocol_logger,
    setup_logging,
)

logger = logging.getLogger("ants_client.runner")


class BotRunner:
    """
    Main entry point for bot authors.

    Usage
    -----
        import sys
        from ants_client import BotRunner
        from my_bot import MyBot

        def write(line):
            sys.stdout.write(line + "\\n")
            sys.stdout.flush()

        runner = BotRunner(bot=MyBot(), lines=sys.stdin, output=write)
        runner.run()

    ``lines`` is any iterable of text lines; ``output`` is called once
    per output line, without the newline.

    Parse errors are raised from run(): a broken record ends the session.
    """

    def __init__(
        self,
        bot: Bot,
        lines: Iterable[str],
        output: Callable[[str], None],
        config: Optional[Dict[str, Any]] = None,
        protocol_logger: Optional[ProtocolLogger] = None,
    ):
        self.bot = bot
        self.parser = Parser(lines)
        self.encoder = OrderEncoder(output)
        self.state_machine = RunStateMachine()
        self.game_config: Optional[GameConfig] = None
        self.turns_played = 0

        self.settings = validate_config(config) if config is not None else None
        if self.settings is not None:
            setup_logging(log_file_path=self.settings.log_file, level=self.settings.level)
            if self.settings.trace:
                enable_trace_mode()
            else:
                disable_trace_mode()

        self._protocol_logger = protocol_logger or get_protocol_logger()
        if self.settings is not None:
            self._protocol_logger.enabled = self.settings.trace

    @property
    def state(self):
        return self.state_machine.current_state

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> Optional[EndInfo]:
        """
        Play the game to the end of the input.

        Returns:
            The EndInfo, or None if the input ended without an end record

        Raises:
            CannotParseGameConfig, CannotParseTurnInfo, CannotParseEndInfo:
                When a record is broken. The session is over.
        """
        try:
            return self._run()
        except Exception as e:
            if not self.state_machine.is_final:
                self.state_machine.transition(RunEvent.ABORT)
            logger.error(
                f"Run aborted after {self.turns_played} turns: {e}",
                extra={"turn": self.parser.last_turn_number},
            )
            raise

    def _run(self) -> Optional[EndInfo]:
        self._configure()

        while True:
            turn = self.parser.next_turn()

            if turn is None:
                logger.info(f"Input ended after {self.turns_played} turns without 'end'")
                self.state_machine.transition(RunEvent.STREAM_EXHAUSTED)
                return None

            if turn.is_end:
                end_info = turn.result()
                self._finalize(end_info)
                return end_info

            self._play_turn(turn.result())

    def _configure(self) -> None:
        config = self.parser.next_start_turn()
        self.game_config = config
        self._protocol_logger.set_turn(0)
        self._protocol_logger.log_received(
            "CONFIG", f"{config.rows}x{config.cols}, {config.turns} turns"
        )
        logger.info(
            f"Game config: {config.rows}x{config.cols} map, {config.turns} turns, "
            f"turntime={config.turn_time}ms"
        )

        execute_callback(self.bot.configure, "configure", config, self._protocol_logger)
        self.state_machine.transition(RunEvent.CONFIGURED)

        self.encoder.output_go()
        self._protocol_logger.log_sent("READY")

    def _play_turn(self, turn_info: TurnInfo) -> None:
        self.state_machine.transition(RunEvent.TURN_RECEIVED)
        self._protocol_logger.set_turn(self.parser.last_turn_number)
        self._protocol_logger.log_received(
            "NORMAL",
            f"ants={len(turn_info.ant)} food={len(turn_info.food)} "
            f"water={len(turn_info.water)}",
        )

        orders = execute_decide(self.bot, turn_info, self._protocol_logger)
        self.state_machine.transition(RunEvent.DECIDED)

        count = self.encoder.output_orders(orders)
        self.turns_played += 1
        self._protocol_logger.log_sent("ORDERS", count)
        logger.debug(
            f"Turn {self.parser.last_turn_number}: sent {count} orders",
            extra={"turn": self.parser.last_turn_number, "record": "turn"},
        )

    def _finalize(self, end_info: EndInfo) -> None:
        self._protocol_logger.log_received("END", f"scores={list(end_info.scores)}")
        logger.info(
            f"Game over after {self.turns_played} turns, scores={list(end_info.scores)}",
            extra={"record": "end"},
        )
        execute_callback(self.bot.finalize, "finalize", end_info, self._protocol_logger)
        self.state_machine.transition(RunEvent.GAME_ENDED)


def run(
    bot: Bot,
    lines: Iterable[str],
    output: Callable[[str], None],
    config: Optional[Dict[str, Any]] = None,
) -> Optional[EndInfo]:
    """Run one game with a fresh BotRunner. See BotRunner.run()."""
    return BotRunner(bot=bot, lines=lines, output=output, config=config).run()
