# Area: Shared
"""
ants_client.cli — Command-line interface
========================================

Provides the CLI entry point: the engine talks to the bot over
stdin/stdout.

Usage:
    python -m ants_client --demo                        # Run RandomWalkBot
    python -m ants_client --bot my_bot:MyBot            # Run your own Bot
    python -m ants_client --bot my_bot:MyBot --config client.json

Settings can also come from the environment (a .env file in the
working directory is loaded first):
    ANTS_BOT, ANTS_DEMO, ANTS_LOG_FILE, ANTS_LOG_LEVEL, ANTS_TRACE

Precedence: CLI flag > environment > config file > default.
"""

import argparse
import importlib
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .callbacks import Bot
from .demo_bot import RandomWalkBot
from .errors import AntsClientError
from .runner import BotRunner
from ._runner_config import RunnerSettings, validate_config
from ._shared import log_and_terminate

EXIT_OK = 0
EXIT_PROTOCOL_ERROR = 1
EXIT_CONFIG_ERROR = 2

ENV_MAPPINGS = {
    "ANTS_BOT": "bot",
    "ANTS_DEMO": "demo",
    "ANTS_LOG_FILE": "log_file",
    "ANTS_LOG_LEVEL": "log_level",
    "ANTS_TRACE": "trace",
}

BOOLEAN_KEYS = {"demo", "trace"}


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Ants client - Play the ants game with your Bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ants_client --demo
  python -m ants_client --bot my_bot:MyBot
  python -m ants_client --bot my_bot:MyBot --log-file bot.log --trace
  ANTS_DEMO=true python -m ants_client
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        default=None,
        help="Run the bundled RandomWalkBot (no Bot implementation needed)",
    )

    parser.add_argument(
        "--bot",
        type=str,
        help="Bot class to run, as module:ClassName",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Print a colored per-record protocol trace on stderr",
    )

    return parser.parse_args(argv)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def load_config(config_path: Optional[str], args: Optional[argparse.Namespace] = None) -> Dict[str, Any]:
    """Load config from file, then environment, then CLI flags."""
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)

    # Override with environment variables
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value = os.environ[env_key]
            if config_key in BOOLEAN_KEYS:
                value = _as_bool(value)
            config[config_key] = value

    # Override with CLI flags
    if args is not None:
        for key in ("bot", "demo", "log_file", "log_level", "trace"):
            value = getattr(args, key, None)
            if value is not None:
                config[key] = value

    return config


def load_bot(import_path: str) -> Bot:
    """Import ``module:ClassName`` and instantiate the Bot."""
    module_name, _, class_name = import_path.partition(":")
    module = importlib.import_module(module_name)
    bot_class = getattr(module, class_name)
    if not (isinstance(bot_class, type) and issubclass(bot_class, Bot)):
        raise TypeError(f"{import_path} is not a Bot subclass")
    return bot_class()


def get_bot(settings: RunnerSettings) -> Bot:
    """Get the appropriate Bot instance based on settings."""
    if settings.demo:
        return RandomWalkBot()
    if settings.bot:
        return load_bot(settings.bot)
    raise ValueError("No bot configured: use --demo or --bot module:ClassName")


def write_line(line: str) -> None:
    """Write one protocol line to stdout and flush it."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def main(argv=None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(args.config, args)
        settings = validate_config(config)
        bot = get_bot(settings)
    except (ValueError, TypeError, ImportError, AttributeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    runner = BotRunner(
        bot=bot,
        lines=sys.stdin,
        output=write_line,
        config=settings.model_dump(),
    )

    try:
        runner.run()
    except AntsClientError as e:
        log_and_terminate(e, exit_code=EXIT_PROTOCOL_ERROR)
    return EXIT_OK
