"""
main.py — Run your ants bot
============================

This is the entry point. The game engine starts this script and talks
to it over stdin/stdout.

    python main.py

The runner will:
  1. Read the game parameters and answer ``go``
  2. Call YOUR decide() once per turn and send its orders
  3. Call YOUR finalize() with the final scores

Everything you log goes to stderr: stdout belongs to the engine.
"""

import sys

from ants_client import BotRunner
from my_bot import MyBot

# ── Configuration ──
config = {
    # JSON log file (None for terminal logging only)
    "log_file": "bot.log",
    "log_level": "INFO",

    # Colored per-record protocol trace on stderr
    "trace": False,
}


def write(line):
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


# ── Create your bot and run ──
runner = BotRunner(bot=MyBot(), lines=sys.stdin, output=write, config=config)
runner.run()
