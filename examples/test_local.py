"""
test_local.py — Test the full game flow WITHOUT an engine
==========================================================

Feeds a canned two-turn game to MyBot and prints everything the bot
would have sent. No game engine needed.

Run with:  python test_local.py
"""

import logging

from ants_client import BotRunner
from my_bot import MyBot

logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")

TRANSCRIPT = """\
turn 0
loadtime 3000
turntime 1000
rows 20
cols 20
turns 500
viewradius2 55
attackradius2 5
spawnradius2 1
player_seed 42
ready
turn 1
f 3 8
w 4 4
a 3 5 0
a 10 10 1
h 3 5 0
go
turn 2
f 3 8
a 3 6 0
go
end
players 2
score 1 0
f 3 8
a 3 7 0
go
"""


def main():
    sent = []
    runner = BotRunner(bot=MyBot(), lines=TRANSCRIPT.splitlines(), output=sent.append)
    end_info = runner.run()

    print("=" * 50)
    print("Lines sent to the engine:")
    for line in sent:
        print(f"    {line}")
    print(f"Turns played: {runner.turns_played}")
    print(f"Final scores: {list(end_info.scores)} (winner: player {end_info.winner})")
    print("=" * 50)


if __name__ == "__main__":
    main()
