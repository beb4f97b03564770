"""Entry point for Monster Sweeper.

Parses the command line, sets up file logging and runs the curses loop.
"""
from __future__ import annotations

import argparse
import curses
import logging
import sys
from functools import partial
from typing import Optional, Sequence

from monstersweeper.components.game_state import GameMode
from monstersweeper.constants import LOG_FILE
from monstersweeper.difficulty import Difficulty, parse_difficulty
from monstersweeper.errors import UnknownDifficulty
from monstersweeper.game import Game
from monstersweeper.input import decode_key
from monstersweeper.rendering.terminal_renderer import TerminalRenderer

logger = logging.getLogger(__name__)

DESCRIPTION = """\
A cross between Minesweeper and an RPG. Gain levels by killing weak monsters
and win when you defeat them all. The number on a revealed square is the total
level of the monsters in the eight squares around it; the board wraps at every
edge.

Selecting a monster starts a battle. A monster of your own level dies at once.
Otherwise you strike first for damage equal to your level, the monster strikes
back for its level, and blows alternate until one of you falls.
"""

CONTROLS = """\
legend:
  HP  hit points, the game ends at 0
  LV  level, the damage you deal
  EX  experience collected toward the next level
  NE  experience needed to reach the next level
  ¹-⁹ a flag, showing the level you guessed
  M   a monster, shown once the game is over
  †   a monster you defeated

controls:
  space/enter       open the selected square, or toggle a defeated monster
  h/a/left          move left
  j/s/down          move down
  k/w/up            move up
  l/d/right         move right
  1-9               flag the square with a level guess
  0                 remove the flag
  r                 restart
  q                 quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monstersweeper",
        description=DESCRIPTION,
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d", "--difficulty",
        default=Difficulty.EASY.name,
        help="EASY, HUGE, EXTREME or BLIND (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, help="seed for a reproducible board")
    parser.add_argument("--debug", action="store_true", help="log per-move detail")
    parser.add_argument("--log-file", default=LOG_FILE, help="log destination (default: %(default)s)")
    return parser


def setup_logging(debug_mode: bool, log_file: str) -> None:
    # curses owns the terminal, so logs go to a file.
    level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        filename=log_file,
        filemode="w",
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run(game: Game, screen, *, use_color: bool = True) -> None:
    """Feed keys from ``screen`` into ``game`` until it quits."""
    renderer = TerminalRenderer(game, screen, use_color=use_color)
    try:
        while game.mode != GameMode.QUIT:
            renderer.draw_if_dirty()
            command = decode_key(screen.getch())
            if command is None:
                continue
            game.dispatch(command)
    finally:
        renderer.close()


def _curses_main(screen, difficulty: Difficulty, seed: Optional[int]) -> None:
    curses.noecho()
    curses.cbreak()
    screen.keypad(True)
    game = Game.new(difficulty, seed=seed)
    run(game, screen, use_color=curses.has_colors())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        difficulty = parse_difficulty(args.difficulty)
    except UnknownDifficulty as exc:
        parser.error(str(exc))
    setup_logging(args.debug, args.log_file)
    logger.info("Starting %s game (seed=%s)", difficulty.name, args.seed)
    try:
        curses.wrapper(partial(_curses_main, difficulty=difficulty, seed=args.seed))
    except Exception:
        logger.exception("Critical error during game execution")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
