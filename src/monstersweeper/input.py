import curses
from typing import Dict, Optional

from monstersweeper.commands import CommandKind, InputCommand

KEY_MOVE_LEFT = [curses.KEY_LEFT, ord('h'), ord('a')]
KEY_MOVE_DOWN = [curses.KEY_DOWN, ord('j'), ord('s')]
KEY_MOVE_UP = [curses.KEY_UP, ord('k'), ord('w')]
KEY_MOVE_RIGHT = [curses.KEY_RIGHT, ord('l'), ord('d')]
KEY_SELECT = [ord(' '), curses.KEY_ENTER, ord('\n'), ord('\r')]
KEY_CLEAR_FLAG = [ord('0')]
KEY_RESTART = [ord('r'), ord('R')]
KEY_QUIT = [ord('q'), ord('Q')]


def _build_bindings() -> Dict[int, InputCommand]:
    bindings: Dict[int, InputCommand] = {}
    for keys, kind in (
        (KEY_MOVE_LEFT, CommandKind.MOVE_LEFT),
        (KEY_MOVE_DOWN, CommandKind.MOVE_DOWN),
        (KEY_MOVE_UP, CommandKind.MOVE_UP),
        (KEY_MOVE_RIGHT, CommandKind.MOVE_RIGHT),
        (KEY_SELECT, CommandKind.SELECT),
        (KEY_CLEAR_FLAG, CommandKind.CLEAR_FLAG),
        (KEY_RESTART, CommandKind.RESTART),
        (KEY_QUIT, CommandKind.QUIT),
    ):
        for key in keys:
            bindings[key] = InputCommand(kind)
    for level in range(1, 10):
        bindings[ord(str(level))] = InputCommand(CommandKind.SET_FLAG, flag_level=level)
    return bindings


KEY_BINDINGS = _build_bindings()


def decode_key(key: int) -> Optional[InputCommand]:
    """Map a curses key code to a command; unbound keys give ``None``."""
    return KEY_BINDINGS.get(key)
