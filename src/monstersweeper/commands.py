from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandKind(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    SELECT = auto()
    SET_FLAG = auto()
    CLEAR_FLAG = auto()
    RESTART = auto()
    QUIT = auto()


# Accepted after the run has ended.
TERMINAL_COMMANDS = frozenset({CommandKind.RESTART, CommandKind.QUIT})


@dataclass(frozen=True, slots=True)
class InputCommand:
    kind: CommandKind
    flag_level: Optional[int] = None
