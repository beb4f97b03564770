"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto

from monstersweeper.difficulty import Difficulty


class GameMode(Enum):
    """High-level modes; only PLAYING accepts board commands."""
    PLAYING = auto()
    GAME_OVER = auto()
    CLEARED = auto()
    QUIT = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and preset."""
    difficulty: Difficulty
    mode: GameMode = GameMode.PLAYING

    @property
    def finished(self) -> bool:
        return self.mode in (GameMode.GAME_OVER, GameMode.CLEARED)
