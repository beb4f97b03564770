from dataclasses import dataclass
from typing import Optional

from monstersweeper.constants import MONSTER_MAX_LEVEL, MONSTER_MIN_LEVEL
from monstersweeper.errors import ActionOnRevealedCell, InvalidFlagLevel


@dataclass(slots=True)
class Cell:
    """State of one board square.

    ``monster_level`` is ``None`` for empty terrain. ``flag`` is the player's guess
    at the level hiding here and only exists on concealed cells. Once a monster is
    beaten its level moves to ``defeated_level`` so the square keeps a marker
    while contributing nothing to neighbouring values.
    """

    revealed: bool = False
    flag: Optional[int] = None
    monster_level: Optional[int] = None
    defeated_level: Optional[int] = None
    show_defeated: bool = False

    @property
    def has_monster(self) -> bool:
        return self.monster_level is not None

    def set_flag(self, level: int) -> None:
        if not MONSTER_MIN_LEVEL <= level <= MONSTER_MAX_LEVEL:
            raise InvalidFlagLevel(f"Flag level {level} outside {MONSTER_MIN_LEVEL}..{MONSTER_MAX_LEVEL}")
        if self.revealed:
            raise ActionOnRevealedCell("Cannot flag a revealed cell")
        self.flag = level

    def remove_flag(self) -> None:
        self.flag = None

    def clear(self) -> None:
        self.revealed = False
        self.flag = None
        self.monster_level = None
        self.defeated_level = None
        self.show_defeated = False
