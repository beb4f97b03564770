"""Difficulty presets and the monster placement policy they drive."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List

from monstersweeper.constants import MONSTER_MIN_LEVEL
from monstersweeper.errors import UnknownDifficulty


class Difficulty(Enum):
    EASY = auto()
    HUGE = auto()
    EXTREME = auto()
    BLIND = auto()


@dataclass(frozen=True, slots=True)
class DifficultyConfig:
    """Fixed board shape and monster policy for one preset.

    ``density`` is the fraction of cells that host a monster. Monster levels are
    drawn from ``MONSTER_MIN_LEVEL..max_level`` with weight ``max_level + 1 - level``
    so weak monsters are the most common. ``hide_values`` keeps revealed numbers
    off the screen (BLIND).
    """

    width: int
    height: int
    density: float
    max_level: int
    player_hp: int
    hide_values: bool = False

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def monster_count(self) -> int:
        count = round(self.cell_count * self.density)
        # Always leave room for at least one free cell.
        return max(0, min(count, self.cell_count - 1))

    def levels(self) -> List[int]:
        return list(range(MONSTER_MIN_LEVEL, self.max_level + 1))

    def level_weights(self) -> List[int]:
        return [self.max_level + 1 - level for level in self.levels()]


DIFFICULTY_CONFIGS: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(width=16, height=16, density=0.16, max_level=5, player_hp=10),
    Difficulty.HUGE: DifficultyConfig(width=50, height=25, density=0.16, max_level=9, player_hp=30),
    Difficulty.EXTREME: DifficultyConfig(width=30, height=16, density=0.22, max_level=9, player_hp=15),
    Difficulty.BLIND: DifficultyConfig(
        width=30, height=16, density=0.18, max_level=9, player_hp=10, hide_values=True
    ),
}


def config_for(difficulty: Difficulty) -> DifficultyConfig:
    return DIFFICULTY_CONFIGS[difficulty]


def parse_difficulty(name: str) -> Difficulty:
    """Resolve a case-insensitive preset name such as ``"easy"``."""
    try:
        return Difficulty[name.strip().upper()]
    except KeyError as exc:
        choices = ", ".join(d.name for d in Difficulty)
        raise UnknownDifficulty(f"Unknown difficulty '{name}' (choose from {choices})") from exc
