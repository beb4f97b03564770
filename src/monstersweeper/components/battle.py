from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class BattlePhase(Enum):
    IDLE = auto()
    IN_BATTLE = auto()
    VICTORY = auto()
    DEFEAT = auto()


@dataclass(frozen=True, slots=True)
class BattleOutcome:
    """Result of one engagement, as reported on EVENT_BATTLE_RESOLVED."""

    x: int
    y: int
    monster_level: int
    player_level: int
    victory: bool
    instant_kill: bool
    rounds: int
    damage_taken: int
    exp_reward: int


@dataclass(slots=True)
class BattleState:
    """Singleton tracking the battle machine.

    ``phase`` is IN_BATTLE only while a battle is being resolved; afterwards it
    holds the terminal phase of the last fight until the next engagement.
    """

    phase: BattlePhase = BattlePhase.IDLE
    last_outcome: Optional[BattleOutcome] = None

    def reset(self) -> None:
        self.phase = BattlePhase.IDLE
        self.last_outcome = None
