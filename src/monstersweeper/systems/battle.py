"""
Monster encounters.

Key mechanics:
- Meeting a monster of exactly the player's level kills it outright; no blows
  are exchanged.
- Otherwise the player strikes first for ``player.level`` damage against a
  monster whose hit points equal its level.
- A surviving monster strikes back for its level.
- Blows alternate until one side drops. Every blow deals at least one point,
  so a fight always ends and never in a draw.
- Victory clears the square and pays the monster's level in experience.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from esper import World

from monstersweeper.components.battle import BattleOutcome, BattlePhase
from monstersweeper.events.bus import (
    EventBus,
    EVENT_BATTLE_RESOLVED,
    EVENT_BATTLE_STARTED,
    EVENT_BOARD_CHANGED,
    EVENT_EXPERIENCE_GAINED,
    EVENT_HEALTH_DAMAGE,
    EVENT_MONSTER_DEFEATED,
    EVENT_PLAYER_DEFEATED,
)
from monstersweeper.systems import board_ops
from monstersweeper.utils.progression import get_battle_state, player_components

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Blow:
    by_player: bool
    damage: int
    monster_hp: int
    player_hp: int


@dataclass(frozen=True, slots=True)
class BattleResult:
    victory: bool
    instant_kill: bool
    blows: List[Blow]

    @property
    def rounds(self) -> int:
        return sum(1 for blow in self.blows if blow.by_player)

    @property
    def damage_taken(self) -> int:
        return sum(blow.damage for blow in self.blows if not blow.by_player)


def resolve_battle(player_level: int, player_hp: int, monster_level: int) -> BattleResult:
    """Play out a fight without touching any state."""
    if player_level < 1 or monster_level < 1:
        raise ValueError("Combatant levels must be at least 1")
    if player_level == monster_level:
        return BattleResult(victory=True, instant_kill=True, blows=[])

    blows: List[Blow] = []
    monster_hp = monster_level
    while True:
        monster_hp -= player_level
        blows.append(Blow(by_player=True, damage=player_level, monster_hp=monster_hp, player_hp=player_hp))
        if monster_hp <= 0:
            return BattleResult(victory=True, instant_kill=False, blows=blows)
        player_hp -= monster_level
        blows.append(Blow(by_player=False, damage=monster_level, monster_hp=monster_hp, player_hp=player_hp))
        if player_hp <= 0:
            return BattleResult(victory=False, instant_kill=False, blows=blows)


class BattleSystem:
    """Drives the IDLE -> IN_BATTLE -> VICTORY/DEFEAT machine for each engagement."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BATTLE_STARTED, self.on_battle_started)

    def on_battle_started(self, sender, **payload):
        x = payload.get('x')
        y = payload.get('y')
        if x is None or y is None:
            return
        board = board_ops.get_board(self.world)
        cell = board.cell(x, y)
        if cell.monster_level is None:
            return
        self.engage(x, y)

    def engage(self, x: int, y: int) -> BattleOutcome:
        board = board_ops.get_board(self.world)
        cell = board.cell(x, y)
        monster_level = cell.monster_level
        if monster_level is None:
            raise ValueError(f"No monster at ({x}, {y})")
        state = get_battle_state(self.world)
        state.phase = BattlePhase.IN_BATTLE

        player_entity, player, health, _ = player_components(self.world)
        player_level = player.level
        result = resolve_battle(player_level, health.current, monster_level)
        logger.debug(
            "Battle at (%d, %d): player lv%d (%d hp) vs monster lv%d",
            x, y, player_level, health.current, monster_level,
        )
        for blow in result.blows:
            if blow.by_player:
                logger.debug("  player hits for %d, monster hp %d", blow.damage, blow.monster_hp)
                continue
            logger.debug("  monster hits for %d, player hp %d", blow.damage, blow.player_hp)
            self.event_bus.emit(
                EVENT_HEALTH_DAMAGE,
                target_entity=player_entity,
                amount=blow.damage,
                reason="monster_attack",
            )

        exp_reward = monster_level if result.victory else 0
        outcome = BattleOutcome(
            x=x,
            y=y,
            monster_level=monster_level,
            player_level=player_level,
            victory=result.victory,
            instant_kill=result.instant_kill,
            rounds=result.rounds,
            damage_taken=result.damage_taken,
            exp_reward=exp_reward,
        )
        state.last_outcome = outcome

        if result.victory:
            cell.monster_level = None
            cell.defeated_level = monster_level
            cell.revealed = True
            cell.flag = None
            cell.show_defeated = True
            state.phase = BattlePhase.VICTORY
            self.event_bus.emit(EVENT_BATTLE_RESOLVED, outcome=outcome)
            self.event_bus.emit(EVENT_EXPERIENCE_GAINED, entity=player_entity, amount=exp_reward, reason="monster_defeated")
            self.event_bus.emit(EVENT_MONSTER_DEFEATED, x=x, y=y, level=monster_level)
        else:
            state.phase = BattlePhase.DEFEAT
            logger.info("Player fell to a level %d monster at (%d, %d)", monster_level, x, y)
            self.event_bus.emit(EVENT_BATTLE_RESOLVED, outcome=outcome)
            self.event_bus.emit(
                EVENT_PLAYER_DEFEATED,
                entity=player_entity,
                x=x,
                y=y,
                monster_level=monster_level,
            )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="battle", positions=[(x, y)])
        return outcome
