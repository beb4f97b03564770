from __future__ import annotations

from esper import World

from monstersweeper.components.battle import BattleState
from monstersweeper.components.health import Health
from monstersweeper.components.player import Cursor, Player
from monstersweeper.constants import EXP_CURVE_BASE


def exp_threshold(level: int) -> int:
    """Experience required to advance from ``level`` to ``level + 1``."""
    return EXP_CURVE_BASE * level


def player_entity(world: World) -> int:
    for entity, _ in world.get_component(Player):
        return entity
    raise RuntimeError("Player entity not found")


def player_components(world: World) -> tuple[int, Player, Health, Cursor]:
    entity = player_entity(world)
    return (
        entity,
        world.component_for_entity(entity, Player),
        world.component_for_entity(entity, Health),
        world.component_for_entity(entity, Cursor),
    )


def get_battle_state(world: World) -> BattleState:
    for _, state in world.get_component(BattleState):
        return state
    raise RuntimeError("BattleState resource not found")
