import random

from esper import World

from monstersweeper.components.battle import BattleState
from monstersweeper.components.game_state import GameState
from monstersweeper.components.health import Health
from monstersweeper.components.player import Cursor, Player
from monstersweeper.constants import PLAYER_START_LEVEL, START_CURSOR
from monstersweeper.difficulty import Difficulty, config_for
from monstersweeper.events.bus import EventBus
from monstersweeper.utils.progression import exp_threshold


def create_world(
    event_bus: EventBus,
    difficulty: Difficulty = Difficulty.EASY,
    *,
    rng: random.Random | None = None,
) -> World:
    """Build the world resources for one game session.

    The board entity is owned by ``BoardSystem``; everything else a session needs
    (mode, battle machine, the player) is registered here.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(GameState(difficulty=difficulty), BattleState())

    config = config_for(difficulty)
    world.create_entity(
        Player(level=PLAYER_START_LEVEL, exp=0, exp_to_next=exp_threshold(PLAYER_START_LEVEL)),
        Health(current=config.player_hp, max_hp=config.player_hp),
        Cursor(*start_cursor(config.width, config.height)),
    )
    return world


def start_cursor(width: int, height: int) -> tuple[int, int]:
    x, y = START_CURSOR
    return x % width, y % height
