from monstersweeper.components.player import Player
from monstersweeper.difficulty import Difficulty
from monstersweeper.events.bus import EventBus, EVENT_EXPERIENCE_GAINED, EVENT_GAME_RESET, EVENT_LEVEL_UP
from monstersweeper.systems.progression_system import ProgressionSystem
from monstersweeper.utils.progression import exp_threshold, player_entity
from monstersweeper.world import create_world

from tests.helpers import capture


def _setup():
    bus = EventBus()
    world = create_world(bus)
    ProgressionSystem(world, bus)
    entity = player_entity(world)
    return bus, world, entity, world.component_for_entity(entity, Player)


def test_threshold_grows_with_level():
    thresholds = [exp_threshold(level) for level in range(1, 10)]
    assert thresholds == sorted(thresholds)
    assert len(set(thresholds)) == len(thresholds)
    assert exp_threshold(1) == 5


def test_new_player_baseline():
    _, _, _, player = _setup()
    assert player.level == 1
    assert player.exp == 0
    assert player.exp_to_next == exp_threshold(1)


def test_experience_below_threshold_only_accumulates():
    bus, _, entity, player = _setup()
    levels = capture(bus, EVENT_LEVEL_UP)
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=entity, amount=4, reason="test")
    assert (player.level, player.exp) == (1, 4)
    assert levels == []


def test_level_up_subtracts_threshold():
    bus, _, entity, player = _setup()
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=entity, amount=12, reason="test")
    assert player.level == 2
    assert player.exp == 7
    assert player.exp_to_next == exp_threshold(2)


def test_large_reward_grants_several_levels():
    bus, _, entity, player = _setup()
    levels = capture(bus, EVENT_LEVEL_UP)
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=entity, amount=20, reason="test")
    # 20 - 5 (lv1) - 10 (lv2) = 5 toward level 4.
    assert player.level == 3
    assert player.exp == 5
    assert [event["level"] for event in levels] == [2, 3]


def test_non_positive_rewards_ignored():
    bus, _, entity, player = _setup()
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=entity, amount=0, reason="test")
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=None, amount=3, reason="test")
    assert player.exp == 0


def test_game_reset_restores_baseline():
    bus, _, entity, player = _setup()
    bus.emit(EVENT_EXPERIENCE_GAINED, entity=entity, amount=30, reason="test")
    bus.emit(EVENT_GAME_RESET, difficulty=Difficulty.EASY)
    assert (player.level, player.exp, player.exp_to_next) == (1, 0, exp_threshold(1))
