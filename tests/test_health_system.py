from monstersweeper.components.health import Health
from monstersweeper.difficulty import Difficulty
from monstersweeper.events.bus import EventBus, EVENT_GAME_RESET, EVENT_HEALTH_CHANGED, EVENT_HEALTH_DAMAGE
from monstersweeper.systems.health_system import HealthSystem
from monstersweeper.utils.progression import player_entity
from monstersweeper.world import create_world

from tests.helpers import capture


def test_damage_event_emits_health_changed():
    """Verify EVENT_HEALTH_CHANGED is emitted after damage application."""
    bus = EventBus()
    world = create_world(bus)
    HealthSystem(world, bus)
    target = player_entity(world)
    health = world.component_for_entity(target, Health)
    changes = capture(bus, EVENT_HEALTH_CHANGED)

    bus.emit(EVENT_HEALTH_DAMAGE, target_entity=target, amount=3, reason="test")

    assert health.current == 7
    assert changes == [
        {"entity": target, "current": 7, "max_hp": 10, "delta": -3, "reason": "test"}
    ]


def test_damage_floors_at_zero():
    bus = EventBus()
    world = create_world(bus)
    HealthSystem(world, bus)
    target = player_entity(world)
    health = world.component_for_entity(target, Health)
    changes = capture(bus, EVENT_HEALTH_CHANGED)

    bus.emit(EVENT_HEALTH_DAMAGE, target_entity=target, amount=25, reason="test")

    assert health.current == 0
    assert not health.is_alive()
    assert changes[0]["delta"] == -10


def test_ignores_unknown_targets_and_zero_damage():
    bus = EventBus()
    world = create_world(bus)
    HealthSystem(world, bus)
    changes = capture(bus, EVENT_HEALTH_CHANGED)
    bus.emit(EVENT_HEALTH_DAMAGE, target_entity=9999, amount=3)
    bus.emit(EVENT_HEALTH_DAMAGE, target_entity=player_entity(world), amount=0)
    assert changes == []


def test_reset_restores_preset_hit_points():
    bus = EventBus()
    world = create_world(bus, Difficulty.EASY)
    HealthSystem(world, bus)
    health = world.component_for_entity(player_entity(world), Health)
    health.current = 1

    bus.emit(EVENT_GAME_RESET, difficulty=Difficulty.HUGE)

    assert health.current == health.max_hp == 30
