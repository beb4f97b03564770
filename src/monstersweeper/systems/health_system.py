import logging

from esper import World

from monstersweeper.components.health import Health
from monstersweeper.difficulty import config_for
from monstersweeper.events.bus import EventBus, EVENT_GAME_RESET, EVENT_HEALTH_CHANGED, EVENT_HEALTH_DAMAGE
from monstersweeper.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class HealthSystem:
    """Applies damage events to Health components.

    Subscribes to EVENT_HEALTH_DAMAGE, mutates the target's Health and emits
    EVENT_HEALTH_CHANGED so the HUD and other systems can react. Restores the
    preset's starting hit points on EVENT_GAME_RESET.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_HEALTH_DAMAGE, self.on_health_damage)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)

    def on_health_damage(self, sender, **kwargs):
        """Apply damage to target entity and emit health changed event."""
        target_entity = kwargs.get('target_entity')
        amount = kwargs.get('amount', 0)
        reason = kwargs.get('reason', 'unknown')

        if target_entity is None or amount <= 0:
            return

        try:
            health = self.world.component_for_entity(target_entity, Health)
        except KeyError:
            return

        delta = health.take(amount)
        logger.debug("Entity %s took %d damage (%s), hp %d/%d", target_entity, amount, reason, health.current, health.max_hp)

        self.event_bus.emit(
            EVENT_HEALTH_CHANGED,
            entity=target_entity,
            current=health.current,
            max_hp=health.max_hp,
            delta=delta,
            reason=reason,
        )

    def on_game_reset(self, sender, **kwargs):
        difficulty = kwargs.get('difficulty') or get_game_state(self.world).difficulty
        max_hp = config_for(difficulty).player_hp
        for entity, health in self.world.get_component(Health):
            health.restore(max_hp)
            self.event_bus.emit(
                EVENT_HEALTH_CHANGED,
                entity=entity,
                current=health.current,
                max_hp=health.max_hp,
                delta=0,
                reason='reset',
            )
