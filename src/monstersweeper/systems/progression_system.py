import logging

from esper import World

from monstersweeper.components.player import Player
from monstersweeper.constants import PLAYER_START_LEVEL
from monstersweeper.events.bus import EventBus, EVENT_EXPERIENCE_GAINED, EVENT_GAME_RESET, EVENT_LEVEL_UP
from monstersweeper.utils.progression import exp_threshold

logger = logging.getLogger(__name__)


class ProgressionSystem:
    """Banks experience and levels the player up.

    ``exp`` counts progress inside the current level. While it reaches
    ``exp_to_next`` the player gains a level, the threshold is paid out of
    ``exp`` and the next threshold comes from ``exp_threshold``. One large
    reward can therefore grant several levels at once.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_EXPERIENCE_GAINED, self.on_experience_gained)
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)

    def on_experience_gained(self, sender, **payload):
        entity = payload.get('entity')
        amount = payload.get('amount', 0)
        if entity is None or amount <= 0:
            return
        try:
            player = self.world.component_for_entity(entity, Player)
        except KeyError:
            return
        player.exp += amount
        while player.exp >= player.exp_to_next:
            player.exp -= player.exp_to_next
            player.level += 1
            player.exp_to_next = exp_threshold(player.level)
            logger.info("Player reached level %d (next at %d exp)", player.level, player.exp_to_next)
            self.event_bus.emit(
                EVENT_LEVEL_UP,
                entity=entity,
                level=player.level,
                exp=player.exp,
                exp_to_next=player.exp_to_next,
            )

    def on_game_reset(self, sender, **payload):
        for _, player in self.world.get_component(Player):
            player.level = PLAYER_START_LEVEL
            player.exp = 0
            player.exp_to_next = exp_threshold(PLAYER_START_LEVEL)
