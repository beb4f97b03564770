from __future__ import annotations

import logging

from esper import World

from monstersweeper.components.game_state import GameMode
from monstersweeper.events.bus import (
    EventBus,
    EVENT_BOARD_CLEARED,
    EVENT_MONSTER_DEFEATED,
    EVENT_PLAYER_DEFEATED,
)
from monstersweeper.systems import board_ops
from monstersweeper.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class DefeatSystem:
    """Moves the game into its terminal modes.

    A fallen player ends the run (GAME_OVER); beating the last monster on the
    board wins it (CLEARED). Either way only restart and quit remain.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PLAYER_DEFEATED, self._on_player_defeated)
        self.event_bus.subscribe(EVENT_MONSTER_DEFEATED, self._on_monster_defeated)

    def _on_player_defeated(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)

    def _on_monster_defeated(self, sender, **payload) -> None:
        if get_game_state(self.world).finished:
            return
        board = board_ops.get_board(self.world)
        remaining = board_ops.remaining_monsters(board)
        if remaining:
            logger.debug("%d monsters remain", remaining)
            return
        logger.info("Board cleared")
        self.event_bus.emit(EVENT_BOARD_CLEARED)
        set_game_mode(self.world, self.event_bus, GameMode.CLEARED)
