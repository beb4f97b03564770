import logging
from typing import Callable, Dict

from blinker import Signal

logger = logging.getLogger(__name__)

Handler = Callable[..., None]


class EventBus:
    """Named blinker signals shared by every system in one game session.

    Handlers are called as ``fn(sender, **payload)`` with the bus as sender.
    """

    def __init__(self) -> None:
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Handler) -> None:
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references: systems are often constructed without being stored.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn: Handler) -> None:
        sig = self._signals.get(name)
        if sig is not None:
            sig.disconnect(fn)

    def emit(self, name: str, **payload) -> None:
        sig = self._signals.get(name)
        if sig is None or not sig.receivers:
            logger.debug("No listeners for %s", name)
            return
        sig.send(self, **payload)


# ============================================================================
# INPUT & CURSOR
# ============================================================================
EVENT_CURSOR_MOVED = "cursor_moved"            # payload: x=int, y=int
EVENT_CELL_SELECTED = "cell_selected"          # payload: x=int, y=int
EVENT_INPUT_REJECTED = "input_rejected"        # payload: command=str, reason=str


# ============================================================================
# BOARD & REVEAL
# ============================================================================
EVENT_CELLS_REVEALED = "cells_revealed"        # payload: origin=(x,y), positions=list[(x,y)]
EVENT_DEFEATED_VIEW_TOGGLED = "defeated_view_toggled"  # payload: x=int, y=int, show_defeated=bool
EVENT_FLAG_CHANGED = "flag_changed"            # payload: x=int, y=int, flag=int|None
EVENT_BOARD_CHANGED = "board_changed"          # payload: reason=str, positions=list[(x,y)]
EVENT_BOARD_CLEARED = "board_cleared"          # payload: None


# ============================================================================
# BATTLE & PROGRESSION
# ============================================================================
EVENT_BATTLE_STARTED = "battle_started"        # payload: x=int, y=int, monster_level=int
EVENT_BATTLE_RESOLVED = "battle_resolved"      # payload: outcome=BattleOutcome
EVENT_MONSTER_DEFEATED = "monster_defeated"    # payload: x=int, y=int, level=int
EVENT_PLAYER_DEFEATED = "player_defeated"      # payload: entity=int, x=int, y=int, monster_level=int
EVENT_EXPERIENCE_GAINED = "experience_gained"  # payload: entity=int, amount=int, reason=str
EVENT_LEVEL_UP = "level_up"                    # payload: entity=int, level=int, exp=int, exp_to_next=int


# ============================================================================
# HEALTH
# ============================================================================
EVENT_HEALTH_DAMAGE = "health_damage"          # payload: target_entity=int, amount=int, reason=str
EVENT_HEALTH_CHANGED = "health_changed"        # payload: entity=int, current=int, max_hp=int, delta=int, reason=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_RESET = "game_reset"                # payload: difficulty=Difficulty
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
