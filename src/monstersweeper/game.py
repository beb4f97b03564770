"""Game controller: composes the board, reveal and battle systems with the cursor.

Every player command enters through one method here. The controller owns the
cursor and flag marks; everything else is delegated over the event bus.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from esper import World

from monstersweeper.commands import CommandKind, InputCommand, TERMINAL_COMMANDS
from monstersweeper.components.board import Board
from monstersweeper.components.game_state import GameMode
from monstersweeper.components.player import Cursor
from monstersweeper.difficulty import Difficulty
from monstersweeper.errors import GameError
from monstersweeper.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_SELECTED,
    EVENT_CURSOR_MOVED,
    EVENT_FLAG_CHANGED,
    EVENT_GAME_RESET,
    EVENT_INPUT_REJECTED,
)
from monstersweeper.systems.battle import BattleSystem
from monstersweeper.systems.board import BoardSystem
from monstersweeper.systems.defeat_system import DefeatSystem
from monstersweeper.systems.health_system import HealthSystem
from monstersweeper.systems.progression_system import ProgressionSystem
from monstersweeper.systems.reveal import RevealSystem
from monstersweeper.utils import coords
from monstersweeper.utils.game_state import get_game_state, set_game_mode
from monstersweeper.utils.progression import get_battle_state, player_components
from monstersweeper.views import CellView, HudData, cell_view, hud
from monstersweeper.world import create_world, start_cursor

logger = logging.getLogger(__name__)


class Game:
    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world: World = create_world(self.event_bus, difficulty, rng=rng or random.Random(seed))
        self.board_system = BoardSystem(self.world, self.event_bus, difficulty)
        self.reveal_system = RevealSystem(self.world, self.event_bus)
        self.battle_system = BattleSystem(self.world, self.event_bus)
        self.health_system = HealthSystem(self.world, self.event_bus)
        self.progression_system = ProgressionSystem(self.world, self.event_bus)
        self.defeat_system = DefeatSystem(self.world, self.event_bus)
        self._handlers: dict[CommandKind, Callable[..., bool]] = {
            CommandKind.MOVE_LEFT: self.move_left,
            CommandKind.MOVE_RIGHT: self.move_right,
            CommandKind.MOVE_UP: self.move_up,
            CommandKind.MOVE_DOWN: self.move_down,
            CommandKind.SELECT: self.select,
            CommandKind.CLEAR_FLAG: self.clear_flag,
            CommandKind.RESTART: self.restart,
            CommandKind.QUIT: self.quit,
        }
        logger.info("New %s game on a %dx%d board", difficulty.name, self.board.width, self.board.height)

    @classmethod
    def new(cls, difficulty: Difficulty, *, seed: Optional[int] = None) -> "Game":
        return cls(difficulty, seed=seed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.board_system.board

    @property
    def cursor(self) -> Cursor:
        return player_components(self.world)[3]

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def difficulty(self) -> Difficulty:
        return get_game_state(self.world).difficulty

    def cell_view(self, x: int, y: int) -> CellView:
        return cell_view(self.world, x, y)

    def hud(self) -> HudData:
        return hud(self.world)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: InputCommand) -> bool:
        """Route a decoded command; returns False when it was not applied."""
        if command.kind == CommandKind.SET_FLAG:
            if command.flag_level is None:
                return self._reject(command.kind, "missing_flag_level")
            return self.set_flag(command.flag_level)
        return self._handlers[command.kind]()

    def move_left(self) -> bool:
        return self._move(CommandKind.MOVE_LEFT, dx=-1)

    def move_right(self) -> bool:
        return self._move(CommandKind.MOVE_RIGHT, dx=1)

    def move_up(self) -> bool:
        return self._move(CommandKind.MOVE_UP, dy=-1)

    def move_down(self) -> bool:
        return self._move(CommandKind.MOVE_DOWN, dy=1)

    def select(self) -> bool:
        if not self._accepts(CommandKind.SELECT):
            return False
        cursor = self.cursor
        self.event_bus.emit(EVENT_CELL_SELECTED, x=cursor.x, y=cursor.y)
        return True

    def set_flag(self, level: int) -> bool:
        if not self._accepts(CommandKind.SET_FLAG):
            return False
        cursor = self.cursor
        try:
            self.board.cell(cursor.x, cursor.y).set_flag(level)
        except GameError as exc:
            return self._reject(CommandKind.SET_FLAG, str(exc))
        self._flag_changed(cursor.x, cursor.y, level)
        return True

    def clear_flag(self) -> bool:
        if not self._accepts(CommandKind.CLEAR_FLAG):
            return False
        cursor = self.cursor
        cell = self.board.cell(cursor.x, cursor.y)
        if cell.flag is None:
            return False
        cell.remove_flag()
        self._flag_changed(cursor.x, cursor.y, None)
        return True

    def restart(self, difficulty: Optional[Difficulty] = None) -> bool:
        """Rebuild the board and the player from their baselines."""
        state = get_game_state(self.world)
        if difficulty is not None:
            state.difficulty = difficulty
        get_battle_state(self.world).reset()
        self.event_bus.emit(EVENT_GAME_RESET, difficulty=state.difficulty)
        cursor = self.cursor
        cursor.x, cursor.y = start_cursor(self.board.width, self.board.height)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("Restarted %s game", state.difficulty.name)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reset", positions=[])
        return True

    reset = restart

    def quit(self) -> bool:
        set_game_mode(self.world, self.event_bus, GameMode.QUIT)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _move(self, kind: CommandKind, dx: int = 0, dy: int = 0) -> bool:
        if not self._accepts(kind):
            return False
        cursor = self.cursor
        board = self.board
        if dx < 0:
            cursor.x = coords.left(cursor.x, board.width)
        elif dx > 0:
            cursor.x = coords.right(cursor.x, board.width)
        if dy < 0:
            cursor.y = coords.up(cursor.y, board.height)
        elif dy > 0:
            cursor.y = coords.down(cursor.y, board.height)
        self.event_bus.emit(EVENT_CURSOR_MOVED, x=cursor.x, y=cursor.y)
        return True

    def _accepts(self, kind: CommandKind) -> bool:
        if self.mode == GameMode.PLAYING or kind in TERMINAL_COMMANDS:
            return True
        self._reject(kind, f"not accepted in {self.mode.name}")
        return False

    def _reject(self, kind: CommandKind, reason: str) -> bool:
        logger.debug("Rejected %s: %s", kind.name, reason)
        self.event_bus.emit(EVENT_INPUT_REJECTED, command=kind.name, reason=reason)
        return False

    def _flag_changed(self, x: int, y: int, flag: Optional[int]) -> None:
        self.event_bus.emit(EVENT_FLAG_CHANGED, x=x, y=y, flag=flag)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="flag", positions=[(x, y)])
