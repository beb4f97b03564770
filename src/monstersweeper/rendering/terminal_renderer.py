from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from monstersweeper.components.game_state import GameMode
from monstersweeper.constants import (
    BLIND_REVEALED,
    BOTTOM_LEFT_CORNER,
    BOTTOM_RIGHT_CORNER,
    CONCEALED,
    DEFEATED_MARKER,
    FLAG_MARKERS,
    FREE,
    HORZ_BOUNDARY,
    MONSTER_MARKER,
    OVERFLOW_MARKER,
    TOP_LEFT_CORNER,
    TOP_RIGHT_CORNER,
    VERT_BOUNDARY,
)
from monstersweeper.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_CURSOR_MOVED,
    EVENT_GAME_MODE_CHANGED,
    EVENT_HEALTH_CHANGED,
    EVENT_LEVEL_UP,
)
from monstersweeper.views import CellKind, CellView, monsters_remaining

if TYPE_CHECKING:
    from monstersweeper.game import Game

logger = logging.getLogger(__name__)

PAIR_VALUE, PAIR_FLAG, PAIR_MONSTER, PAIR_DEFEATED, PAIR_CONCEALED = range(1, 6)

REDRAW_EVENTS = (
    EVENT_BOARD_CHANGED,
    EVENT_CURSOR_MOVED,
    EVENT_GAME_MODE_CHANGED,
    EVENT_HEALTH_CHANGED,
    EVENT_LEVEL_UP,
)

MODE_BANNERS = {
    GameMode.GAME_OVER: "GAME OVER - r to restart, q to quit",
    GameMode.CLEARED: "ALL MONSTERS DEFEATED - r to restart, q to quit",
}


def symbol_for(view: CellView) -> str:
    """Single-character glyph for a cell view."""
    if view.kind == CellKind.CONCEALED:
        return CONCEALED
    if view.kind == CellKind.FLAGGED:
        return FLAG_MARKERS[view.value - 1]
    if view.kind == CellKind.MONSTER:
        return MONSTER_MARKER
    if view.kind == CellKind.DEFEATED:
        return DEFEATED_MARKER
    value = view.value or 0
    if value == 0:
        return FREE
    if view.hidden:
        return BLIND_REVEALED
    if value < 10:
        return str(value)
    if value < 36:
        return chr(ord('A') + value - 10)
    return OVERFLOW_MARKER


def hud_line(game: Game) -> str:
    data = game.hud()
    return f"LV:{data.level} HP:{data.hp} EX:{data.exp} NE:{data.exp_to_next}"


def tally_line(game: Game) -> str:
    counts = monsters_remaining(game.world)
    parts = [f"L{level}:{counts[level]}" for level in sorted(counts)]
    return "Monsters " + " ".join(parts) if parts else "Monsters none"


class TerminalRenderer:
    """Draws the framed board and HUD onto a curses window.

    The screen is injected so tests can pass a recording stand-in; with
    ``use_color`` off no curses calls are made beyond the screen's own methods.
    Render-relevant events mark the view dirty, and ``draw_if_dirty`` repaints.
    """

    def __init__(self, game: Game, screen, *, use_color: bool = False) -> None:
        self.game = game
        self.screen = screen
        self.use_color = use_color
        self.dirty = True
        if use_color:
            self._init_colors()
        for event_name in REDRAW_EVENTS:
            game.event_bus.subscribe(event_name, self._mark_dirty)

    def close(self) -> None:
        for event_name in REDRAW_EVENTS:
            self.game.event_bus.unsubscribe(event_name, self._mark_dirty)

    def _mark_dirty(self, sender, **payload) -> None:
        self.dirty = True

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_VALUE, curses.COLOR_CYAN, -1)
        curses.init_pair(PAIR_FLAG, curses.COLOR_YELLOW, -1)
        curses.init_pair(PAIR_MONSTER, curses.COLOR_BLACK, curses.COLOR_RED)
        curses.init_pair(PAIR_DEFEATED, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_CONCEALED, curses.COLOR_BLUE, -1)

    def _attr(self, kind: CellKind) -> int:
        if not self.use_color:
            return 0
        pair = {
            CellKind.CONCEALED: PAIR_CONCEALED,
            CellKind.FLAGGED: PAIR_FLAG,
            CellKind.VALUE: PAIR_VALUE,
            CellKind.MONSTER: PAIR_MONSTER,
            CellKind.DEFEATED: PAIR_DEFEATED,
        }[kind]
        return curses.color_pair(pair)

    def _put(self, row: int, col: int, text: str, attr: int = 0) -> None:
        try:
            self.screen.addstr(row, col, text, attr)
        except curses.error:
            pass  # writes past the last screen cell are harmless

    def draw_if_dirty(self) -> bool:
        if not self.dirty:
            return False
        self.draw()
        return True

    def draw(self) -> None:
        board = self.game.board
        self.screen.erase()
        self._put(0, 0, TOP_LEFT_CORNER + HORZ_BOUNDARY * board.width + TOP_RIGHT_CORNER)
        for y in range(board.height):
            self._put(y + 1, 0, VERT_BOUNDARY)
            for x in range(board.width):
                view = self.game.cell_view(x, y)
                self._put(y + 1, x + 1, symbol_for(view), self._attr(view.kind))
            self._put(y + 1, board.width + 1, VERT_BOUNDARY)
        self._put(board.height + 1, 0, BOTTOM_LEFT_CORNER + HORZ_BOUNDARY * board.width + BOTTOM_RIGHT_CORNER)

        hud_row = board.height + 2
        self._put(hud_row, 0, hud_line(self.game))
        self._put(hud_row + 1, 0, tally_line(self.game))
        banner = MODE_BANNERS.get(self.game.mode)
        if banner:
            self._put(hud_row + 2, 0, banner)

        cursor = self.game.cursor
        try:
            self.screen.move(cursor.y + 1, cursor.x + 1)
        except curses.error:
            logger.debug("Cursor (%d, %d) is off screen", cursor.x, cursor.y)
        self.screen.refresh()
        self.dirty = False
