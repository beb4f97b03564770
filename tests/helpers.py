from __future__ import annotations

from typing import Mapping

from esper import World

from monstersweeper.components.board import Board
from monstersweeper.events.bus import EventBus
from monstersweeper.systems import board_ops


def place_monsters(world: World, monsters: Mapping[tuple[int, int], int]) -> Board:
    """Replace the board's layout with exactly the given ``(x, y) -> level`` monsters."""

    board = board_ops.get_board(world)
    board_ops.clear_board(board)
    for (x, y), level in monsters.items():
        board.cell(x, y).monster_level = level
    return board


def capture(bus: EventBus, event_name: str) -> list[dict]:
    """Subscribe to ``event_name`` and collect every payload it carries."""

    received: list[dict] = []
    bus.subscribe(event_name, lambda sender, **payload: received.append(payload))
    return received


class RecordingScreen:
    """Headless stand-in for a curses window that remembers what was drawn."""

    def __init__(self, keys=(), size=(40, 80)) -> None:
        self.cells: dict[tuple[int, int], str] = {}
        self.cursor: tuple[int, int] | None = None
        self.refreshes = 0
        self._keys = list(keys)
        self._size = size

    def erase(self) -> None:
        self.cells.clear()

    def addstr(self, row: int, col: int, text: str, attr: int = 0) -> None:
        for offset, char in enumerate(text):
            self.cells[(row, col + offset)] = char

    def move(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def refresh(self) -> None:
        self.refreshes += 1

    def getmaxyx(self) -> tuple[int, int]:
        return self._size

    def getch(self) -> int:
        if not self._keys:
            raise AssertionError("Ran out of scripted keys")
        return self._keys.pop(0)

    def row(self, row: int) -> str:
        cols = [col for (r, col) in self.cells if r == row]
        if not cols:
            return ""
        return "".join(self.cells.get((row, col), " ") for col in range(max(cols) + 1))
