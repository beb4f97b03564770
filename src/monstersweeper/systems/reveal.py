import logging
from typing import List, Set

from esper import World

from monstersweeper.events.bus import (
    EventBus,
    EVENT_BATTLE_STARTED,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_SELECTED,
    EVENT_CELLS_REVEALED,
    EVENT_DEFEATED_VIEW_TOGGLED,
)
from monstersweeper.systems import board_ops
from monstersweeper.utils.coords import Coord

logger = logging.getLogger(__name__)


class RevealSystem:
    """Turns cell selections into reveals, or into battles when a monster is hit.

    Flow:
      - EVENT_CELL_SELECTED on a monster square emits EVENT_BATTLE_STARTED and
        reveals nothing.
      - On a concealed square the flood fill runs and EVENT_CELLS_REVEALED plus
        EVENT_BOARD_CHANGED report every square it opened.
      - On a revealed defeated-monster square the display toggles between the
        monster marker and the square's value.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_SELECTED, self.on_cell_selected)

    def on_cell_selected(self, sender, **payload):
        x = payload.get('x')
        y = payload.get('y')
        if x is None or y is None:
            return
        board = board_ops.get_board(self.world)
        cell = board.cell(x, y)
        if cell.revealed:
            if cell.defeated_level is not None:
                cell.show_defeated = not cell.show_defeated
                self.event_bus.emit(EVENT_DEFEATED_VIEW_TOGGLED, x=x, y=y, show_defeated=cell.show_defeated)
                self.event_bus.emit(EVENT_BOARD_CHANGED, reason="toggle_defeated", positions=[(x, y)])
            return
        self.reveal(x, y)

    def reveal(self, x: int, y: int) -> List[Coord]:
        """Reveal ``(x, y)`` and flood outward from free squares.

        Uses an explicit stack with a visited set: the board wraps, so there is
        no edge to stop a naive recursion. Monster squares are never entered by
        the flood; any flag on an opened square is dropped. Returns the squares
        opened, in order.
        """
        board = board_ops.get_board(self.world)
        origin = board.cell(x, y)
        if origin.has_monster:
            self.event_bus.emit(EVENT_BATTLE_STARTED, x=x, y=y, monster_level=origin.monster_level)
            return []
        if origin.revealed:
            return []

        revealed: List[Coord] = []
        visited: Set[Coord] = {(x, y)}
        stack: List[Coord] = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = board.cell(cx, cy)
            cell.revealed = True
            cell.flag = None
            revealed.append((cx, cy))
            if board_ops.cell_value(board, cx, cy) != 0:
                continue
            for nx, ny in board_ops.adjacent_coords(board, cx, cy):
                if (nx, ny) in visited:
                    continue
                neighbour = board.cell(nx, ny)
                if neighbour.revealed or neighbour.has_monster:
                    continue
                visited.add((nx, ny))
                stack.append((nx, ny))

        logger.debug("Reveal at (%d, %d) opened %d cells", x, y, len(revealed))
        self.event_bus.emit(EVENT_CELLS_REVEALED, origin=(x, y), positions=revealed)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reveal", positions=revealed)
        return revealed
