import logging
import random
from typing import Optional, Tuple

from esper import World

from monstersweeper.components.board import Board
from monstersweeper.constants import PLACEMENT_MAX_ATTEMPTS
from monstersweeper.difficulty import Difficulty, config_for
from monstersweeper.events.bus import EventBus, EVENT_BOARD_CHANGED, EVENT_GAME_RESET
from monstersweeper.systems import board_ops
from monstersweeper.utils.coords import Coord

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity: sizing, monster placement and adjacency queries."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        rng: Optional[random.Random] = None,
        populate: bool = True,
    ):
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self._rng: random.Random = candidate_rng or random.Random()
        config = config_for(difficulty)
        self.board_entity = self.world.create_entity(
            Board(width=config.width, height=config.height, difficulty=difficulty)
        )
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)
        if populate:
            self.place_monsters(difficulty)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def place_monsters(self, difficulty: Optional[Difficulty] = None) -> None:
        board = self.board
        if difficulty is not None and difficulty != board.difficulty:
            self._resize(difficulty)
            board = self.board
        config = config_for(board.difficulty)
        layout = board_ops.respawn_monsters(board, config, self._rng, max_attempts=PLACEMENT_MAX_ATTEMPTS)
        logger.debug(
            "Placed %d monsters on %dx%d %s board",
            len(layout), board.width, board.height, board.difficulty.name,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="placement", positions=[])

    def reset(self, difficulty: Optional[Difficulty] = None) -> None:
        board_ops.clear_board(self.board)
        self.place_monsters(difficulty)

    def adjacent(self, x: int, y: int) -> Tuple[Coord, ...]:
        return board_ops.adjacent_coords(self.board, x, y)

    def cell_value(self, x: int, y: int) -> int:
        return board_ops.cell_value(self.board, x, y)

    def on_game_reset(self, sender, **payload):
        self.reset(payload.get("difficulty"))

    def _resize(self, difficulty: Difficulty) -> None:
        config = config_for(difficulty)
        # add_component replaces the existing Board in place.
        self.world.add_component(
            self.board_entity,
            Board(width=config.width, height=config.height, difficulty=difficulty),
        )
