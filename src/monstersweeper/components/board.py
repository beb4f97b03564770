from dataclasses import dataclass, field
from typing import List

from monstersweeper.components.cell import Cell
from monstersweeper.difficulty import Difficulty
from monstersweeper.utils.coords import check_bounds, position


@dataclass(slots=True)
class Board:
    """Row-major grid of cells; ``position`` is the only way to index ``cells``."""

    width: int
    height: int
    difficulty: Difficulty
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [Cell() for _ in range(self.width * self.height)]
        if len(self.cells) != self.width * self.height:
            raise ValueError("Cell count does not match board dimensions")

    def cell(self, x: int, y: int) -> Cell:
        check_bounds(x, y, self.width, self.height)
        return self.cells[position(x, y, self.width)]

    def coords(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y
