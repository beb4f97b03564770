from __future__ import annotations

import random
from typing import Dict, List, Tuple

from esper import World

from monstersweeper.components.board import Board
from monstersweeper.difficulty import DifficultyConfig
from monstersweeper.utils.coords import Coord, adjacent

# Flat cell index -> monster level
MonsterLayout = Dict[int, int]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.width, board.height
    return None


def adjacent_coords(board: Board, x: int, y: int) -> Tuple[Coord, ...]:
    return adjacent(x, y, board.width, board.height)


def cell_value(board: Board, x: int, y: int) -> int:
    """Sum of the monster levels around ``(x, y)``; 0 marks a free cell."""
    total = 0
    for nx, ny in adjacent_coords(board, x, y):
        level = board.cell(nx, ny).monster_level
        if level is not None:
            total += level
    return total


def is_free(board: Board, x: int, y: int) -> bool:
    return not board.cell(x, y).has_monster and cell_value(board, x, y) == 0


def has_free_cell(board: Board) -> bool:
    return any(is_free(board, x, y) for x, y in board.coords())


def monster_positions(board: Board) -> List[Coord]:
    return [(x, y) for x, y in board.coords() if board.cell(x, y).has_monster]


def remaining_monsters(board: Board) -> int:
    return sum(1 for cell in board.cells if cell.has_monster)


def clear_board(board: Board) -> None:
    for cell in board.cells:
        cell.clear()


def apply_layout(board: Board, layout: MonsterLayout) -> None:
    clear_board(board)
    for index, level in layout.items():
        board.cells[index].monster_level = level


def draw_monster_layout(config: DifficultyConfig, rng: random.Random) -> MonsterLayout:
    """Pick monster squares and levels for one board.

    Squares are a uniform sample of ``monster_count`` cells; levels follow the
    preset's weights. Only ``rng`` is consulted, so a seeded generator yields the
    same layout every time.
    """
    count = config.monster_count()
    indices = rng.sample(range(config.cell_count), count)
    levels = rng.choices(config.levels(), weights=config.level_weights(), k=count)
    return dict(zip(indices, levels))


def respawn_monsters(
    board: Board,
    config: DifficultyConfig,
    rng: random.Random,
    *,
    max_attempts: int,
) -> MonsterLayout:
    """Lay out fresh monsters, redrawing until at least one free cell exists."""
    for _ in range(max_attempts):
        layout = draw_monster_layout(config, rng)
        apply_layout(board, layout)
        if has_free_cell(board):
            return layout
    raise RuntimeError("Unable to place monsters while leaving a free cell")


def level_counts(board: Board) -> Dict[int, int]:
    counts: Dict[int, int] = {}
    for cell in board.cells:
        if cell.monster_level is not None:
            counts[cell.monster_level] = counts.get(cell.monster_level, 0) + 1
    return counts

