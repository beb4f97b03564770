import pytest

from monstersweeper.components.board import Board
from monstersweeper.components.cell import Cell
from monstersweeper.difficulty import Difficulty
from monstersweeper.errors import ActionOnRevealedCell, InvalidFlagLevel, OutOfBounds


def test_flag_on_concealed_cell():
    cell = Cell()
    cell.set_flag(4)
    assert cell.flag == 4
    cell.remove_flag()
    assert cell.flag is None


@pytest.mark.parametrize("level", [0, 10, -1])
def test_flag_level_outside_range_rejected(level):
    cell = Cell()
    with pytest.raises(InvalidFlagLevel):
        cell.set_flag(level)
    assert cell.flag is None


def test_flag_on_revealed_cell_rejected():
    cell = Cell(revealed=True)
    with pytest.raises(ActionOnRevealedCell):
        cell.set_flag(2)
    assert cell.flag is None


def test_clear_restores_baseline():
    cell = Cell(revealed=True, flag=None, monster_level=None, defeated_level=3, show_defeated=True)
    cell.clear()
    assert cell == Cell()


def test_board_allocates_width_times_height_cells():
    board = Board(width=30, height=16, difficulty=Difficulty.EXTREME)
    assert len(board.cells) == 30 * 16
    assert board.cell(29, 15) is board.cells[-1]


def test_board_rejects_mismatched_cells():
    with pytest.raises(ValueError):
        Board(width=2, height=2, difficulty=Difficulty.EASY, cells=[Cell()])


def test_board_cell_out_of_bounds_raises():
    board = Board(width=4, height=4, difficulty=Difficulty.EASY)
    with pytest.raises(OutOfBounds):
        board.cell(4, 0)
