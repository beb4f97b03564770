"""Toroidal coordinate math shared by every board consumer.

The board wraps at every edge, so stepping off one side lands on the opposite
side. ``position`` is the only mapping from ``(x, y)`` into the flat cell list.
"""
from __future__ import annotations

from typing import Tuple

from monstersweeper.errors import OutOfBounds

Coord = Tuple[int, int]


def left(x: int, width: int) -> int:
    return (x - 1) % width


def right(x: int, width: int) -> int:
    return (x + 1) % width


def up(y: int, height: int) -> int:
    return (y - 1) % height


def down(y: int, height: int) -> int:
    return (y + 1) % height


def position(x: int, y: int, width: int) -> int:
    return y * width + x


def check_bounds(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfBounds(f"({x}, {y}) outside {width}x{height} board")


def adjacent(x: int, y: int, width: int, height: int) -> Tuple[Coord, ...]:
    """Return the eight neighbours of ``(x, y)`` in reading order.

    On boards narrower or shorter than three cells the wrap folds neighbours onto
    each other (or onto the cell itself), so entries repeat. Callers summing over
    the result count such a cell once per occurrence.
    """
    lx, rx = left(x, width), right(x, width)
    uy, dy = up(y, height), down(y, height)
    return (
        (lx, uy), (x, uy), (rx, uy),
        (lx, y),           (rx, y),
        (lx, dy), (x, dy), (rx, dy),
    )
