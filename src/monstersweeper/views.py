"""Read-only queries the render layer draws from."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, NamedTuple, Optional

from esper import World

from monstersweeper.difficulty import config_for
from monstersweeper.systems import board_ops
from monstersweeper.utils.game_state import get_game_state
from monstersweeper.utils.progression import player_components


class CellKind(Enum):
    CONCEALED = auto()
    FLAGGED = auto()
    VALUE = auto()
    MONSTER = auto()
    DEFEATED = auto()


@dataclass(frozen=True, slots=True)
class CellView:
    kind: CellKind
    value: Optional[int] = None
    # BLIND boards compute values but keep them off the screen.
    hidden: bool = False


class HudData(NamedTuple):
    level: int
    hp: int
    exp: int
    exp_to_next: int


def cell_view(world: World, x: int, y: int) -> CellView:
    board = board_ops.get_board(world)
    cell = board.cell(x, y)
    if cell.revealed:
        if cell.defeated_level is not None and cell.show_defeated:
            return CellView(CellKind.DEFEATED, cell.defeated_level)
        value = board_ops.cell_value(board, x, y)
        return CellView(CellKind.VALUE, value, hidden=config_for(board.difficulty).hide_values)
    # Once the run is over every surviving monster is shown.
    if cell.has_monster and get_game_state(world).finished:
        return CellView(CellKind.MONSTER, cell.monster_level)
    if cell.flag is not None:
        return CellView(CellKind.FLAGGED, cell.flag)
    return CellView(CellKind.CONCEALED)


def hud(world: World) -> HudData:
    _, player, health, _ = player_components(world)
    return HudData(level=player.level, hp=health.current, exp=player.exp, exp_to_next=player.exp_to_next)


def monsters_remaining(world: World) -> Dict[int, int]:
    """Surviving monsters per level, for the HUD tally."""
    return board_ops.level_counts(board_ops.get_board(world))
