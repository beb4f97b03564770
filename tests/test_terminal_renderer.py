import pytest

from monstersweeper.constants import (
    BLIND_REVEALED,
    CONCEALED,
    DEFEATED_MARKER,
    FREE,
    MONSTER_MARKER,
    OVERFLOW_MARKER,
    TOP_LEFT_CORNER,
)
from monstersweeper.difficulty import Difficulty
from monstersweeper.events.bus import EVENT_BOARD_CHANGED
from monstersweeper.game import Game
from monstersweeper.rendering.terminal_renderer import MODE_BANNERS, TerminalRenderer, symbol_for
from monstersweeper.components.game_state import GameMode
from monstersweeper.views import CellKind, CellView

from tests.helpers import RecordingScreen, place_monsters


@pytest.mark.parametrize(
    "view, glyph",
    [
        (CellView(CellKind.CONCEALED), CONCEALED),
        (CellView(CellKind.VALUE, 0), FREE),
        (CellView(CellKind.VALUE, 7), "7"),
        (CellView(CellKind.VALUE, 10), "A"),
        (CellView(CellKind.VALUE, 35), "Z"),
        (CellView(CellKind.VALUE, 40), OVERFLOW_MARKER),
        (CellView(CellKind.VALUE, 5, hidden=True), BLIND_REVEALED),
        (CellView(CellKind.VALUE, 0, hidden=True), FREE),
        (CellView(CellKind.FLAGGED, 3), "³"),
        (CellView(CellKind.MONSTER, 9), MONSTER_MARKER),
        (CellView(CellKind.DEFEATED, 2), DEFEATED_MARKER),
    ],
)
def test_symbol_for(view, glyph):
    assert symbol_for(view) == glyph


def test_marks_never_look_like_revealed_values():
    for level in range(1, 10):
        glyphs = {
            symbol_for(CellView(CellKind.VALUE, level)),
            symbol_for(CellView(CellKind.FLAGGED, level)),
            symbol_for(CellView(CellKind.MONSTER, level)),
            symbol_for(CellView(CellKind.DEFEATED, level)),
        }
        assert len(glyphs) == 4


def test_flag_glyph_is_drawn_on_the_board():
    game, screen, renderer = _rendered({(9, 9): 2})
    game.set_flag(7)
    renderer.draw_if_dirty()
    assert screen.cells[(3, 3)] == "⁷"


def _rendered(monsters):
    game = Game(Difficulty.EASY, seed=0)
    place_monsters(game.world, monsters)
    screen = RecordingScreen()
    renderer = TerminalRenderer(game, screen)
    return game, screen, renderer


def test_fresh_board_is_framed_and_concealed():
    game, screen, renderer = _rendered({(5, 5): 3})

    assert renderer.draw_if_dirty()

    assert screen.cells[(0, 0)] == TOP_LEFT_CORNER
    board_glyphs = [screen.cells[(y + 1, x + 1)] for x, y in game.board.coords()]
    assert board_glyphs.count(CONCEALED) == 256
    assert screen.row(18) == "LV:1 HP:10 EX:0 NE:5"
    assert screen.row(19) == "Monsters L3:1"
    assert screen.cursor == (3, 3)
    assert not renderer.draw_if_dirty()


def test_redraws_after_reveal():
    game, screen, renderer = _rendered({(5, 5): 3})
    renderer.draw()
    game.cursor.x, game.cursor.y = 4, 4

    game.select()

    assert renderer.dirty
    renderer.draw_if_dirty()
    assert screen.cells[(5, 5)] == "3"
    assert screen.cells[(6, 6)] == CONCEALED


def test_game_over_banner_and_monsters():
    game, screen, renderer = _rendered({(3, 3): 5, (9, 9): 1})
    game.cursor.x, game.cursor.y = 3, 3
    game.select()

    renderer.draw_if_dirty()

    assert screen.cells[(10, 10)] == MONSTER_MARKER
    assert screen.row(18) == "LV:1 HP:0 EX:0 NE:5"
    assert screen.row(20) == MODE_BANNERS[GameMode.GAME_OVER]


def test_empty_tally():
    game, screen, renderer = _rendered({})
    renderer.draw()
    assert screen.row(19) == "Monsters none"
    assert screen.row(20) == ""


def test_closed_renderer_ignores_events():
    game, screen, renderer = _rendered({})
    renderer.draw()
    renderer.close()
    game.event_bus.emit(EVENT_BOARD_CHANGED, reason="test", positions=[])
    assert not renderer.dirty
