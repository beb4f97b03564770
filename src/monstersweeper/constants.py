MONSTER_MIN_LEVEL = 1
MONSTER_MAX_LEVEL = 9

PLAYER_START_LEVEL = 1
# Experience needed to leave a level is EXP_CURVE_BASE * level.
EXP_CURVE_BASE = 5

# Cursor spawn point; wrapped onto the board for very small grids.
START_CURSOR = (2, 2)

# Attempts at drawing a monster layout that still leaves a free cell.
PLACEMENT_MAX_ATTEMPTS = 200

# ============================================================================
# DISPLAY SYMBOLS
# ============================================================================
CONCEALED = "▒"
FREE = " "
BLIND_REVEALED = "·"
# Two-digit values are drawn as letters (10 -> 'A'); anything past 'Z' uses this.
OVERFLOW_MARKER = "+"
# Flags show the guessed level (1-9) as a superscript digit.
FLAG_MARKERS = "¹²³⁴⁵⁶⁷⁸⁹"
MONSTER_MARKER = "M"
DEFEATED_MARKER = "†"

HORZ_BOUNDARY = "─"
VERT_BOUNDARY = "│"
TOP_LEFT_CORNER = "┌"
TOP_RIGHT_CORNER = "┐"
BOTTOM_LEFT_CORNER = "└"
BOTTOM_RIGHT_CORNER = "┘"

LOG_FILE = "monstersweeper.log"
