class GameError(Exception):
    """Base class for gameplay errors that leave the game running."""


class OutOfBounds(IndexError):
    """A coordinate fell outside the board.

    Wraparound normalises every coordinate the game produces, so this signals a
    broken invariant rather than bad input.
    """


class InvalidFlagLevel(GameError, ValueError):
    """Flag values must lie in 1..9."""


class ActionOnRevealedCell(GameError):
    """Flags cannot be placed on a revealed cell."""


class UnknownDifficulty(ValueError):
    pass
