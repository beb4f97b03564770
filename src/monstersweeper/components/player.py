from dataclasses import dataclass


@dataclass
class Player:
    """Progression stats; hit points live in the sibling Health component."""
    level: int
    exp: int = 0
    exp_to_next: int = 0


@dataclass
class Cursor:
    x: int
    y: int
