from dataclasses import dataclass


@dataclass
class Health:
    """Player hit points. Zero means the player has fallen."""
    current: int
    max_hp: int

    def take(self, amount: int) -> int:
        """Subtract ``amount`` (floored at zero) and return the signed change."""
        before = self.current
        self.current = max(0, self.current - amount)
        return self.current - before

    def is_alive(self) -> bool:
        return self.current > 0

    def restore(self, max_hp: int) -> None:
        self.max_hp = max_hp
        self.current = max_hp
