"""Health bar state: remaining health, bar length and colour."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int]

BAR_WIDTH = 120
BAR_HEIGHT = 15


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


def health_color(health: int) -> Color:
    """Colour of the bar: green at full health, fading through yellow to red."""
    if health > 50:
        return (_channel((100 - health) * 2.55 * 2), 255, 0)
    return (255, _channel(health * 2.55 * 2), 0)


@dataclass
class Healthbar:
    """Health of a pokemon together with what the bar shows for it."""

    name: str = ""
    level: int = 1
    health: int = 100
    width: int = BAR_WIDTH
    height: int = BAR_HEIGHT
    size: tuple[int, int] = field(init=False)
    color: Color = field(init=False)
    name_text: str = field(init=False)
    level_text: str = field(init=False)

    def __post_init__(self) -> None:
        self.update()

    def set_health(self, value: int) -> None:
        """Set health and refresh the bar."""
        self.health = value
        self.update()

    def decrease(self, amount: int) -> None:
        """Lower health; the bar follows on the next update."""
        self.health -= amount

    def update(self) -> None:
        """Refresh texts, bar length and colour; health never stays below zero."""
        self.name_text = self.name
        self.level_text = f"lvl: {self.level}"
        if self.health > 0:
            self.size = (self.health * self.width // 100, self.height)
        else:
            self.size = (0, self.height)
            self.health = 0
        self.color = health_color(self.health)

    @property
    def fainted(self) -> bool:
        """True once health has run out."""
        return self.health <= 0