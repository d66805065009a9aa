"""The special attacks bar: availability and timers of a special attack."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pokefight.pokedex import PokemonType
from pokefight.timing import Stopwatch

Color = tuple[int, int, int]

GREY: Color = (192, 192, 192)
GREEN: Color = (114, 228, 110)
RED: Color = (219, 88, 88)
OUTLINE_THICKNESS = 4

_IMAGE_DIR = "fights/Images/Special_Attacks_Bar"
BACKGROUND_IMAGE = f"{_IMAGE_DIR}/attackbar.png"
KEY_IMAGE = f"{_IMAGE_DIR}/key1.png"

_ATTACK_NAMES = {
    PokemonType.EARTH: "rock",
    PokemonType.WATER: "water",
    PokemonType.AIR: "air",
    PokemonType.FIRE: "fire",
}


def attack_images(ptype: int) -> tuple[str, str]:
    """Return the coloured and the black-and-white attack image of a type."""
    try:
        name = _ATTACK_NAMES[PokemonType(ptype)]
    except ValueError:
        raise ValueError(f"unknown pokemon type: {ptype!r}") from None
    return f"{_IMAGE_DIR}/{name}.png", f"{_IMAGE_DIR}/{name}_bw.png"


class BarPhase(Enum):
    """Where the special attack is in its cycle."""

    AVAILABLE = "available"
    SHOOTING = "shooting"
    REGENERATING = "regenerating"


@dataclass
class SpecialAttacksBar:
    """Tracks one special attack: ready, in use, then regenerating."""

    ptype: int
    attack_time: float = 3.0
    regeneration_time: float = 3.0
    phase: BarPhase = BarPhase.AVAILABLE
    boxsize: int = 0
    xpos: int = 0
    ypos: int = 0
    base_position: tuple[float, float] = (0.0, 0.0)
    timer_position: tuple[float, float] = (0.0, 0.0)
    attack_sprite_position: tuple[float, float] = (0.0, 0.0)
    key_position: tuple[float, float] = (0.0, 0.0)
    base_color: Color = GREY
    timer_color: Color = GREEN
    timer_size: tuple[float, float] = (0.0, 0.0)
    attack_image: str | None = None
    attack_image_bw: str | None = None
    current_image: str | None = field(default=None)

    @property
    def attack1_available(self) -> bool:
        return self.phase is BarPhase.AVAILABLE

    @property
    def shooting1(self) -> bool:
        return self.phase is BarPhase.SHOOTING

    @property
    def regenerating1(self) -> bool:
        return self.phase is BarPhase.REGENERATING

    def initialise(self, window_width: int, window_height: int) -> None:
        """Pick the images for the type and lay the bar out in the window."""
        self.attack_image, self.attack_image_bw = attack_images(self.ptype)
        self.current_image = self.attack_image
        self.boxsize = window_height // 7
        self.base_color = GREY
        self.timer_color = GREEN
        self.timer_size = (self.boxsize, self.boxsize)
        self.xpos = window_width // 14
        self.ypos = 8 * window_height // 10
        self._set_position(self.xpos, self.ypos)

    def _set_position(self, x: float, y: float) -> None:
        bx, by = self.base_position
        tx, ty = self.timer_position
        self.base_position = (bx + x, by + y)
        self.timer_position = (tx + x, ty + y)
        bounds = self.boxsize + 2 * OUTLINE_THICKNESS
        self.attack_sprite_position = (x + bounds / 2, y + bounds / 2)
        self.key_position = self.base_position

    def initial_state(self) -> None:
        """Make the attack available again with a full green timer."""
        self.base_color = GREY
        self.timer_color = GREEN
        self.timer_size = (self.boxsize, self.boxsize)
        self.current_image = self.attack_image
        self.phase = BarPhase.AVAILABLE

    def trigger(self, stopwatch: Stopwatch) -> bool:
        """Start the attack if it is available; return whether it started."""
        if self.phase is not BarPhase.AVAILABLE:
            return False
        self.phase = BarPhase.SHOOTING
        stopwatch.restart()
        return True

    def update(self, stopwatch: Stopwatch) -> None:
        """Advance the timer display according to the time on ``stopwatch``."""
        elapsed = stopwatch.elapsed
        if self.phase is BarPhase.SHOOTING:
            if elapsed < self.attack_time:
                height = self.boxsize * elapsed / self.attack_time
                self.timer_size = (self.boxsize, height)
                self.base_color = RED
                self.timer_color = GREY
            else:
                self.phase = BarPhase.REGENERATING
                stopwatch.restart()
                self.current_image = self.attack_image_bw
        elif self.phase is BarPhase.REGENERATING:
            if elapsed < self.regeneration_time:
                height = self.boxsize - self.boxsize * elapsed / self.regeneration_time
                self.timer_size = (self.boxsize, height)
                self.base_color = GREEN
                self.timer_color = GREY
            else:
                self.initial_state()