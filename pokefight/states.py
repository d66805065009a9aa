"""Fight screen states: intro messages and the countdown before a fight."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WILD_MODE = "w"
TRAINER_MODE = "t"
MAX_CHAR_SIZE = 150

_INTRO_MESSAGES = {
    WILD_MODE: "You encountered a wild pokemon!",
    TRAINER_MODE: "You are in a duel! ",
}


def intro_message(game_mode: str) -> str:
    """Text shown when a fight starts: against a wild pokemon or a trainer."""
    return _INTRO_MESSAGES.get(game_mode, "")


class CountdownStatus(IntEnum):
    """Fight state reported by the countdown: still counting, or start fighting."""

    FIGHTING = 2
    RUNNING = 10


@dataclass
class Countdown:
    """The "3, 2, 1, Go!" countdown; each number shows, shrinks, then hides."""

    window_width: int = 1400
    window_height: int = 700
    max_char_size: int = MAX_CHAR_SIZE
    text: str = "3"
    char_size: int = MAX_CHAR_SIZE
    visible: bool = True

    def __post_init__(self) -> None:
        if self.max_char_size < 1:
            raise ValueError("character size must be at least one")
        self.char_size = self.max_char_size

    @property
    def center(self) -> tuple[float, float]:
        """Where the text is centred in the window."""
        return (self.window_width / 2, 2 * self.window_height / 5)

    def shrink(self, delta_time: float) -> int:
        """Make the text smaller in step with time; return the new size."""
        step = 5 * delta_time * self.max_char_size / 2
        self.char_size = max(1, int(self.char_size) - int(step))
        return self.char_size

    def _show(self, text: str) -> None:
        self.visible = True
        self.char_size = self.max_char_size
        self.text = text

    def update(self, delta_time: float, elapsed: float) -> CountdownStatus:
        """Advance the countdown to ``elapsed`` seconds since it started."""
        t = elapsed
        if 0.5 < t <= 0.9:
            self.shrink(delta_time)
        elif 0.9 < t <= 1:
            self.visible = False
        elif 1 < t <= 1.5:
            self._show("2")
        elif 1.5 < t < 1.9:
            self.shrink(delta_time)
        elif 1.9 < t <= 2:
            self.visible = False
        elif 2 < t <= 2.5:
            self._show("1")
        elif 2.5 < t <= 2.9:
            self.shrink(delta_time)
        elif 2.9 < t <= 3:
            self.visible = False
        elif 3 < t <= 4:
            self._show("Go!")
        elif t > 4:
            self.text = "3"
            return CountdownStatus.FIGHTING
        return CountdownStatus.RUNNING