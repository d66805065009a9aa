"""Thrown pokeballs: bouncing flight and the chance of catching the opponent."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Protocol

from pokefight.timing import Stopwatch

HIDDEN_POSITION = (200.0, 2000.0)
MAX_BOUNCES = 8
CATCH_WAIT = 6.0
CATCH_TIMEOUT = 7.0


class RandomSource(Protocol):
    def random(self) -> float: ...


class CatchResult(IntEnum):
    """Outcome of a catch attempt."""

    NOTHING = 0
    CAUGHT = 1
    ESCAPED = 2


def catch_threshold(proba: float, opponent_health: float) -> float:
    """Probability of a catch; a weakened opponent is easier to catch."""
    return proba + (proba + 0.4) * ((100 - opponent_health) / 100)


@dataclass
class Pokeball:
    """A ball thrown under low gravity and air friction that bounces to rest."""

    proba: ClassVar[float] = 0.0
    image: ClassVar[str | None] = None
    scale: ClassVar[float] = 0.4

    velocity_x: float = 0.0
    velocity_y: float = 0.0
    x: float = 0.0
    y: float = 0.0
    ball_height: float = 300.0
    gravity: float = 981.0
    air_friction: float = 0.4
    coef_impact: float = 0.2
    in_air: bool = False
    bounce: int = 0
    waiting: bool = False
    position: tuple[float, float] = HIDDEN_POSITION

    def set_position(self, x: float, y: float) -> None:
        """Place the ball at ``(x, y)``."""
        self.x = x
        self.y = y
        self.position = (x, y)

    def disappear(self) -> None:
        """Move the ball out of sight and forget its bounces."""
        self.position = HIDDEN_POSITION
        self.waiting = False
        self.bounce = 0

    def reset(self) -> None:
        """Return to the state before a throw."""
        self.bounce = 0
        self.position = HIDDEN_POSITION
        self.waiting = False

    def update(
        self,
        delta_time: float,
        window_width: float,
        window_height: float,
        stopwatch: Stopwatch,
        opponent_health: float,
        rng: RandomSource | None = None,
    ) -> CatchResult:
        """Advance the flight by ``delta_time`` seconds and check for a catch."""
        self.velocity_y += self.gravity * delta_time - self.air_friction * self.velocity_y * delta_time
        self.x += self.velocity_x * delta_time - self.air_friction * self.velocity_x * delta_time
        self.y += self.velocity_y * delta_time
        self.set_position(self.x, self.y)

        bounce_x = 0.4 * window_width
        if self.x >= bounce_x and self.bounce < MAX_BOUNCES and self.y >= window_height / 2:
            self.velocity_y = -self.velocity_y + self.coef_impact * self.velocity_y
            self.y -= 5
            if self.bounce == 0:
                self.velocity_x -= 200
            else:
                self.velocity_x = max(self.velocity_x - 60, 0.0)
            self.bounce += 1

        if self.bounce == MAX_BOUNCES - 1:
            self.velocity_x = 0.0
            self.velocity_y = 0.0
            self.bounce += 1

        if self.bounce > MAX_BOUNCES - 1:
            self.waiting = True
            self.velocity_x = 0.0
            self.velocity_y = 0.0

        return self.try_catch(stopwatch, opponent_health, rng)

    def try_catch(
        self,
        stopwatch: Stopwatch,
        opponent_health: float,
        rng: RandomSource | None = None,
    ) -> CatchResult:
        """Decide the catch once the ball has waited long enough."""
        elapsed = stopwatch.elapsed
        if elapsed > CATCH_TIMEOUT:
            stopwatch.restart()
            return CatchResult.NOTHING
        if elapsed > CATCH_WAIT:
            stopwatch.restart()
            draw = (rng if rng is not None else random).random()
            if draw < catch_threshold(self.proba, opponent_health):
                return CatchResult.CAUGHT
            return CatchResult.ESCAPED
        return CatchResult.NOTHING


@dataclass
class Normalball(Pokeball):
    """The common ball."""

    proba: ClassVar[float] = 0.20
    image: ClassVar[str | None] = "fights/Images/pokeball.png"
    scale: ClassVar[float] = 0.25


@dataclass
class Superball(Pokeball):
    """A ball with a better catch rate."""

    proba: ClassVar[float] = 0.30
    image: ClassVar[str | None] = "fights/Images/superball.png"
    scale: ClassVar[float] = 0.25


@dataclass
class Masterball(Pokeball):
    """The best ball."""

    proba: ClassVar[float] = 0.60
    image: ClassVar[str | None] = "fights/Images/masterball.png"
    scale: ClassVar[float] = 0.07