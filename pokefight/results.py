"""End-of-round screens: fainted and duel-result messages, falling, leaving."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pokefight.fighter import GRAVITY

HOVER_GROWTH = 1.2


class _Falling(Protocol):
    x: float
    y: float
    velocity_y: float


def fainted_message(name: str) -> str:
    """Text shown when the pokemon called ``name`` runs out of health."""
    return f"{name} fainted!"


def duel_result_message(won: bool) -> str:
    """Text shown at the end of a duel against a trainer."""
    outcome = "won" if won else "lost"
    return f"You {outcome} the duel!"


def fall(fighter: _Falling, ground_y: float, delta_time: float) -> None:
    """Let a fighter still in the air drop towards the ground and land on it."""
    if fighter.y >= ground_y:
        return
    fighter.velocity_y += GRAVITY * delta_time
    fighter.y += fighter.velocity_y * delta_time
    if fighter.y >= ground_y:
        fighter.y = ground_y
        fighter.velocity_y = 0.0


@dataclass
class LeaveButton:
    """An arrow that grows while the mouse is over it and leaves when clicked."""

    scale_x: float = 1.0
    scale_y: float = 1.0
    onquit: bool = False
    offquit: bool = False

    @property
    def scale(self) -> tuple[float, float]:
        return (self.scale_x, self.scale_y)

    def update(self, hovered: bool, pressed: bool) -> bool:
        """Resize for the mouse position; return True when clicked."""
        if hovered and not self.onquit:
            self.scale_x *= HOVER_GROWTH
            self.scale_y *= HOVER_GROWTH
            self.onquit = True
            self.offquit = False
        elif not hovered and not self.offquit:
            self.scale_x /= HOVER_GROWTH
            self.scale_y /= HOVER_GROWTH
            self.offquit = True
            self.onquit = False
        return pressed and hovered