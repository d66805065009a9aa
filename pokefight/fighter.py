"""Pokemons on the fight screen: the player's one and the computer's one."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Protocol

from pokefight.button import BackpackPokemon, pokemon_image
from pokefight.health import Healthbar
from pokefight.timing import Stopwatch

GRAVITY = 981.0
DEFAULT_WINDOW = (1400, 700)
OPPONENT_SPEED = 400.0
DODGE_RANGE_X = 200.0
DODGE_RANGE_Y = 30.0
RANDOM_JUMP_CHANCE = 0.0005
WALL_MARGIN = 20.0
SHRINK_TIME = 0.3


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def jump_velocity(jump_height: float) -> float:
    """Upward (negative) speed needed to rise ``jump_height`` under gravity."""
    if jump_height < 0:
        raise ValueError("jump height cannot be negative")
    return -math.sqrt(2.0 * GRAVITY * jump_height)


class Fighter:
    """A pokemon that moves, jumps and falls on the fight screen."""

    def __init__(
        self,
        backpack: BackpackPokemon,
        jump_height: float,
        speed: float,
        *,
        texture_size: tuple[int, int],
        window_size: tuple[int, int] = DEFAULT_WINDOW,
    ) -> None:
        tex_w, tex_h = texture_size
        if tex_w <= 0 or tex_h <= 0:
            raise ValueError("texture size must be positive")
        self.index = backpack.index
        self.name = backpack.name
        self.ptype = backpack.ptype
        self.level = backpack.level
        self.xp = 0
        self.health = Healthbar(name=backpack.name, level=backpack.level, health=backpack.health)
        self.jump_height = jump_height
        self.speed = speed
        self.texture_size = texture_size
        self.window_width, self.window_height = window_size
        self.scale = self.window_height / tex_h / 5
        self.scale_x = self.scale
        self.scale_y = self.scale
        self.x = 0.0
        self.y = 0.0
        self.ground_y = 0.0
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.can_jump = True
        self.enemy: Fighter | None = None

    @property
    def image(self) -> str:
        return pokemon_image(self.name)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def sprite_width(self) -> float:
        """On-screen width of the sprite at its current scale."""
        return self.texture_size[0] * abs(self.scale_x)

    def jump(self) -> bool:
        """Leave the ground if standing on it; return whether a jump started."""
        if not self.can_jump:
            return False
        self.can_jump = False
        self.velocity_y = jump_velocity(self.jump_height)
        return True

    def apply_gravity(self, delta_time: float) -> None:
        """Accelerate downwards for ``delta_time`` seconds."""
        self.velocity_y += GRAVITY * delta_time

    def move(self, delta_time: float) -> None:
        """Move by the current velocity and land on the ground."""
        self.x += self.velocity_x * delta_time
        self.y += self.velocity_y * delta_time
        if self.y >= self.ground_y:
            self.y = self.ground_y
            self.velocity_y = 0.0
            self.can_jump = True

    def death_disappear(self, delta_time: float) -> None:
        """Shrink the sprite towards nothing over a fraction of a second."""
        if self.scale_y <= 0:
            return
        step = (delta_time / SHRINK_TIME) * self.scale
        if self.scale_x < 0:
            self.scale_x += step
        elif self.scale_x > 0:
            self.scale_x -= step
        self.scale_y -= step


@dataclass
class Controls:
    """Which inputs are held during one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


class PlayerFighter(Fighter):
    """The pokemon steered by the player, starting on the left."""

    def __init__(
        self,
        backpack: BackpackPokemon,
        jump_height: float,
        speed: float,
        *,
        texture_size: tuple[int, int],
        window_size: tuple[int, int] = DEFAULT_WINDOW,
    ) -> None:
        super().__init__(backpack, jump_height, speed, texture_size=texture_size, window_size=window_size)
        # Pictures face left; the player starts facing right.
        self.scale_x = -self.scale
        self.was_left = True
        self.x = float(self.window_width // 5)
        self.y = float(3 * self.window_height // 5)
        self.ground_y = self.y

    def steer(self, controls: Controls) -> None:
        """Set the horizontal speed and jump from the held inputs."""
        self.velocity_x = 0.0
        if controls.left:
            self.velocity_x -= self.speed
        if controls.right:
            self.velocity_x += self.speed
        if controls.up:
            self.jump()
        if controls.down:
            self.health.set_health(self.health.health - 1)

    def move(self, delta_time: float) -> None:
        """Move, stay inside the window and face the enemy."""
        super().move(delta_time)
        half = self.sprite_width / 2
        self.x = min(max(self.x, half), self.window_width - half)
        if self.enemy is not None:
            self.update_orientation(self.enemy)

    def update_orientation(self, enemy: Fighter) -> None:
        """Flip both sprites so the two pokemons face each other."""
        offset = 2 * self.sprite_width / 3
        if self.x > enemy.x + offset and self.was_left:
            self.scale_x = self.scale
            enemy.scale_x = -enemy.scale
            self.was_left = False
        if self.x + offset < enemy.x and not self.was_left:
            self.scale_x = -self.scale
            enemy.scale_x = enemy.scale
            self.was_left = True

    def bounce_off(self) -> None:
        """Turn back after touching the enemy so the two cannot cross."""
        self.velocity_x *= -1


class OpponentFighter(Fighter):
    """The computer's pokemon: wanders, dodges bullets and jumps at random."""

    def __init__(
        self,
        backpack: BackpackPokemon,
        jump_height: float,
        speed: float,
        *,
        texture_size: tuple[int, int],
        window_size: tuple[int, int] = DEFAULT_WINDOW,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(backpack, jump_height, speed, texture_size=texture_size, window_size=window_size)
        rng = rng if rng is not None else random
        self.speed = OPPONENT_SPEED
        self.direction = (-1, 1)[rng.randrange(2)]
        self.time_change_dir = self.random_turn_time(rng)
        self.turn_clock = Stopwatch()
        self.x = float(4 * self.window_width // 5)
        self.y = float(3 * self.window_height // 5)
        self.ground_y = self.y

    @staticmethod
    def random_turn_time(rng: RandomSource | None = None) -> float:
        """Seconds to keep going one way: uniform between 0.3 and 2."""
        rng = rng if rng is not None else random
        return 0.3 + rng.random() * (2 - 0.3)

    def steer(
        self,
        delta_time: float,
        rng: RandomSource | None = None,
        incoming_bullet: tuple[float, float] | None = None,
    ) -> None:
        """Choose direction and jumps for this frame."""
        rng = rng if rng is not None else random
        self.velocity_x = self.direction * self.speed

        if self.turn_clock.tick(delta_time) > self.time_change_dir:
            self.time_change_dir = self.random_turn_time(rng)
            self.turn_clock.restart()
            self.direction *= -1

        if incoming_bullet is not None:
            bx, by = incoming_bullet
            close = abs(self.x - bx) <= DODGE_RANGE_X and abs(self.y - by) <= DODGE_RANGE_Y
            if close and self.can_jump and rng.randrange(100) < 1 + self.level * 2:
                self.jump()

        if rng.random() < RANDOM_JUMP_CHANCE and self.can_jump:
            self.jump()

        if self.x + self.sprite_width + WALL_MARGIN >= self.window_width:
            self.direction = -1
        if self.x - WALL_MARGIN <= 0:
            self.direction = 1

    def move(self, delta_time: float) -> None:
        """Move by the current velocity and land on the ground."""
        super().move(delta_time)