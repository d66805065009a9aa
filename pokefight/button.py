"""Buttons that show a backpack pokemon and let the player pick it."""

from __future__ import annotations

from dataclasses import dataclass, field

from pokefight.health import BAR_HEIGHT, BAR_WIDTH, Color, health_color

WHITE: Color = (255, 255, 255)
HOVER: Color = (255, 99, 99)
DEAD_BAR: Color = (100, 100, 100)
DEAD_HOVER: Color = (60, 60, 60)
DARK: Color = (50, 50, 50)

BAR_IMAGE = "fights/Images/bar.png"
HEART_IMAGE = "fights/Images/heart.png"


def pokemon_image(name: str) -> str:
    """Path of the picture of the pokemon called ``name``."""
    return f"fights/Images/Pokemon_Images/{name}.png"


@dataclass
class PokemonButton:
    """A clickable card with a pokemon's name, level and health bar."""

    name: str
    level: int
    health: int
    index: int
    width: int = BAR_WIDTH
    height: int = BAR_HEIGHT
    bar_color: Color = WHITE
    sprite_color: Color = WHITE
    heart_color: Color = WHITE
    outline_color: Color = WHITE
    size: tuple[int, int] = field(init=False)
    color: Color = field(init=False)

    def __post_init__(self) -> None:
        self._refresh_bar()

    @property
    def name_text(self) -> str:
        return self.name

    @property
    def level_text(self) -> str:
        return f"lvl: {self.level}"

    @property
    def image(self) -> str:
        return pokemon_image(self.name)

    @property
    def alive(self) -> bool:
        """Only a pokemon with health left can be chosen."""
        return self.health > 0

    def _refresh_bar(self) -> None:
        self.size = (int(self.health * self.width / 100), self.height)
        self.color = health_color(self.health)

    def set_health(self, value: int) -> None:
        """Set the health shown and refresh the button."""
        self.health = value
        self.update()

    def level_up(self) -> None:
        """Raise the level by one."""
        self.level += 1

    def update(self) -> None:
        """Refresh the bar; a fainted pokemon is greyed out."""
        self._refresh_bar()
        if self.health == 0:
            self.bar_color = DEAD_BAR
            self.sprite_color = DARK
            self.color = DARK
            self.heart_color = DARK
            self.outline_color = DARK
        else:
            self.sprite_color = WHITE
            self.heart_color = WHITE
            self.outline_color = WHITE

    def update_mouse(self, hovered: bool, pressed: bool) -> int | None:
        """Highlight under the mouse; return the backpack index when clicked."""
        if self.alive:
            if hovered:
                self.bar_color = HOVER
                if pressed:
                    return self.index
            else:
                self.bar_color = WHITE
        else:
            self.bar_color = DEAD_HOVER if hovered else DEAD_BAR
        return None


@dataclass
class BackpackPokemon:
    """A pokemon carried in the backpack, with its selection button."""

    name: str
    level: int
    index: int
    health: int
    ptype: int
    button: PokemonButton = field(init=False)

    def __post_init__(self) -> None:
        self.button = PokemonButton(self.name, self.level, self.health, self.index)