"""Species tables used to create and randomly choose pokemons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class PokemonType(IntEnum):
    """Elemental type; multiples of ten to keep apart from backpack indices."""

    EARTH = 10
    WATER = 20
    AIR = 30
    FIRE = 40


@dataclass(frozen=True)
class PokemonInfo:
    """Base statistics of one species."""

    height: float
    velocity: float
    name: str
    health: int
    level: int
    index: int
    ptype: PokemonType


AIR_POKEMONS: Mapping[int, str] = MappingProxyType({
    1: "Abata",
    2: "Kangascuno",
    3: "Marodactyl",
    4: "Pulple",
    5: "Wapefet",
})

EARTH_POKEMONS: Mapping[int, str] = MappingProxyType({
    1: "Taukazam",
    2: "Churita",
    3: "Gixeor",
    4: "Sandlax",
    5: "Seemar",
    6: "Venion",
    7: "Vewaro",
    8: "Withuble",
    9: "Ganstakabra",
})

WATER_POKEMONS: Mapping[int, str] = MappingProxyType({
    1: "Molag",
    2: "Auron",
    3: "Golnite",
    4: "Warmau",
    5: "Mepowat",
})

FIRE_POKEMONS: Mapping[int, str] = MappingProxyType({
    1: "Poras",
    2: "Arfau",
    3: "Lowtor",
    4: "Pikalee",
    5: "Ponag",
    6: "Qulyd",
    7: "Ronew",
    8: "Twobee",
    9: "Raporoy",
})

# Grass areas host both earth and air pokemons.
GRASS_POKEMONS: Mapping[int, str] = MappingProxyType({
    1: "Taukazam",
    2: "Churita",
    3: "Gixeor",
    4: "Sandlax",
    5: "Seemar",
    6: "Venion",
    7: "Vewaro",
    8: "Withuble",
    9: "Ganstakabra",
    10: "Abata",
    11: "Kangascuno",
    12: "Marodactyl",
    13: "Pulple",
    14: "Wapefet",
})


def _info(height: float, velocity: float, name: str, ptype: PokemonType) -> PokemonInfo:
    return PokemonInfo(height, velocity, name, 100, 1, 0, ptype)


_A, _E, _W, _F = PokemonType.AIR, PokemonType.EARTH, PokemonType.WATER, PokemonType.FIRE

POKEMONS: Mapping[str, PokemonInfo] = MappingProxyType({
    "Abata": _info(220.0, 750.0, "abata", _A),
    "Kangascuno": _info(200.0, 700.0, "kangascuno", _A),
    "Marodactyl": _info(200.0, 700.0, "marodactyl", _A),
    "Pulple": _info(200.0, 700.0, "pulple", _A),
    "Wapefet": _info(120.0, 600.0, "wapefet", _A),
    "Taukazam": _info(170.0, 650.0, "taukazam", _E),
    "Churita": _info(100.0, 600.0, "churita", _E),
    "Gixeor": _info(100.0, 600.0, "gixeor", _E),
    "Sandlax": _info(100.0, 600.0, "sandlax", _E),
    "Seemar": _info(100.0, 600.0, "seemar", _E),
    "Venion": _info(100.0, 600.0, "venion", _E),
    "Vewaro": _info(100.0, 600.0, "vewaro", _E),
    "Withuble": _info(100.0, 600.0, "withuble", _E),
    "Ganstakabra": _info(50.0, 550.0, "ganstakabra", _E),
    "Molag": _info(270.0, 700.0, "molag", _W),
    "Auron": _info(200.0, 620.0, "auron", _W),
    "Golnite": _info(200.0, 620.0, "golnite", _W),
    "Warmau": _info(200.0, 620.0, "warmau", _W),
    "Mepowat": _info(200.0, 620.0, "mepowat", _W),
    "Poras": _info(270.0, 800.0, "poras", _F),
    "Arfau": _info(220.0, 700.0, "arfau", _F),
    "Lowtor": _info(220.0, 700.0, "lowtor", _F),
    "Pikalee": _info(220.0, 700.0, "pikalee", _F),
    "Ponag": _info(220.0, 650.0, "ponag", _F),
    "Qulyd": _info(220.0, 650.0, "qulyd", _F),
    "Ronew": _info(220.0, 650.0, "ronew", _F),
    "Twobee": _info(220.0, 650.0, "twobee", _F),
    "Raporoy": _info(130.0, 540.0, "raporoy", _F),
})

_BY_TYPE: Mapping[PokemonType, Mapping[int, str]] = MappingProxyType({
    PokemonType.AIR: AIR_POKEMONS,
    PokemonType.EARTH: EARTH_POKEMONS,
    PokemonType.WATER: WATER_POKEMONS,
    PokemonType.FIRE: FIRE_POKEMONS,
})


def lookup(name: str) -> PokemonInfo:
    """Return the statistics of the species called ``name``."""
    try:
        return POKEMONS[name]
    except KeyError:
        raise KeyError(f"unknown pokemon: {name!r}") from None


def species_of_type(ptype: int) -> Mapping[int, str]:
    """Return the numbered species table for an elemental type."""
    try:
        return _BY_TYPE[PokemonType(ptype)]
    except ValueError:
        raise ValueError(f"unknown pokemon type: {ptype!r}") from None