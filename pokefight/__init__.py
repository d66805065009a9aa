"""Game logic for a side-view creature fighting game: timing, species, tile maps, health, pokeballs, special attacks, fighters and menu states."""

__version__ = "0.1.0"