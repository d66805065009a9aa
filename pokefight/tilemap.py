"""Geometry of tile maps: one textured quad per map cell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

Point = tuple[float, float]


@dataclass(frozen=True)
class Quad:
    """Four corners on screen and in the tileset, clockwise from top-left."""

    positions: tuple[Point, Point, Point, Point]
    tex_coords: tuple[Point, Point, Point, Point]


def _corners(left: float, top: float, width: float, height: float) -> tuple[Point, Point, Point, Point]:
    right, bottom = left + width, top + height
    return ((left, top), (right, top), (right, bottom), (left, bottom))


def build_quads(
    tileset_width: int,
    tile_size: tuple[int, int],
    tiles: Sequence[int],
    width: int,
    height: int,
) -> list[Quad]:
    """Build quads for a ``width`` x ``height`` map, stored row by row."""
    tile_w, tile_h = tile_size
    if tile_w <= 0 or tile_h <= 0:
        raise ValueError("tile size must be positive")
    if width < 0 or height < 0:
        raise ValueError("map dimensions cannot be negative")
    columns = tileset_width // tile_w
    if columns <= 0:
        raise ValueError("tileset is narrower than one tile")
    if len(tiles) < width * height:
        raise ValueError(f"expected {width * height} tiles, got {len(tiles)}")

    quads = []
    for j in range(height):
        for i, tile_number in enumerate(tiles[j * width:(j + 1) * width]):
            if tile_number < 0:
                raise ValueError(f"negative tile number {tile_number}")
            tv, tu = divmod(tile_number, columns)
            quads.append(Quad(
                positions=_corners(i * tile_w, j * tile_h, tile_w, tile_h),
                tex_coords=_corners(tu * tile_w, tv * tile_h, tile_w, tile_h),
            ))
    return quads


@dataclass
class Interior:
    """A drawable tile map placed at a position in the world."""

    position: Point = (0.0, 0.0)
    quads: list[Quad] = field(default_factory=list)

    def load(
        self,
        tileset_width: int,
        tile_size: tuple[int, int],
        tiles: Sequence[int],
        width: int,
        height: int,
    ) -> None:
        """Replace the map geometry with the given tiles."""
        self.quads = build_quads(tileset_width, tile_size, tiles, width, height)

    @property
    def vertex_count(self) -> int:
        """Number of vertices, four per quad."""
        return 4 * len(self.quads)