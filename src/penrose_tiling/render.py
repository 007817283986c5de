# Drawing tiles as filled, outlined fan polygons.
from typing import Protocol

import numpy as np

from .tiles import PHI, THETA, Tile, TileShape

KITE_COLOR = 0xff8000  # orange
DART_COLOR = 0xffff00  # yellow
STROKE_COLOR = 0x000000
LINE_WIDTH = 1.0

# Distance of each of the three outer vertices from the reference vertex,
# in units of the tile size. The dart's -1 gives its notch.
DISTANCES = {
    TileShape.KITE: np.array([PHI, PHI, PHI]),
    TileShape.DART: np.array([-PHI, -1.0, -PHI]),
}


class DrawingSurface(Protocol):
    """The part of a cairo.Context the renderer uses."""

    def new_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def close_path(self) -> None: ...
    def set_source_rgb(self, red: float, green: float, blue: float) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def fill_preserve(self) -> None: ...
    def stroke(self) -> None: ...


def mkcolor(hex: int) -> tuple[float, float, float]:
    r, g, b = (hex >> 16) & 0xff, (hex >> 8) & 0xff, (hex & 0xff)
    return r / 255, g / 255, b / 255


def tile_color(tile: Tile) -> tuple[float, float, float]:
    if tile.is_kite():
        return mkcolor(KITE_COLOR)
    return mkcolor(DART_COLOR)


def tile_vertices(tile: Tile) -> np.ndarray:
    # Fan around the reference vertex: angle - θ, angle, angle + θ
    angles = tile.angle - THETA + THETA * np.arange(3)
    d = DISTANCES[tile.shape] * tile.size
    outer = np.column_stack((tile.x + d * np.cos(angles), tile.y - d * np.sin(angles)))
    return np.vstack(([tile.x, tile.y], outer))


def draw_tile(surface: DrawingSurface, tile: Tile) -> None:
    ps = tile_vertices(tile)
    surface.new_path()
    surface.move_to(*ps[0])
    for x, y in ps[1:]:
        surface.line_to(x, y)
    surface.close_path()

    surface.set_source_rgb(*tile_color(tile))
    surface.fill_preserve()
    surface.set_source_rgb(*mkcolor(STROKE_COLOR))
    surface.stroke()


def draw_tiles(surface: DrawingSurface, tiles: list[Tile], line_width: float = LINE_WIDTH) -> None:
    surface.set_line_width(line_width)
    for tile in tiles:
        draw_tile(surface, tile)
