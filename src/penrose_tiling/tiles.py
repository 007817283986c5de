# Tile model and seed ring for kite/dart (P2) penrose tilings.
# References:
# - https://preshing.com/20110831/penrose-tiling-explained/
from dataclasses import dataclass
from enum import Enum
from math import sqrt, pi

# (1 + sqrt(5)) / 2
PHI = (1 + sqrt(5)) / 2.0
# 36 degrees
THETA = pi / 5.0


class TileShape(Enum):
    # kite first: it picks the first color and the first distance row
    KITE = 0
    DART = 1

    def next(self) -> "TileShape":
        if self is TileShape.KITE:
            return TileShape.DART
        return TileShape.KITE


@dataclass(frozen=True)
class Tile:
    shape: TileShape
    # reference vertex; every other vertex is placed relative to it
    x: float
    y: float
    # direction of the first edge, in radians
    angle: float
    size: float

    def is_kite(self) -> bool:
        return self.shape is TileShape.KITE


def initial_tiles(w: int, h: int) -> list[Tile]:
    # Ring of kites around the center of the canvas. Five strides of 2θ
    # starting at π/2 + θ go once around the full circle.
    start = pi / 2.0 + THETA
    step = 2.0 * THETA
    tiles: list[Tile] = []
    for i in range(5):
        tiles.append(Tile(TileShape.KITE, w / 2.0, h / 2.0, start + i * step, w / 2.5))
    return tiles
