# Deflation: replace every tile by smaller tiles, generation by generation.
from collections.abc import Iterator
from math import cos, sin, tau

from .tiles import PHI, THETA, Tile, TileShape


def subdivide(tile: Tile) -> list[Tile]:
    x, y, a, s = tile.x, tile.y, tile.angle, tile.size
    size = s / PHI

    if tile.shape is TileShape.DART:
        result = [Tile(TileShape.KITE, x, y, a + 5.0 * THETA, size)]
        for sign in (1.0, -1.0):
            nangle = a - 4.0 * THETA * sign
            nx = x + cos(nangle) * PHI * s
            ny = y - sin(nangle) * PHI * s
            result.append(Tile(TileShape.DART, nx, ny, nangle, size))
        return result
    else:
        result = []
        for sign in (1.0, -1.0):
            result.append(Tile(TileShape.DART, x, y, a - 4.0 * THETA * sign, size))
            nx = x + cos(a - THETA * sign) * PHI * s
            ny = y - sin(a - THETA * sign) * PHI * s
            result.append(Tile(TileShape.KITE, nx, ny, a + 3.0 * THETA * sign, size))
        return result


def _snapped_key(tile: Tile, tolerance: float) -> tuple:
    # Angles from different parents can differ by whole turns.
    angle = tile.angle % tau
    return (
        tile.shape,
        round(tile.x / tolerance),
        round(tile.y / tolerance),
        round(angle / tolerance) % max(1, round(tau / tolerance)),
        round(tile.size / tolerance),
    )


def distinct(tiles: list[Tile], tolerance: float | None = None) -> list[Tile]:
    """Drop repeated tiles, keeping the first occurrence of each.

    Without a tolerance two tiles are the same only if all their fields are
    bit-identical. With one, positions, angles and sizes are compared after
    snapping to a grid with that pitch.
    """
    if tolerance is None:
        return list(dict.fromkeys(tiles))

    seen: set[tuple] = set()
    unique: list[Tile] = []
    for tile in tiles:
        key = _snapped_key(tile, tolerance)
        if key not in seen:
            seen.add(key)
            unique.append(tile)
    return unique


def subdivide_once(tiles: list[Tile], tolerance: float | None = None) -> list[Tile]:
    next_tiles: list[Tile] = []
    for tile in tiles:
        next_tiles.extend(subdivide(tile))
    return distinct(next_tiles, tolerance)


def deflate_tiles(tiles: list[Tile], gen: int, tolerance: float | None = None) -> list[Tile]:
    if gen <= 0:
        return tiles
    return deflate_tiles(subdivide_once(tiles, tolerance), gen - 1, tolerance)


def generations(
    tiles: list[Tile], gen: int, tolerance: float | None = None
) -> Iterator[tuple[int, list[Tile]]]:
    """Yield (generation, tiles) from the seeds up to generation `gen`.

    The last list yielded equals deflate_tiles(tiles, gen, tolerance).
    """
    yield 0, tiles
    for i in range(1, gen + 1):
        tiles = subdivide_once(tiles, tolerance)
        yield i, tiles
