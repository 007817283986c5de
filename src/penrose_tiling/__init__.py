from .canvas import CanvasError, create_canvas, default_output_path, documents_directory, write_png
from .config import ConfigError, TilingConfig, parse_config
from .deflate import deflate_tiles, distinct, generations, subdivide
from .render import DrawingSurface, draw_tile, draw_tiles, tile_vertices
from .tiles import PHI, THETA, Tile, TileShape, initial_tiles

__all__ = [
    "PHI",
    "THETA",
    "CanvasError",
    "ConfigError",
    "DrawingSurface",
    "Tile",
    "TileShape",
    "TilingConfig",
    "create_canvas",
    "default_output_path",
    "deflate_tiles",
    "distinct",
    "documents_directory",
    "draw_tile",
    "draw_tiles",
    "generations",
    "initial_tiles",
    "parse_config",
    "subdivide",
    "tile_vertices",
    "write_png",
]
