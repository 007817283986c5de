# Raster surface setup and PNG output.
import sys
from pathlib import Path

import cairo

OUTPUT_NAME = "penrose_tiling.png"
BACKGROUND = (1.0, 1.0, 1.0)


class CanvasError(RuntimeError):
    pass


def documents_directory() -> Path:
    docs = Path.home() / "Documents"
    if docs.is_dir():
        return docs
    return Path.cwd()


def default_output_path() -> Path:
    return documents_directory() / OUTPUT_NAME


def create_canvas(width: int, height: int, flip_y: bool = True) -> tuple[cairo.ImageSurface, cairo.Context]:
    # ARGB32 is premultiplied alpha, 8 bits per channel
    try:
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        ctx = cairo.Context(surface)
    except (cairo.Error, MemoryError) as e:
        raise CanvasError(f"Couldn't create a {width}x{height} image surface: {e}") from e

    ctx.set_source_rgb(*BACKGROUND)
    ctx.paint()

    if flip_y:
        # Origin at the bottom left, y pointing up
        ctx.translate(0, height)
        ctx.scale(1, -1)
    return surface, ctx


def write_png(surface: cairo.ImageSurface, path: str | Path) -> bool:
    path = Path(path)
    surface.flush()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        surface.write_to_png(str(path))
    except (OSError, cairo.Error) as e:
        print("Error writing file.", file=sys.stderr)
        print(f"  {path}: {e}", file=sys.stderr)
        return False
    return True
