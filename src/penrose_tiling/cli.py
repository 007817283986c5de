# Command line entry point: seed, deflate, draw, write.
import argparse
import sys

from .canvas import CanvasError, create_canvas, default_output_path, write_png
from .config import ConfigError, TilingConfig, load_json, parse_config
from .deflate import generations
from .render import draw_tiles
from .tiles import Tile, initial_tiles
from .timing import Timing


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="penrose-tiling",
        description="Render a kite/dart penrose tiling to a PNG file.",
    )
    p.add_argument("--config", help="JSON file with width, height, generations, output, tolerance, flip_y.")
    p.add_argument("--width", type=int, help="Canvas width in pixels (default 700).")
    p.add_argument("--height", type=int, help="Canvas height in pixels (default 450).")
    p.add_argument("--generations", type=int, help="Number of deflation steps (default 5).")
    p.add_argument("--output", help="PNG path (default: penrose_tiling.png in ~/Documents).")
    p.add_argument(
        "--tolerance",
        type=float,
        help="Merge tiles whose coordinates agree to this precision instead of exactly.",
    )
    p.add_argument(
        "--no-flip",
        dest="flip_y",
        action="store_false",
        default=None,
        help="Keep cairo's top-left origin instead of a bottom-left one.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Print per-generation counts and timings.")
    return p


def make_tiles(cfg: TilingConfig, verbose: bool = False) -> list[Tile]:
    tiles = initial_tiles(cfg.width, cfg.height)
    for gen, tiles in generations(tiles, cfg.generations, cfg.tolerance):
        if verbose:
            print(f"generation {gen}: {len(tiles)} tiles", file=sys.stderr)
    return tiles


def run(cfg: TilingConfig, verbose: bool = False) -> None:
    surface, ctx = create_canvas(cfg.width, cfg.height, cfg.flip_y)

    with Timing() as t:
        tiles = make_tiles(cfg, verbose)
    if verbose:
        print(f"deflate: {t}", file=sys.stderr)

    with Timing() as t:
        draw_tiles(ctx, tiles)
    if verbose:
        print(f"draw: {t}", file=sys.stderr)

    output = cfg.output if cfg.output is not None else default_output_path()
    if write_png(surface, output) and verbose:
        print(f"wrote {output}", file=sys.stderr)

    print(f"Tile count: {len(tiles)}")


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        cfg = TilingConfig()
        if args.config:
            try:
                cfg = parse_config(load_json(args.config))
            except OSError as e:
                print(f"File error: {e}", file=sys.stderr)
                return 2
        cfg = cfg.with_overrides(
            width=args.width,
            height=args.height,
            generations=args.generations,
            output=args.output,
            tolerance=args.tolerance,
            flip_y=args.flip_y,
        )
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2

    try:
        run(cfg, args.verbose)
    except CanvasError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 1
    return 0
