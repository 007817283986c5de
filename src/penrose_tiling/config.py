# Run configuration: canvas size, depth and output location.
import json
from dataclasses import dataclass, replace
from typing import Any, cast


class ConfigError(ValueError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _as_int(x: Any, path: str) -> int:
    _require(isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer")
    return int(x)


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool), f"{path} must be a number"
    )
    return float(x)


def _as_bool(x: Any, path: str) -> bool:
    _require(isinstance(x, bool), f"{path} must be a boolean")
    return cast(bool, x)


@dataclass(frozen=True)
class TilingConfig:
    width: int = 700
    height: int = 450
    generations: int = 5
    # None means penrose_tiling.png in the documents directory
    output: str | None = None
    # None means exact equality when removing duplicate tiles
    tolerance: float | None = None
    flip_y: bool = True

    def validate(self) -> "TilingConfig":
        _require(self.width > 0, "width must be > 0")
        _require(self.height > 0, "height must be > 0")
        _require(self.generations >= 0, "generations must be >= 0")
        if self.tolerance is not None:
            _require(self.tolerance > 0, "tolerance must be > 0")
        return self

    def with_overrides(self, **overrides: Any) -> "TilingConfig":
        # Only options that were actually given replace file values
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **given).validate()


_KEYS = {"width", "height", "generations", "output", "tolerance", "flip_y"}


def parse_config(obj: Any) -> TilingConfig:
    _require(isinstance(obj, dict), "config root must be an object")
    unknown = sorted(set(obj) - _KEYS)
    _require(not unknown, f"unknown config keys: {', '.join(unknown)}")

    defaults = TilingConfig()
    output = obj.get("output")
    if output is not None:
        _require(isinstance(output, str), "output must be a string")
    tolerance = obj.get("tolerance")
    if tolerance is not None:
        tolerance = _as_float(tolerance, "tolerance")

    return TilingConfig(
        width=_as_int(obj.get("width", defaults.width), "width"),
        height=_as_int(obj.get("height", defaults.height), "height"),
        generations=_as_int(obj.get("generations", defaults.generations), "generations"),
        output=output,
        tolerance=tolerance,
        flip_y=_as_bool(obj.get("flip_y", defaults.flip_y), "flip_y"),
    ).validate()


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        try:
            return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
