import json
from pathlib import Path

import pytest

from penrose_tiling.config import ConfigError, TilingConfig, load_json, parse_config


class TestParseConfig:
    def test_defaults(self) -> None:
        cfg = parse_config({})
        assert cfg == TilingConfig()
        assert (cfg.width, cfg.height, cfg.generations) == (700, 450, 5)
        assert cfg.output is None
        assert cfg.tolerance is None
        assert cfg.flip_y is True

    def test_values(self) -> None:
        cfg = parse_config(
            {"width": 300, "height": 200, "generations": 2, "output": "a.png", "tolerance": 1e-6, "flip_y": False}
        )
        assert cfg == TilingConfig(300, 200, 2, "a.png", 1e-6, False)

    @pytest.mark.parametrize(
        "obj",
        [
            [],
            {"width": 0},
            {"height": -5},
            {"generations": -1},
            {"generations": "5"},
            {"width": 10.5},
            {"width": True},
            {"tolerance": 0},
            {"tolerance": "small"},
            {"output": 3},
            {"flip_y": "yes"},
            {"colour": "red"},
        ],
    )
    def test_invalid(self, obj: object) -> None:
        with pytest.raises(ConfigError):
            parse_config(obj)

    def test_zero_generations_allowed(self) -> None:
        assert parse_config({"generations": 0}).generations == 0


class TestOverrides:
    def test_none_keeps_value(self) -> None:
        cfg = TilingConfig(width=300).with_overrides(width=None, height=100, flip_y=None)
        assert (cfg.width, cfg.height, cfg.flip_y) == (300, 100, True)

    def test_override_validated(self) -> None:
        with pytest.raises(ConfigError):
            TilingConfig().with_overrides(generations=-2)


class TestLoadJson:
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"width": 120}), encoding="utf-8")
        assert parse_config(load_json(str(path))).width == 120

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text("{width: ", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_json(str(path))
