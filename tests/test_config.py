from pathlib import Path

import pytest

from inline_dice.config import DiceConfig, config_from_dict, load_config


def test_defaults_match_plugin_behaviour():
    cfg = load_config()
    assert cfg.style_id == "clickable-dice"
    assert cfg.notice_duration_ms == 8000
    assert cfg.to_dict()["success_class"] == "dice-critical-success"


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"icon": "d", "seed": 3, "unused": True})
    assert cfg == DiceConfig(icon="d", seed=3)
    assert config_from_dict(None) == DiceConfig()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "dice.yaml"
    path.write_text("notice_duration_ms: 3000\nwindow_size: 64\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.notice_duration_ms == 3000
    assert cfg.window_size == 64


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "dice.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
