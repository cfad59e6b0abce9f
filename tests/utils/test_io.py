"""Unit tests for I/O helpers."""

from src.utils.io import load_json, load_yaml, save_json


def test_json_keeps_unicode(tmp_path):
    path = tmp_path / "nested" / "units.json"
    save_json({"text": "你好"}, path)

    assert "你好" in path.read_text(encoding="utf-8")
    assert load_json(path) == {"text": "你好"}


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("width_multipliers:\n  cjk: 2.0\n", encoding="utf-8")

    assert load_yaml(path) == {"width_multipliers": {"cjk": 2.0}}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_yaml(path) is None
