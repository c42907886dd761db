# tests/test_config.py
import json

import pytest
from rich.console import Console

from markov_text_predictor.core.errors import ConfigurationError
from markov_text_predictor.utils.config_manager import Config, DEFAULTS


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    ec = cfg.engine_config()
    assert ec.max_order == 15 and ec.seed is None and ec.workers is None


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_order": 4, "seed": 11, "replace_newlines": False}))
    cfg = Config(str(path))
    assert cfg.get("max_order") == 4
    assert cfg.get("seed") == 11
    assert cfg.get("replace_newlines") is False
    assert cfg.get("length") == 1000


def test_set_coerces_and_persists(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("length", "250")
    cfg.set("show_stats", "no")
    cfg.set("seed", "none")
    saved = json.loads(path.read_text())
    assert saved["length"] == 250
    assert saved["show_stats"] is False
    assert saved["seed"] is None


def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError):
        Config().set("temperature", 0.7)


@pytest.mark.parametrize("key,val", [("max_order", "abc"), ("max_order", None), ("length", 2.5),
                                     ("show_stats", "maybe"), ("max_order", True),
                                     ("workers", False), ("seed", True)])
def test_bad_values_rejected(key, val):
    with pytest.raises(ConfigurationError):
        Config().set(key, val, persist=False)


def test_malformed_file_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_show_renders_settings_table():
    console = Console(record=True, width=100)
    Config().show(console)
    out = console.export_text()
    assert "Settings" in out
    assert "max_order" in out and "15" in out
    assert "metrics_file" in out


def test_boolean_for_integer_key_in_file_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_order": True}))
    with pytest.raises(ConfigurationError):
        Config(str(path))
