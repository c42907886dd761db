# config_manager.py - JSON config manager

import json
import os
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from markov_text_predictor.core.errors import ConfigurationError
from markov_text_predictor.core.prediction_engine import DEFAULT_MAX_ORDER, EngineConfig
from markov_text_predictor.generation import DEFAULT_LENGTH

DEFAULTS = {
    "max_order": DEFAULT_MAX_ORDER,  # longest context length tried first
    "length": DEFAULT_LENGTH,        # characters generated per run
    "seed": None,
    "workers": None,                 # build threads, None -> min(orders, CPUs)
    "replace_newlines": True,
    "show_stats": True,
    "log_file": None,
    "metrics_file": None,            # JSON file accumulating build/generate timings
}

# keys whose default is None still need a type to coerce "set" values to
_NULLABLE_TYPES = {"seed": int, "workers": int, "log_file": str, "metrics_file": str}


class Config:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"could not read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"config {self.path} must hold a JSON object")
        for k, v in loaded.items():
            self.set(k, v, persist=False)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self, console=None):
        """Print the resolved settings as a table."""
        console = console or Console()
        t = Table(title="Settings", box=box.MINIMAL)
        t.add_column("Option", style="cyan")
        t.add_column("Value")
        for k, v in self.data.items():
            t.add_row(k, str(v))
        console.print(t)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val, persist: bool = True):
        if key not in DEFAULTS:
            raise ConfigurationError(f"No such option: {key}")
        self.data[key] = self._coerce(key, val)
        if persist:
            self.save()

    @staticmethod
    def _coerce(key, val):
        if val is None or (isinstance(val, str) and val.lower() in ("none", "null")):
            if DEFAULTS[key] is not None:
                raise ConfigurationError(f"{key} cannot be null")
            return None
        typ = _NULLABLE_TYPES.get(key) or type(DEFAULTS[key])
        try:
            if typ is bool and isinstance(val, str):
                if val.lower() in ("1", "true", "yes", "on"):
                    return True
                if val.lower() in ("0", "false", "no", "off"):
                    return False
                raise ValueError(val)
            if typ is int and isinstance(val, (bool, float)):
                raise ValueError(val)
            return typ(val)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"bad value for {key}: {val!r}") from e

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            max_order=self.data["max_order"],
            seed=self.data["seed"],
            workers=self.data["workers"],
        )
