# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table


DEFAULTS: Dict[str, Any] = {
    "max_distance": 2,  # edit distance used by search/fuzzy when not given
    "limit": 10,  # max suggestions returned
    "metric": "damerau",  # damerau | levenshtein
    "log_level": "INFO",
    "log_path": os.path.join("logs", "fuzzy_index.log"),
}


class Config:
    """
    Settings backed by a JSON file. Unknown keys in the file are ignored;
    a missing file just means defaults (nothing is written until save()).
    """

    def __init__(self, path: str = "config.json"):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self.load_error: Optional[str] = None
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            # keep defaults, caller decides how loudly to report it
            self.load_error = f"could not read {self.path}: {e}"
            return
        if not isinstance(raw, dict):
            self.load_error = f"{self.path}: expected a JSON object"
            return
        bad = []
        for k, v in raw.items():
            if k not in DEFAULTS:
                continue
            # same coercion as set(); unusable values keep the default
            try:
                self.data[k] = type(DEFAULTS[k])(v)
            except (TypeError, ValueError):
                bad.append(k)
        if bad:
            self.load_error = f"{self.path}: ignored invalid value(s) for {', '.join(bad)}"

    def save(self) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any, save: bool = True) -> None:
        """Set an option, coercing to the default's type. Raises KeyError for unknown options."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = type(DEFAULTS[key])(val)
        if save:
            self.save()

    def show(self, console: Optional[Console] = None) -> None:
        table = Table(title="config")
        table.add_column("option")
        table.add_column("value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)
