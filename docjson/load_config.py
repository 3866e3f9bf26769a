"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docjson.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "indent": 2,
        "sort_keys": False,
    },
    "relations": {
        # all: every implementor, local: only impls of the documented crate
        "implementors_scope": "all",
    },
    # external crate name -> documentation root, used when the model has none
    "html_root_urls": {},
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            # an empty section keeps its defaults
            user_config = {k: v for k, v in user_config.items() if v is not None}
            config = deep_merge(config, user_config)
    return config
