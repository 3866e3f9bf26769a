"""Logic for layering a user configuration over the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries without modifying either.

    - Mappings are merged recursively, so a user file only names the keys
      it changes (``html_root_urls`` entries add to the defaults).
    - Lists and scalars in 'update' replace the 'base' value.
    """
    result = dict(base)
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
