"""Lookup of the items a container structurally owns."""

from typing import Any

from docjson.clean_item import CleanItem

_OWNED_KEYS: dict[str, str] = {
    "struct": "fields",
    "union": "fields",
    "enum": "variants",
    "trait": "items",
    "impl": "items",
}


def owned_items(item: CleanItem) -> list[CleanItem]:
    """Return the nested items owned by ``item``, in declaration order.

    Modules own nothing here: their children are emitted as separate
    traversal events.
    """
    return owned_items_of(item.kind, item.inner)


def owned_items_of(kind: str | None, inner: dict[str, Any]) -> list[CleanItem]:
    """Return owned items for a raw kind/inner pair."""
    if kind == "stripped":
        return owned_items_of(inner.get("kind"), inner.get("inner") or {})
    if kind == "variant":
        if inner.get("variant_kind") == "struct":
            return list((inner.get("inner") or {}).get("fields") or [])
        return []
    key = _OWNED_KEYS.get(kind or "")
    if key is None:
        return []
    return list(inner.get(key) or [])
