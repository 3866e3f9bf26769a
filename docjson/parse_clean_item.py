"""Logic for building CleanItem trees from the raw YAML mappings."""

from typing import Any

from docjson.clean_item import CleanItem
from docjson.def_id import DefId
from docjson.model_error import ModelError

# Keys under ``inner`` holding full nested items rather than identifiers.
_NESTED_KEYS: dict[str, str] = {
    "module": "items",
    "struct": "fields",
    "union": "fields",
    "enum": "variants",
    "trait": "items",
    "impl": "items",
}


def parse_clean_item(raw: Any) -> CleanItem:
    """Parse one raw item mapping, including every nested item."""
    if not isinstance(raw, dict) or raw.get("def_id") is None:
        msg = f"Item without def_id: {raw!r}"
        raise ModelError(msg)
    try:
        def_id = DefId.parse(raw["def_id"])
    except (KeyError, TypeError, ValueError) as e:
        msg = f"Malformed def id {raw['def_id']!r}: {e}"
        raise ModelError(msg) from e

    kind = str(raw.get("kind") or "").strip()
    if not kind:
        msg = f"Item {raw['def_id']} has no kind"
        raise ModelError(msg)

    name = raw.get("name")
    return CleanItem(
        def_id=def_id,
        kind=kind,
        name=str(name) if name is not None else None,
        source=raw.get("source"),
        visibility=raw.get("visibility") or "default",
        docs=str(raw.get("docs") or ""),
        attrs=[str(a) for a in raw.get("attrs") or []],
        links=list(raw.get("links") or []),
        deprecation=raw.get("deprecation"),
        inner=_parse_inner(kind, raw.get("inner") or {}),
    )


def _parse_inner(kind: str, inner: dict[str, Any]) -> dict[str, Any]:
    """Replace nested raw items in ``inner`` with parsed CleanItems."""
    inner = dict(inner)
    if kind == "stripped":
        wrapped_kind = str(inner.get("kind") or "")
        inner["inner"] = _parse_inner(wrapped_kind, inner.get("inner") or {})
        return inner
    if kind == "variant":
        if inner.get("variant_kind") == "struct":
            body = dict(inner.get("inner") or {})
            body["fields"] = [parse_clean_item(f) for f in body.get("fields") or []]
            inner["inner"] = body
        return inner
    key = _NESTED_KEYS.get(kind)
    if key is not None:
        inner[key] = [parse_clean_item(it) for it in inner.get(key) or []]
    return inner
