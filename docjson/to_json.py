"""Conversion of the public model into JSON-ready data."""

import enum
from dataclasses import fields, is_dataclass
from typing import Any

from docjson.models import Stripped, Variant, Visibility

# Python-side names for fields that are keywords in the output schema.
_RENAMED_FIELDS = {"type_": "type", "trait_": "trait", "for_": "for"}


def to_json(value: Any) -> Any:
    """Recursively turn dataclasses, enums and tuples into plain JSON data."""
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Visibility):
        out: dict[str, Any] = {"visibility": value.kind}
        if value.kind == "restricted":
            out["restricted_path"] = [value.parent, value.path]
        return out
    if isinstance(value, Variant):
        out = {"variant_kind": value.variant_kind}
        if value.variant_kind != "plain":
            out["inner"] = to_json(value.inner)
        return out
    if isinstance(value, Stripped):
        return {"stripped": to_json(value.inner)}
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _RENAMED_FIELDS.get(f.name, f.name): to_json(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, dict):
        # JSON object keys are strings (external crate numbers included).
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value
