"""Logic for mapping type shapes from the upstream model to the public form.

Types arrive tagged as ``{"kind": ..., "inner": ...}``. The public form keeps
that tagging; a few kinds are renamed and every embedded def id becomes an
identifier.
"""

from typing import Any

from docjson.def_id import DefId, make_id
from docjson.models import FnDecl, Generics
from docjson.unsupported_item_error import UnsupportedItemError

# upstream kind -> public kind
_RENAMED_KINDS = {
    "bare_function": "function_pointer",
    "qpath": "qualified_path",
}
_TYPE_KINDS = {
    "resolved_path",
    "generic",
    "primitive",
    "function_pointer",
    "tuple",
    "slice",
    "array",
    "impl_trait",
    "never",
    "infer",
    "raw_pointer",
    "borrowed_ref",
    "qualified_path",
}


def convert_id(raw: Any) -> str:
    """Normalize an upstream def id to an identifier."""
    return make_id(DefId.parse(raw))


def convert_type(raw: dict[str, Any] | None) -> dict[str, Any] | None:
    """Convert one tagged type, recursing into nested types."""
    if raw is None:
        return None
    kind = _RENAMED_KINDS.get(raw.get("kind"), raw.get("kind"))
    if kind not in _TYPE_KINDS:
        msg = f"Type kind {raw.get('kind')!r} is not supported for JSON output"
        raise UnsupportedItemError(msg)
    inner = raw.get("inner")

    if kind == "resolved_path":
        inner = {
            "name": inner["name"],
            "id": convert_id(inner["id"]),
            "args": convert_generic_args(inner.get("args")),
            "param_names": [convert_bound(b) for b in inner.get("param_names") or []],
        }
    elif kind == "function_pointer":
        inner = {
            "is_unsafe": bool(inner.get("is_unsafe", False)),
            "generic_params": [
                convert_generic_param(p) for p in inner.get("generic_params") or []
            ],
            "decl": convert_fn_decl(inner.get("decl") or {}),
            "abi": str(inner.get("abi") or "Rust"),
        }
    elif kind == "tuple":
        inner = [convert_type(t) for t in inner or []]
    elif kind == "slice":
        inner = convert_type(inner)
    elif kind == "array":
        inner = {"type": convert_type(inner["type"]), "len": str(inner["len"])}
    elif kind == "impl_trait":
        inner = [convert_bound(b) for b in inner or []]
    elif kind in ("never", "infer"):
        inner = None
    elif kind == "raw_pointer":
        inner = {
            "mutable": bool(inner.get("mutable", False)),
            "type": convert_type(inner["type"]),
        }
    elif kind == "borrowed_ref":
        inner = {
            "lifetime": inner.get("lifetime"),
            "mutable": bool(inner.get("mutable", False)),
            "type": convert_type(inner["type"]),
        }
    elif kind == "qualified_path":
        inner = {
            "name": inner["name"],
            "self_type": convert_type(inner["self_type"]),
            "trait": convert_type(inner["trait"]),
        }
    # generic and primitive carry a bare name

    return {"kind": kind, "inner": inner}


def convert_generic_args(raw: dict[str, Any] | None) -> dict[str, Any] | None:
    """Convert ``<'a, T, N = u32>`` or ``Fn(A) -> B`` style arguments."""
    if not raw:
        return None
    if "angle_bracketed" in raw:
        args = raw["angle_bracketed"] or {}
        return {
            "angle_bracketed": {
                "args": [convert_generic_arg(a) for a in args.get("args") or []],
                "bindings": [convert_binding(b) for b in args.get("bindings") or []],
            }
        }
    if "parenthesized" in raw:
        args = raw["parenthesized"] or {}
        return {
            "parenthesized": {
                "inputs": [convert_type(t) for t in args.get("inputs") or []],
                "output": convert_type(args.get("output")),
            }
        }
    msg = f"Unknown generic args shape: {sorted(raw)}"
    raise UnsupportedItemError(msg)


def convert_generic_arg(raw: dict[str, Any]) -> dict[str, Any]:
    if "lifetime" in raw:
        return {"lifetime": str(raw["lifetime"])}
    if "type" in raw:
        return {"type": convert_type(raw["type"])}
    if "const" in raw:
        return {"const": convert_constant(raw["const"])}
    msg = f"Unknown generic arg shape: {sorted(raw)}"
    raise UnsupportedItemError(msg)


def convert_binding(raw: dict[str, Any]) -> dict[str, Any]:
    binding = raw.get("binding") or {}
    if "equality" in binding:
        converted: dict[str, Any] = {"equality": convert_type(binding["equality"])}
    else:
        converted = {
            "constraint": [convert_bound(b) for b in binding.get("constraint") or []]
        }
    return {"name": str(raw["name"]), "binding": converted}


def convert_constant(raw: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": convert_type(raw["type"]),
        "expr": str(raw.get("expr") or ""),
        "value": raw.get("value"),
        "is_literal": bool(raw.get("is_literal", False)),
    }


def convert_bound(raw: dict[str, Any]) -> dict[str, Any]:
    """Convert a trait bound or an outlives bound."""
    if "outlives" in raw:
        return {"outlives": str(raw["outlives"])}
    bound = raw.get("trait_bound")
    if bound is None:
        msg = f"Unknown bound shape: {sorted(raw)}"
        raise UnsupportedItemError(msg)
    return {
        "trait_bound": {
            "trait": convert_type(bound["trait"]),
            # Used for HRTBs
            "generic_params": [
                convert_generic_param(p) for p in bound.get("generic_params") or []
            ],
            "modifier": str(bound.get("modifier") or "none"),
        }
    }


def convert_generic_param(raw: dict[str, Any]) -> dict[str, Any]:
    kind = raw.get("kind") or "lifetime"
    if isinstance(kind, str):
        kind = {kind: None}
    if "type" in kind:
        ty = kind["type"] or {}
        converted: dict[str, Any] = {
            "type": {
                "bounds": [convert_bound(b) for b in ty.get("bounds") or []],
                "default": convert_type(ty.get("default")),
                "synthetic": bool(ty.get("synthetic", False)),
            }
        }
    elif "const" in kind:
        converted = {"const": convert_type(kind["const"])}
    else:
        converted = "lifetime"
    return {"name": str(raw["name"]), "kind": converted}


def convert_where_predicate(raw: dict[str, Any]) -> dict[str, Any]:
    if "bound_predicate" in raw:
        pred = raw["bound_predicate"]
        return {
            "bound_predicate": {
                "ty": convert_type(pred["ty"]),
                "bounds": [convert_bound(b) for b in pred.get("bounds") or []],
            }
        }
    if "region_predicate" in raw:
        pred = raw["region_predicate"]
        return {
            "region_predicate": {
                "lifetime": str(pred["lifetime"]),
                "bounds": [convert_bound(b) for b in pred.get("bounds") or []],
            }
        }
    if "eq_predicate" in raw:
        pred = raw["eq_predicate"]
        return {
            "eq_predicate": {
                "lhs": convert_type(pred["lhs"]),
                "rhs": convert_type(pred["rhs"]),
            }
        }
    msg = f"Unknown where predicate shape: {sorted(raw)}"
    raise UnsupportedItemError(msg)


def convert_generics(raw: dict[str, Any] | None) -> Generics:
    raw = raw or {}
    return Generics(
        params=[convert_generic_param(p) for p in raw.get("params") or []],
        where_predicates=[
            convert_where_predicate(w) for w in raw.get("where_predicates") or []
        ],
    )


def convert_fn_decl(raw: dict[str, Any]) -> FnDecl:
    return FnDecl(
        inputs=[(str(name), convert_type(ty)) for name, ty in raw.get("inputs") or []],
        output=convert_type(raw.get("output")),
        c_variadic=bool(raw.get("c_variadic", False)),
    )
