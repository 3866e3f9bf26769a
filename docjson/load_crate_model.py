"""Logic for loading a documentation model dump from YAML."""

from pathlib import Path
from typing import Any

import yaml

from docjson.clean_item import CleanItem
from docjson.crate_model import CrateModel
from docjson.def_id import DefId, make_id
from docjson.model_error import ModelError
from docjson.parse_clean_item import parse_clean_item


def load_crate_model(path: Path) -> CrateModel:
    """Load and parse a documentation model YAML file.

    Def ids must be quoted in the YAML: PyYAML reads a bare ``1:30`` as a
    base-60 integer.
    """
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise ModelError(msg)
    return crate_model_from_dict(doc)


def crate_model_from_dict(doc: dict[str, Any]) -> CrateModel:
    """Build a CrateModel from an already parsed mapping."""
    crate = doc.get("crate") or {}
    if not crate.get("root"):
        msg = "Documentation model has no crate.root module"
        raise ModelError(msg)

    root = parse_clean_item(crate["root"])
    if not root.is_module:
        msg = f"crate.root must be a module, got {root.kind!r}"
        raise ModelError(msg)

    paths = None
    if "paths" in doc or "external_paths" in doc:
        # Local paths last so external entries never shadow them.
        paths = _id_keyed(doc.get("external_paths") or {})
        paths.update(_id_keyed(doc.get("paths") or {}))

    external_crates = None
    if "external_crates" in doc:
        external_crates = _crate_keyed(doc["external_crates"] or {})

    version = crate.get("version")
    return CrateModel(
        name=str(crate.get("name") or root.name or ""),
        root=root,
        version=str(version) if version is not None else None,
        includes_private=bool(crate.get("includes_private", False)),
        impls=_relation_table(doc.get("impls") or {}),
        implementors=_relation_table(doc.get("implementors") or {}),
        paths=paths,
        external_crates=external_crates,
    )


def _relation_table(raw: dict[Any, Any]) -> dict[str, list[CleanItem]]:
    """Parse a relation table, keeping the order impls were listed in."""
    return {
        key: [parse_clean_item(it) for it in items or []]
        for key, items in _id_keyed(raw).items()
    }


def _id_keyed(raw: dict[Any, Any]) -> dict[str, Any]:
    """Normalize def id keys to identifiers."""
    out: dict[str, Any] = {}
    for key, value in raw.items():
        try:
            out[make_id(DefId.parse(key))] = value
        except (TypeError, ValueError) as e:
            raise ModelError(str(e)) from e
    return out


def _crate_keyed(raw: dict[Any, Any]) -> dict[int, dict[str, Any]]:
    """Normalize external crate table keys to crate numbers."""
    out: dict[int, dict[str, Any]] = {}
    for num, entry in raw.items():
        try:
            out[int(num)] = dict(entry or {})
        except (TypeError, ValueError) as e:
            msg = f"Malformed external crate entry {num!r}: {e}"
            raise ModelError(msg) from e
    return out
