"""Logic for assembling the final document from the finished index."""

from collections.abc import Mapping
from typing import Any

from docjson.def_id import crate_num_of
from docjson.models import Crate, ExternalCrate, Item, ItemKind, ItemSummary


class AssemblyConfigError(Exception):
    """A table required to assemble the document was not supplied."""


def assemble(
    root_id: str,
    crate_metadata: Mapping[str, Any] | None,
    index_snapshot: Mapping[str, Item] | None,
    path_table: Mapping[str, Mapping[str, Any]] | None,
    external_crate_table: Mapping[int, Mapping[str, Any]] | None,
) -> Crate:
    """Build the document; inputs are only read, never modified."""
    required = {
        "crate metadata": crate_metadata,
        "index": index_snapshot,
        "path table": path_table,
        "external crate table": external_crate_table,
    }
    for label, table in required.items():
        if table is None:
            msg = f"Cannot assemble document: {label} is missing"
            raise AssemblyConfigError(msg)

    return Crate(
        root=root_id,
        version=crate_metadata.get("version"),
        includes_private=bool(crate_metadata.get("includes_private", False)),
        index=dict(index_snapshot),
        paths={
            item_id: _summary(item_id, entry) for item_id, entry in path_table.items()
        },
        external_crates={
            int(num): _external_crate(num, entry)
            for num, entry in external_crate_table.items()
        },
    )


def _summary(item_id: str, entry: Mapping[str, Any]) -> ItemSummary:
    try:
        kind = ItemKind(entry["kind"])
    except (KeyError, ValueError) as e:
        msg = f"Path entry {item_id} has no usable kind: {entry.get('kind')!r}"
        raise AssemblyConfigError(msg) from e
    return ItemSummary(
        crate_num=crate_num_of(item_id),
        path=[str(segment) for segment in entry.get("path") or []],
        kind=kind,
    )


def _external_crate(num: int, entry: Mapping[str, Any]) -> ExternalCrate:
    if not entry.get("name"):
        msg = f"External crate {num} has no name"
        raise AssemblyConfigError(msg)
    return ExternalCrate(
        name=str(entry["name"]), html_root_url=entry.get("html_root_url")
    )
