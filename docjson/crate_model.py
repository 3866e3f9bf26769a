"""Data model for the whole upstream crate handed to the renderer."""

from dataclasses import dataclass, field
from typing import Any

from docjson.clean_item import CleanItem


@dataclass
class CrateModel:
    """Everything the traversal source supplies for one crate."""

    name: str
    root: CleanItem
    version: str | None = None
    includes_private: bool = False
    # Relation tables: type id -> impls, trait id -> implementing impls.
    impls: dict[str, list[CleanItem]] = field(default_factory=dict)
    implementors: dict[str, list[CleanItem]] = field(default_factory=dict)
    # id -> {"path": [segments], "kind": public kind}, local and external.
    # None when the dump carries no path table at all.
    paths: dict[str, dict[str, Any]] | None = None
    # crate number -> {"name": ..., "html_root_url": ...}
    external_crates: dict[int, dict[str, Any]] | None = None

    @property
    def crate_metadata(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "includes_private": self.includes_private,
        }
