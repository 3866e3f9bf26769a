"""Upstream documentation model items, as handed over by the traversal source."""

from dataclasses import dataclass, field
from typing import Any

from docjson.def_id import DefId


@dataclass
class CleanItem:
    """Represents one documented entity before conversion to the public model."""

    def_id: DefId
    kind: str  # module/struct/impl/ty_method/stripped/etc.
    name: str | None = None
    source: dict[str, Any] | None = None  # absent for macro-generated items
    visibility: Any = "default"
    docs: str = ""
    attrs: list[str] = field(default_factory=list)
    links: list[Any] = field(default_factory=list)
    deprecation: dict[str, Any] | None = None
    # Kind-specific payload; nested items are CleanItem instances.
    inner: dict[str, Any] = field(default_factory=dict)

    @property
    def is_module(self) -> bool:
        """Modules, stripped or not, are walked by the traversal source."""
        if self.kind == "stripped":
            return self.inner.get("kind") == "module"
        return self.kind == "module"
