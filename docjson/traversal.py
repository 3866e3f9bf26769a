"""Depth-first walk over the crate's module tree."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from docjson.clean_item import CleanItem
from docjson.flattening_pass import FlatteningPass

ENTER_MODULE = "enter_module"
ITEM = "item"
LEAVE_MODULE = "leave_module"


@dataclass(frozen=True)
class TraversalEvent:
    """One step of the walk: entering or leaving a module, or a single item."""

    kind: str  # enter_module/item/leave_module
    item: CleanItem


def module_items(module: CleanItem) -> list[CleanItem]:
    """Return the children of a (possibly stripped) module, in order."""
    inner = module.inner
    if module.kind == "stripped":
        inner = inner.get("inner") or {}
    return list(inner.get("items") or [])


def iter_crate_events(root: CleanItem) -> Iterator[TraversalEvent]:
    """Yield module entry/exit and item events depth-first from ``root``."""
    yield TraversalEvent(ENTER_MODULE, root)
    for child in module_items(root):
        if child.is_module:
            yield from iter_crate_events(child)
        else:
            yield TraversalEvent(ITEM, child)
    yield TraversalEvent(LEAVE_MODULE, root)


def run_traversal(events: Iterable[TraversalEvent], pass_: FlatteningPass) -> None:
    """Feed traversal events to the flattening pass, in order."""
    for event in events:
        if event.kind == ENTER_MODULE:
            pass_.enter_module(event.item)
        elif event.kind == LEAVE_MODULE:
            pass_.leave_module(event.item)
        elif event.kind == ITEM:
            pass_.visit(event.item)
        else:
            msg = f"Unknown traversal event: {event.kind!r}"
            raise ValueError(msg)
