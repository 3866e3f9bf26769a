"""Identifier-keyed arena holding one canonical entry per documented entity."""

import logging

from docjson.models import Item

logger = logging.getLogger(__name__)


class IdentityIndex:
    """Maps identifiers to converted items.

    The same entity is reachable through several paths (a module listing, a
    trait's implementors, a type's impls), so insertion is idempotent: the
    first entry recorded for an identifier is kept and later inserts are
    no-ops. A single writer drives traversal; nested inserts made while a
    container is being visited need no locking.
    """

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}
        self._closed = False

    def insert(self, item_id: str, item: Item) -> bool:
        """Record ``item`` unless ``item_id`` is already indexed.

        Returns True when the entry was added.
        """
        if self._closed:
            msg = f"Cannot insert {item_id}: index is closed"
            raise RuntimeError(msg)
        if item_id in self._items:
            logger.debug("Already indexed: %s", item_id)
            return False
        self._items[item_id] = item
        return True

    def contains(self, item_id: str) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> Item | None:
        return self._items.get(item_id)

    def close(self) -> None:
        """Mark traversal as complete."""
        self._closed = True

    def snapshot(self) -> dict[str, Item]:
        """Return the indexed items for final assembly."""
        if not self._closed:
            msg = "Index snapshot requested before traversal completed"
            raise RuntimeError(msg)
        return dict(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
