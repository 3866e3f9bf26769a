"""Lazy resolution of the relations that are not tree edges.

A nominal type points at the impl blocks whose target is that type, and a
trait points at every impl block implementing it. Both lists come from
relation tables built upstream; resolving them indexes the impl blocks found
(and the members they own) as a side effect.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from docjson.clean_item import CleanItem
from docjson.conversions import convert_item
from docjson.def_id import make_id
from docjson.identity_index import IdentityIndex
from docjson.models import Item
from docjson.owned_items import owned_items

logger = logging.getLogger(__name__)

IMPLEMENTORS_SCOPES = ("all", "local")


class RelationReentryError(RuntimeError):
    """A relation lookup was requested while another one was in progress."""


class RelationResolver:
    """Resolves type -> impls and trait -> implementors against an index.

    Impl trees are indexed by a relation-free walk, so a lookup can never
    trigger another lookup; the guard in ``_resolution`` turns any violation
    of that into an error instead of unbounded recursion.
    """

    def __init__(
        self,
        index: IdentityIndex,
        impls: dict[str, list[CleanItem]],
        implementors: dict[str, list[CleanItem]],
        *,
        implementors_scope: str = "all",
        convert: Callable[[CleanItem], Item] = convert_item,
    ) -> None:
        if implementors_scope not in IMPLEMENTORS_SCOPES:
            msg = (
                f"implementors_scope must be one of {IMPLEMENTORS_SCOPES}, "
                f"got {implementors_scope!r}"
            )
            raise ValueError(msg)
        self.index = index
        self.impls = impls
        self.implementors = implementors
        self.implementors_scope = implementors_scope
        self.convert = convert
        self._resolving: str | None = None

    def implementations_of(self, type_id: str) -> list[str]:
        """Return the local impl blocks targeting ``type_id``, in table order.

        External impls are left out of the result. They are still indexed
        when one of their members is local, otherwise skipped entirely.
        """
        found: list[str] = []
        with self._resolution(type_id):
            for impl in self.impls.get(type_id, []):
                impl_id = make_id(impl.def_id)
                if impl.def_id.is_local:
                    self._index_tree(impl)
                    found.append(impl_id)
                elif any(m.def_id.is_local for m in owned_items(impl)):
                    self._index_tree(impl)
                else:
                    logger.debug("Skipping external impl %s of %s", impl_id, type_id)
        logger.debug("Resolved %d impls for %s", len(found), type_id)
        return found

    def implementors_of(self, trait_id: str) -> list[str]:
        """Return the impl blocks implementing ``trait_id``, in table order.

        Every implementor is indexed whatever its crate; the returned list
        is limited to local impls when the scope is ``local``.
        """
        found: list[str] = []
        with self._resolution(trait_id):
            for impl in self.implementors.get(trait_id, []):
                self._index_tree(impl)
                if self.implementors_scope == "all" or impl.def_id.is_local:
                    found.append(make_id(impl.def_id))
        logger.debug("Resolved %d implementors for %s", len(found), trait_id)
        return found

    def _index_tree(self, item: CleanItem) -> None:
        """Index ``item`` and everything it owns, members first.

        Never consults the relation tables.
        """
        item_id = make_id(item.def_id)
        if self.index.contains(item_id):
            return
        for child in owned_items(item):
            self._index_tree(child)
        self.index.insert(item_id, self.convert(item))

    @contextmanager
    def _resolution(self, key: str) -> Iterator[None]:
        if self._resolving is not None:
            msg = (
                f"Relation lookup for {key} requested while resolving "
                f"{self._resolving}"
            )
            raise RelationReentryError(msg)
        self._resolving = key
        try:
            yield
        finally:
            self._resolving = None
