"""Flattening of the documentation tree into the identity index."""

import logging
from collections.abc import Callable

from docjson.clean_item import CleanItem
from docjson.conversions import convert_item
from docjson.def_id import make_id
from docjson.identity_index import IdentityIndex
from docjson.models import Enum, Item, Stripped, Struct, Trait
from docjson.owned_items import owned_items
from docjson.relation_resolver import RelationResolver

logger = logging.getLogger(__name__)


class FlatteningPass:
    """Receives traversal events and indexes every item they surface."""

    def __init__(
        self,
        index: IdentityIndex,
        resolver: RelationResolver,
        convert: Callable[[CleanItem], Item] = convert_item,
    ) -> None:
        self.index = index
        self.resolver = resolver
        self.convert = convert
        self.module_stack: list[str] = []

    def enter_module(self, item: CleanItem) -> None:
        """Index a module; its body records the ordered child identifiers.

        Children are not flattened here, they arrive as their own events.
        """
        item_id = make_id(item.def_id)
        logger.debug("Entering module: %s (%s)", item.name, item_id)
        self.index.insert(item_id, self.convert(item))
        self.module_stack.append(item_id)

    def leave_module(self, item: CleanItem) -> None:
        self.module_stack.pop()
        logger.debug("Exiting module: %s", item.name)

    @property
    def current_module(self) -> str | None:
        """Identifier of the innermost module being walked, if any."""
        return self.module_stack[-1] if self.module_stack else None

    def visit(self, item: CleanItem) -> None:
        """Index ``item`` after every item it owns.

        Structs, unions and enums get their impl list attached, traits their
        implementors, before the container is inserted.
        """
        item_id = make_id(item.def_id)
        if self.index.contains(item_id):
            logger.debug("Revisited: %s", item_id)
            return
        for child in owned_items(item):
            self.visit(child)

        converted = self.convert(item)
        self._attach_relations(item_id, converted)
        logger.debug(
            "Documenting item: %s (%s) in %s", item.name, item_id, self.current_module
        )
        self.index.insert(item_id, converted)

    def _attach_relations(self, item_id: str, item: Item) -> None:
        body = item.inner
        # stripped containers keep their relations
        while isinstance(body, Stripped):
            body = body.inner
        if isinstance(body, (Struct, Enum)):
            body.impls = self.resolver.implementations_of(item_id)
        elif isinstance(body, Trait):
            body.implementors = self.resolver.implementors_of(item_id)
