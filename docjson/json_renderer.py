"""Renderer turning one crate model into the flat JSON document model."""

import logging
from typing import Any

from docjson.assemble_document import assemble
from docjson.crate_model import CrateModel
from docjson.def_id import make_id
from docjson.flattening_pass import FlatteningPass
from docjson.identity_index import IdentityIndex
from docjson.models import Crate
from docjson.relation_resolver import RelationResolver
from docjson.traversal import iter_crate_events, run_traversal

logger = logging.getLogger(__name__)


class JsonRenderer:
    """Owns the index for one traversal and shares it with the pass and resolver."""

    def __init__(self, model: CrateModel, config: dict[str, Any]) -> None:
        self.model = model
        self.config = config
        self.index = IdentityIndex()
        self.resolver = RelationResolver(
            self.index,
            model.impls,
            model.implementors,
            implementors_scope=(config.get("relations") or {}).get(
                "implementors_scope", "all"
            ),
        )
        self.flattening = FlatteningPass(self.index, self.resolver)

    def render(self) -> Crate:
        """Walk the whole crate, then assemble the document."""
        logger.debug("Initializing json renderer for %s", self.model.name)
        run_traversal(iter_crate_events(self.model.root), self.flattening)
        return self.after_krate()

    def after_krate(self) -> Crate:
        self.index.close()
        logger.debug("Done with crate: %d items indexed", len(self.index))
        return assemble(
            make_id(self.model.root.def_id),
            self.model.crate_metadata,
            self.index.snapshot(),
            self.model.paths,
            self._external_crates(),
        )

    def _external_crates(self) -> dict[int, dict[str, Any]] | None:
        """External crate table with configured documentation roots filled in."""
        if self.model.external_crates is None:
            return None
        overrides = self.config.get("html_root_urls") or {}
        table: dict[int, dict[str, Any]] = {}
        for num, entry in self.model.external_crates.items():
            entry = dict(entry)
            if not entry.get("html_root_url") and entry.get("name") in overrides:
                entry["html_root_url"] = overrides[entry["name"]]
            table[num] = entry
        return table
