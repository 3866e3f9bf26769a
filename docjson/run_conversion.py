"""Orchestration logic for converting a documentation model to JSON."""

import argparse
import logging

from docjson.assemble_document import AssemblyConfigError
from docjson.check_completeness import find_missing_local_ids
from docjson.json_renderer import JsonRenderer
from docjson.load_config import load_config
from docjson.load_crate_model import load_crate_model
from docjson.model_error import ModelError
from docjson.unsupported_item_error import UnsupportedItemError
from docjson.write_document import write_document

logger = logging.getLogger(__name__)

EXIT_UNSUPPORTED = 1
EXIT_ASSEMBLY = 2
EXIT_INCOMPLETE = 3


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    if not args.model.exists():
        msg = f"No documentation model found at: {args.model}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.implementors_scope:
        relations = dict(config.get("relations") or {})
        relations["implementors_scope"] = args.implementors_scope
        config["relations"] = relations

    try:
        model = load_crate_model(args.model)
    except ModelError as e:
        msg = f"Invalid documentation model {args.model}: {e}"
        raise SystemExit(msg) from e

    try:
        crate = JsonRenderer(model, config).render()
    except UnsupportedItemError as e:
        logger.error("Aborting, no document written: %s", e)
        return EXIT_UNSUPPORTED
    except AssemblyConfigError as e:
        logger.error("%s", e)
        return EXIT_ASSEMBLY

    missing = find_missing_local_ids(crate)
    for item_id in missing:
        logger.warning("Referenced local item is not indexed: %s", item_id)
    if missing and args.strict:
        logger.error("%d local items missing from the index", len(missing))
        return EXIT_INCOMPLETE

    write_document(crate, args.out_file, config)
    print(f"Documented {len(crate.index)} items into: {args.out_file}")
    return 0
