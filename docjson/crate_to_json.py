"""Convert a crate documentation model (YAML dump) to one flat JSON document.

The model is walked module by module; every documented item is indexed once
under its identifier, and impl/implementor relations are resolved so tools
can answer "what does this type implement" without re-parsing source.
"""

import argparse
import logging
from pathlib import Path

from docjson.relation_resolver import IMPLEMENTORS_SCOPES
from docjson.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert a crate documentation model to a flat JSON document.",
    )
    ap.add_argument(
        "model",
        type=Path,
        help="YAML dump of the crate documentation model",
    )
    ap.add_argument(
        "out_file",
        type=Path,
        help="Path of the JSON document to write",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--implementors-scope",
        choices=IMPLEMENTORS_SCOPES,
        help="Which implementors to list on traits (overrides the config file)",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a referenced local item is missing from the index",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every module and item as it is documented",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
