"""Logic for writing the assembled document to disk."""

import json
import logging
from pathlib import Path
from typing import Any

from docjson.models import Crate
from docjson.to_json import to_json

logger = logging.getLogger(__name__)


def write_document(crate: Crate, path: Path, config: dict[str, Any]) -> None:
    """Serialize ``crate`` as JSON at ``path``, creating parent directories."""
    output = config.get("output") or {}
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(
        to_json(crate),
        indent=output.get("indent"),
        sort_keys=bool(output.get("sort_keys", False)),
        ensure_ascii=False,
    )
    path.write_text(text + "\n", encoding="utf-8")
    logger.info(
        "Wrote %d items and %d paths to %s", len(crate.index), len(crate.paths), path
    )
