"""Golden test pinning the emitted document shape for this format version."""

import json
from pathlib import Path

from docjson.json_renderer import JsonRenderer
from docjson.load_config import load_config
from docjson.load_crate_model import crate_model_from_dict
from docjson.write_document import write_document

MODEL = {
    "crate": {
        "name": "demo",
        "version": "0.1.0",
        "root": {
            "def_id": "0:0",
            "kind": "module",
            "name": "demo",
            "visibility": "public",
            "docs": "Demo crate.",
            "inner": {
                "is_crate": True,
                "items": [
                    {
                        "def_id": "0:1",
                        "kind": "struct",
                        "name": "Unit",
                        "visibility": "public",
                        "source": {
                            "filename": "src/lib.rs",
                            "begin": [2, 0],
                            "end": [2, 16],
                        },
                        "attrs": ["#[derive(Clone)]"],
                        "inner": {"struct_type": "unit"},
                    }
                ],
            },
        },
    },
    "paths": {
        "0:0": {"path": ["demo"], "kind": "module"},
        "0:1": {"path": ["demo", "Unit"], "kind": "struct"},
    },
    "external_crates": {1: {"name": "core"}},
}

EXPECTED = {
    "root": "0:0",
    "version": "0.1.0",
    "includes_private": False,
    "index": {
        "0:0": {
            "id": "0:0",
            "crate_num": 0,
            "name": "demo",
            "source": None,
            "visibility": {"visibility": "public"},
            "docs": "Demo crate.",
            "links": [],
            "attrs": [],
            "deprecation": None,
            "kind": "module",
            "inner": {"is_crate": True, "items": ["0:1"]},
        },
        "0:1": {
            "id": "0:1",
            "crate_num": 0,
            "name": "Unit",
            "source": {"filename": "src/lib.rs", "begin": [2, 0], "end": [2, 16]},
            "visibility": {"visibility": "public"},
            "docs": "",
            "links": [],
            "attrs": ["#[derive(Clone)]"],
            "deprecation": None,
            "kind": "struct",
            "inner": {
                "struct_type": "unit",
                "generics": {"params": [], "where_predicates": []},
                "fields_stripped": False,
                "fields": [],
                "impls": [],
            },
        },
    },
    "paths": {
        "0:0": {"crate_num": 0, "path": ["demo"], "kind": "module"},
        "0:1": {"crate_num": 0, "path": ["demo", "Unit"], "kind": "struct"},
    },
    "external_crates": {"1": {"name": "core", "html_root_url": None}},
    "format_version": 1,
}


def test_golden_document(tmp_path: Path) -> None:
    """Verify the written document matches the pinned shape exactly."""
    crate = JsonRenderer(crate_model_from_dict(MODEL), load_config()).render()
    out = tmp_path / "doc" / "demo.json"

    write_document(crate, out, load_config())

    text = out.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert json.loads(text) == EXPECTED


def test_document_key_order(tmp_path: Path) -> None:
    """Verify top-level keys keep model order unless sorting is configured."""
    crate = JsonRenderer(crate_model_from_dict(MODEL), load_config()).render()
    out = tmp_path / "demo.json"

    write_document(crate, out, load_config())
    assert list(json.loads(out.read_text(encoding="utf-8"))) == list(EXPECTED)

    config = load_config()
    config["output"]["sort_keys"] = True
    write_document(crate, out, config)
    assert list(json.loads(out.read_text(encoding="utf-8"))) == sorted(EXPECTED)
