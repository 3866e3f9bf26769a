"""Tests for loading documentation model dumps."""

from pathlib import Path

import pytest
import yaml

from docjson.def_id import DefId
from docjson.load_crate_model import crate_model_from_dict, load_crate_model
from docjson.model_error import ModelError


def test_load_sample_model(sample_model_path: Path) -> None:
    """Verify the crate tree and relation tables are parsed."""
    model = load_crate_model(sample_model_path)

    assert model.name == "demo"
    assert model.version == "0.1.0"
    assert model.root.def_id == DefId(0, 0)
    assert [child.name for child in model.root.inner["items"]] == [
        "Widget",
        "Render",
        None,
        "Shape",
        "util",
    ]
    assert [i.def_id for i in model.impls["0:1"]] == [DefId(0, 5), DefId(1, 40)]
    assert [i.def_id for i in model.implementors["0:3"]] == [DefId(0, 5)]


def test_nested_items_are_parsed(sample_model_path: Path) -> None:
    """Verify fields, variant fields and impl members become items."""
    model = load_crate_model(sample_model_path)
    widget, _, render_impl, shape, _ = model.root.inner["items"]

    assert widget.inner["fields"][0].def_id == DefId(0, 2)
    assert render_impl.inner["items"][0].kind == "method"
    rect = shape.inner["variants"][1]
    assert rect.inner["inner"]["fields"][0].name == "w"


def test_paths_merge_local_and_external(sample_model_path: Path) -> None:
    """Verify external paths join the table without shadowing local ones."""
    model = load_crate_model(sample_model_path)
    assert model.paths["1:30"]["path"] == ["core", "fmt", "Debug"]
    assert model.paths["0:1"]["path"] == ["demo", "Widget"]
    assert model.external_crates == {1: {"name": "core"}}


def test_local_path_wins_over_external() -> None:
    """Verify a local entry replaces an external entry for the same id."""
    model = crate_model_from_dict(
        {
            "crate": {"root": {"def_id": "0:0", "kind": "module"}},
            "paths": {"0:1": {"path": ["local"], "kind": "struct"}},
            "external_paths": {"0:1": {"path": ["external"], "kind": "struct"}},
        }
    )
    assert model.paths["0:1"]["path"] == ["local"]


def test_absent_tables_are_none() -> None:
    """Verify missing path and crate tables are kept distinct from empty ones."""
    root = {"def_id": "0:0", "kind": "module"}
    model = crate_model_from_dict({"crate": {"root": root}})
    assert model.paths is None
    assert model.external_crates is None
    assert model.impls == {}

    model = crate_model_from_dict(
        {
            "crate": {"root": {"def_id": "0:0", "kind": "module"}},
            "paths": {},
            "external_crates": {},
        }
    )
    assert model.paths == {}
    assert model.external_crates == {}


def test_missing_root_fails() -> None:
    """Verify a model without a root module is rejected."""
    with pytest.raises(ModelError, match="crate.root"):
        crate_model_from_dict({"crate": {"name": "demo"}})
    with pytest.raises(ModelError, match="must be a module"):
        crate_model_from_dict({"crate": {"root": {"def_id": "0:0", "kind": "struct"}}})


def test_item_without_def_id_fails(tmp_path: Path) -> None:
    """Verify nested items must carry a def id."""
    doc = {
        "crate": {
            "root": {
                "def_id": "0:0",
                "kind": "module",
                "inner": {"items": [{"kind": "struct", "name": "Widget"}]},
            }
        }
    }
    path = tmp_path / "model.yml"
    path.write_text(yaml.dump(doc), encoding="utf-8")
    with pytest.raises(ModelError, match="def_id"):
        load_crate_model(path)


def test_malformed_table_key_fails() -> None:
    """Verify relation table keys must be def ids."""
    with pytest.raises(ModelError, match="Malformed"):
        crate_model_from_dict(
            {
                "crate": {"root": {"def_id": "0:0", "kind": "module"}},
                "impls": {"Widget": []},
            }
        )


def test_def_id_with_null_part_fails() -> None:
    """Verify a def id mapping with a missing number is rejected."""
    root = {"def_id": {"krate": None, "index": 1}, "kind": "module"}
    with pytest.raises(ModelError, match="Malformed def id"):
        crate_model_from_dict({"crate": {"root": root}})


def test_malformed_external_crate_key_fails() -> None:
    """Verify external crate keys must be crate numbers."""
    with pytest.raises(ModelError, match="external crate entry 'core'"):
        crate_model_from_dict(
            {
                "crate": {"root": {"def_id": "0:0", "kind": "module"}},
                "external_crates": {"core": {"name": "core"}},
            }
        )
