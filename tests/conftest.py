"""Shared test fixtures and item builders."""

from pathlib import Path
from typing import Any

import pytest

from docjson.clean_item import CleanItem
from docjson.def_id import DefId

# Item builders


def make_item(
    def_id: str, kind: str, name: str | None = None, **inner: Any
) -> CleanItem:
    """Build a CleanItem with the given kind-specific payload."""
    return CleanItem(
        def_id=DefId.parse(def_id),
        kind=kind,
        name=name,
        visibility="public",
        inner=inner,
    )


def path_type(name: str, def_id: str) -> dict[str, Any]:
    return {"kind": "resolved_path", "inner": {"name": name, "id": def_id}}


def field(def_id: str, name: str, ty: str = "u32") -> CleanItem:
    return make_item(
        def_id, "struct_field", name, type={"kind": "primitive", "inner": ty}
    )


def struct(def_id: str, name: str, fields: list[CleanItem] | None = None) -> CleanItem:
    return make_item(def_id, "struct", name, struct_type="plain", fields=fields or [])


def enum(def_id: str, name: str, variants: list[CleanItem] | None = None) -> CleanItem:
    return make_item(def_id, "enum", name, variants=variants or [])


def method(def_id: str, name: str, *, has_body: bool = True) -> CleanItem:
    kind = "method" if has_body else "ty_method"
    return make_item(def_id, kind, name, decl={"inputs": [], "output": None})


def trait(def_id: str, name: str, items: list[CleanItem] | None = None) -> CleanItem:
    return make_item(def_id, "trait", name, items=items or [])


def impl(
    def_id: str,
    for_id: str,
    trait_id: str | None = None,
    items: list[CleanItem] | None = None,
) -> CleanItem:
    return make_item(
        def_id,
        "impl",
        None,
        trait=path_type("Trait", trait_id) if trait_id else None,
        **{"for": path_type("Type", for_id)},
        items=items or [],
    )


def module(
    def_id: str,
    name: str,
    items: list[CleanItem] | None = None,
    *,
    is_crate: bool = False,
) -> CleanItem:
    return make_item(def_id, "module", name, is_crate=is_crate, items=items or [])


def stripped(def_id: str, name: str, kind: str, **inner: Any) -> CleanItem:
    """Build an item hidden by a filtering pass, wrapping a ``kind`` body."""
    return CleanItem(
        def_id=DefId.parse(def_id),
        kind="stripped",
        name=name,
        inner={"kind": kind, "inner": inner},
    )


# Sample model

SAMPLE_MODEL_YAML = """\
crate:
  name: demo
  version: "0.1.0"
  includes_private: false
  root:
    def_id: "0:0"
    kind: module
    name: demo
    visibility: public
    docs: Demo crate.
    source: {filename: src/lib.rs, begin: [0, 0], end: [40, 1]}
    inner:
      is_crate: true
      items:
        - def_id: "0:1"
          kind: struct
          name: Widget
          visibility: public
          docs: A widget.
          inner:
            struct_type: plain
            fields:
              - def_id: "0:2"
                kind: struct_field
                name: size
                visibility: public
                inner:
                  type: {kind: primitive, inner: u32}
        - def_id: "0:3"
          kind: trait
          name: Render
          visibility: public
          inner:
            items:
              - def_id: "0:4"
                kind: ty_method
                name: draw
                inner:
                  decl:
                    inputs:
                      - - self
                        - kind: borrowed_ref
                          inner:
                            lifetime: null
                            mutable: false
                            type: {kind: generic, inner: Self}
                    output: null
        - &render_impl
          def_id: "0:5"
          kind: impl
          inner:
            trait: {kind: resolved_path, inner: {name: Render, id: "0:3"}}
            for: {kind: resolved_path, inner: {name: Widget, id: "0:1"}}
            items:
              - def_id: "0:6"
                kind: method
                name: draw
                inner:
                  decl: {inputs: [], output: null}
        - def_id: "0:7"
          kind: enum
          name: Shape
          visibility: public
          inner:
            variants:
              - def_id: "0:8"
                kind: variant
                name: Circle
                inner:
                  variant_kind: tuple
                  inner: [{kind: primitive, inner: f64}]
              - def_id: "0:9"
                kind: variant
                name: Rect
                inner:
                  variant_kind: struct
                  inner:
                    struct_type: plain
                    fields:
                      - def_id: "0:10"
                        kind: struct_field
                        name: w
                        inner:
                          type: {kind: primitive, inner: f64}
        - def_id: "0:11"
          kind: module
          name: util
          visibility: public
          inner:
            items:
              - def_id: "0:12"
                kind: function
                name: helper
                visibility: public
                inner:
                  decl: {inputs: [], output: {kind: primitive, inner: bool}}
                  header: [const]
impls:
  "0:1":
    - *render_impl
    - def_id: "1:40"
      kind: impl
      inner:
        trait: {kind: resolved_path, inner: {name: Debug, id: "1:30"}}
        for: {kind: resolved_path, inner: {name: Widget, id: "0:1"}}
        items:
          - def_id: "1:41"
            kind: method
            name: fmt
            inner:
              decl: {inputs: [], output: null}
implementors:
  "0:3":
    - *render_impl
paths:
  "0:0": {path: [demo], kind: module}
  "0:1": {path: [demo, Widget], kind: struct}
  "0:3": {path: [demo, Render], kind: trait}
  "0:7": {path: [demo, Shape], kind: enum}
  "0:11": {path: [demo, util], kind: module}
  "0:12": {path: [demo, util, helper], kind: function}
external_paths:
  "1:30": {path: [core, fmt, Debug], kind: trait}
external_crates:
  1: {name: core}
"""

SAMPLE_LOCAL_IDS = {f"0:{n}" for n in range(13)}


@pytest.fixture
def sample_model_path(tmp_path: Path) -> Path:
    """Write the sample documentation model to a temporary file."""
    path = tmp_path / "demo.yml"
    path.write_text(SAMPLE_MODEL_YAML, encoding="utf-8")
    return path
