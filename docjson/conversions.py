"""Structural mapping from upstream items to the public item model."""

from collections.abc import Callable
from typing import Any

from docjson.clean_item import CleanItem
from docjson.convert_type import (
    convert_bound,
    convert_fn_decl,
    convert_generics,
    convert_id,
    convert_type,
)
from docjson.def_id import make_id
from docjson.models import (
    AssocConst,
    AssocType,
    Constant,
    Deprecation,
    Enum,
    ExternCrate,
    ForeignType,
    Function,
    Generics,
    Impl,
    Import,
    Item,
    ItemBody,
    ItemKind,
    Macro,
    Method,
    Module,
    OpaqueTy,
    ProcMacro,
    Span,
    Static,
    Stripped,
    Struct,
    StructField,
    Trait,
    TraitAlias,
    Typedef,
    Variant,
    Visibility,
)
from docjson.unsupported_item_error import UnsupportedItemError

BodyConverter = Callable[[dict[str, Any]], tuple[ItemKind, ItemBody]]


def convert_item(item: CleanItem) -> Item:
    """Convert one upstream item; nested items are referenced by identifier only."""
    kind, body = convert_body(item.kind, item.inner)
    return Item(
        id=make_id(item.def_id),
        crate_num=item.def_id.krate,
        name=item.name,
        source=convert_span(item.source),
        visibility=convert_visibility(item.visibility),
        docs=item.docs,
        links=[convert_link(link) for link in item.links],
        attrs=list(item.attrs),
        deprecation=convert_deprecation(item.deprecation),
        kind=kind,
        inner=body,
    )


def convert_body(kind: str | None, inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    """Convert a kind-specific payload, returning the public kind and body."""
    converter = _BODY_CONVERTERS.get(kind or "")
    if converter is None:
        msg = f"{kind!r} is not supported for JSON output"
        raise UnsupportedItemError(msg)
    return converter(inner)


def convert_span(raw: dict[str, Any] | None) -> Span | None:
    """Convert a source span; virtual files (macro expansions etc.) have none."""
    if not raw or not raw.get("filename"):
        return None
    begin = raw.get("begin") or (0, 0)
    end = raw.get("end") or begin
    return Span(
        filename=str(raw["filename"]),
        begin=(int(begin[0]), int(begin[1])),
        end=(int(end[0]), int(end[1])),
    )


def convert_visibility(raw: Any) -> Visibility:
    if isinstance(raw, dict) and "restricted" in raw:
        restricted = raw["restricted"] or {}
        return Visibility(
            kind="restricted",
            parent=convert_id(restricted["parent"]),
            path=str(restricted.get("path") or ""),
        )
    kind = str(raw or "default")
    if kind == "inherited":
        kind = "default"
    if kind not in ("public", "default", "crate"):
        msg = f"Visibility {raw!r} is not supported for JSON output"
        raise UnsupportedItemError(msg)
    return Visibility(kind=kind)


def convert_link(raw: Any) -> tuple[str, str | None, str | None]:
    """Convert an intra-doc link: (text, target id, fragment)."""
    if isinstance(raw, dict):
        text, target, fragment = raw.get("text"), raw.get("id"), raw.get("fragment")
    else:
        text, target, fragment = (list(raw) + [None, None])[:3]
    return (
        str(text),
        convert_id(target) if target is not None else None,
        str(fragment) if fragment is not None else None,
    )


def convert_deprecation(raw: dict[str, Any] | None) -> Deprecation | None:
    if raw is None:
        return None
    return Deprecation(since=raw.get("since"), note=raw.get("note"))


def _ids(items: list[CleanItem] | None) -> list[str]:
    return [make_id(it.def_id) for it in items or []]


def _module(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.MODULE, Module(
        is_crate=bool(inner.get("is_crate", False)),
        items=_ids(inner.get("items")),
    )


def _extern_crate(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.EXTERN_CRATE, ExternCrate(
        name=str(inner["name"]), rename=inner.get("rename")
    )


def _import(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    source = str(inner.get("source") or "")
    target = inner.get("id")
    return ItemKind.IMPORT, Import(
        source=source,
        # `use source as name;` may rename the last segment
        name=str(inner.get("name") or source.rsplit("::", 1)[-1]),
        id=convert_id(target) if target is not None else None,
        glob=bool(inner.get("glob", False)),
    )


def _struct_body(inner: dict[str, Any], generics: Generics | None = None) -> Struct:
    if generics is None:
        generics = convert_generics(inner.get("generics"))
    return Struct(
        struct_type=str(inner.get("struct_type") or "plain"),
        generics=generics,
        fields_stripped=bool(inner.get("fields_stripped", False)),
        fields=_ids(inner.get("fields")),
    )


def _struct(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.STRUCT, _struct_body(inner)


def _union(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.UNION, _struct_body(inner)


def _struct_field(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.STRUCT_FIELD, StructField(type_=convert_type(inner["type"]))


def _enum(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.ENUM, Enum(
        generics=convert_generics(inner.get("generics")),
        variants_stripped=bool(inner.get("variants_stripped", False)),
        variants=_ids(inner.get("variants")),
    )


def _variant(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    variant_kind = str(inner.get("variant_kind") or "plain")
    if variant_kind == "plain":
        return ItemKind.VARIANT, Variant(variant_kind="plain")
    if variant_kind == "tuple":
        types = [convert_type(t) for t in inner.get("inner") or []]
        return ItemKind.VARIANT, Variant(variant_kind="tuple", inner=types)
    if variant_kind == "struct":
        # Variants never carry their own generics.
        body = _struct_body(inner.get("inner") or {}, generics=Generics())
        return ItemKind.VARIANT, Variant(variant_kind="struct", inner=body)
    msg = f"Variant kind {variant_kind!r} is not supported for JSON output"
    raise UnsupportedItemError(msg)


def _header(inner: dict[str, Any]) -> list[str]:
    return [str(q) for q in inner.get("header") or []]


def _function(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.FUNCTION, Function(
        decl=convert_fn_decl(inner.get("decl") or {}),
        generics=convert_generics(inner.get("generics")),
        header=_header(inner),
        abi=str(inner.get("abi") or "Rust"),
    )


def _method_converter(has_body: bool) -> BodyConverter:
    def convert(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
        return ItemKind.METHOD, Method(
            decl=convert_fn_decl(inner.get("decl") or {}),
            generics=convert_generics(inner.get("generics")),
            header=_header(inner),
            has_body=has_body,
            abi=str(inner.get("abi") or "Rust"),
        )

    return convert


def _trait(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.TRAIT, Trait(
        is_auto=bool(inner.get("is_auto", False)),
        is_unsafe=bool(inner.get("is_unsafe", False)),
        items=_ids(inner.get("items")),
        generics=convert_generics(inner.get("generics")),
        bounds=[convert_bound(b) for b in inner.get("bounds") or []],
    )


def _trait_alias(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.TRAIT_ALIAS, TraitAlias(
        generics=convert_generics(inner.get("generics")),
        bounds=[convert_bound(b) for b in inner.get("bounds") or []],
    )


def _impl(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.IMPL, Impl(
        is_unsafe=bool(inner.get("is_unsafe", False)),
        generics=convert_generics(inner.get("generics")),
        provided_trait_methods=[
            str(m) for m in inner.get("provided_trait_methods") or []
        ],
        trait_=convert_type(inner.get("trait")),
        for_=convert_type(inner["for"]),
        items=_ids(inner.get("items")),
        negative=bool(inner.get("negative", False)),
        synthetic=bool(inner.get("synthetic", False)),
        blanket_impl=convert_type(inner.get("blanket_impl")),
    )


def _typedef(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.TYPEDEF, Typedef(
        type_=convert_type(inner["type"]),
        generics=convert_generics(inner.get("generics")),
    )


def _opaque_ty(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.OPAQUE_TY, OpaqueTy(
        bounds=[convert_bound(b) for b in inner.get("bounds") or []],
        generics=convert_generics(inner.get("generics")),
    )


def _constant(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.CONSTANT, Constant(
        type_=convert_type(inner["type"]),
        expr=str(inner.get("expr") or ""),
        value=inner.get("value"),
        is_literal=bool(inner.get("is_literal", False)),
    )


def _static(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.STATIC, Static(
        type_=convert_type(inner["type"]),
        mutable=bool(inner.get("mutable", False)),
        expr=str(inner.get("expr") or ""),
    )


def _foreign_type(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.FOREIGN_TYPE, ForeignType()


def _macro(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.MACRO, Macro(source=str(inner.get("source") or ""))


_PROC_MACRO_KINDS = {
    "bang": ItemKind.MACRO,
    "attr": ItemKind.PROC_ATTRIBUTE,
    "derive": ItemKind.PROC_DERIVE,
}


def _proc_macro(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    macro_kind = str(inner.get("kind") or "bang")
    if macro_kind not in _PROC_MACRO_KINDS:
        msg = f"Macro kind {macro_kind!r} is not supported for JSON output"
        raise UnsupportedItemError(msg)
    return _PROC_MACRO_KINDS[macro_kind], ProcMacro(
        kind=macro_kind, helpers=[str(h) for h in inner.get("helpers") or []]
    )


def _assoc_const(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.ASSOC_CONST, AssocConst(
        type_=convert_type(inner["type"]), default=inner.get("default")
    )


def _assoc_type(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    return ItemKind.ASSOC_TYPE, AssocType(
        bounds=[convert_bound(b) for b in inner.get("bounds") or []],
        default=convert_type(inner.get("default")),
    )


def _stripped(inner: dict[str, Any]) -> tuple[ItemKind, ItemBody]:
    kind, body = convert_body(inner.get("kind"), inner.get("inner") or {})
    return kind, Stripped(inner=body)


# primitive and keyword have no public form.
_BODY_CONVERTERS: dict[str, BodyConverter] = {
    "module": _module,
    "extern_crate": _extern_crate,
    "import": _import,
    "struct": _struct,
    "union": _union,
    "struct_field": _struct_field,
    "enum": _enum,
    "variant": _variant,
    "function": _function,
    "foreign_function": _function,
    "method": _method_converter(has_body=True),
    "ty_method": _method_converter(has_body=False),
    "trait": _trait,
    "trait_alias": _trait_alias,
    "impl": _impl,
    "typedef": _typedef,
    "opaque_ty": _opaque_ty,
    "constant": _constant,
    "static": _static,
    "foreign_static": _static,
    "foreign_type": _foreign_type,
    "macro": _macro,
    "proc_macro": _proc_macro,
    "assoc_const": _assoc_const,
    "assoc_type": _assoc_type,
    "stripped": _stripped,
}
