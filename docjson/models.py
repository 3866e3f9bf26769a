"""Public item model written to the JSON document.

Each item carries an ``ItemKind`` tag and a body dataclass whose shape is
fixed by that kind. Types, generics and bounds stay plain JSON-ready data.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Union

FORMAT_VERSION = 1


class ItemKind(str, enum.Enum):
    """Public kind of a documented item."""

    MODULE = "module"
    EXTERN_CRATE = "extern_crate"
    IMPORT = "import"
    STRUCT = "struct"
    STRUCT_FIELD = "struct_field"
    UNION = "union"
    ENUM = "enum"
    VARIANT = "variant"
    FUNCTION = "function"
    TYPEDEF = "typedef"
    OPAQUE_TY = "opaque_ty"
    CONSTANT = "constant"
    TRAIT = "trait"
    TRAIT_ALIAS = "trait_alias"
    METHOD = "method"
    IMPL = "impl"
    STATIC = "static"
    FOREIGN_TYPE = "foreign_type"
    MACRO = "macro"
    PROC_ATTRIBUTE = "proc_attribute"
    PROC_DERIVE = "proc_derive"
    ASSOC_CONST = "assoc_const"
    ASSOC_TYPE = "assoc_type"
    PRIMITIVE = "primitive"
    KEYWORD = "keyword"


@dataclass
class Span:
    filename: str
    begin: tuple[int, int]  # zero indexed (line, column)
    end: tuple[int, int]


@dataclass
class Visibility:
    kind: str  # public/default/crate/restricted
    parent: str | None = None  # restricted only
    path: str | None = None


@dataclass
class Deprecation:
    since: str | None = None
    note: str | None = None


@dataclass
class Generics:
    params: list[dict[str, Any]] = field(default_factory=list)
    where_predicates: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class Module:
    is_crate: bool
    items: list[str]


@dataclass
class ExternCrate:
    name: str
    rename: str | None = None


@dataclass
class Import:
    source: str
    name: str
    id: str | None
    glob: bool


@dataclass
class Struct:
    """Also used for unions and struct-like variants."""

    struct_type: str  # plain/tuple/unit
    generics: Generics
    fields_stripped: bool
    fields: list[str]
    impls: list[str] = field(default_factory=list)


@dataclass
class StructField:
    type_: dict[str, Any]


@dataclass
class Enum:
    generics: Generics
    variants_stripped: bool
    variants: list[str]
    impls: list[str] = field(default_factory=list)


@dataclass
class Variant:
    variant_kind: str  # plain/tuple/struct
    inner: list[dict[str, Any]] | Struct | None = None


@dataclass
class FnDecl:
    inputs: list[tuple[str, dict[str, Any]]]
    output: dict[str, Any] | None
    c_variadic: bool = False


@dataclass
class Function:
    decl: FnDecl
    generics: Generics
    header: list[str]  # qualifiers: const/async/unsafe
    abi: str = "Rust"


@dataclass
class Method:
    decl: FnDecl
    generics: Generics
    header: list[str]
    has_body: bool
    abi: str = "Rust"


@dataclass
class Trait:
    is_auto: bool
    is_unsafe: bool
    items: list[str]
    generics: Generics
    bounds: list[dict[str, Any]]
    implementors: list[str] = field(default_factory=list)


@dataclass
class TraitAlias:
    generics: Generics
    bounds: list[dict[str, Any]]


@dataclass
class Impl:
    is_unsafe: bool
    generics: Generics
    provided_trait_methods: list[str]
    trait_: dict[str, Any] | None
    for_: dict[str, Any]
    items: list[str]
    negative: bool
    synthetic: bool
    blanket_impl: dict[str, Any] | None = None


@dataclass
class Typedef:
    type_: dict[str, Any]
    generics: Generics


@dataclass
class OpaqueTy:
    bounds: list[dict[str, Any]]
    generics: Generics


@dataclass
class Constant:
    type_: dict[str, Any]
    expr: str
    value: str | None
    is_literal: bool


@dataclass
class Static:
    type_: dict[str, Any]
    mutable: bool
    expr: str


@dataclass
class ForeignType:
    pass


@dataclass
class Macro:
    source: str


@dataclass
class ProcMacro:
    kind: str  # bang/attr/derive
    helpers: list[str]


@dataclass
class AssocConst:
    type_: dict[str, Any]
    default: str | None = None


@dataclass
class AssocType:
    bounds: list[dict[str, Any]]
    default: dict[str, Any] | None = None


@dataclass
class Stripped:
    """Body of an item hidden by a filtering pass."""

    inner: "ItemBody"


ItemBody = Union[
    Module,
    ExternCrate,
    Import,
    Struct,
    StructField,
    Enum,
    Variant,
    Function,
    Method,
    Trait,
    TraitAlias,
    Impl,
    Typedef,
    OpaqueTy,
    Constant,
    Static,
    ForeignType,
    Macro,
    ProcMacro,
    AssocConst,
    AssocType,
    Stripped,
]


@dataclass
class Item:
    """Represents one documented entity in the output index."""

    id: str
    crate_num: int
    name: str | None
    source: Span | None
    visibility: Visibility
    docs: str
    links: list[tuple[str, str | None, str | None]]
    attrs: list[str]
    deprecation: Deprecation | None
    kind: ItemKind
    inner: ItemBody


@dataclass(frozen=True)
class ItemSummary:
    crate_num: int
    path: list[str]
    kind: ItemKind


@dataclass(frozen=True)
class ExternalCrate:
    name: str
    html_root_url: str | None = None


@dataclass
class Crate:
    """Root of the emitted document."""

    root: str
    version: str | None
    includes_private: bool
    index: dict[str, Item]
    paths: dict[str, ItemSummary]
    external_crates: dict[int, ExternalCrate]
    format_version: int = FORMAT_VERSION
