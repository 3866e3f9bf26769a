"""Verification that every referenced local item made it into the index."""

from collections.abc import Iterator

from docjson.def_id import is_local_id
from docjson.models import (
    Crate,
    Enum,
    Impl,
    ItemBody,
    Module,
    Stripped,
    Struct,
    Trait,
    Variant,
)


def referenced_ids(body: ItemBody) -> Iterator[str]:
    """Yield the member and relation identifiers a body points at."""
    if isinstance(body, Stripped):
        yield from referenced_ids(body.inner)
    elif isinstance(body, Module):
        yield from body.items
    elif isinstance(body, Struct):
        yield from body.fields
        yield from body.impls
    elif isinstance(body, Enum):
        yield from body.variants
        yield from body.impls
    elif isinstance(body, Variant) and isinstance(body.inner, Struct):
        yield from body.inner.fields
    elif isinstance(body, Trait):
        yield from body.items
        yield from body.implementors
    elif isinstance(body, Impl):
        yield from body.items


def find_missing_local_ids(crate: Crate) -> list[str]:
    """Return local identifiers that are referenced but have no index entry."""
    missing: list[str] = []
    seen: set[str] = set()
    for item in crate.index.values():
        for ref in referenced_ids(item.inner):
            if ref in seen:
                continue
            seen.add(ref)
            if is_local_id(ref) and ref not in crate.index:
                missing.append(ref)
    return missing
