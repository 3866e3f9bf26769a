"""Stable identifiers derived from an entity's defining location."""

from dataclasses import dataclass
from typing import Any

LOCAL_CRATE = 0


@dataclass(frozen=True)
class DefId:
    """Defining location of a documented entity: crate number plus index."""

    krate: int
    index: int

    @property
    def is_local(self) -> bool:
        return self.krate == LOCAL_CRATE

    @classmethod
    def parse(cls, raw: Any) -> "DefId":
        """Parse the ``krate:index`` form (or a ``{krate, index}`` mapping)."""
        if isinstance(raw, DefId):
            return raw
        if isinstance(raw, dict):
            return cls(int(raw["krate"]), int(raw["index"]))
        krate, sep, index = str(raw).partition(":")
        if not sep:
            msg = f"Malformed def id: {raw!r}"
            raise ValueError(msg)
        return cls(int(krate), int(index))


def make_id(def_id: DefId) -> str:
    """Return the opaque identifier used as index key."""
    return f"{def_id.krate}:{def_id.index}"


def crate_num_of(item_id: str) -> int:
    """Return the crate number an identifier originates from."""
    return int(item_id.split(":", 1)[0])


def is_local_id(item_id: str) -> bool:
    """Check if the identifier names an entity of the local crate."""
    return crate_num_of(item_id) == LOCAL_CRATE
