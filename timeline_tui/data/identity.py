"""Stable element identities for timeline widgets.

An identity lets Textual match the same logical item across re-renders. It is
a 64-bit BLAKE2b digest of the key, used only for widget reconciliation: two
different keys can collide, and nothing relies on them not doing so.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

DIGEST_SIZE = 8


@dataclass(frozen=True)
class ElementId:
    """Identity of a rendered timeline element."""

    prefix: str
    value: int

    @property
    def dom_id(self) -> str:
        """Textual-safe widget id, e.g. ``item-00ff12ab34cd56ef``."""
        return f"{self.prefix}-{self.value:0{DIGEST_SIZE * 2}x}"

    def __str__(self) -> str:
        return self.dom_id


def identity(key: str, prefix: str = "item") -> ElementId:
    """Derive the element identity for a logical key.

    Args:
        key: Logical key, usually the id string from the log.
        prefix: Leading part of the DOM id; must start with a letter.

    Returns:
        The same ElementId for the same key and prefix, in any process.
    """
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=DIGEST_SIZE).digest()
    return ElementId(prefix=prefix, value=int.from_bytes(digest, "big"))
