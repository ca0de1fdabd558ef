from __future__ import annotations
import sys


class Symbol:
    """Name resolved through a Context when evaluated; `(quote sym)` keeps it as data."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned: equal names share one string object
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
