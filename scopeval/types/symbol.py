from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id < other.id

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword:
    """A self-evaluating name written `:name`; keywords are functions of maps."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name[1:] if name.startswith(":") else name)

    def __eq__(self, other: Keyword) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        # Keep keywords and symbols of the same name in separate hash buckets
        return hash((":", self.id))

    def __lt__(self, other: Keyword) -> bool:
        if not isinstance(other, Keyword):
            return NotImplemented
        return self.id < other.id

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return f":{self.id}"
