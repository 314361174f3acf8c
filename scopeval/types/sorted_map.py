"""Map variants beyond the plain dict hash map."""

from __future__ import annotations

from typing import Iterator

from scopeval import LispValue
from scopeval.errors import EvalTypeError


class SortedMap(dict):
    """A dict whose iteration order follows its sorted keys.

    Keys must be mutually comparable, as in any sorted collection.
    """

    def _ordered(self) -> list[LispValue]:
        try:
            return sorted(super().keys())
        except TypeError as exc:
            raise EvalTypeError("sorted-map keys must be mutually comparable") from exc

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._ordered())

    def keys(self):
        return self._ordered()

    def values(self):
        return [self[k] for k in self._ordered()]

    def items(self):
        return [(k, self[k]) for k in self._ordered()]

    def copy(self) -> SortedMap:
        return SortedMap(super().items())
