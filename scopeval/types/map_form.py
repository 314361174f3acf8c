from __future__ import annotations

from scopeval import SExpression
from scopeval.errors import EvalTypeError


class MapForm:
    """A map literal whose keys are not all hashable, e.g. `{'x 36}`.

    Kept as ordered (key, value) pairs until evaluation produces a dict.
    """

    __slots__ = ("pairs",)

    def __init__(self, pairs: list[tuple[SExpression, SExpression]]):
        self.pairs: list[tuple[SExpression, SExpression]] = list(pairs)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MapForm) and self.pairs == other.pairs

    __hash__ = None

    def __repr__(self) -> str:
        return f"MapForm({self.pairs!r})"


def build_map(pairs, factory=dict) -> dict:
    """Collect evaluated (key, value) pairs into a new map made by `factory`."""
    result = factory()
    for key, value in pairs:
        try:
            result[key] = value
        except TypeError as exc:
            raise EvalTypeError(f"Map key cannot be used as a key: {key!r}") from exc
    return result
