from __future__ import annotations

from scopeval import LispValue
from scopeval.errors import EvalTypeError
from scopeval.types.nil import is_nil


def is_sequential(value: LispValue) -> bool:
    """Lists and vectors are sequential; maps and strings are not."""
    return isinstance(value, (list, tuple))


def as_items(value: LispValue, who: str = "seq") -> list[LispValue]:
    """
    Coerce a seqable value into a Python list of items.

    nil is empty, maps yield `[k v]` vector entries, strings yield
    one-character strings. Anything else raises EvalTypeError.
    """
    if is_nil(value):
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        return [(k, v) for k, v in value.items()]
    if isinstance(value, str):
        return list(value)
    raise EvalTypeError(f"{who}: don't know how to create a sequence from {type(value).__name__}")
