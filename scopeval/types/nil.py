from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Comparisons: Nil is always less than anything else, and equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)

    def __lt__(self, other):
        return not isinstance(other, NilType)

    def __le__(self, other):
        return True  # Nil <= anything

    def __gt__(self, other):
        return False

    def __ge__(self, other):
        return isinstance(other, NilType)


Nil = NilType()


def is_nil(value) -> bool:
    """Python None shows up from host callables; treat it as nil."""
    return value is Nil or value is None


def is_truthy(value) -> bool:
    """Only nil and false are false."""
    return not (is_nil(value) or value is False)
