"""Tagged-variant expression tree.

Callers that build expressions programmatically use these node types instead
of a host-specific "everything is a list" encoding:

    Seq((Ref("+"), Ref("a"), Literal(1)))          # (+ a 1)
    Seq((Literal(1), Literal(2)), kind="vector")    # [1 2]
    MapNode(((Literal(Keyword("a")), Literal(1)),)) # {:a 1}

`lower` turns a tree into the plain form the evaluator walks; `lift` goes the
other way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal as KindLiteral, Union

from scopeval import SExpression
from scopeval.errors import ReaderError
from scopeval.reader.parser import read
from scopeval.types.map_form import MapForm
from scopeval.types.symbol import Symbol


@dataclass(frozen=True)
class Literal:
    """A self-evaluating atom: number, string, boolean, nil, keyword or any host value."""

    value: Any


@dataclass(frozen=True)
class Ref:
    """A symbolic reference resolved against the evaluation scope."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ReaderError(f"Ref name must be a non-empty string, got {self.name!r}")


@dataclass(frozen=True)
class Seq:
    """An ordered sequence. A list is application or a special form; a vector is data."""

    items: tuple = ()
    kind: KindLiteral["list", "vector"] = "list"

    def __post_init__(self):
        if self.kind not in ("list", "vector"):
            raise ReaderError(f"Unknown sequence kind: {self.kind!r}")
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class MapNode:
    """A map literal; both keys and values are sub-expressions."""

    entries: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))


Expr = Union[Literal, Ref, Seq, MapNode]

EXPR_TYPES = (Literal, Ref, Seq, MapNode)

QUOTE = Symbol("quote")


def lower(expr: Expr) -> SExpression:
    """Convert a tagged tree into the plain form used by the evaluator."""
    match expr:
        case Literal(value=value):
            # Structured host values stay data
            if isinstance(value, (list, tuple, dict, Symbol)):
                return [QUOTE, value]
            return value
        case Ref(name=name):
            return Symbol(name)
        case Seq(items=items, kind="vector"):
            return tuple(lower(item) for item in items)
        case Seq(items=items):
            return [lower(item) for item in items]
        case MapNode(entries=entries):
            pairs = [(lower(k), lower(v)) for k, v in entries]
            result = {}
            for key, value in pairs:
                try:
                    if key in result:
                        raise ReaderError(f"Duplicate key: {key}")
                    result[key] = value
                except TypeError:
                    return MapForm(pairs)
            return result
    raise ReaderError(f"Not an expression node: {expr!r}")


def lift(form: SExpression) -> Expr:
    """Convert a plain form into a tagged tree."""
    if isinstance(form, EXPR_TYPES):
        return form
    if isinstance(form, Symbol):
        return Ref(form.id)
    if isinstance(form, list):
        return Seq(tuple(lift(item) for item in form), kind="list")
    if isinstance(form, tuple):
        return Seq(tuple(lift(item) for item in form), kind="vector")
    if isinstance(form, dict):
        return MapNode(tuple((lift(k), lift(v)) for k, v in form.items()))
    if isinstance(form, MapForm):
        return MapNode(tuple((lift(k), lift(v)) for k, v in form.pairs))
    return Literal(form)


def read_expr(source: str) -> Expr:
    """Read a single expression from text as a tagged tree."""
    return lift(read(source))
