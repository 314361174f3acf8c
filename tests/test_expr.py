import pytest

from scopeval.errors import ReaderError
from scopeval.expr import Literal, Ref, Seq, MapNode, lift, lower, read_expr
from scopeval.types.map_form import MapForm
from scopeval.types.nil import Nil
from scopeval.types.symbol import Symbol, Keyword

QUOTE = Symbol("quote")


def test_lower_application():
    expr = Seq((Ref("+"), Ref("a"), Literal(1)))
    assert lower(expr) == [Symbol("+"), Symbol("a"), 1]


def test_lower_vector_and_map():
    vec = Seq((Literal(1), Ref("x")), kind="vector")
    assert lower(vec) == (1, Symbol("x"))
    m = MapNode(((Literal(Keyword("a")), Literal(1)),))
    assert lower(m) == {Keyword("a"): 1}


def test_lower_map_with_form_keys():
    m = MapNode(((Seq((Ref("quote"), Ref("x"))), Literal(36)),))
    assert lower(m) == MapForm([([QUOTE, Symbol("x")], 36)])


@pytest.mark.parametrize(
    "value",
    [[1, 2], (Symbol("y"),), {Keyword("k"): 1}, Symbol("s")],
)
def test_structured_literals_are_quoted(value):
    assert lower(Literal(value)) == [QUOTE, value]


@pytest.mark.parametrize("value", [1, "text", True, Nil, Keyword("k"), 2.5])
def test_atomic_literals_lower_to_themselves(value):
    assert lower(Literal(value)) == value


def test_lift_plain_forms():
    form = [Symbol("f"), (1, Symbol("x")), {Keyword("a"): "b"}]
    assert lift(form) == Seq(
        (
            Ref("f"),
            Seq((Literal(1), Ref("x")), kind="vector"),
            MapNode(((Literal(Keyword("a")), Literal("b")),)),
        )
    )


def test_lift_leaves_nodes_alone():
    node = Ref("a")
    assert lift(node) is node


def test_read_expr():
    assert read_expr("(inc x)") == Seq((Ref("inc"), Ref("x")))
    assert lower(read_expr("[1 {:a b}]")) == (1, {Keyword("a"): Symbol("b")})


@pytest.mark.parametrize(
    "build",
    [
        lambda: Ref(""),
        lambda: Ref(1),
        lambda: Seq((), kind="set"),
    ],
)
def test_invalid_nodes(build):
    with pytest.raises(ReaderError):
        build()


def test_lower_rejects_foreign_objects():
    with pytest.raises(ReaderError):
        lower(object())


def test_lower_rejects_duplicate_map_keys():
    m = MapNode(
        (
            (Literal(Keyword("a")), Literal(1)),
            (Literal(Keyword("a")), Literal(2)),
        )
    )
    with pytest.raises(ReaderError):
        lower(m)
