import pytest

from scopeval.errors import EvalTypeError, UnquoteError
from scopeval.evaluation.evaluator import evaluate
from scopeval.reader.parser import read
from scopeval.types.symbol import Symbol, Keyword

SQ = Symbol("syntax-quote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def test_syntax_quote_simple(env):
    expr = [SQ, [1, 2, 3]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_syntax_quote_leaves_symbols_alone(env):
    assert evaluate(read("`(a b)"), env) == [Symbol("a"), Symbol("b")]


def test_syntax_quote_with_unquote(env):
    expr = [SQ, [1, [UNQUOTE, [Symbol("+"), 1, 1]], 3]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_syntax_quote_with_unquote_splicing(env):
    expr = [SQ, [1, [UNQUOTE_SPLICING, [Symbol("list"), 2, 3]], 4]]
    assert evaluate(expr, env) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("`[1 ~(inc 1) ~@(list 3 4)]", (1, 2, 3, 4)),
        ("`(x ~@[] y)", [Symbol("x"), Symbol("y")]),
        ("`(x ~@nil)", [Symbol("x")]),
        ("`{:a ~(+ 1 2)}", {Keyword("a"): 3}),
        ("`(+ ~@(map inc [1 2]))", [Symbol("+"), 2, 3]),
    ]
)
def test_syntax_quote_reader_forms(env, source, expected):
    assert evaluate(read(source), env) == expected


def test_syntax_quote_result_can_be_evaluated(env):
    env.define(Symbol("n"), 5)
    assert evaluate(read("(eval `(* 2 ~n))"), env) == 10


def test_nested_syntax_quote_keeps_inner_unquote(env):
    env.define(Symbol("x"), 1)
    # Only the outer level is processed; the inner template stays as data
    result = evaluate(read("``(a ~x)"), env)
    assert result == [SQ, [Symbol("a"), [UNQUOTE, Symbol("x")]]]


def test_double_unquote_evaluates_at_outer_level(env):
    env.define(Symbol("y"), [Symbol("-"), Symbol("x")])
    result = evaluate(read("``~~y"), env)
    assert result == [SQ, [UNQUOTE, [Symbol("-"), Symbol("x")]]]


def test_splicing_a_non_sequence(env):
    with pytest.raises(EvalTypeError):
        evaluate(read("`(1 ~@2)"), env)


def test_splicing_outside_a_collection(env):
    with pytest.raises(UnquoteError):
        evaluate(read("`~@(list 1)"), env)
