import pytest

from scopeval.errors import ArityError, EvalTypeError, EvaluationError
from scopeval.evaluation.evaluator import evaluate
from scopeval.reader.parser import read
from scopeval.types.nil import Nil
from scopeval.types.symbol import Symbol, Keyword


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2)", [1, 2]),
        ("(vector 1 2)", (1, 2)),
        ("(vec '(1 2))", (1, 2)),
        ("(first [1 2 3])", 1),
        ("(first [])", Nil),
        ("(second '(1 2 3))", 2),
        ("(last [1 2 3])", 3),
        ("(rest [1 2 3])", [2, 3]),
        ("(rest nil)", []),
        ("(next [1])", Nil),
        ("(cons 0 [1 2])", [0, 1, 2]),
        ("(conj [1 2] 3 4)", (1, 2, 3, 4)),
        ("(conj '(1 2) 0)", [0, 1, 2]),
        ("(conj nil 1)", [1]),
        ("(count \"abc\")", 3),
        ("(count nil)", 0),
        ("(nth [1 2 3] 1)", 2),
        ("(nth [1 2 3] 5 :none)", Keyword("none")),
        ("(concat [1] '(2) nil [3])", [1, 2, 3]),
        ("(reverse [1 2 3])", [3, 2, 1]),
        ("(range 3)", [0, 1, 2]),
        ("(range 1 10 4)", [1, 5, 9]),
        ("(take 2 [1 2 3])", [1, 2]),
        ("(drop 2 [1 2 3])", [3]),
        ("(map + [1 2 3] [10 20])", [11, 22]),
        ("(map :a [{:a 1} {:a 2}])", [1, 2]),
        ("(mapcat reverse [[1 2] [3 4]])", [2, 1, 4, 3]),
        ("(filter even? (range 6))", [0, 2, 4]),
        ("(remove even? (range 6))", [1, 3, 5]),
        ("(reduce + [1 2 3 4])", 10),
        ("(reduce + 10 [1 2])", 13),
        ("(reduce + [])", 0),
        ("(apply + 1 2 [3 4])", 10),
        ("(identity :x)", Keyword("x")),
        ("(empty? [])", True),
        ("(empty? {:a 1})", False),
        ("(seq \"ab\")", ["a", "b"]),
    ]
)
def test_sequence_builtins(env, source, expected):
    assert evaluate(read(source), env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(nil? nil)", True),
        ("(some? false)", True),
        ("(number? 2/3)", True),
        ("(number? true)", False),
        ("(string? \"s\")", True),
        ("(symbol? 'a)", True),
        ("(keyword? :a)", True),
        ("(map? {})", True),
        ("(vector? [1])", True),
        ("(list? '(1))", True),
        ("(list? [1])", False),
        ("(fn? inc)", True),
        ("(fn? (fn [] 1))", True),
        ("(fn? :a)", False),
        ("(zero? 0.0)", True),
        ("(odd? -3)", True),
    ]
)
def test_predicates(env, source, expected):
    assert evaluate(read(source), env) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(int 3.9)", 3),
        ("(double 1/2)", 0.5),
        ("(symbol \"abc\")", Symbol("abc")),
        ("(keyword \"2\")", Keyword("2")),
        ("(keyword 'sym)", Keyword("sym")),
        ("(keyword 42)", Nil),
        ("(name 'sym)", "sym"),
    ]
)
def test_conversions(env, source, expected):
    assert evaluate(read(source), env) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(first 1)", EvalTypeError),
        ("(count :a)", EvalTypeError),
        ("(nth [1] 3)", EvaluationError),
        ("(nth [1] :a)", EvalTypeError),
        ("(range 1 5 0)", EvaluationError),
        ("(map inc)", ArityError),
        ("([1 2] 5)", EvaluationError),
        ("(symbol 1)", EvalTypeError),
        ("(take :a [1])", EvalTypeError),
        ("(int \"5\")", EvalTypeError),
    ]
)
def test_sequence_errors(env, source, error):
    with pytest.raises(error):
        evaluate(read(source), env)
