from fractions import Fraction

import pytest

from scopeval.evaluation.evaluator import evaluate
from scopeval.printer import pr_str, print_str, str_value
from scopeval.reader.parser import read
from scopeval.types.nil import Nil
from scopeval.types.sorted_map import SortedMap
from scopeval.types.symbol import Symbol, Keyword


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "nil"),
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (Fraction(2, 3), "2/3"),
        ("a \"quoted\"\nline", '"a \\"quoted\\"\\nline"'),
        (Symbol("x"), "x"),
        (Keyword("kw"), ":kw"),
        ([1, [2, 3]], "(1 (2 3))"),
        ((1, "s"), '[1 "s"]'),
        ({Keyword("a"): 1, Keyword("b"): 2}, "{:a 1, :b 2}"),
        (SortedMap({3: "c", 1: "a"}), '{1 "a", 3 "c"}'),
        ([], "()"),
    ]
)
def test_pr_str(value, expected):
    assert pr_str(value) == expected


def test_print_str_unquotes_nested_strings():
    assert print_str(["a", ("b",)]) == "(a [b])"


def test_str_value():
    assert str_value(Nil) == ""
    assert str_value("x") == "x"
    assert str_value(Keyword("k")) == ":k"


def test_functions_render_with_name(env):
    fn = evaluate(read("(fn add [a b] a)"), env)
    assert pr_str(fn) == "#<fn add [a b]>"


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(str "a" 1 nil :k)', "a1:k"),
        ("(str)", ""),
        ("(pr-str \"x\" [1 2])", '"x" [1 2]'),
        ("(str 2/3)", "2/3"),
        ("(name :kw)", "kw"),
    ]
)
def test_string_builtins(env, source, expected):
    assert evaluate(read(source), env) == expected


def test_println_and_prn(env, capsys):
    assert evaluate(read('(println "hi" [1 "two"])'), env) is Nil
    assert evaluate(read('(prn "hi" [1 "two"])'), env) is Nil
    out = capsys.readouterr().out
    assert out == 'hi [1 two]\n"hi" [1 "two"]\n'
