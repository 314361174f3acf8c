from fractions import Fraction

import pytest

from scopeval.errors import ReaderError
from scopeval.reader.parser import lex, read, read_all, TokenStream
from scopeval.types.map_form import MapForm
from scopeval.types.nil import Nil
from scopeval.types.symbol import Symbol, Keyword


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("[1, 2]", [("lbracket", "["), ("atom", "1"), ("atom", "2"), ("rbracket", "]")]),
        ("{:a 1}", [("lbrace", "{"), ("atom", ":a"), ("atom", "1"), ("rbrace", "}")]),
        ('"hello"', [("string", '"hello"')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("`y", [("syntax_quote", "`"), ("atom", "y")]),
        ("~z", [("unquote", "~"), ("atom", "z")]),
        ("~@w", [("unquote", "~@"), ("atom", "w")]),
        ("   ,, \n", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("2/3", Fraction(2, 3)),
        ("4/2", 2),
        (":a", Keyword("a")),
        (":33", Keyword("33")),
        ("Math/sqrt", Symbol("Math/sqrt")),
        ("/", Symbol("/")),
        ("->", Symbol("->")),
        ("-", Symbol("-")),
        ('"a\\nb"', "a\nb"),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("`(a ~b ~@c)", [Symbol("syntax-quote"),
                         [Symbol("a"), [Symbol("unquote"), Symbol("b")], [Symbol("unquote-splicing"), Symbol("c")]]]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("[a [1 2]]", (Symbol("a"), (1, 2))),
        ("()", []),
        ("{:a 1, [1 2 3] \"4 5 6\"}", {Keyword("a"): 1, (1, 2, 3): "4 5 6"}),
    ]
)
def test_parser_expressions(source, expected):
    assert read(source) == expected


def test_keyword_and_symbol_of_same_name_differ():
    assert read(":a") != read("a")
    assert len({read(":a"), read("a")}) == 2


def test_parse_all_reads_every_form():
    stream = TokenStream(lex("(def a 1) a ; trailing comment"))
    forms = list(stream.parse_all())
    assert forms == [[Symbol("def"), Symbol("a"), 1], Symbol("a")]


@pytest.mark.parametrize(
    "source",
    [
        "(a b",
        "[1 2",
        "(a]",
        ")",
        "{:a}",
        '"unterminated',
        "'",
        "1/0",
        "12abc",
        "{:a 1 :a 2}",
    ]
)
def test_reader_errors(source):
    with pytest.raises(ReaderError):
        read_all(source)


def test_read_requires_exactly_one_form():
    with pytest.raises(ReaderError):
        read("a b")
    with pytest.raises(ReaderError):
        read("")


def test_map_literal_with_form_keys_is_kept_as_pairs():
    form = read("{'x 36}")
    assert isinstance(form, MapForm)
    assert form.pairs == [([Symbol("quote"), Symbol("x")], 36)]
