"""Built-in functions for the scopeval core environment.

This module defines arithmetic, comparison, predicates, conversions, sequence
and map operations, printing helpers and `contextual-eval`. Every builtin uses
the `(env, args)` calling protocol and is registered by `register`.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

from scopeval import LispValue
from scopeval.errors import ArityError, EvalTypeError, EvaluationDepthError, EvaluationError
from scopeval.evaluation.apply import apply as apply_engine, builtin, is_builtin, lookup_key
from scopeval.evaluation.evaluator import evaluate
from scopeval.printer import pr_str, print_str, str_value
from scopeval.types.environment import Environment
from scopeval.types.lambda_fn import Fn
from scopeval.types.nil import Nil, is_nil, is_truthy
from scopeval.types.seq import as_items, is_sequential
from scopeval.types.sorted_map import SortedMap
from scopeval.types.symbol import Symbol, Keyword


# -------------------------------
# Helpers
# -------------------------------
def _arity(name: str, args: list[Any], lo: int, hi: int | None = -1) -> None:
    """Check lo <= len(args) <= hi; hi=None means unbounded, -1 means exactly lo."""
    hi = lo if hi == -1 else hi
    if len(args) < lo or (hi is not None and len(args) > hi):
        raise ArityError(f"Wrong number of args ({len(args)}) passed to: {name}")


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float, Fraction)) and not isinstance(x, bool)


def _numbers(name: str, args: list[Any]) -> None:
    for x in args:
        if not _is_number(x):
            raise EvalTypeError(f"{name} expects numbers, got {pr_str(x)}")


def _normalize(x: Any) -> Any:
    """Collapse whole ratios back to integers."""
    if isinstance(x, Fraction) and x.denominator == 1:
        return x.numerator
    return x


def _call(env: Environment, fn: LispValue, args: list[LispValue]) -> LispValue:
    return apply_engine(fn, args, env, evaluate)


def lisp_equal(a: Any, b: Any) -> bool:
    """Value equality: lists equal vectors with the same items, floats never equal exact numbers."""
    if is_nil(a) or is_nil(b):
        return is_nil(a) and is_nil(b)
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if _is_number(a) and _is_number(b):
        if isinstance(a, float) != isinstance(b, float):
            return False
        return a == b
    if is_sequential(a) and is_sequential(b):
        return len(a) == len(b) and all(lisp_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        if len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not lisp_equal(v, b[k]):
                return False
        return True
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
@builtin
def add(env: Environment, args: list[Any]) -> Any:
    _numbers("+", args)
    return _normalize(sum(args))


@builtin
def sub(env: Environment, args: list[Any]) -> Any:
    _arity("-", args, 1, None)
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return _normalize(result)


@builtin
def mul(env: Environment, args: list[Any]) -> Any:
    _numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return _normalize(result)


@builtin
def div(env: Environment, args: list[Any]) -> Any:
    """Division of exact numbers yields a ratio, as in (/ 2 3) => 2/3."""
    _arity("/", args, 1, None)
    _numbers("/", args)
    if len(args) == 1:
        args = [1, *args]
    result = args[0]
    for x in args[1:]:
        if x == 0 and not isinstance(x, float) and not isinstance(result, float):
            raise EvaluationError("Divide by zero")
        if isinstance(result, float) or isinstance(x, float):
            result = result / x
        else:
            result = Fraction(result) / x
    return _normalize(result)


def _integers(name: str, args: list[Any]) -> None:
    _arity(name, args, 2)
    for x in args:
        if not isinstance(x, int) or isinstance(x, bool):
            raise EvalTypeError(f"{name} expects integers, got {pr_str(x)}")
    if args[1] == 0:
        raise EvaluationError("Divide by zero")


@builtin
def quot(env: Environment, args: list[Any]) -> int:
    _integers("quot", args)
    n, d = args
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


@builtin
def rem(env: Environment, args: list[Any]) -> int:
    _integers("rem", args)
    n, d = args
    return n - d * quot(env, args)


@builtin
def mod(env: Environment, args: list[Any]) -> int:
    _integers("mod", args)
    return args[0] % args[1]


@builtin
def inc(env: Environment, args: list[Any]) -> Any:
    _arity("inc", args, 1)
    _numbers("inc", args)
    return _normalize(args[0] + 1)


@builtin
def dec(env: Environment, args: list[Any]) -> Any:
    _arity("dec", args, 1)
    _numbers("dec", args)
    return _normalize(args[0] - 1)


@builtin
def max_builtin(env: Environment, args: list[Any]) -> Any:
    _arity("max", args, 1, None)
    _numbers("max", args)
    return max(args)


@builtin
def min_builtin(env: Environment, args: list[Any]) -> Any:
    _arity("min", args, 1, None)
    _numbers("min", args)
    return min(args)


@builtin
def math_sqrt(env: Environment, args: list[Any]) -> float:
    _arity("Math/sqrt", args, 1)
    _numbers("Math/sqrt", args)
    if args[0] < 0:
        return math.nan
    return math.sqrt(args[0])


@builtin
def math_abs(env: Environment, args: list[Any]) -> Any:
    _arity("Math/abs", args, 1)
    _numbers("Math/abs", args)
    return abs(args[0])


@builtin
def math_pow(env: Environment, args: list[Any]) -> float:
    _arity("Math/pow", args, 2)
    _numbers("Math/pow", args)
    return math.pow(args[0], args[1])


# -------------------------------
# Comparison and logic
# -------------------------------
@builtin
def equals(env: Environment, args: list[Any]) -> bool:
    _arity("=", args, 1, None)
    first = args[0]
    return all(lisp_equal(first, other) for other in args[1:])


@builtin
def not_equals(env: Environment, args: list[Any]) -> bool:
    return not equals(env, args)


def _compare(name: str, args: list[Any], op) -> bool:
    _arity(name, args, 1, None)
    _numbers(name, args)
    return all(op(a, b) for a, b in zip(args, args[1:]))


@builtin
def lt(env: Environment, args: list[Any]) -> bool:
    return _compare("<", args, lambda a, b: a < b)


@builtin
def lte(env: Environment, args: list[Any]) -> bool:
    return _compare("<=", args, lambda a, b: a <= b)


@builtin
def gt(env: Environment, args: list[Any]) -> bool:
    return _compare(">", args, lambda a, b: a > b)


@builtin
def gte(env: Environment, args: list[Any]) -> bool:
    return _compare(">=", args, lambda a, b: a >= b)


@builtin
def logical_not(env: Environment, args: list[Any]) -> bool:
    _arity("not", args, 1)
    return not is_truthy(args[0])


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test):
    @builtin
    def check(env: Environment, args: list[Any]) -> bool:
        _arity(name, args, 1)
        return bool(test(args[0]))
    check.__name__ = name
    return check


is_nil_builtin = _predicate("nil?", is_nil)
is_some = _predicate("some?", lambda x: not is_nil(x))
is_number = _predicate("number?", _is_number)
is_string = _predicate("string?", lambda x: isinstance(x, str))
is_symbol = _predicate("symbol?", lambda x: isinstance(x, Symbol))
is_keyword = _predicate("keyword?", lambda x: isinstance(x, Keyword))
is_map = _predicate("map?", lambda x: isinstance(x, dict))
is_vector = _predicate("vector?", lambda x: isinstance(x, tuple))
is_list = _predicate("list?", lambda x: isinstance(x, list))
is_fn = _predicate("fn?", lambda x: isinstance(x, Fn) or is_builtin(x))


@builtin
def is_empty(env: Environment, args: list[Any]) -> bool:
    _arity("empty?", args, 1)
    return not as_items(args[0], "empty?")


@builtin
def is_zero(env: Environment, args: list[Any]) -> bool:
    _arity("zero?", args, 1)
    _numbers("zero?", args)
    return args[0] == 0


def _parity(name: str, args: list[Any]) -> int:
    _arity(name, args, 1)
    x = args[0]
    if not isinstance(x, int) or isinstance(x, bool):
        raise EvalTypeError(f"{name} expects an integer, got {pr_str(x)}")
    return x % 2


@builtin
def is_even(env: Environment, args: list[Any]) -> bool:
    return _parity("even?", args) == 0


@builtin
def is_odd(env: Environment, args: list[Any]) -> bool:
    return _parity("odd?", args) == 1


# -------------------------------
# Conversions
# -------------------------------
@builtin
def str_builtin(env: Environment, args: list[Any]) -> str:
    return "".join(str_value(x) for x in args)


@builtin
def int_builtin(env: Environment, args: list[Any]) -> int:
    _arity("int", args, 1)
    _numbers("int", args)
    return int(args[0])


@builtin
def double(env: Environment, args: list[Any]) -> float:
    _arity("double", args, 1)
    _numbers("double", args)
    return float(args[0])


@builtin
def symbol_builtin(env: Environment, args: list[Any]) -> Symbol:
    _arity("symbol", args, 1)
    x = args[0]
    if isinstance(x, Symbol):
        return x
    if not isinstance(x, str) or not x:
        raise EvalTypeError(f"symbol expects a non-empty string, got {pr_str(x)}")
    return Symbol(x)


@builtin
def keyword_builtin(env: Environment, args: list[Any]) -> Any:
    _arity("keyword", args, 1)
    x = args[0]
    if isinstance(x, Keyword):
        return x
    if isinstance(x, Symbol):
        return Keyword(x.id)
    if isinstance(x, str) and x:
        return Keyword(x)
    # (keyword 42) is nil
    return Nil


@builtin
def name_builtin(env: Environment, args: list[Any]) -> str:
    _arity("name", args, 1)
    x = args[0]
    if isinstance(x, (Symbol, Keyword)):
        return x.id
    if isinstance(x, str):
        return x
    raise EvalTypeError(f"name expects a string, symbol or keyword, got {pr_str(x)}")


# -------------------------------
# Sequences
# -------------------------------
@builtin
def list_builtin(env: Environment, args: list[Any]) -> list:
    return list(args)


@builtin
def vector(env: Environment, args: list[Any]) -> tuple:
    return tuple(args)


@builtin
def vec(env: Environment, args: list[Any]) -> tuple:
    _arity("vec", args, 1)
    return tuple(as_items(args[0], "vec"))


@builtin
def seq(env: Environment, args: list[Any]) -> Any:
    _arity("seq", args, 1)
    items = as_items(args[0], "seq")
    return items if items else Nil


@builtin
def first(env: Environment, args: list[Any]) -> Any:
    _arity("first", args, 1)
    items = as_items(args[0], "first")
    return items[0] if items else Nil


@builtin
def second(env: Environment, args: list[Any]) -> Any:
    _arity("second", args, 1)
    items = as_items(args[0], "second")
    return items[1] if len(items) > 1 else Nil


@builtin
def last(env: Environment, args: list[Any]) -> Any:
    _arity("last", args, 1)
    items = as_items(args[0], "last")
    return items[-1] if items else Nil


@builtin
def rest(env: Environment, args: list[Any]) -> list:
    _arity("rest", args, 1)
    return as_items(args[0], "rest")[1:]


@builtin
def next_builtin(env: Environment, args: list[Any]) -> Any:
    _arity("next", args, 1)
    items = as_items(args[0], "next")[1:]
    return items if items else Nil


@builtin
def cons(env: Environment, args: list[Any]) -> list:
    _arity("cons", args, 2)
    return [args[0], *as_items(args[1], "cons")]


def conj_one(coll: Any, item: Any) -> Any:
    if is_nil(coll):
        return [item]
    if isinstance(coll, list):
        return [item, *coll]
    if isinstance(coll, tuple):
        return (*coll, item)
    if isinstance(coll, dict):
        if isinstance(item, dict):
            return merge_maps([coll, item])
        if not is_sequential(item) or len(item) != 2:
            raise EvalTypeError("Map entries must be two-element vectors")
        result = coll.copy()
        result[item[0]] = item[1]
        return result
    raise EvalTypeError(f"conj: cannot add to {pr_str(coll)}")


@builtin
def conj(env: Environment, args: list[Any]) -> Any:
    _arity("conj", args, 1, None)
    coll = args[0]
    for item in args[1:]:
        coll = conj_one(coll, item)
    return coll


@builtin
def count(env: Environment, args: list[Any]) -> int:
    _arity("count", args, 1)
    return len(as_items(args[0], "count"))


@builtin
def nth(env: Environment, args: list[Any]) -> Any:
    _arity("nth", args, 2, 3)
    items = as_items(args[0], "nth")
    index = args[1]
    if not isinstance(index, int) or isinstance(index, bool):
        raise EvalTypeError("nth index must be an integer")
    if 0 <= index < len(items):
        return items[index]
    if len(args) == 3:
        return args[2]
    raise EvaluationError(f"Index {index} out of bounds")


@builtin
def concat(env: Environment, args: list[Any]) -> list:
    result = []
    for coll in args:
        result.extend(as_items(coll, "concat"))
    return result


@builtin
def reverse(env: Environment, args: list[Any]) -> list:
    _arity("reverse", args, 1)
    return list(reversed(as_items(args[0], "reverse")))


@builtin
def range_builtin(env: Environment, args: list[Any]) -> list:
    _arity("range", args, 1, 3)
    for x in args:
        if not isinstance(x, int) or isinstance(x, bool):
            raise EvalTypeError("range expects integer bounds")
    if len(args) == 3 and args[2] == 0:
        raise EvaluationError("range step cannot be zero")
    return list(range(*args))


@builtin
def take(env: Environment, args: list[Any]) -> list:
    _arity("take", args, 2)
    return as_items(args[1], "take")[:max(args[0], 0)]


@builtin
def drop(env: Environment, args: list[Any]) -> list:
    _arity("drop", args, 2)
    return as_items(args[1], "drop")[max(args[0], 0):]


@builtin
def map_builtin(env: Environment, args: list[Any]) -> list:
    """(map f coll ...) stops at the shortest collection."""
    _arity("map", args, 2, None)
    fn, *colls = args
    seqs = [as_items(c, "map") for c in colls]
    return [_call(env, fn, list(items)) for items in zip(*seqs)]


@builtin
def mapcat(env: Environment, args: list[Any]) -> list:
    result = []
    for item in map_builtin(env, args):
        result.extend(as_items(item, "mapcat"))
    return result


@builtin
def filter_builtin(env: Environment, args: list[Any]) -> list:
    _arity("filter", args, 2)
    fn, coll = args
    return [x for x in as_items(coll, "filter") if is_truthy(_call(env, fn, [x]))]


@builtin
def remove(env: Environment, args: list[Any]) -> list:
    _arity("remove", args, 2)
    fn, coll = args
    return [x for x in as_items(coll, "remove") if not is_truthy(_call(env, fn, [x]))]


@builtin
def reduce_builtin(env: Environment, args: list[Any]) -> Any:
    """(reduce f coll) or (reduce f init coll)."""
    _arity("reduce", args, 2, 3)
    fn = args[0]
    items = as_items(args[-1], "reduce")
    if len(args) == 3:
        acc = args[1]
    elif items:
        acc, items = items[0], items[1:]
    else:
        return _call(env, fn, [])
    for x in items:
        acc = _call(env, fn, [acc, x])
    return acc


@builtin
def apply_builtin(env: Environment, args: list[Any]) -> Any:
    """(apply f a b [c d]) calls f with a, b, c, d."""
    _arity("apply", args, 2, None)
    fn, *fixed, coll = args
    return _call(env, fn, [*fixed, *as_items(coll, "apply")])


@builtin
def identity(env: Environment, args: list[Any]) -> Any:
    _arity("identity", args, 1)
    return args[0]


# -------------------------------
# Maps
# -------------------------------
def _pairs(name: str, args: list[Any]) -> list[tuple[Any, Any]]:
    if len(args) % 2:
        raise EvaluationError(f"{name}: no value supplied for key {pr_str(args[-1])}")
    return list(zip(args[::2], args[1::2]))


def _put(m: dict, k: Any, v: Any) -> None:
    try:
        m[k] = v
    except TypeError as exc:
        raise EvalTypeError(f"{pr_str(k)} cannot be used as a map key") from exc


@builtin
def hash_map(env: Environment, args: list[Any]) -> dict:
    result: dict = {}
    for k, v in _pairs("hash-map", args):
        _put(result, k, v)
    return result


@builtin
def array_map(env: Environment, args: list[Any]) -> dict:
    """Insertion-ordered map; a plain dict already keeps insertion order."""
    result: dict = {}
    for k, v in _pairs("array-map", args):
        _put(result, k, v)
    return result


@builtin
def sorted_map(env: Environment, args: list[Any]) -> SortedMap:
    result = SortedMap()
    for k, v in _pairs("sorted-map", args):
        _put(result, k, v)
    # Fail now on incomparable keys rather than on first traversal
    result.keys()
    return result


def _as_map(name: str, m: Any) -> dict:
    if is_nil(m):
        return {}
    if not isinstance(m, dict):
        raise EvalTypeError(f"{name} expects a map, got {pr_str(m)}")
    return m


@builtin
def get(env: Environment, args: list[Any]) -> Any:
    _arity("get", args, 2, 3)
    return lookup_key(args[0], args[1], args[2] if len(args) == 3 else Nil)


@builtin
def assoc(env: Environment, args: list[Any]) -> Any:
    _arity("assoc", args, 3, None)
    coll, *kvs = args
    if isinstance(coll, tuple):
        items = list(coll)
        for index, v in _pairs("assoc", kvs):
            if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= len(items):
                raise EvaluationError(f"Index {pr_str(index)} out of bounds for assoc")
            if index == len(items):
                items.append(v)
            else:
                items[index] = v
        return tuple(items)
    result = _as_map("assoc", coll).copy()
    for k, v in _pairs("assoc", kvs):
        _put(result, k, v)
    return result


@builtin
def dissoc(env: Environment, args: list[Any]) -> Any:
    _arity("dissoc", args, 1, None)
    if is_nil(args[0]):
        return Nil
    result = _as_map("dissoc", args[0]).copy()
    for k in args[1:]:
        try:
            result.pop(k, None)
        except TypeError:
            continue
    return result


@builtin
def keys(env: Environment, args: list[Any]) -> Any:
    _arity("keys", args, 1)
    ks = list(_as_map("keys", args[0]).keys())
    return ks if ks else Nil


@builtin
def vals(env: Environment, args: list[Any]) -> Any:
    _arity("vals", args, 1)
    vs = list(_as_map("vals", args[0]).values())
    return vs if vs else Nil


@builtin
def contains(env: Environment, args: list[Any]) -> bool:
    _arity("contains?", args, 2)
    coll, key = args
    if isinstance(coll, tuple):
        return isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(coll)
    try:
        return key in _as_map("contains?", coll)
    except TypeError:
        return False


@builtin
def find(env: Environment, args: list[Any]) -> Any:
    _arity("find", args, 2)
    m, key = _as_map("find", args[0]), args[1]
    try:
        if key in m:
            return (key, m[key])
    except TypeError:
        pass
    return Nil


def merge_maps(maps: list[Any]) -> Any:
    present = [m for m in maps if not is_nil(m)]
    if not present:
        return Nil
    result = _as_map("merge", present[0]).copy()
    for m in present[1:]:
        result.update(_as_map("merge", m))
    return result


@builtin
def merge(env: Environment, args: list[Any]) -> Any:
    return merge_maps(args)


@builtin
def into(env: Environment, args: list[Any]) -> Any:
    """(into to from) conjoins every item of `from` onto `to`."""
    _arity("into", args, 2)
    coll = args[0]
    for item in as_items(args[1], "into"):
        coll = conj_one(coll, item)
    return coll


@builtin
def zipmap(env: Environment, args: list[Any]) -> dict:
    _arity("zipmap", args, 2)
    result: dict = {}
    for k, v in zip(as_items(args[0], "zipmap"), as_items(args[1], "zipmap")):
        _put(result, k, v)
    return result


@builtin
def select_keys(env: Environment, args: list[Any]) -> dict:
    _arity("select-keys", args, 2)
    m = _as_map("select-keys", args[0])
    result = m.__class__()
    for k in as_items(args[1], "select-keys"):
        try:
            if k in m:
                result[k] = m[k]
        except TypeError:
            continue
    return result


# -------------------------------
# Printing
# -------------------------------
@builtin
def println(env: Environment, args: list[Any]) -> Any:
    print(" ".join(print_str(x) for x in args))
    return Nil


@builtin
def prn(env: Environment, args: list[Any]) -> Any:
    print(" ".join(pr_str(x) for x in args))
    return Nil


@builtin
def pr_str_builtin(env: Environment, args: list[Any]) -> str:
    return " ".join(pr_str(x) for x in args)


# -------------------------------
# Scoped evaluation
# -------------------------------
@builtin
def contextual_eval_builtin(env: Environment, args: list[Any]) -> Any:
    """(contextual-eval ctx form) evaluates form with ctx's entries as locals.

    Like `eval`, the form runs in the global frame, so earlier `def`s are
    visible but the caller's locals are not.
    """
    _arity("contextual-eval", args, 2)
    # Lazy import: scopeval.contextual builds its core env from this module
    from scopeval.contextual import LET, context_bindings
    ctx, form = args
    if not isinstance(ctx, dict):
        raise EvalTypeError(f"contextual-eval expects a map, got {pr_str(ctx)}")
    bindings = context_bindings(ctx)
    try:
        return evaluate([LET, bindings, form], env.global_frame())
    except RecursionError as exc:
        raise EvaluationDepthError("Expression nests too deeply to evaluate") from exc


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("quot"): quot,
            Symbol("rem"): rem,
            Symbol("mod"): mod,
            Symbol("inc"): inc,
            Symbol("dec"): dec,
            Symbol("max"): max_builtin,
            Symbol("min"): min_builtin,
            Symbol("Math/sqrt"): math_sqrt,
            Symbol("Math/abs"): math_abs,
            Symbol("Math/pow"): math_pow,
            Symbol("="): equals,
            Symbol("not="): not_equals,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("not"): logical_not,
            Symbol("nil?"): is_nil_builtin,
            Symbol("some?"): is_some,
            Symbol("number?"): is_number,
            Symbol("string?"): is_string,
            Symbol("symbol?"): is_symbol,
            Symbol("keyword?"): is_keyword,
            Symbol("map?"): is_map,
            Symbol("vector?"): is_vector,
            Symbol("list?"): is_list,
            Symbol("fn?"): is_fn,
            Symbol("empty?"): is_empty,
            Symbol("zero?"): is_zero,
            Symbol("even?"): is_even,
            Symbol("odd?"): is_odd,
            Symbol("str"): str_builtin,
            Symbol("int"): int_builtin,
            Symbol("double"): double,
            Symbol("symbol"): symbol_builtin,
            Symbol("keyword"): keyword_builtin,
            Symbol("name"): name_builtin,
            Symbol("list"): list_builtin,
            Symbol("vector"): vector,
            Symbol("vec"): vec,
            Symbol("seq"): seq,
            Symbol("first"): first,
            Symbol("second"): second,
            Symbol("last"): last,
            Symbol("rest"): rest,
            Symbol("next"): next_builtin,
            Symbol("cons"): cons,
            Symbol("conj"): conj,
            Symbol("count"): count,
            Symbol("nth"): nth,
            Symbol("concat"): concat,
            Symbol("reverse"): reverse,
            Symbol("range"): range_builtin,
            Symbol("take"): take,
            Symbol("drop"): drop,
            Symbol("map"): map_builtin,
            Symbol("mapcat"): mapcat,
            Symbol("filter"): filter_builtin,
            Symbol("remove"): remove,
            Symbol("reduce"): reduce_builtin,
            Symbol("apply"): apply_builtin,
            Symbol("identity"): identity,
            Symbol("hash-map"): hash_map,
            Symbol("array-map"): array_map,
            Symbol("sorted-map"): sorted_map,
            Symbol("get"): get,
            Symbol("assoc"): assoc,
            Symbol("dissoc"): dissoc,
            Symbol("keys"): keys,
            Symbol("vals"): vals,
            Symbol("contains?"): contains,
            Symbol("find"): find,
            Symbol("merge"): merge,
            Symbol("into"): into,
            Symbol("zipmap"): zipmap,
            Symbol("select-keys"): select_keys,
            Symbol("println"): println,
            Symbol("prn"): prn,
            Symbol("pr-str"): pr_str_builtin,
            Symbol("contextual-eval"): contextual_eval_builtin,
        }
    )
