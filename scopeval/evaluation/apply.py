"""Application engine for scopeval.

This module centralizes function application semantics:
- Closures (`Fn`) bind their parameters in a new frame and run their body.
- Keywords, maps and vectors are functions of their keys/indices.
- Builtins marked with `@builtin` are called with the runtime env and the
  argument list; any other Python callable is called with the arguments
  spread, so host functions can be passed in through a binding context.
- Anything else in call position raises NotCallableError.

Keeping this logic in one place prevents duplication between the evaluator,
special forms, and builtin helpers.
"""

from __future__ import annotations

from typing import Callable

from scopeval import LispValue, EvaluatorFn
from scopeval.errors import ArityError, EvalTypeError, EvaluationError, NotCallableError, ScopevalError
from scopeval.printer import pr_str
from scopeval.types.environment import Environment
from scopeval.types.lambda_fn import Fn
from scopeval.types.nil import Nil
from scopeval.types.symbol import Keyword


def builtin(fn: Callable[[Environment, list[LispValue]], LispValue]):
    """Mark a Python function as using the builtin `(env, args)` protocol."""
    fn._scopeval_builtin = True
    return fn


def is_builtin(fn: object) -> bool:
    return callable(fn) and getattr(fn, "_scopeval_builtin", False)


def lookup_key(coll: LispValue, key: LispValue, default: LispValue = Nil) -> LispValue:
    """`get` semantics shared by maps, keywords and vectors in call position."""
    if isinstance(coll, dict):
        try:
            return coll.get(key, default)
        except TypeError:
            # An unhashable key can never be present
            return default
    if isinstance(coll, (tuple, str)) and isinstance(key, int) and not isinstance(key, bool):
        return coll[key] if 0 <= key < len(coll) else default
    return default


def _lookup_args(label: str, args: list[LispValue]) -> None:
    if len(args) not in (1, 2):
        raise ArityError(f"Wrong number of args ({len(args)}) passed to: {label}")


def apply_fn(fn: Fn, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure: bind parameters, then evaluate body forms in order."""
    fn_env = fn.extend_env(args)
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, fn_env)
    return result


def apply(
    head: Fn | Keyword | dict | tuple | Callable | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `head` to already-evaluated `args`."""
    if isinstance(head, Fn):
        return apply_fn(head, args, evaluate_fn)

    if isinstance(head, Keyword):
        _lookup_args(str(head), args)
        return lookup_key(args[0], head, args[1] if len(args) > 1 else Nil)

    if isinstance(head, dict):
        _lookup_args("map", args)
        return lookup_key(head, args[0], args[1] if len(args) > 1 else Nil)

    if isinstance(head, tuple):
        if len(args) != 1:
            raise ArityError(f"Wrong number of args ({len(args)}) passed to: vector")
        index = args[0]
        if not isinstance(index, int) or isinstance(index, bool):
            raise EvalTypeError("Vector index must be an integer")
        if not 0 <= index < len(head):
            raise EvaluationError(f"Index {index} out of bounds for vector of length {len(head)}")
        return head[index]

    if callable(head):
        try:
            if is_builtin(head):
                return head(env, args)
            return head(*args)
        except ScopevalError:
            raise
        except (TypeError, ValueError, ArithmeticError, LookupError) as exc:
            name = getattr(head, "__name__", repr(head))
            raise EvalTypeError(f"Error calling {name}: {exc}") from exc

    raise NotCallableError(head, pr_str(head))
