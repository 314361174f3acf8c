"""Scoped evaluation: run an expression with an explicit binding context.

`evaluate(context, expression)` wraps the expression in a `let` whose bindings
are the context entries, each value quoted so it is bound as-is, and evaluates
that form in a fresh frame over the shared core environment:

    (let [k1 (quote v1) k2 (quote v2) ...] expression)

The core environment (builtins plus prelude) is built once per process and
frozen, so nothing an expression defines can outlive the call.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from scopeval import LispValue, SExpression
from scopeval.builtins import register
from scopeval.config import get_prelude_path
from scopeval.errors import BindingError, EvaluationDepthError, ReaderError
from scopeval.evaluation.evaluator import evaluate as evaluate_form
from scopeval.evaluation.special_forms import SPECIAL_FORMS
from scopeval.expr import EXPR_TYPES, lower
from scopeval.reader.parser import lex, parse_atom, read_all
from scopeval.types.bind import REST_MARKER
from scopeval.types.environment import Environment
from scopeval.types.symbol import Symbol

logger = logging.getLogger(__name__)

LET = Symbol("let")
QUOTE = Symbol("quote")

_core_env: Optional[Environment] = None
_core_lock = threading.Lock()


def load_prelude(env: Environment, path: Path) -> None:
    """Read and evaluate every form of the prelude file into `env`."""
    code = path.read_text(encoding="utf-8")
    forms = read_all(code)
    for form in forms:
        evaluate_form(form, env)
    logger.debug("Loaded %d prelude forms from %s", len(forms), path)


def build_core_environment() -> Environment:
    """Create the builtins-plus-prelude environment and freeze it."""
    env = Environment()
    register(env)
    path = get_prelude_path()
    if path is None:
        logger.debug("Prelude disabled")
    elif not path.is_file():
        logger.warning("Prelude file %s not found; continuing without it", path)
    else:
        load_prelude(env, path)
    return env.freeze()


def core_environment() -> Environment:
    """Return the shared core environment, building it on first use."""
    global _core_env
    if _core_env is None:
        with _core_lock:
            if _core_env is None:
                _core_env = build_core_environment()
                logger.debug("Core environment ready with %d bindings", len(_core_env.vars))
    return _core_env


def reset_core_environment() -> None:
    """Drop the cached core environment so the next call rebuilds it."""
    global _core_env
    with _core_lock:
        _core_env = None


def binding_name(key: object) -> Symbol:
    """Validate a context key and return it as a Symbol.

    Raises BindingError when the key could not be written as a local name.
    """
    if isinstance(key, Symbol):
        name = key.id
    elif isinstance(key, str):
        name = key
    else:
        raise BindingError(f"Context key {key!r} must be a symbol or string")

    try:
        tokens = list(lex(name))
    except ReaderError as exc:
        raise BindingError(f"Context key {name!r} is not a valid name") from exc
    if tokens != [("atom", name)]:
        raise BindingError(f"Context key {name!r} is not a valid name")
    try:
        parsed = parse_atom(name)
    except ReaderError as exc:
        raise BindingError(f"Context key {name!r} is not a valid name") from exc
    if not isinstance(parsed, Symbol):
        raise BindingError(f"Context key {name!r} reads as {type(parsed).__name__}, not a name")
    if parsed == REST_MARKER or parsed in SPECIAL_FORMS:
        raise BindingError(f"Context key {name!r} is reserved")
    if "/" in name and name != "/":
        raise BindingError(f"Context key {name!r} is namespace-qualified")
    return parsed


def context_bindings(context: Mapping) -> tuple:
    """Build the `let` binding vector for `context`; all keys are checked first."""
    if not isinstance(context, Mapping):
        raise BindingError(f"Context must be a mapping, got {type(context).__name__}")
    names = [(binding_name(k), v) for k, v in context.items()]
    seen: set[Symbol] = set()
    bindings: list[SExpression] = []
    for name, value in names:
        if name in seen:
            raise BindingError(f"Context binds {name} more than once")
        seen.add(name)
        bindings.extend([name, [QUOTE, value]])
    return tuple(bindings)


def evaluate(context: Mapping, expression: SExpression) -> LispValue:
    """
    Evaluate `expression` with the entries of `context` bound as locals.

    `expression` may be a tagged tree (`Literal`, `Ref`, `Seq`, `MapNode`) or
    an already-read form. Context values are bound literally, never
    evaluated.

    Raises BindingError before evaluation if a key is not a usable name, and
    EvaluationError (or a subclass) if evaluation fails.
    """
    bindings = context_bindings(context)
    form = lower(expression) if isinstance(expression, EXPR_TYPES) else expression
    scope = Environment(outer=core_environment())
    try:
        return evaluate_form([LET, bindings, form], scope)
    except RecursionError as exc:
        raise EvaluationDepthError("Expression nests too deeply to evaluate") from exc


contextual_eval = evaluate
