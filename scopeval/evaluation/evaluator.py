"""Core evaluator for scopeval.

Dispatches special forms through the SPECIAL_FORMS table, resolves symbols
through the environment chain, evaluates vector and map literals element-wise
and hands everything else in call position to the application engine.
"""

from __future__ import annotations

from scopeval import SExpression, LispValue
from scopeval.evaluation.apply import apply
from scopeval.evaluation.special_forms import SPECIAL_FORMS
from scopeval.types.environment import Environment
from scopeval.types.map_form import MapForm, build_map
from scopeval.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one form in `env` and return its value."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    if isinstance(expr, list):
        if not expr:
            return []
        head, *tail_args = expr
        # --- Special forms handling ---
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)
        fn = evaluate(head, env)
        args = [evaluate(arg, env) for arg in tail_args]
        return apply(fn, args, env, evaluate)

    # Vector literal: evaluate each element
    if isinstance(expr, tuple):
        return tuple(evaluate(item, env) for item in expr)

    # Map literal: evaluate keys and values, keep the map flavour
    if isinstance(expr, dict):
        return build_map(
            ((evaluate(k, env), evaluate(v, env)) for k, v in expr.items()),
            expr.__class__,
        )

    if isinstance(expr, MapForm):
        return build_map((evaluate(k, env), evaluate(v, env)) for k, v in expr.pairs)

    # --- Atoms return as-is ---
    return expr
