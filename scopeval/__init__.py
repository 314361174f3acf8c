# Core type aliases for the scopeval data model.
# Forms (code-as-data) and runtime values share plain Python types: lists for
# list forms, tuples for vectors, dicts for maps, Symbol/Keyword for names.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms: (form, env) -> value
EvaluatorFn = Callable[..., LispValue]

# Public API. Imported last so the aliases above exist for submodules.
from scopeval.errors import (  # noqa: E402
    ScopevalError,
    EvaluationError,
    BindingError,
    ReaderError,
)
from scopeval.contextual import evaluate, contextual_eval  # noqa: E402
from scopeval.reader.parser import read, read_all  # noqa: E402
from scopeval.expr import Literal, Ref, Seq, MapNode, lift, lower, read_expr  # noqa: E402
from scopeval.printer import pr_str  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "ScopevalError",
    "EvaluationError",
    "BindingError",
    "ReaderError",
    "evaluate",
    "contextual_eval",
    "read",
    "read_all",
    "read_expr",
    "Literal",
    "Ref",
    "Seq",
    "MapNode",
    "lift",
    "lower",
    "pr_str",
]
