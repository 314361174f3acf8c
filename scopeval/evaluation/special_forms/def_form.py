from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError, InvalidBindingFormError
from scopeval.evaluation.special_forms.fn_form import make_fn
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil
from scopeval.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value?)
    Binds in the evaluation's global frame, never in the shared core
    environment. Returns the bound name.
    """
    if len(tail) not in (1, 2):
        raise ArityError("def requires a name and an optional value")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise InvalidBindingFormError(f"def requires a symbol, got {name!r}")
    value = evaluate_fn(tail[1], env) if len(tail) == 2 else Nil
    env.global_frame().define(name, value)
    return name


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defn name "doc"? [params] body...)"""
    if not tail or not isinstance(tail[0], Symbol):
        raise InvalidBindingFormError("defn requires a symbol name")
    name, rest = tail[0], list(tail[1:])
    if rest and isinstance(rest[0], str):
        rest = rest[1:]  # docstring
    fn = make_fn(rest, env, name)
    env.global_frame().define(name, fn)
    return name
