from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError, InvalidBindingFormError
from scopeval.types.bind import split_rest
from scopeval.types.environment import Environment
from scopeval.types.lambda_fn import Fn
from scopeval.types.symbol import Symbol


def make_fn(
    tail: list[SExpression],
    env: Environment,
    name: Symbol | None = None,
) -> Fn:
    """Build a closure from `[params] body...`, validating the parameter vector."""
    if not tail:
        raise ArityError("fn requires a parameter vector")
    params = tail[0]
    if not isinstance(params, tuple):
        raise InvalidBindingFormError("fn parameters must be a vector")
    # Validate the shape of `& rest` now rather than on first call
    split_rest(params)
    return Fn(params, list(tail[1:]), env, name)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn [params] body...) or (fn name [params] body...)
    # A name is bound inside the body so the function can call itself.
    if tail and isinstance(tail[0], Symbol):
        return make_fn(tail[1:], env, tail[0])
    return make_fn(tail, env)
