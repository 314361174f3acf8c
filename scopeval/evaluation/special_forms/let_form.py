from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError, InvalidBindingFormError
from scopeval.types.bind import destructure
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let [name1 init1 name2 init2 ...] body...)

    Bindings are made left to right in one new frame, so later inits see
    earlier names and a repeated name shadows its earlier binding. Targets may
    be symbols or destructuring vectors.
    """
    if not tail:
        raise ArityError("let requires a binding vector")
    bindings = tail[0]
    if not isinstance(bindings, tuple):
        raise InvalidBindingFormError("let requires a vector for its bindings")
    if len(bindings) % 2:
        raise InvalidBindingFormError("let requires an even number of forms in its binding vector")

    local_env = Environment(outer=env)
    for target, init in zip(bindings[::2], bindings[1::2]):
        destructure(target, evaluate_fn(init, local_env), local_env)

    result: LispValue = Nil
    for e in tail[1:]:
        result = evaluate_fn(e, local_env)
    return result
