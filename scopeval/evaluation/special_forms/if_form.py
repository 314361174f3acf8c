from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil, is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil


def when_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(when test body...) runs body as an implicit do when test is truthy."""
    if not tail:
        raise ArityError("when requires a condition")
    result: LispValue = Nil
    if is_truthy(evaluate_fn(tail[0], env)):
        for e in tail[1:]:
            result = evaluate_fn(e, env)
    return result
