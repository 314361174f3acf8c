from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
