from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError
from scopeval.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (eval form)
    The argument is evaluated where it appears; the resulting form is then
    evaluated in the global frame, so local bindings are not visible to it.
    """
    if len(tail) != 1:
        raise ArityError("eval expects exactly one argument")
    expr_to_eval = evaluate_fn(tail[0], env)
    return evaluate_fn(expr_to_eval, env.global_frame())
