from scopeval import SExpression, EvaluatorFn
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil, is_truthy


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    (nil or false) is found, which is returned immediately. If all operands are
    truthy, returns the value of the last operand. With zero operands, returns true.
    """
    result: SExpression = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_truthy(result):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, returns the value of the last operand.
    With zero operands, returns nil.
    """
    result: SExpression = Nil
    for expr in tail:
        result = evaluate_fn(expr, env)
        if is_truthy(result):
            return result
    return result
