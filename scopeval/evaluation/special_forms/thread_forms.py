from scopeval import EvaluatorFn
from scopeval import SExpression, LispValue
from scopeval.errors import ArityError
from scopeval.types.environment import Environment


def thread(tail: list[SExpression], last: bool) -> SExpression:
    """Weave each form into the next, as first argument or as last argument.

    A step that is not a list, e.g. `str`, is treated as `(str)`.
    """
    if not tail:
        raise ArityError("threading forms require an initial expression")
    acc, *steps = tail
    for step in steps:
        if isinstance(step, list) and step:
            head, *args = step
            acc = [head, *args, acc] if last else [head, acc, *args]
        else:
            acc = [step, acc]
    return acc


def thread_first_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (-> x (f a) g) => (g (f x a))
    return evaluate_fn(thread(tail, last=False), env)


def thread_last_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (->> x (f a) g) => (g (f a x))
    return evaluate_fn(thread(tail, last=True), env)
