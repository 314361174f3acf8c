from scopeval import SExpression, LispValue, EvaluatorFn
from scopeval.errors import ArityError, EvalTypeError, UnquoteError
from scopeval.types.environment import Environment
from scopeval.types.map_form import MapForm, build_map
from scopeval.types.seq import as_items
from scopeval.types.symbol import Symbol

SYNTAX_QUOTE = Symbol("syntax-quote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def _quote_head(form: SExpression) -> Symbol | None:
    if isinstance(form, list) and len(form) == 2 and isinstance(form[0], Symbol):
        if form[0] in (SYNTAX_QUOTE, UNQUOTE, UNQUOTE_SPLICING):
            return form[0]
    return None


def eval_syntax_quote(
    evaluate_fn: EvaluatorFn,
    expr: SExpression,
    env: Environment,
    depth: int = 1,
) -> SExpression:
    """Build the structure described by a syntax-quoted template.

    Each nested syntax-quote raises `depth` and each unquote lowers it; only
    unquotes that bring it to zero are evaluated. Shallower ones are rebuilt
    as data so a later evaluation can process them.
    """
    head = _quote_head(expr)
    if head == SYNTAX_QUOTE:
        return [SYNTAX_QUOTE, eval_syntax_quote(evaluate_fn, expr[1], env, depth + 1)]
    if head == UNQUOTE:
        if depth == 1:
            return evaluate_fn(expr[1], env)
        return [UNQUOTE, eval_syntax_quote(evaluate_fn, expr[1], env, depth - 1)]
    if head == UNQUOTE_SPLICING:
        if depth == 1:
            raise UnquoteError("unquote-splicing used outside of a list or vector")
        return [UNQUOTE_SPLICING, eval_syntax_quote(evaluate_fn, expr[1], env, depth - 1)]

    if isinstance(expr, (list, tuple)):
        result_list = []
        for item in expr:
            if depth == 1 and _quote_head(item) == UNQUOTE_SPLICING:
                spliced_val = evaluate_fn(item[1], env)
                try:
                    result_list.extend(as_items(spliced_val, "unquote-splicing"))
                except EvalTypeError as exc:
                    raise EvalTypeError("unquote-splicing must produce a sequence") from exc
                continue
            result_list.append(eval_syntax_quote(evaluate_fn, item, env, depth))
        return result_list if isinstance(expr, list) else tuple(result_list)

    if isinstance(expr, dict):
        return build_map(
            (
                (eval_syntax_quote(evaluate_fn, k, env, depth), eval_syntax_quote(evaluate_fn, v, env, depth))
                for k, v in expr.items()
            ),
            expr.__class__,
        )

    if isinstance(expr, MapForm):
        return MapForm(
            [
                (eval_syntax_quote(evaluate_fn, k, env, depth), eval_syntax_quote(evaluate_fn, v, env, depth))
                for k, v in expr.pairs
            ]
        )

    # Atoms (symbols included) are returned as-is
    return expr


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ArityError("quote expects exactly 1 argument")
    return tail[0]


def syntax_quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ArityError("syntax-quote expects exactly 1 argument")
    # Returns the constructed data structure; it is not evaluated here.
    return eval_syntax_quote(evaluate_fn, tail[0], env)


def unquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    raise UnquoteError("unquote not valid outside of syntax-quote")


def unquote_splice_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    raise UnquoteError("unquote-splicing not valid outside of syntax-quote")
