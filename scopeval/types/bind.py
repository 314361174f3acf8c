from __future__ import annotations

from typing import TYPE_CHECKING

from scopeval import LispValue, SExpression
from scopeval.errors import ArityError, InvalidBindingFormError
from scopeval.types.environment import Environment
from scopeval.types.nil import Nil
from scopeval.types.seq import as_items
from scopeval.types.symbol import Symbol

if TYPE_CHECKING:
    from scopeval.types.lambda_fn import Fn

REST_MARKER = Symbol("&")


def split_rest(targets: tuple) -> tuple[list[SExpression], SExpression | None]:
    """Split a binding vector into leading targets and the optional `& rest` target."""
    targets = list(targets)
    if REST_MARKER not in targets:
        return targets, None
    idx = targets.index(REST_MARKER)
    after = targets[idx + 1:]
    if len(after) != 1:
        raise InvalidBindingFormError("'&' must be followed by exactly one binding target")
    return targets[:idx], after[0]


def destructure(target: SExpression, value: LispValue, env: Environment) -> None:
    """
    Bind `value` to `target` in `env`.

    A Symbol target binds directly. A vector target destructures a sequential
    value positionally; missing positions bind to nil and `& name` captures
    the remaining items as a list (nil when none remain).
    """
    if isinstance(target, Symbol):
        if target == REST_MARKER:
            raise InvalidBindingFormError("'&' cannot be bound as a name")
        env.define(target, value)
        return

    if isinstance(target, tuple):
        items = as_items(value, "destructure")
        leading, rest = split_rest(target)
        for i, sub in enumerate(leading):
            destructure(sub, items[i] if i < len(items) else Nil, env)
        if rest is not None:
            remaining = items[len(leading):]
            destructure(rest, remaining if remaining else Nil, env)
        return

    raise InvalidBindingFormError(f"Unsupported binding form: {target!r}")


def bind_arguments(fn: Fn, supplied_args: list[LispValue]) -> Environment:
    """
    Single source of truth for parameter binding.

    Supports:
    - Positional required parameters (symbols or destructuring vectors)
    - `& rest` capturing the remaining arguments as a list, or nil

    Returns a new Environment whose outer is the closure environment. A named
    function also sees its own name in that frame so it can recurse.
    """
    leading, rest = split_rest(fn.params)
    provided = len(supplied_args)
    if provided < len(leading) or (rest is None and provided > len(leading)):
        label = fn.name if fn.name is not None else "fn"
        raise ArityError(f"Wrong number of args ({provided}) passed to: {label}")

    local_env = Environment(outer=fn.env)
    if fn.name is not None:
        local_env.define(fn.name, fn)
    for target, value in zip(leading, supplied_args):
        destructure(target, value, local_env)
    if rest is not None:
        remaining = list(supplied_args[len(leading):])
        destructure(rest, remaining if remaining else Nil, local_env)
    return local_env
