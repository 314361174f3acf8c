"""Function values for scopeval: closures created by `fn` and `defn`."""

from __future__ import annotations

from io import StringIO

from scopeval import SExpression, LispValue
from scopeval.types.environment import Environment
from scopeval.types.symbol import Symbol


class Fn:
    """A first-class closure with a parameter vector, body forms, and closure env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: tuple,
        body: list[SExpression],
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: tuple = params
        self.body: list[SExpression] = body
        self.env: Environment = env
        self.name: Symbol | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<fn")
            if self.name is not None:
                buffer.write(f" {self.name}")
            buffer.write(" [")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write("]>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this function's parameters and
        return a new Environment for evaluating the body.

        Delegates to the shared binder in scopeval.types.bind so that `fn`
        parameters and `let` bindings destructure the same way.
        """
        from scopeval.types.bind import bind_arguments
        return bind_arguments(self, list(args))
