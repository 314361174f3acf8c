"""Runtime environment for scopeval.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. A frame can be frozen once populated; the
shared core environment (builtins plus prelude) is frozen so that no
evaluation can leak a definition into it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from scopeval import LispValue
from scopeval.errors import BindingError, UnboundSymbolError, FrozenEnvironmentError
from scopeval.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer", "frozen")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        self.frozen: bool = False

    def freeze(self) -> Environment:
        self.frozen = True
        return self

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises BindingError if `name` is not a Symbol and
        FrozenEnvironmentError if this frame is frozen.
        """
        if not isinstance(name, Symbol):
            raise BindingError(f"Cannot bind {name!r}: not a symbol")
        if self.frozen:
            raise FrozenEnvironmentError(f"Cannot define {name} in the core environment")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundSymbolError if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(name)
        return env.vars[name]

    def global_frame(self) -> Environment:
        """Return the outermost writable frame of this chain.

        Evaluations run in a per-call frame whose parent is the frozen core
        environment; that per-call frame is where `def` and `eval` act.
        """
        env = self
        while env.outer is not None and not env.outer.frozen:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            if self.frozen:
                buffer.write(f"<core: {len(self.vars)} bindings>")
            else:
                self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the core frame is summarised."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            if env.frozen:
                chain.append(f"<core: {len(env.vars)} bindings>")
            else:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
