from typing import Dict, Optional

from .errors import LoxRuntimeError
from .types import LiteralValue


class Environment:
    """A scope mapping variable names to values, linked to its enclosing scope."""
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, LiteralValue] = {}

    def define(self, name: str, value: LiteralValue):
        # redefinition in the same scope simply overwrites
        self.values[name] = value

    def get(self, name: str) -> LiteralValue:
        env = self
        while env is not None:
            if name in env.values:
                return env.values[name]
            env = env.enclosing
        raise LoxRuntimeError(f"Undefined variable '{name}'.")

    def assign(self, name: str, value: LiteralValue):
        # Mutate the nearest scope that already binds `name`; never shadow
        env = self
        while env is not None:
            if name in env.values:
                env.values[name] = value
                return
            env = env.enclosing
        raise LoxRuntimeError(f"Undefined variable '{name}'.")

    def depth(self) -> int:
        """Number of enclosing scopes (0 for the global scope)."""
        count = 0
        env = self.enclosing
        while env is not None:
            count += 1
            env = env.enclosing
        return count
