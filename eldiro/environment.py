from __future__ import annotations

from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from eldiro.errors import EvalError
from eldiro.types import Value

if TYPE_CHECKING:
    from eldiro.ast import Expr


class Environment:
    """A scope mapping names to values and to function definitions.

    Lookups fall through to the parent chain; stores only ever touch
    this scope's own mappings, so a child can read but never change what
    its ancestors hold.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.bindings: Dict[str, Value] = {}
        self.funcs: Dict[str, Tuple[List[str], 'Expr']] = {}

    def create_child(self) -> 'Environment':
        return Environment(parent=self)

    def store_binding(self, name: str, value: Value):
        self.bindings[name] = value

    def get_binding(self, name: str) -> Value:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.parent
        raise EvalError(f"binding with name '{name}' does not exist")

    def store_func(self, name: str, params: List[str], body: 'Expr'):
        self.funcs[name] = (list(params), body)

    def get_func(self, name: str) -> Tuple[List[str], 'Expr']:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.funcs:
                params, body = env.funcs[name]
                return list(params), body
            env = env.parent
        raise EvalError(f"function with name '{name}' does not exist")

    @property
    def depth(self) -> int:
        # Number of ancestors; used for debug tracing.
        return 0 if self.parent is None else self.parent.depth + 1
