"""Runtime values for Eldiro.

Evaluation produces one of two values: a signed integer wrapped in
`NumberVal`, or `UnitVal` for statements that have no result (a `let`,
a `fn`, or an empty block). Values are frozen and compared by content,
so they can be copied between environments freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import EvalError


@dataclass(frozen=True)
class NumberVal:
    value: int

    def __repr__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnitVal:
    """Marker value for statements without a result."""
    def __repr__(self) -> str:
        return '()'


Value = Union[NumberVal, UnitVal]


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero rather than toward negative infinity."""
    if b == 0:
        raise EvalError('attempt to divide by zero')
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def type_name(value: Value) -> str:
    return 'Number' if isinstance(value, NumberVal) else 'Unit'
