"""Arithmetic Dispatch — name-based dispatch over a closed set of operations.

Invariants:
    - Operation names match exactly: case-sensitive, no trimming
    - Unknown, empty or None names yield None (never raise)
    - division by zero yields NaN inside the dispatcher (not an error)
    - IEEE-754 semantics preserved for inf/NaN operands
    - coerce_operand never raises: anything outside plain decimal/exponent
      notation or a signed "Infinity" becomes NaN
    - is_computed() is false only for None and NaN; infinities are results

Design Decisions:
    - str Enum as the closed set: Operacion(value) does the exact-match lookup
"""

import math
import operator
import re
from enum import Enum
from typing import Callable

Number = int | float

_NUMERIC = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)", re.ASCII)


class Operacion(str, Enum):
    """Supported operations, keyed by their public (Spanish) name."""
    SUMA = "suma"
    RESTA = "resta"
    MULTIPLICACION = "multiplicacion"
    DIVISION = "division"


def _division(a: Number, b: Number) -> float:
    if b == 0:
        return math.nan
    return a / b


_DISPATCH: dict[Operacion, Callable[[Number, Number], Number]] = {
    Operacion.SUMA: operator.add,
    Operacion.RESTA: operator.sub,
    Operacion.MULTIPLICACION: operator.mul,
    Operacion.DIVISION: _division,
}


def parse_operacion(name: object) -> Operacion | None:
    """Resolve a raw operation name, or None when it is not an exact match."""
    if not isinstance(name, str):
        return None
    try:
        return Operacion(name)
    except ValueError:
        return None


def operar(operacion: object, a: Number, b: Number) -> Number | None:
    """Apply the named operation to a and b.

    Returns None when the name is not one of the four recognised operations.
    """
    op = parse_operacion(operacion)
    if op is None:
        return None
    return _DISPATCH[op](a, b)


def coerce_operand(raw: str | None) -> float:
    """Coerce a raw query value to a float; missing or non-numeric -> NaN."""
    if raw is None:
        return math.nan
    text = raw.strip()
    if not _NUMERIC.fullmatch(text):
        return math.nan
    return float(text)


def is_computed(result: Number | None) -> bool:
    """True unless the dispatcher produced no result or NaN."""
    if result is None:
        return False
    return not math.isnan(result)
