"""RUT Validator — thin wrapper over python-stdnum's Chilean RUT checksum validation.

Invariants:
    - Decision logic lives entirely in stdnum.cl.rut (format + mod-11 check digit)
    - Errors raised by the library are NOT caught here; they propagate to the caller
"""

from stdnum.cl import rut as _rut


def is_valid_rut(value: str) -> bool:
    """Delegate to stdnum; any falsy result means invalid."""
    return bool(_rut.is_valid(value))
