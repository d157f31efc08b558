"""Error Hierarchy — typed, categorized exceptions for all Tareas API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it is rendered with
    - to_response() produces the public JSON body for that status; each concrete
      error defines its own, since the public bodies are fixed
      ({"mensaje": ...} / {"resultado", "mensaje"})
"""

from enum import Enum

from tareas_api.core.messages import RUT_INVALIDO, OPERACION_NO_CALCULADA


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


class TareasError(Exception):
    """Base exception for all Tareas API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        raise NotImplementedError


# ─── Domain Errors ──────────────────────────────────────────────

class InvalidRutError(TareasError):
    """RUT missing, malformed, or rejected by the checksum library."""
    def __init__(self, rut: str | None):
        super().__init__(
            f"Invalid RUT: {rut!r}",
            "INVALID_RUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.rut = rut

    def to_response(self) -> dict:
        return {"mensaje": RUT_INVALIDO}


class OperationNotComputedError(TareasError):
    """Arithmetic dispatch produced no usable result.

    Covers unknown operation names, non-numeric operands and
    NaN results (division by zero). Rendered as 502.
    """
    def __init__(self, operacion: str | None):
        super().__init__(
            f"Operation {operacion!r} could not be calculated",
            "OPERATION_NOT_COMPUTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, 502,
        )
        self.operacion = operacion

    def to_response(self) -> dict:
        return {"resultado": None, "mensaje": OPERACION_NO_CALCULADA}
