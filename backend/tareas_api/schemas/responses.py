"""Response Schemas — Pydantic models for the public JSON bodies.

Invariants:
    - MensajeResponse is the RUT endpoint body ({"mensaje": ...})
    - Integral float results serialize as JSON integers (40, not 40.0)
    - Infinite results serialize as null (JSON has no infinity)
"""

import math

from pydantic import BaseModel, field_serializer


class MensajeResponse(BaseModel):
    mensaje: str


class OperacionResponse(BaseModel):
    resultado: int | float | None
    mensaje: str

    @field_serializer("resultado")
    def json_number(self, v: int | float | None) -> int | float | None:
        if isinstance(v, float):
            if not math.isfinite(v):
                return None
            if v.is_integer():
                return int(v)
        return v
