"""Arithmetic Route — GET /operaciones?operacion=&a=&b=.

Invariants:
    - a and b are read as raw strings and coerced here (missing/non-numeric → NaN)
    - No result (None) or NaN → 502 {"resultado": null, "mensaje": "operacion no pudo ser calculada"}
    - Any other result → 200 {"resultado": x, "mensaje": "operacion exitosa"};
      zero and negatives included, infinities rendered as null
"""

import logging

from fastapi import APIRouter, Query

from tareas_api.core.arithmetic import coerce_operand, is_computed, operar
from tareas_api.core.errors import OperationNotComputedError
from tareas_api.core.messages import OPERACION_EXITOSA
from tareas_api.schemas.responses import OperacionResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["operaciones"])


@router.get(
    "/operaciones",
    response_model=OperacionResponse,
    responses={502: {"model": OperacionResponse}},
)
async def operaciones(
    operacion: str | None = Query(None),
    a: str | None = Query(None),
    b: str | None = Query(None),
):
    """Apply suma / resta / multiplicacion / division to a and b."""
    resultado = operar(operacion, coerce_operand(a), coerce_operand(b))
    if not is_computed(resultado):
        raise OperationNotComputedError(operacion)

    logger.debug(
        f"Computed {operacion}({a}, {b}) = {resultado}",
        extra={"operacion": operacion},
    )
    return OperacionResponse(resultado=resultado, mensaje=OPERACION_EXITOSA)
