"""RUT Validation Route — maps the validator's boolean to 200 / 400.

Invariants:
    - valid → 200 {"mensaje": "rut valido"}
    - invalid, empty, missing or whitespace-padded → 400 {"mensaje": "rut invalido"}
    - Errors raised by the validation library are not caught here (catch-all → 500)
"""

from fastapi import APIRouter, Depends, Query

from tareas_api.core.errors import InvalidRutError
from tareas_api.core.messages import RUT_VALIDO
from tareas_api.schemas.responses import MensajeResponse
from tareas_api.services.app_service import AppService, get_app_service

router = APIRouter(tags=["rut"])


@router.get(
    "/validate-rut",
    response_model=MensajeResponse,
    responses={400: {"model": MensajeResponse}},
)
async def validate_rut(
    rut: str | None = Query(None),
    service: AppService = Depends(get_app_service),
):
    """Validate a Chilean RUT (e.g. 11111111-1)."""
    if not service.validate_rut(rut):
        raise InvalidRutError(rut)
    return MensajeResponse(mensaje=RUT_VALIDO)
