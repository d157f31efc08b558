"""Response Messages — fixed Spanish strings returned in public response bodies.

Invariants:
    - Clients match on these exact strings; they are part of the HTTP contract
"""

RUT_VALIDO = "rut valido"
RUT_INVALIDO = "rut invalido"

OPERACION_EXITOSA = "operacion exitosa"
OPERACION_NO_CALCULADA = "operacion no pudo ser calculada"
