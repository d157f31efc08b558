"""App Service — greeting, API-key echo, and RUT validation.

Invariants:
    - get_hello / get_apikey echo configured values verbatim (empty included)
    - validate_rut rejects None, empty and whitespace-containing input before delegating
    - Delegate errors propagate untouched (no local recovery)
"""

from fastapi import Depends

from tareas_api.config import Settings, get_settings
from tareas_api.infrastructure.rut_validator import is_valid_rut


class AppService:
    """Configuration-backed greeting handlers plus the RUT check."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_hello(self) -> str:
        return "Hello " + self.settings.username + "!!"

    def get_apikey(self) -> str:
        return self.settings.apikey + "!!"

    def validate_rut(self, rut: str | None) -> bool:
        """True only when the delegate accepts the RUT as given."""
        if not rut or any(ch.isspace() for ch in rut):
            return False
        return is_valid_rut(rut)


def get_app_service(settings: Settings = Depends(get_settings)) -> AppService:
    """FastAPI dependency: one AppService per request over the cached Settings."""
    return AppService(settings)
