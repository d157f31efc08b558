"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - load_configuration() reads the process environment at call time (never cached)
    - get_settings() is cached (lru_cache), one instance per process injected via Depends
    - Numeric fields: missing -> default, present but not a base-10 integer -> NaN
    - String fields: present (even empty) -> verbatim, missing -> default

Design Decisions:
    - No .env file: the process environment is the only source
"""

import math
import re
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INTEGER = re.compile(r"[+-]?\d+")


def parse_int_or_nan(value: object) -> int | float:
    """Base-10 integer parse; anything unparseable becomes NaN."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
    return math.nan


class DatabaseSettings(BaseModel):
    """Database connection scaffolding (no consumer in this service)."""
    host: str = "localhost"
    port: int | float = 5432


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False, populate_by_name=True, frozen=True,
    )

    port: int | float = 3000
    username: str = ""
    apikey: str = Field(default="", validation_alias="API_KEY")

    # Database
    database_host: str = "localhost"
    database_port: int | float = 5432

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("port", "database_port", mode="before")
    @classmethod
    def integer_or_nan(cls, v: object) -> int | float:
        return parse_int_or_nan(v)

    @property
    def database(self) -> DatabaseSettings:
        return DatabaseSettings(host=self.database_host, port=self.database_port)

    def as_dict(self) -> dict:
        """The public configuration shape: port, username, apikey, database."""
        return {
            "port": self.port,
            "username": self.username,
            "apikey": self.apikey,
            "database": self.database.model_dump(),
        }


def load_configuration() -> Settings:
    """Build a fresh Settings from the current process environment."""
    return Settings()


@lru_cache
def get_settings() -> Settings:
    return load_configuration()
