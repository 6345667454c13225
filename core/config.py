"""
Pydantic-based configuration for the port prober.

Every knob is exposed via environment variables (prefix PORTSCAN_) or a
local .env file, so defaults can be changed without touching the CLI.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# select() deadlines overflow past a signed 32-bit millisecond count
MAX_TIMEOUT_MS = 2**31 - 1


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, env_file=".env", env_prefix="PORTSCAN_")

    # Defaults for omitted arguments / blank prompt answers
    default_start_port: int = Field(1, description="first port scanned when none is given")
    default_end_port: int = Field(100, description="last port scanned when none is given")
    default_timeout_ms: int = Field(300, ge=0, le=MAX_TIMEOUT_MS, description="per-port connect deadline")

    # Diagnostics go to stderr, never to the report on stdout
    log_level: str = Field("WARNING", description="standard logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError("log_level must be a standard logging level name")
        return v


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
