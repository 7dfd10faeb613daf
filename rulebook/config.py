import os
from functools import lru_cache
from typing import Literal
from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: LogLevel = "INFO"

    # store opening window, local hours, [opening_hour, closing_hour)
    opening_hour: int = Field(default=8, ge=0, le=23)
    closing_hour: int = Field(default=20, ge=1, le=24)

    holiday_discount: float = Field(default=0.2, ge=0, lt=1)

    @classmethod
    def from_env(cls) -> "Settings":
        overrides = {}
        if "RULEBOOK_HOST" in os.environ:
            overrides["host"] = os.environ["RULEBOOK_HOST"]
        if "RULEBOOK_PORT" in os.environ:
            overrides["port"] = os.environ["RULEBOOK_PORT"]
        if "RULEBOOK_LOG_LEVEL" in os.environ:
            overrides["log_level"] = os.environ["RULEBOOK_LOG_LEVEL"].upper()
        # pydantic coerces the string values (e.g. port)
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
