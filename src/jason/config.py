from __future__ import annotations

import codecs
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class JasonConfig(BaseModel):
    """Runtime settings shared by the codec, the I/O adapters and logging."""

    model_config = ConfigDict(validate_assignment=True)

    indent: int = Field(default=2, ge=0)
    ensure_ascii: bool = True
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls) -> "JasonConfig":
        return cls(
            indent=os.getenv("JASON_INDENT", "2"),
            ensure_ascii=_env_bool("JASON_ENSURE_ASCII", True),
            encoding=os.getenv("JASON_ENCODING", "utf-8"),
            log_level=os.getenv("JASON_LOG_LEVEL", "INFO"),
        )


JASON_CONFIG = JasonConfig.from_env()


__all__ = ["JASON_CONFIG", "JasonConfig"]
