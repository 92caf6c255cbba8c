"""Result and settings models."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from .parse import U64_MAX


class ProbeResult(BaseModel):
    """Values produced by one probe run."""

    value: int = Field(ge=0, le=U64_MAX)
    line: str

    def render(self) -> str:
        """Format as ``{<value>}{<line>}`` with no trailing newline."""

        return f"{{{self.value}}}{{{self.line}}}"


class ProbeSettings(BaseModel):
    """Runtime settings for a CLI invocation."""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        """Normalize and validate a logging level name."""

        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


__all__ = ["ProbeResult", "ProbeSettings"]
