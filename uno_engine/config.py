"""Validation schema for the UNO service configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServiceConfig(BaseModel):
    tokens: dict[str, int] = Field(
        default_factory=lambda: {"hash": 10000},
        description="Authorization cookie value mapped to the caller's uid.",
    )
    max_games: int = Field(100, ge=1, description="Game ids are drawn from [0, max_games).")
    seed: Optional[int] = Field(None, description="Seed for game id allocation and per-game card draws.")
    log_level: str = Field("INFO", description="Root logging level used by the serve script.")

    @field_validator("tokens")
    @classmethod
    def validate_tokens(cls, value: dict[str, int]) -> dict[str, int]:
        for token in value:
            if not token:
                raise ValueError("Tokens must be non-empty strings.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_service_config(path: Optional[Union[str, Path]] = None) -> ServiceConfig:
    """Read a JSON config file, or return the defaults when no path is given."""
    if path is None:
        return ServiceConfig()
    with Path(path).open("r", encoding="utf-8") as fh:
        return ServiceConfig.model_validate(json.load(fh))
