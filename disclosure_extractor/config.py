"""Central configuration for the disclosure extractor package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Context

OUTPUT_FORMATS = ("table", "json", "csv")


@dataclass(slots=True, frozen=True)
class Settings:
    decimal_context: Context
    log_level: str
    default_output_format: str


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.getenv(name, default).strip().lower()
    return value if value in choices else default


SETTINGS = Settings(
    decimal_context=Context(prec=28),
    log_level=os.getenv("DISCLOSURE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    default_output_format=_env_choice("DISCLOSURE_OUTPUT_FORMAT", "table", OUTPUT_FORMATS),
)
