"""Domain-level results produced by the carrier extraction strategies."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .models import ExtractionWarning, FundRecord, WarningKind


@dataclass(frozen=True)
class ExtractionResult:
    reporting_date: date | None
    accounts: tuple[FundRecord, ...] = field(default_factory=tuple)
    warnings: tuple[ExtractionWarning, ...] = field(default_factory=tuple)

    @property
    def found_codes(self) -> tuple[str, ...]:
        return tuple(record.account_code for record in self.accounts)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def iter_warnings(self, kind: WarningKind | None = None) -> Iterable[ExtractionWarning]:
        for warning in self.warnings:
            if kind is None or warning.kind is kind:
                yield warning
