"""Domain models for the disclosure extraction engine.

These dataclasses capture the canonical schema for fund performance records
extracted from carrier disclosure documents.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Iterator, Sequence


class CarrierCode(str, Enum):
    """Carriers (and product variants) with a known document layout."""

    SONY_LIFE_SOVANI = "SONY_LIFE_SOVANI"
    SONY_LIFE_ANNUITY = "SONY_LIFE_ANNUITY"
    SONY_LIFE = "SONY_LIFE"
    AXA_LIFE = "AXA_LIFE"
    PRUDENTIAL_LIFE = "PRUDENTIAL_LIFE"


class AccountType(str, Enum):
    EQUITY = "equity"
    BOND = "bond"
    BALANCED = "balanced"
    REIT = "reit"
    MONEY_MARKET = "money_market"


class WarningKind(str, Enum):
    COVERAGE_GAP = "coverage_gap"
    NUMERIC_RECONSTRUCTION = "numeric_reconstruction"


@dataclass(frozen=True)
class CatalogEntry:
    """One special account a carrier is known to publish."""

    name: str
    code: str
    account_type: AccountType
    aliases: tuple[str, ...] = ()

    def search_names(self) -> Iterator[str]:
        yield self.name
        yield from self.aliases


Catalog = Sequence[CatalogEntry]


@dataclass(frozen=True)
class FundRecord:
    """Performance snapshot of one special account for one reporting date."""

    account_name: str
    account_code: str
    account_type: AccountType
    unit_price: Decimal | None = None
    return_1m: Decimal | None = None
    return_3m: Decimal | None = None
    return_6m: Decimal | None = None
    return_1y: Decimal | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "accountName": self.account_name,
            "accountCode": self.account_code,
            "accountType": self.account_type.value,
            "unitPrice": _number(self.unit_price),
            "return1m": _number(self.return_1m),
            "return3m": _number(self.return_3m),
            "return6m": _number(self.return_6m),
            "return1y": _number(self.return_1y),
        }


@dataclass(frozen=True)
class ExtractionWarning:
    """A catalog entry that could not be turned into a record."""

    kind: WarningKind
    account_code: str
    account_name: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "accountCode": self.account_code,
            "accountName": self.account_name,
            "message": self.message,
        }


@dataclass(frozen=True)
class ParsedDocument:
    """Validated output of one parse call."""

    carrier_code: CarrierCode
    reporting_date: date | None
    accounts: tuple[FundRecord, ...]
    warnings: tuple[ExtractionWarning, ...] = field(default_factory=tuple)

    @property
    def found_codes(self) -> tuple[str, ...]:
        return tuple(record.account_code for record in self.accounts)

    def missing_codes(self, catalog: Catalog) -> tuple[str, ...]:
        found = set(self.found_codes)
        return tuple(entry.code for entry in catalog if entry.code not in found)

    def to_dict(self) -> dict[str, object]:
        return {
            "carrierCode": self.carrier_code.value,
            "reportingDate": self.reporting_date.isoformat() if self.reporting_date else None,
            "accounts": [record.to_dict() for record in self.accounts],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


def _number(value: Decimal | None) -> float | None:
    return None if value is None else float(value)
