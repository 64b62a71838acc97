"""Sony Life disclosure parsers producing canonical fund records.

Three layouts are published:

* SOVANI and the 変額個人年金保険（無告知型）22 annuity print an index table,
  one account per row::

      バランス型20 105.87 ＋0.29％ ＋2.06％ ＋1.74％ ＋2.29％ ＋5.87％

  (index value, then 1 month, 3 months, 6 months, 1 year, since inception).
  pdf text extraction sometimes drops every space between the columns.
* The variable life 変額保険（特別勘定）の現況 report only lists the monthly
  return next to each account name; it has no unit price.
"""
from __future__ import annotations

import re

from disclosure_extractor.domain.catalogs import SONY_ANNUITY_CATALOG, SONY_LIFE_CATALOG, SOVANI_CATALOG
from disclosure_extractor.domain.models import Catalog, CatalogEntry, FundRecord
from disclosure_extractor.domain.results import ExtractionResult
from disclosure_extractor.infrastructure.parsing.dates import DateNotation, extract_date
from disclosure_extractor.infrastructure.parsing.utils import (
    PERCENT,
    PRICE,
    SEP,
    SIGNED_VALUE,
    extract_catalog,
    parse_decimal,
)

SOVANI_DATE_NOTATIONS = (DateNotation.FULL, DateNotation.MONTH_END)
ANNUITY_DATE_NOTATIONS = (DateNotation.FULL, DateNotation.MONTH)
VARIABLE_LIFE_DATE_NOTATIONS = (DateNotation.FULL, DateNotation.MONTH_END)


def index_table_layout(name: str) -> re.Pattern[str]:
    return re.compile(
        name
        + SEP
        + rf"(?P<price>{PRICE})"
        + SEP
        + rf"(?P<r1m>{SIGNED_VALUE}){PERCENT}"
        + SEP
        + rf"(?P<r3m>{SIGNED_VALUE}){PERCENT}"
        + SEP
        + rf"(?P<r6m>{SIGNED_VALUE}){PERCENT}"
        + SEP
        + rf"(?P<r1y>{SIGNED_VALUE}){PERCENT}"
    )


def monthly_return_layout(name: str) -> re.Pattern[str]:
    return re.compile(name + SEP + rf"(?P<r1m>{SIGNED_VALUE}){PERCENT}")


def _index_table_record(entry: CatalogEntry, match: re.Match[str]) -> FundRecord:
    return FundRecord(
        account_name=entry.name,
        account_code=entry.code,
        account_type=entry.account_type,
        unit_price=parse_decimal(match.group("price")),
        return_1m=parse_decimal(match.group("r1m")),
        return_3m=parse_decimal(match.group("r3m")),
        return_6m=parse_decimal(match.group("r6m")),
        return_1y=parse_decimal(match.group("r1y")),
    )


def _monthly_return_record(entry: CatalogEntry, match: re.Match[str]) -> FundRecord:
    return FundRecord(
        account_name=entry.name,
        account_code=entry.code,
        account_type=entry.account_type,
        return_1m=parse_decimal(match.group("r1m")),
    )


def extract_sovani(text: str, catalog: Catalog = SOVANI_CATALOG) -> ExtractionResult:
    accounts, warnings = extract_catalog(text, catalog, index_table_layout, _index_table_record)
    return ExtractionResult(
        reporting_date=extract_date(text, SOVANI_DATE_NOTATIONS),
        accounts=accounts,
        warnings=warnings,
    )


def extract_annuity(text: str, catalog: Catalog = SONY_ANNUITY_CATALOG) -> ExtractionResult:
    accounts, warnings = extract_catalog(text, catalog, index_table_layout, _index_table_record)
    return ExtractionResult(
        reporting_date=extract_date(text, ANNUITY_DATE_NOTATIONS),
        accounts=accounts,
        warnings=warnings,
    )


def extract_variable_life(text: str, catalog: Catalog = SONY_LIFE_CATALOG) -> ExtractionResult:
    accounts, warnings = extract_catalog(text, catalog, monthly_return_layout, _monthly_return_record)
    return ExtractionResult(
        reporting_date=extract_date(text, VARIABLE_LIFE_DATE_NOTATIONS),
        accounts=accounts,
        warnings=warnings,
    )
