"""AXA Life disclosure parser producing canonical fund records.

Each account is printed as the account name followed by its inception date,
with the numbers on the same or the following line::

    新興国株式型2015/5/1
    165.83△ 0.5311.7818.42

The numbers (unit price, 1 month, 6 months, 1 year, ...) usually lose their
separators and are split by ``reconstruct_values``.
"""
from __future__ import annotations

import re

from disclosure_extractor.domain.catalogs import AXA_CATALOG
from disclosure_extractor.domain.models import Catalog, CatalogEntry, FundRecord
from disclosure_extractor.domain.results import ExtractionResult
from disclosure_extractor.infrastructure.parsing.dates import DateNotation, extract_date
from disclosure_extractor.infrastructure.parsing.numbers import reconstruct_values
from disclosure_extractor.infrastructure.parsing.utils import BLANK, SEP, extract_catalog

DATE_NOTATIONS = (DateNotation.FULL, DateNotation.MONTH_END)

# unit price, 1 month, 6 months, 1 year
VALUES_PER_ACCOUNT = 4

_RUN_START = r"[\d△▲＋+\-－−]"
_RUN_CHAR = r"[\d.△▲＋+\-－− \t　]"


def performance_layout(name: str) -> re.Pattern[str]:
    return re.compile(
        name
        + rf"{BLANK}*\d{{4}}/\d{{1,2}}/\d{{1,2}}(?!\d)"
        + SEP
        + rf"(?P<run>{_RUN_START}{_RUN_CHAR}*)"
    )


def _performance_record(entry: CatalogEntry, match: re.Match[str]) -> FundRecord:
    unit_price, return_1m, return_6m, return_1y = reconstruct_values(match.group("run"), VALUES_PER_ACCOUNT)
    return FundRecord(
        account_name=entry.name,
        account_code=entry.code,
        account_type=entry.account_type,
        unit_price=unit_price,
        return_1m=return_1m,
        return_6m=return_6m,
        return_1y=return_1y,
    )


def extract_axa(text: str, catalog: Catalog = AXA_CATALOG) -> ExtractionResult:
    accounts, warnings = extract_catalog(text, catalog, performance_layout, _performance_record)
    return ExtractionResult(
        reporting_date=extract_date(text, DATE_NOTATIONS),
        accounts=accounts,
        warnings=warnings,
    )
