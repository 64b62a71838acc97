"""Prudential Life disclosure parser producing canonical fund records.

Accounts are printed as blocks::

    ●総合型
    ﾕﾆｯﾄﾊﾞﾘｭｰ︓ 306.58
    期 間騰落率利回り月払利回り
    直近1年   -0.64%   -0.64%-2.32%

Only the unit value and the trailing one-year return are published.
"""
from __future__ import annotations

import re

from disclosure_extractor.domain.catalogs import PRUDENTIAL_CATALOG
from disclosure_extractor.domain.models import Catalog, CatalogEntry, FundRecord
from disclosure_extractor.domain.results import ExtractionResult
from disclosure_extractor.infrastructure.parsing.dates import DateNotation, extract_date
from disclosure_extractor.infrastructure.parsing.utils import (
    BLANK,
    PERCENT,
    SEP,
    SIGNED_VALUE,
    extract_catalog,
    parse_decimal,
)

DATE_NOTATIONS = (DateNotation.FULL, DateNotation.PARENTHESIZED_MONTH_END)

_UNIT_VALUE = r"(?:ﾕﾆｯﾄﾊﾞﾘｭｰ|ユニットバリュー)"


def account_block_layout(name: str) -> re.Pattern[str]:
    # [^●] keeps the lazy scans inside the current account block.
    return re.compile(
        rf"●{BLANK}*"
        + name
        + r"[^●]*?"
        + rf"{_UNIT_VALUE}{BLANK}*[︓:：]\s*(?P<price>\d[\d,]*(?:\.\d+)?)"
        + r"[^●]*?"
        + rf"直近1年{SEP}(?P<r1y>{SIGNED_VALUE}){PERCENT}"
    )


def _account_block_record(entry: CatalogEntry, match: re.Match[str]) -> FundRecord:
    return FundRecord(
        account_name=entry.name,
        account_code=entry.code,
        account_type=entry.account_type,
        unit_price=parse_decimal(match.group("price")),
        return_1y=parse_decimal(match.group("r1y")),
    )


def extract_prudential(text: str, catalog: Catalog = PRUDENTIAL_CATALOG) -> ExtractionResult:
    accounts, warnings = extract_catalog(text, catalog, account_block_layout, _account_block_record)
    return ExtractionResult(
        reporting_date=extract_date(text, DATE_NOTATIONS),
        accounts=accounts,
        warnings=warnings,
    )
