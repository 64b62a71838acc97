"""Reporting-date extraction for Japanese disclosure documents."""
from __future__ import annotations

import calendar
import re
from datetime import date
from enum import Enum
from typing import Iterable

from disclosure_extractor.logging_config import get_logger

logger = get_logger(__name__)


class DateNotation(Enum):
    FULL = "full"  # 2025年8月29日現在
    MONTH_END = "month_end"  # 2025年8月末現在
    PARENTHESIZED_MONTH_END = "parenthesized_month_end"  # （2025年7月末）
    MONTH = "month"  # 2025年8月


_B = r"[ 　]*"
_YEAR_MONTH = rf"(?P<year>\d{{4}}){_B}年{_B}(?P<month>\d{{1,2}}){_B}月"

_PATTERNS: dict[DateNotation, re.Pattern[str]] = {
    DateNotation.FULL: re.compile(rf"{_YEAR_MONTH}{_B}(?P<day>\d{{1,2}}){_B}日{_B}現在"),
    DateNotation.MONTH_END: re.compile(rf"{_YEAR_MONTH}{_B}末{_B}現在"),
    DateNotation.PARENTHESIZED_MONTH_END: re.compile(rf"[（(]{_B}{_YEAR_MONTH}{_B}末{_B}[）)]"),
    DateNotation.MONTH: re.compile(_YEAR_MONTH),
}


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _to_date(match: re.Match[str]) -> date | None:
    year = int(match.group("year"))
    month = int(match.group("month"))
    if not 1 <= month <= 12:
        return None
    day = match.groupdict().get("day")
    if day is None:
        return last_day_of_month(year, month)
    try:
        return date(year, month, int(day))
    except ValueError:
        return None


def extract_date(text: str, notations: Iterable[DateNotation]) -> date | None:
    """Return the first date found, trying ``notations`` in order.

    Notations without a day are normalized to the last day of the month.
    """
    for notation in notations:
        for match in _PATTERNS[notation].finditer(text):
            value = _to_date(match)
            if value is not None:
                logger.debug("Reporting date %s from %s notation", value, notation.value)
                return value
    return None
