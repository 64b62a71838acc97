"""Shared parsing utilities for carrier disclosure text."""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable

from disclosure_extractor.config import SETTINGS
from disclosure_extractor.domain.errors import NumericReconstructionError
from disclosure_extractor.domain.models import (
    Catalog,
    CatalogEntry,
    ExtractionWarning,
    FundRecord,
    WarningKind,
)
from disclosure_extractor.logging_config import get_logger

logger = get_logger(__name__)

PLUS_GLYPHS = "＋+"
# △ and ▲ are the negative markers used in Japanese financial tables.
NEGATIVE_GLYPHS = "△▲－−-"

SIGN = r"[＋+△▲－−\-]"
PERCENT = r"[％%]"
BLANK = r"[ \t　]"
# Whitespace between two columns, allowing the value to continue on the next line.
SEP = rf"{BLANK}*(?:\r?\n{BLANK}*)?"
PRICE = r"\d[\d,]*\.\d+"
SIGNED_VALUE = rf"{SIGN}?{BLANK}*\d+(?:\.\d+)?"

LayoutFactory = Callable[[str], "re.Pattern[str]"]
RecordBuilder = Callable[[CatalogEntry, "re.Match[str]"], FundRecord]


def parse_decimal(value: str | None) -> Decimal | None:
    """Parse a table cell such as ``＋1,234.5`` or ``△0.53`` into a Decimal."""
    if value is None:
        return None
    s = str(value).strip()
    for ch in (",", "，", " ", "　"):
        s = s.replace(ch, "")
    negative = False
    if s and s[0] in NEGATIVE_GLYPHS:
        negative = True
        s = s[1:]
    elif s and s[0] in PLUS_GLYPHS:
        s = s[1:]
    if not s:
        return None
    try:
        result = SETTINGS.decimal_context.create_decimal(s)
    except InvalidOperation:
        return None
    if negative:
        result = -result
    return result


def shadowing_prefixes(name: str, catalog: Catalog) -> tuple[str, ...]:
    """Prefixes that turn ``name`` into a longer catalog name (``世界`` for ``株式型``)."""
    prefixes: list[str] = []
    for entry in catalog:
        for other in entry.search_names():
            if other != name and other.endswith(name):
                prefixes.append(other[: -len(name)])
    return tuple(prefixes)


def _is_shadowed(text: str, start: int, prefixes: Iterable[str]) -> bool:
    return any(text.endswith(prefix, 0, start) for prefix in prefixes)


def find_layout_match(
    text: str,
    entry: CatalogEntry,
    catalog: Catalog,
    layout: LayoutFactory,
) -> re.Match[str] | None:
    """Return the layout match for the first search name of ``entry`` that matches."""
    for search_name in entry.search_names():
        pattern = layout(f"(?P<name>{re.escape(search_name)})")
        prefixes = shadowing_prefixes(search_name, catalog)
        for match in pattern.finditer(text):
            if _is_shadowed(text, match.start("name"), prefixes):
                continue
            logger.debug("Matched %s via %r", entry.code, search_name)
            return match
    return None


def extract_catalog(
    text: str,
    catalog: Catalog,
    layout: LayoutFactory,
    build: RecordBuilder,
) -> tuple[tuple[FundRecord, ...], tuple[ExtractionWarning, ...]]:
    """Run one carrier layout over every catalog entry, in catalog order.

    Entries without a match, or whose numbers cannot be reconstructed, are
    omitted and reported as warnings.
    """
    records: list[FundRecord] = []
    warnings: list[ExtractionWarning] = []

    for entry in catalog:
        match = find_layout_match(text, entry, catalog, layout)
        if match is None:
            logger.warning("Could not extract data for %s (%s)", entry.name, entry.code)
            warnings.append(
                ExtractionWarning(
                    kind=WarningKind.COVERAGE_GAP,
                    account_code=entry.code,
                    account_name=entry.name,
                    message=f"No match for {entry.name} in document text",
                )
            )
            continue
        try:
            records.append(build(entry, match))
        except NumericReconstructionError as exc:
            logger.warning("Could not parse performance data for %s: %s", entry.name, exc)
            warnings.append(
                ExtractionWarning(
                    kind=WarningKind.NUMERIC_RECONSTRUCTION,
                    account_code=entry.code,
                    account_name=entry.name,
                    message=str(exc),
                )
            )

    return tuple(records), tuple(warnings)
