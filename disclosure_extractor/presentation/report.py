"""Report renderers for parsed disclosure documents."""
from __future__ import annotations

import csv
import io
import json
from typing import Sequence

import pandas as pd

from disclosure_extractor.domain.models import ExtractionWarning, ParsedDocument

ACCOUNT_COLUMNS = [
    "carrier_code",
    "reporting_date",
    "account_name",
    "account_code",
    "account_type",
    "unit_price",
    "return_1m",
    "return_3m",
    "return_6m",
    "return_1y",
]

WARNING_COLUMNS = ["carrier_code", "kind", "account_code", "account_name", "message"]


def _cell(value: object) -> str:
    return "" if value is None else str(value)


def records_to_rows(document: ParsedDocument) -> list[dict[str, str]]:
    reporting_date = document.reporting_date.isoformat() if document.reporting_date else ""
    rows: list[dict[str, str]] = []
    for record in document.accounts:
        rows.append(
            {
                "carrier_code": document.carrier_code.value,
                "reporting_date": reporting_date,
                "account_name": record.account_name,
                "account_code": record.account_code,
                "account_type": record.account_type.value,
                "unit_price": _cell(record.unit_price),
                "return_1m": _cell(record.return_1m),
                "return_3m": _cell(record.return_3m),
                "return_6m": _cell(record.return_6m),
                "return_1y": _cell(record.return_1y),
            }
        )
    return rows


def warnings_to_rows(document: ParsedDocument) -> list[dict[str, str]]:
    return [_warning_row(document, warning) for warning in document.warnings]


def _warning_row(document: ParsedDocument, warning: ExtractionWarning) -> dict[str, str]:
    return {
        "carrier_code": document.carrier_code.value,
        "kind": warning.kind.value,
        "account_code": warning.account_code,
        "account_name": warning.account_name,
        "message": warning.message,
    }


def records_to_dataframe(documents: Sequence[ParsedDocument]) -> pd.DataFrame:
    rows = [row for document in documents for row in records_to_rows(document)]
    frame = pd.DataFrame(rows, columns=ACCOUNT_COLUMNS)
    for column in ("unit_price", "return_1m", "return_3m", "return_6m", "return_1y"):
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    return frame


def warnings_to_dataframe(documents: Sequence[ParsedDocument]) -> pd.DataFrame:
    rows = [row for document in documents for row in warnings_to_rows(document)]
    return pd.DataFrame(rows, columns=WARNING_COLUMNS)


def render_csv(documents: Sequence[ParsedDocument]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=ACCOUNT_COLUMNS)
    writer.writeheader()
    for document in documents:
        writer.writerows(records_to_rows(document))
    return buffer.getvalue().encode("utf-8")


def render_json(documents: Sequence[ParsedDocument]) -> str:
    payload = [document.to_dict() for document in documents]
    if len(payload) == 1:
        return json.dumps(payload[0], ensure_ascii=False, indent=2)
    return json.dumps(payload, ensure_ascii=False, indent=2)


def render_xlsx(documents: Sequence[ParsedDocument]) -> bytes:
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        records_to_dataframe(documents).to_excel(writer, sheet_name="accounts", index=False)
        warnings_to_dataframe(documents).to_excel(writer, sheet_name="warnings", index=False)
    return buffer.getvalue()
