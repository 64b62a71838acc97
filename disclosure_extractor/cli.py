"""Command-line entrypoint for disclosure extraction."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from disclosure_extractor.application.dto import ParseOutcome
from disclosure_extractor.application.use_cases import ParseDocumentsUseCase, load_sources
from disclosure_extractor.config import OUTPUT_FORMATS, SETTINGS
from disclosure_extractor.logging_config import configure_logging
from disclosure_extractor.presentation.report import render_csv, render_json, render_xlsx


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract fund performance records from carrier disclosure text")
    parser.add_argument("paths", nargs="+", type=Path, help="UTF-8 text extracted from disclosure PDFs")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=SETTINGS.default_output_format)
    parser.add_argument("--output", type=Path, help="Write the rendered output to a file instead of stdout (.xlsx writes a workbook)")
    parser.add_argument("--log-level", default=SETTINGS.log_level)
    return parser.parse_args(argv)


def _render_table(outcomes: Sequence[ParseOutcome]) -> str:
    lines: list[str] = []
    for outcome in outcomes:
        if not outcome.ok:
            continue
        document = outcome.document
        lines.append(outcome.name)
        lines.append("=" * len(outcome.name))
        lines.append(f"Carrier: {document.carrier_code.value}")
        lines.append(f"Reporting date: {document.reporting_date.isoformat()}")
        lines.append(f"Accounts: {len(document.accounts)}")
        for record in document.accounts:
            values = [record.unit_price, record.return_1m, record.return_3m, record.return_6m, record.return_1y]
            rendered = " ".join("-" if value is None else str(value) for value in values)
            lines.append(f"- {record.account_code} {record.account_name}: {rendered}")
        if document.warnings:
            lines.append("")
            lines.append("Warnings:")
            for warning in document.warnings:
                lines.append(f"- {warning.kind.value} for {warning.account_code}: {warning.message}")
        lines.append("")
    return "\n".join(lines)


def _render(outcomes: Sequence[ParseOutcome], output_format: str) -> str:
    if output_format == "table":
        return _render_table(outcomes)
    documents = [outcome.document for outcome in outcomes if outcome.ok]
    if output_format == "json":
        return render_json(documents)
    return render_csv(documents).decode("utf-8")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(args.log_level)

    sources, failures = load_sources((path.name, path) for path in args.paths)
    for failure in failures:
        print(f"Cannot read {failure.name}: {failure.reason}", file=sys.stderr)

    outcomes = ParseDocumentsUseCase().execute(sources)
    for outcome in outcomes:
        if not outcome.ok:
            print(f"{outcome.name}: {type(outcome.error).__name__}: {outcome.error}", file=sys.stderr)

    if args.output is not None and args.output.suffix.lower() == ".xlsx":
        documents = [outcome.document for outcome in outcomes if outcome.ok]
        args.output.write_bytes(render_xlsx(documents))
    else:
        rendered = _render(outcomes, args.format)
        if args.output is not None:
            args.output.write_text(rendered, encoding="utf-8")
        else:
            print(rendered)

    return 0 if not failures and all(outcome.ok for outcome in outcomes) else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
