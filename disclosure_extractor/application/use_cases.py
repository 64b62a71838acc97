"""Application services orchestrating the extraction workflow."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Sequence

from disclosure_extractor.application.dto import DocumentSource, ParseOutcome, SourceFailure
from disclosure_extractor.domain.errors import (
    CarrierUnrecognizedError,
    DateExtractionError,
    DisclosureParseError,
)
from disclosure_extractor.domain.models import CarrierCode, ParsedDocument
from disclosure_extractor.domain.services import DocumentValidator
from disclosure_extractor.infrastructure.parsing.detector import detect_carrier
from disclosure_extractor.infrastructure.parsing.registry import STRATEGIES, CarrierStrategy
from disclosure_extractor.infrastructure.sources import TextSource, ensure_text
from disclosure_extractor.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ParseDocumentContext:
    detector: Callable[[str], CarrierCode] = detect_carrier
    strategies: Mapping[CarrierCode, CarrierStrategy] = field(default_factory=lambda: STRATEGIES)
    validator: DocumentValidator = field(default_factory=DocumentValidator)


class ParseDocumentUseCase:
    """Detect the carrier, run its strategy and validate the result."""

    def __init__(self, context: ParseDocumentContext | None = None) -> None:
        self._context = context or ParseDocumentContext()

    def execute(self, raw_text: str) -> ParsedDocument:
        if not isinstance(raw_text, str):
            raise TypeError(f"Expected document text as str, got {type(raw_text)!r}")

        carrier = self._context.detector(raw_text)
        strategy = self._context.strategies.get(carrier)
        if strategy is None:
            raise CarrierUnrecognizedError(f"No extraction strategy registered for {carrier.value}")
        logger.debug("Dispatching to %s over %d catalog entries", carrier.value, len(strategy.catalog))

        result = strategy.extract(raw_text)
        if result.reporting_date is None:
            found = result.found_codes
            raise DateExtractionError(
                "Reporting date not found in document",
                carrier_code=carrier,
                found_codes=found,
                missing_codes=tuple(entry.code for entry in strategy.catalog if entry.code not in found),
            )

        document = ParsedDocument(
            carrier_code=carrier,
            reporting_date=result.reporting_date,
            accounts=result.accounts,
            warnings=result.warnings,
        )
        self._context.validator.validate(document, strategy.catalog)

        logger.info(
            "Parsed %s document as of %s: %d of %d accounts, %d warnings",
            carrier.value,
            document.reporting_date,
            len(document.accounts),
            len(strategy.catalog),
            len(document.warnings),
        )
        return document


class ParseDocumentsUseCase:
    """Parse several documents independently, collecting hard failures per document."""

    def __init__(self, single: ParseDocumentUseCase | None = None) -> None:
        self._single = single or ParseDocumentUseCase()

    def execute(self, sources: Iterable[DocumentSource]) -> Sequence[ParseOutcome]:
        outcomes: list[ParseOutcome] = []
        for source in sources:
            try:
                document = self._single.execute(source.text)
            except DisclosureParseError as exc:
                logger.error("Failed to parse %s: %s", source.name, exc)
                outcomes.append(ParseOutcome(name=source.name, error=exc))
                continue
            outcomes.append(ParseOutcome(name=source.name, document=document))
        return outcomes


def parse_document(raw_text: str) -> ParsedDocument:
    """Parse the extracted text of one carrier disclosure document."""
    return ParseDocumentUseCase().execute(raw_text)


def load_sources(
    payloads: Iterable[tuple[str, TextSource]],
) -> tuple[list[DocumentSource], list[SourceFailure]]:
    """Decode named payloads, keeping unreadable ones apart instead of aborting the batch."""
    sources: list[DocumentSource] = []
    failures: list[SourceFailure] = []
    for name, payload in payloads:
        try:
            sources.append(DocumentSource(name=name, text=ensure_text(payload)))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", name, exc)
            failures.append(SourceFailure(name=name, reason=str(exc)))
    return sources, failures
