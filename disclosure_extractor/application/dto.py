"""Application-level DTOs for batch parsing."""
from __future__ import annotations

from dataclasses import dataclass

from disclosure_extractor.domain.errors import DisclosureParseError
from disclosure_extractor.domain.models import ParsedDocument


@dataclass(slots=True, frozen=True)
class DocumentSource:
    name: str
    text: str


@dataclass(slots=True, frozen=True)
class ParseOutcome:
    """Either a validated document or the hard failure that stopped it."""

    name: str
    document: ParsedDocument | None = None
    error: DisclosureParseError | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


@dataclass(slots=True, frozen=True)
class SourceFailure:
    """A source whose text could not be read or decoded."""

    name: str
    reason: str
