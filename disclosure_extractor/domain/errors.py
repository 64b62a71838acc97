"""Typed failures raised by the extraction engine.

Document-level failures propagate to the caller. NumericReconstructionError is
scoped to a single catalog entry and is turned into a warning by the catalog
loop.
"""
from __future__ import annotations

from typing import Sequence

from .models import CarrierCode


class DisclosureParseError(Exception):
    """Base class for every failure raised by the engine."""

    def __init__(self, message: str, carrier_code: CarrierCode | None = None) -> None:
        super().__init__(message)
        self.carrier_code = carrier_code


class CarrierUnrecognizedError(DisclosureParseError):
    """No detector predicate matched the document text."""

    def __init__(self, message: str = "Unable to detect insurance carrier from document text") -> None:
        super().__init__(message)


class _CoverageError(DisclosureParseError):
    def __init__(
        self,
        message: str,
        carrier_code: CarrierCode | None = None,
        found_codes: Sequence[str] = (),
        missing_codes: Sequence[str] = (),
    ) -> None:
        super().__init__(message, carrier_code)
        self.found_codes = tuple(found_codes)
        self.missing_codes = tuple(missing_codes)


class DateExtractionError(_CoverageError):
    """Neither date notation matched."""


class DocumentValidationError(_CoverageError):
    """Post-extraction completeness check failed."""


class NumericReconstructionError(DisclosureParseError):
    """A concatenated number run could not be split into the expected values."""

    def __init__(self, message: str, run: str, expected: int) -> None:
        super().__init__(message)
        self.run = run
        self.expected = expected
