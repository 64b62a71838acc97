"""Fund performance extraction from insurance carrier disclosure documents."""
from disclosure_extractor.application.use_cases import (
    ParseDocumentContext,
    ParseDocumentsUseCase,
    ParseDocumentUseCase,
    parse_document,
)
from disclosure_extractor.domain.errors import (
    CarrierUnrecognizedError,
    DateExtractionError,
    DisclosureParseError,
    DocumentValidationError,
    NumericReconstructionError,
)
from disclosure_extractor.domain.models import (
    AccountType,
    CarrierCode,
    ExtractionWarning,
    FundRecord,
    ParsedDocument,
)
from disclosure_extractor.domain.services import DocumentValidator

__all__ = [
    "parse_document",
    "ParseDocumentUseCase",
    "ParseDocumentContext",
    "ParseDocumentsUseCase",
    "DocumentValidator",
    "AccountType",
    "CarrierCode",
    "ExtractionWarning",
    "FundRecord",
    "ParsedDocument",
    "DisclosureParseError",
    "CarrierUnrecognizedError",
    "DateExtractionError",
    "DocumentValidationError",
    "NumericReconstructionError",
]
