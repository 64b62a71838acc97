"""Domain services implementing completeness rules."""
from __future__ import annotations

from collections import Counter

from .errors import DocumentValidationError
from .models import Catalog, ParsedDocument


class DocumentValidator:
    """Checks structural completeness of a parsed document before it is accepted.

    Null unit prices and returns are legitimate: some carriers only publish a
    subset of the horizons.
    """

    def validate(self, document: ParsedDocument, catalog: Catalog | None = None) -> ParsedDocument:
        missing = document.missing_codes(catalog) if catalog is not None else ()

        if document.reporting_date is None:
            raise self._error("Reporting date not found in document", document, missing)

        if not document.accounts:
            raise self._error("No account data found in document", document, missing)

        for record in document.accounts:
            if not record.account_name or not record.account_name.strip():
                raise self._error(f"Invalid account data: {record!r}", document, missing)

        duplicates = [code for code, count in Counter(document.found_codes).items() if count > 1]
        if duplicates:
            raise self._error(f"Duplicate account codes: {', '.join(duplicates)}", document, missing)

        if catalog is not None:
            known = {entry.code for entry in catalog}
            unknown = [code for code in document.found_codes if code not in known]
            if unknown:
                raise self._error(
                    f"Account codes outside the {document.carrier_code.value} catalog: {', '.join(unknown)}",
                    document,
                    missing,
                )

        return document

    @staticmethod
    def _error(message: str, document: ParsedDocument, missing: tuple[str, ...]) -> DocumentValidationError:
        return DocumentValidationError(
            message,
            carrier_code=document.carrier_code,
            found_codes=document.found_codes,
            missing_codes=missing,
        )
