"""Carrier detection from document content."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from disclosure_extractor.domain.errors import CarrierUnrecognizedError
from disclosure_extractor.domain.models import CarrierCode
from disclosure_extractor.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CarrierMarker:
    """Substring predicate: every ``all_of`` marker and, if given, one ``any_of`` marker."""

    carrier: CarrierCode
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if not all(marker in text for marker in self.all_of):
            return False
        return not self.any_of or any(marker in text for marker in self.any_of)


# Order matters: product variants share the generic Sony Life marker and must be
# checked before it.
CARRIER_MARKERS: tuple[CarrierMarker, ...] = (
    CarrierMarker(CarrierCode.SONY_LIFE_SOVANI, all_of=("ソニー生命", "SOVANI")),
    CarrierMarker(CarrierCode.SONY_LIFE_ANNUITY, all_of=("変額個人年金保険（無告知型）22",)),
    CarrierMarker(CarrierCode.SONY_LIFE, any_of=("ソニー生命", "変額保険（特別勘定）の現況")),
    CarrierMarker(CarrierCode.AXA_LIFE, any_of=("アクサ生命", "アクサ・キャピタル")),
    CarrierMarker(CarrierCode.PRUDENTIAL_LIFE, all_of=("プルデンシャル生命",)),
)


def detect_carrier(text: str, markers: Sequence[CarrierMarker] = CARRIER_MARKERS) -> CarrierCode:
    for marker in markers:
        if marker.matches(text):
            logger.info("Detected carrier %s", marker.carrier.value)
            return marker.carrier
    raise CarrierUnrecognizedError()
