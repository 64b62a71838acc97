"""Dispatch table from detected carrier to its extraction strategy."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Protocol

from disclosure_extractor.domain.catalogs import CATALOGS
from disclosure_extractor.domain.models import Catalog, CarrierCode
from disclosure_extractor.domain.results import ExtractionResult
from disclosure_extractor.infrastructure.parsing.axa import extract_axa
from disclosure_extractor.infrastructure.parsing.prudential import extract_prudential
from disclosure_extractor.infrastructure.parsing.sony import (
    extract_annuity,
    extract_sovani,
    extract_variable_life,
)


class ExtractFunction(Protocol):
    def __call__(self, text: str, catalog: Catalog) -> ExtractionResult:
        ...


@dataclass(frozen=True)
class CarrierStrategy:
    carrier: CarrierCode
    catalog: Catalog
    extract_fn: ExtractFunction

    def extract(self, text: str) -> ExtractionResult:
        return self.extract_fn(text, self.catalog)


def _strategy(carrier: CarrierCode, extract_fn: ExtractFunction) -> CarrierStrategy:
    return CarrierStrategy(carrier=carrier, catalog=CATALOGS[carrier], extract_fn=extract_fn)


STRATEGIES: Mapping[CarrierCode, CarrierStrategy] = MappingProxyType(
    {
        CarrierCode.SONY_LIFE_SOVANI: _strategy(CarrierCode.SONY_LIFE_SOVANI, extract_sovani),
        CarrierCode.SONY_LIFE_ANNUITY: _strategy(CarrierCode.SONY_LIFE_ANNUITY, extract_annuity),
        CarrierCode.SONY_LIFE: _strategy(CarrierCode.SONY_LIFE, extract_variable_life),
        CarrierCode.AXA_LIFE: _strategy(CarrierCode.AXA_LIFE, extract_axa),
        CarrierCode.PRUDENTIAL_LIFE: _strategy(CarrierCode.PRUDENTIAL_LIFE, extract_prudential),
    }
)
