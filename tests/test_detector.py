import pytest

from disclosure_extractor.domain.errors import CarrierUnrecognizedError
from disclosure_extractor.domain.models import CarrierCode
from disclosure_extractor.infrastructure.parsing.detector import CarrierMarker, detect_carrier


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ソニー生命 変額個人年金保険 SOVANI", CarrierCode.SONY_LIFE_SOVANI),
        ("変額個人年金保険（無告知型）22 ソニー生命", CarrierCode.SONY_LIFE_ANNUITY),
        ("ソニー生命保険株式会社", CarrierCode.SONY_LIFE),
        ("変額保険（特別勘定）の現況", CarrierCode.SONY_LIFE),
        ("アクサ生命保険株式会社", CarrierCode.AXA_LIFE),
        ("アクサ・キャピタル生命", CarrierCode.AXA_LIFE),
        ("プルデンシャル生命保険株式会社", CarrierCode.PRUDENTIAL_LIFE),
    ],
)
def test_detects_carrier(text, expected):
    assert detect_carrier(text) is expected


def test_sovani_needs_both_markers():
    with pytest.raises(CarrierUnrecognizedError):
        detect_carrier("SOVANI only")


def test_specific_variant_wins_over_generic_marker():
    text = "ソニー生命 SOVANI 変額個人年金保険（無告知型）22 変額保険（特別勘定）の現況"

    assert detect_carrier(text) is CarrierCode.SONY_LIFE_SOVANI


def test_unknown_document_fails_closed():
    with pytest.raises(CarrierUnrecognizedError):
        detect_carrier("明治安田生命 運用レポート 2025年8月")


def test_custom_marker_order():
    markers = (
        CarrierMarker(CarrierCode.AXA_LIFE, any_of=("共通",)),
        CarrierMarker(CarrierCode.PRUDENTIAL_LIFE, all_of=("共通",)),
    )

    assert detect_carrier("共通マーカー", markers) is CarrierCode.AXA_LIFE
