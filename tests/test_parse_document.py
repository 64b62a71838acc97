import json
from datetime import date
from decimal import Decimal

import pytest

from disclosure_extractor import (
    CarrierCode,
    CarrierUnrecognizedError,
    DateExtractionError,
    DisclosureParseError,
    DocumentValidationError,
    ParseDocumentContext,
    ParseDocumentsUseCase,
    ParseDocumentUseCase,
    parse_document,
)
from disclosure_extractor.application.dto import DocumentSource
from disclosure_extractor.application.use_cases import load_sources
from disclosure_extractor.domain.catalogs import AXA_CATALOG, CATALOGS
from disclosure_extractor.domain.models import WarningKind
from disclosure_extractor.infrastructure.parsing.registry import STRATEGIES


def make_axa_document(malformed: set[str]) -> str:
    lines = ["アクサ生命保険株式会社", "特別勘定の運用実績 2025年7月末現在"]
    for index, entry in enumerate(AXA_CATALOG):
        lines.append(f"{entry.name}2008/4/1")
        lines.append("98.7" if entry.code in malformed else f"1{index:02d}.230.994.135.11")
    return "\n".join(lines) + "\n"


def test_signed_line_example():
    text = "ソニー生命 SOVANI\n2025年8月29日現在\nバランス型20 105.87 ＋0.29％ ＋2.06％ ＋1.74％ ＋2.29％\n"

    document = parse_document(text)

    assert document.carrier_code is CarrierCode.SONY_LIFE_SOVANI
    record = document.accounts[0]
    assert record.account_name == "バランス型20"
    assert record.unit_price == Decimal("105.87")
    assert (record.return_1m, record.return_3m, record.return_6m, record.return_1y) == (
        Decimal("0.29"),
        Decimal("2.06"),
        Decimal("1.74"),
        Decimal("2.29"),
    )


@pytest.mark.parametrize(
    "fixture, carrier, reporting_date, count",
    [
        ("sovani_text", CarrierCode.SONY_LIFE_SOVANI, date(2025, 8, 29), 4),
        ("annuity_text", CarrierCode.SONY_LIFE_ANNUITY, date(2025, 8, 31), 2),
        ("sony_life_text", CarrierCode.SONY_LIFE, date(2025, 7, 31), 5),
        ("axa_text", CarrierCode.AXA_LIFE, date(2025, 7, 31), 3),
        ("prudential_text", CarrierCode.PRUDENTIAL_LIFE, date(2025, 7, 31), 3),
    ],
)
def test_parses_every_carrier(request, fixture, carrier, reporting_date, count):
    document = parse_document(request.getfixturevalue(fixture))

    assert document.carrier_code is carrier
    assert document.reporting_date == reporting_date
    assert len(document.accounts) == count
    catalog_codes = [entry.code for entry in CATALOGS[carrier]]
    assert set(document.found_codes) <= set(catalog_codes)
    assert list(document.found_codes) == sorted(document.found_codes, key=catalog_codes.index)


def test_unmatched_entries_are_omitted_not_placeholders(prudential_text):
    document = parse_document(prudential_text)

    assert "PRU_DOMESTIC_EQUITY" not in document.found_codes
    for record in document.accounts:
        assert any(
            value is not None
            for value in (record.unit_price, record.return_1m, record.return_3m, record.return_6m, record.return_1y)
        )
    assert "PRU_DOMESTIC_EQUITY" in document.missing_codes(CATALOGS[CarrierCode.PRUDENTIAL_LIFE])


def test_unknown_carrier_fails_closed():
    with pytest.raises(CarrierUnrecognizedError):
        parse_document("第一生命 運用レポート\n2025年8月29日現在\nバランス型20 105.87 ＋0.29％\n")


def test_missing_date_reports_coverage(axa_text):
    text = axa_text.replace("2025年7月末現在", "")

    with pytest.raises(DateExtractionError) as excinfo:
        parse_document(text)

    assert excinfo.value.carrier_code is CarrierCode.AXA_LIFE
    assert excinfo.value.found_codes == ("AXA_BALANCED_STABLE", "AXA_DOMESTIC_EQUITY", "AXA_EMERGING_EQUITY")
    assert "AXA_FOREIGN_BOND" in excinfo.value.missing_codes


def test_no_records_is_a_validation_error():
    with pytest.raises(DocumentValidationError, match="No account data found") as excinfo:
        parse_document("プルデンシャル生命\n（2025年7月末）\n")

    assert excinfo.value.missing_codes == tuple(entry.code for entry in CATALOGS[CarrierCode.PRUDENTIAL_LIFE])


def test_hard_failures_share_a_base_class():
    with pytest.raises(DisclosureParseError):
        parse_document("unrelated text")


def test_partial_coverage_is_tolerated():
    document = parse_document(make_axa_document({"AXA_GLOBAL_BOND", "AXA_MONEY_MARKET"}))

    assert len(document.accounts) == 10
    assert [warning.account_code for warning in document.warnings] == ["AXA_GLOBAL_BOND", "AXA_MONEY_MARKET"]
    assert all(warning.kind is WarningKind.NUMERIC_RECONSTRUCTION for warning in document.warnings)
    assert document.accounts[0].unit_price == Decimal("100.23")


def test_parsing_is_deterministic(sovani_text):
    assert parse_document(sovani_text) == parse_document(sovani_text)


def test_json_shape(annuity_text):
    payload = json.loads(json.dumps(parse_document(annuity_text).to_dict(), ensure_ascii=False))

    assert payload["carrierCode"] == "SONY_LIFE_ANNUITY"
    assert payload["reportingDate"] == "2025-08-31"
    assert payload["accounts"][1] == {
        "accountName": "マネー型",
        "accountCode": "SONY_ANNUITY_MONEY",
        "accountType": "money_market",
        "unitPrice": 99.98,
        "return1m": 0.0,
        "return3m": -0.01,
        "return6m": -0.02,
        "return1y": 0.01,
    }
    assert len(payload["warnings"]) == 12


def test_bytes_input_is_rejected():
    with pytest.raises(TypeError):
        ParseDocumentUseCase().execute("ソニー生命".encode("utf-8"))


def test_custom_context_dispatch(axa_text):
    context = ParseDocumentContext(detector=lambda text: CarrierCode.AXA_LIFE)

    document = ParseDocumentUseCase(context).execute(axa_text.replace("アクサ生命保険株式会社", ""))

    assert document.carrier_code is CarrierCode.AXA_LIFE


def test_missing_strategy_is_unrecognized(axa_text):
    strategies = {code: strategy for code, strategy in STRATEGIES.items() if code is not CarrierCode.AXA_LIFE}
    context = ParseDocumentContext(strategies=strategies)

    with pytest.raises(CarrierUnrecognizedError, match="AXA_LIFE"):
        ParseDocumentUseCase(context).execute(axa_text)


def test_batch_collects_failures(sovani_text, prudential_text):
    outcomes = ParseDocumentsUseCase().execute(
        [
            DocumentSource(name="sovani.txt", text=sovani_text),
            DocumentSource(name="unknown.txt", text="unrelated text"),
            DocumentSource(name="prudential.txt", text=prudential_text),
        ]
    )

    assert [outcome.ok for outcome in outcomes] == [True, False, True]
    assert isinstance(outcomes[1].error, CarrierUnrecognizedError)
    assert outcomes[1].document is None
    assert outcomes[2].document.carrier_code is CarrierCode.PRUDENTIAL_LIFE


def test_default_context_uses_registered_strategies():
    context = ParseDocumentContext()

    assert context.strategies is STRATEGIES
    assert set(context.strategies) == set(CarrierCode)


def test_load_sources_keeps_unreadable_payloads_apart(tmp_path, axa_text):
    sources, failures = load_sources(
        [
            ("axa.txt", axa_text.encode("utf-8")),
            ("shift_jis.txt", "アクサ生命".encode("shift_jis")),
            ("missing.txt", tmp_path / "missing.txt"),
        ]
    )

    assert [source.name for source in sources] == ["axa.txt"]
    assert sources[0].text == axa_text
    assert [failure.name for failure in failures] == ["shift_jis.txt", "missing.txt"]
