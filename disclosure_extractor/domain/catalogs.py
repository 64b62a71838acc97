"""Fixed special-account catalogs, one per carrier layout.

Codes are matched against existing account rows by the surrounding service and
must stay stable. Aliases are tried in declaration order after the display name.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import AccountType, Catalog, CatalogEntry, CarrierCode

EQUITY = AccountType.EQUITY
BOND = AccountType.BOND
BALANCED = AccountType.BALANCED
REIT = AccountType.REIT
MONEY_MARKET = AccountType.MONEY_MARKET


SOVANI_CATALOG: Catalog = (
    CatalogEntry("バランス型20", "BALANCE_20", BALANCED),
    CatalogEntry("バランス型40", "BALANCE_40", BALANCED),
    CatalogEntry("バランス型60", "BALANCE_60", BALANCED),
    CatalogEntry("バランス型80", "BALANCE_80", BALANCED),
    CatalogEntry("日本株式型TOP", "JP_STOCK_TOP", EQUITY, ("日本株式ＴＯＰ型", "日本株式TOP型")),
    CatalogEntry("日本株式型JV", "JP_STOCK_JV", EQUITY, ("日本株式ＪＶ型", "日本株式JV型")),
    CatalogEntry("日本株式型JG", "JP_STOCK_JG", EQUITY, ("日本株式ＪＧ型", "日本株式JG型")),
    CatalogEntry("世界株式型GQ", "WORLD_STOCK_GQ", EQUITY, ("世界株式ＧＱ型", "世界株式GQ型")),
    CatalogEntry("世界株式型GI", "WORLD_STOCK_GI", EQUITY, ("世界株式ＧＩ型", "世界株式GI型")),
    CatalogEntry(
        "海外株式型MSP",
        "FOREIGN_STOCK_MSP",
        EQUITY,
        ("外国株式ＭＳＰ型", "外国株式MSP型", "海外株式ＭＳＰ型"),
    ),
    CatalogEntry("日本債券型NOP", "DOMESTIC_BOND", BOND, ("国内債券型", "日本債券ＮＯＰ型")),
    CatalogEntry("海外債券型FTP", "FOREIGN_BOND", BOND, ("外国債券型", "海外債券ＦＴＰ型")),
    CatalogEntry(
        "世界債券型GQ",
        "WORLD_BOND_GD",
        BOND,
        ("世界債券ＧＤ型", "世界債券ＧＱ型", "世界債券GD型", "世界債券GQ型"),
    ),
    CatalogEntry("海外リート型SPP", "WORLD_REIT", REIT, ("世界ＲＥＩＴ型", "世界リート型", "海外リートＳＰＰ型")),
    CatalogEntry("日本リート型TSP", "JP_REIT", REIT, ("日本ＲＥＩＴ型", "日本リートＴＳＰ型")),
    CatalogEntry("マネー型", "MONEY_MARKET", MONEY_MARKET, ("マネーマーケット型",)),
)

SONY_ANNUITY_CATALOG: Catalog = (
    CatalogEntry("バランス型20", "SONY_ANNUITY_BALANCE20", BALANCED),
    CatalogEntry("バランス型40", "SONY_ANNUITY_BALANCE40", BALANCED),
    CatalogEntry("バランス型60", "SONY_ANNUITY_BALANCE60", BALANCED),
    CatalogEntry("バランス型80", "SONY_ANNUITY_BALANCE80", BALANCED),
    CatalogEntry("日本株式型TOP", "SONY_ANNUITY_JP_EQUITY_TOP", EQUITY),
    CatalogEntry("日本株式型JV", "SONY_ANNUITY_JP_EQUITY_JV", EQUITY),
    CatalogEntry("日本株式型JG", "SONY_ANNUITY_JP_EQUITY_JG", EQUITY),
    CatalogEntry("マネー型", "SONY_ANNUITY_MONEY", MONEY_MARKET),
    CatalogEntry("世界株式型GQ", "SONY_ANNUITY_GLOBAL_EQUITY_GQ", EQUITY),
    CatalogEntry("世界株式型GI", "SONY_ANNUITY_GLOBAL_EQUITY_GI", EQUITY),
    CatalogEntry("海外株式型MSP", "SONY_ANNUITY_FOREIGN_EQUITY_MSP", EQUITY),
    CatalogEntry("日本債券型NOP", "SONY_ANNUITY_JP_BOND_NOP", BOND),
    CatalogEntry("世界債券型GQ", "SONY_ANNUITY_GLOBAL_BOND_GQ", BOND),
    CatalogEntry("海外債券型FTP", "SONY_ANNUITY_FOREIGN_BOND_FTP", BOND),
)

SONY_LIFE_CATALOG: Catalog = (
    CatalogEntry("世界株式型", "SONY_GLOBAL_EQUITY", EQUITY),
    CatalogEntry("世界コア株式型", "SONY_CORE_GLOBAL_EQUITY", EQUITY),
    CatalogEntry("世界債券型", "SONY_GLOBAL_BOND", BOND),
    CatalogEntry("株式型", "SONY_DOMESTIC_EQUITY", EQUITY),
    CatalogEntry("日本成長株式型", "SONY_DOMESTIC_GROWTH", EQUITY),
    CatalogEntry("総合型", "SONY_BALANCED_TOTAL", BALANCED),
    CatalogEntry("債券型", "SONY_BOND", BOND),
    CatalogEntry("短期金融市場型", "SONY_MONEY_MARKET", MONEY_MARKET),
)

# "外国株式型" is not published in the performance section, only "外国株式プラス型".
AXA_CATALOG: Catalog = (
    CatalogEntry("安定成長バランス型", "AXA_BALANCED_STABLE", BALANCED),
    CatalogEntry("積極運用バランス型", "AXA_BALANCED_AGGRESSIVE", BALANCED),
    CatalogEntry("日本株式型", "AXA_DOMESTIC_EQUITY", EQUITY),
    CatalogEntry("日本株式プラス型", "AXA_DOMESTIC_EQUITY_PLUS", EQUITY),
    CatalogEntry("新興国株式型", "AXA_EMERGING_EQUITY", EQUITY),
    CatalogEntry("外国株式プラス型", "AXA_FOREIGN_EQUITY_PLUS", EQUITY),
    CatalogEntry("世界株式プラス型", "AXA_GLOBAL_EQUITY", EQUITY),
    CatalogEntry("SDGs世界株式型", "AXA_SDGS_EQUITY", EQUITY),
    CatalogEntry("外国債券型", "AXA_FOREIGN_BOND", BOND),
    CatalogEntry("オーストラリア債券型", "AXA_AUSTRALIA_BOND", BOND),
    CatalogEntry("世界債券プラス型", "AXA_GLOBAL_BOND", BOND),
    CatalogEntry("金融市場型", "AXA_MONEY_MARKET", MONEY_MARKET),
)

PRUDENTIAL_CATALOG: Catalog = (
    CatalogEntry("総合型", "PRU_BALANCED_TOTAL", BALANCED),
    CatalogEntry("債券型", "PRU_BOND", BOND),
    CatalogEntry("株式型", "PRU_DOMESTIC_EQUITY", EQUITY),
    CatalogEntry("米国債券型", "PRU_US_BOND", BOND),
    CatalogEntry("米国株式型", "PRU_US_EQUITY", EQUITY),
    CatalogEntry("REIT型", "PRU_REIT", REIT),
    CatalogEntry("世界株式型", "PRU_GLOBAL_EQUITY", EQUITY),
    CatalogEntry("外国株式型", "PRU_FOREIGN_EQUITY", EQUITY),
    CatalogEntry("新興国株式型", "PRU_EMERGING_EQUITY", EQUITY),
    CatalogEntry("世界債券型", "PRU_GLOBAL_BOND", BOND),
    CatalogEntry("外国債券型", "PRU_FOREIGN_BOND", BOND),
    CatalogEntry("短期金融市場型", "PRU_MONEY_MARKET", MONEY_MARKET),
)

CATALOGS: Mapping[CarrierCode, Catalog] = MappingProxyType(
    {
        CarrierCode.SONY_LIFE_SOVANI: SOVANI_CATALOG,
        CarrierCode.SONY_LIFE_ANNUITY: SONY_ANNUITY_CATALOG,
        CarrierCode.SONY_LIFE: SONY_LIFE_CATALOG,
        CarrierCode.AXA_LIFE: AXA_CATALOG,
        CarrierCode.PRUDENTIAL_LIFE: PRUDENTIAL_CATALOG,
    }
)


def catalog_for(carrier: CarrierCode) -> Catalog:
    return CATALOGS[carrier]
