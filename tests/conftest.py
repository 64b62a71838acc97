import pytest

SOVANI_TEXT = """ソニー生命保険株式会社
変額個人年金保険 SOVANI 特別勘定の運用状況
2025年8月29日現在
特別勘定 指数値 前月末比 3ヶ月 6ヶ月 1年 設定来
バランス型20 105.87 ＋0.29％ ＋2.06％ ＋1.74％ ＋2.29％ ＋5.87％
バランス型40111.20＋0.55％＋3.10％＋2.20％△1.05％＋8.00％
バランス型60
108.00 ＋0.10％ ＋0.20％ ＋0.30％ ＋0.40％ ＋1.00％
日本株式ＴＯＰ型 130.12 －1.20％ ＋4.50％ ＋6.10％ ＋12.30％ ＋30.12％
"""

ANNUITY_TEXT = """変額個人年金保険（無告知型）22
ソニー生命保険株式会社
2025年8月 特別勘定の運用実績
バランス型20105.87＋0.29％＋2.06％＋1.74％＋2.29％
マネー型 99.98 ＋0.00％ －0.01％ △0.02％ ＋0.01％
"""

SONY_LIFE_TEXT = """変額保険（特別勘定）の現況
2025年7月末現在
特別勘定 指数騰落率
世界株式型 ＋2.31％
世界コア株式型 ＋1.80％
株式型 △0.52％
債券型 －0.10％
短期金融市場型 0.00％
"""

AXA_TEXT = """アクサ生命保険株式会社
ユニット・リンク 特別勘定の運用実績 2025年7月末現在
安定成長バランス型2008/4/1
249.230.994.135.11
新興国株式型2015/5/1
165.83△ 0.5311.7818.42
日本株式型2008/4/1 132.450.120.3310.22
外国債券型2008/4/1
98.7
"""

PRUDENTIAL_TEXT = """プルデンシャル生命保険株式会社
変額保険 特別勘定の運用状況（2025年7月末）
●総合型
ﾕﾆｯﾄﾊﾞﾘｭｰ︓ 306.58
期 間騰落率利回り月払利回り
直近1年   -0.64%   -0.64%-2.32%
●米国株式型
ﾕﾆｯﾄﾊﾞﾘｭｰ︓ 512.10
期 間騰落率利回り月払利回り
直近1年   12.40%   12.40%11.02%
●株式型
ﾕﾆｯﾄﾊﾞﾘｭｰ︓ 250.00
●債券型
ﾕﾆｯﾄﾊﾞﾘｭｰ︓ 180.25
直近1年   △1.10%   △1.10%-0.50%
"""


@pytest.fixture
def sovani_text() -> str:
    return SOVANI_TEXT


@pytest.fixture
def annuity_text() -> str:
    return ANNUITY_TEXT


@pytest.fixture
def sony_life_text() -> str:
    return SONY_LIFE_TEXT


@pytest.fixture
def axa_text() -> str:
    return AXA_TEXT


@pytest.fixture
def prudential_text() -> str:
    return PRUDENTIAL_TEXT
