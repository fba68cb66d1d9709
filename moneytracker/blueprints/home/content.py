"""Copy tables for the landing page, one per region.

Every string shown on the page lives here so a translated or A/B variant can
swap a table without touching the templates.
"""

from __future__ import annotations

from dataclasses import dataclass

LOGIN_PATH = "/login"
REGISTER_PATH = "/register"
PLACEHOLDER_HREF = "#"


@dataclass(frozen=True, slots=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True, slots=True)
class StatItem:
    value: str
    label: str
    # Rendered after the value, e.g. the star glyph in "4.8★".
    icon: str | None = None

    @property
    def display_value(self) -> str:
        return f"{self.value}★" if self.icon == "star" else self.value


@dataclass(frozen=True, slots=True)
class FeatureCard:
    icon: str
    title: str
    description: str
    accent: str = "green"


@dataclass(frozen=True, slots=True)
class CopyBlock:
    """Badge, two-line headline and paragraph shared by the hero, features and CTA."""

    badge: str
    badge_icon: str
    headline: tuple[str, str]
    body: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class HeaderCopy:
    brand: str
    login: NavLink
    signup: NavLink


@dataclass(frozen=True, slots=True)
class HeroCopy:
    copy: CopyBlock
    primary: NavLink
    secondary: NavLink
    stats: tuple[StatItem, ...]


@dataclass(frozen=True, slots=True)
class FeaturesCopy:
    copy: CopyBlock
    cards: tuple[FeatureCard, ...]


@dataclass(frozen=True, slots=True)
class CallToActionCopy:
    copy: CopyBlock
    primary: NavLink
    secondary: NavLink


@dataclass(frozen=True, slots=True)
class FooterCopy:
    brand: str
    tagline: str
    copyright: str
    legal_links: tuple[NavLink, ...]


BRAND_NAME = "MoneyTracker"

HEADER = HeaderCopy(
    brand=BRAND_NAME,
    login=NavLink("Login", LOGIN_PATH),
    signup=NavLink("Sign Up", REGISTER_PATH),
)

HERO = HeroCopy(
    copy=CopyBlock(
        badge="日本で最も使いやすい家計簿アプリ",
        badge_icon="sparkles",
        headline=("お金の管理を", "もっとスマートに"),
        body=("MoneyTrackerで家計を見える化し、", "理想の未来を手に入れましょう"),
    ),
    primary=NavLink("無料で始める", REGISTER_PATH),
    secondary=NavLink("ログイン", LOGIN_PATH),
    stats=(
        StatItem("10万+", "利用者数"),
        StatItem("4.8", "満足度", icon="star"),
        StatItem("無料", "基本機能"),
    ),
)

FEATURES = FeaturesCopy(
    copy=CopyBlock(
        badge="充実の機能",
        badge_icon="rocket-launch",
        headline=("家計管理に必要な", "すべてが揃っています"),
        body=("シンプルで直感的な操作で、誰でも簡単に家計を管理できます",),
    ),
    cards=(
        FeatureCard(
            icon="chart-bar",
            title="スマート分析",
            description="AIが支出パターンを分析し、無駄遣いを発見。美しいグラフで家計の状況を一目で把握できます。",
        ),
        FeatureCard(
            icon="currency-dollar",
            title="簡単記録",
            description="カレンダーをタップするだけで収支を記録。カテゴリ分けも自動で、面倒な入力作業は不要です。",
        ),
        FeatureCard(
            icon="shield-check",
            title="安心セキュリティ",
            description="銀行レベルの暗号化でデータを保護。プライバシーを最優先に、安全に家計管理ができます。",
            accent="purple",
        ),
    ),
)

CALL_TO_ACTION = CallToActionCopy(
    copy=CopyBlock(
        badge="今すぐ始めよう",
        badge_icon="rocket-launch",
        headline=("あなたの理想の家計を", "実現しませんか？"),
        body=("すでに10万人以上の方がMoneyTrackerで", "家計管理を成功させています"),
    ),
    primary=NavLink("今すぐ無料で始める", REGISTER_PATH),
    secondary=NavLink("既にアカウントをお持ちの方", LOGIN_PATH),
)

# TODO: point the legal links at real pages once privacy/terms/contact exist.
FOOTER = FooterCopy(
    brand=BRAND_NAME,
    tagline="日本で最も使いやすい家計簿アプリで、あなたの理想の未来を実現しましょう",
    copyright=f"© 2025 {BRAND_NAME}. すべての権利を保有しています。",
    legal_links=(
        NavLink("プライバシーポリシー", PLACEHOLDER_HREF),
        NavLink("利用規約", PLACEHOLDER_HREF),
        NavLink("お問い合わせ", PLACEHOLDER_HREF),
    ),
)


def page_copy() -> dict[str, object]:
    """Return the region tables keyed by the names the templates use."""

    return {
        "header": HEADER,
        "hero": HERO,
        "features": FEATURES,
        "cta": CALL_TO_ACTION,
        "footer": FOOTER,
    }
