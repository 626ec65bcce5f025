import os
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from padhang_theme.models.view import SiteInfo
from padhang_theme.rendering.fonts import FontKit
from padhang_theme.shared.i18n import DEFAULT_LOCALE

DEFAULT_STATUS_AVATAR_SIZE = 64


def get_fonts_kit() -> FontKit:
    return FontKit.parse(os.getenv("THEME_FONTS_KIT", FontKit.ROBOTO.value))


def get_disabled_font_families() -> frozenset[str]:
    return frozenset(family.strip() for family in os.getenv("DISABLED_FONT_FAMILIES", "").split(",") if family.strip())


def get_locale() -> str:
    return os.getenv("THEME_LOCALE") or DEFAULT_LOCALE


def get_status_avatar_size() -> int:
    return int(os.getenv("STATUS_AVATAR_SIZE", str(DEFAULT_STATUS_AVATAR_SIZE)))


def get_site_info() -> SiteInfo:
    return SiteInfo(
        name=os.getenv("SITE_NAME", ""),
        description=os.getenv("SITE_DESCRIPTION", ""),
        url=os.getenv("SITE_URL", "/"),
    )


class ThemeSettings(BaseModel):
    """Theme options, the equivalent of the host's theme mods."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    fonts_kit: FontKit = Field(default=FontKit.ROBOTO, description="The font kit used for the Google Fonts stylesheet.")
    disabled_font_families: frozenset[str] = Field(default=frozenset(), description="Font families that should not be requested.")
    locale: str = Field(default=DEFAULT_LOCALE, description="The locale used to translate theme strings.")
    status_avatar_size: int = Field(default=DEFAULT_STATUS_AVATAR_SIZE, gt=0, description="The avatar size on status posts.")
    site: SiteInfo = Field(default_factory=SiteInfo, description="The site the theme is rendering for.")

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            fonts_kit=get_fonts_kit(),
            disabled_font_families=get_disabled_font_families(),
            locale=get_locale(),
            status_avatar_size=get_status_avatar_size(),
            site=get_site_info(),
        )
