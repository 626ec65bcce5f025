import gettext
from collections.abc import Collection
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import quote_plus, urlencode

from pydantic import BaseModel, ConfigDict

from padhang_theme.shared.i18n import get_translations

GOOGLE_FONTS_URL = "//fonts.googleapis.com/css"
FONT_SUBSETS = "latin,latin-ext"
FAMILY_SEPARATOR = "|"

# Left unencoded so the query stays readable, as the font service expects.
SAFE_QUERY_CHARACTERS = ":,"


class FontKit(str, Enum):
    ROBOTO = "roboto"
    OPENSANS = "opensans"

    @classmethod
    def parse(cls, value: Any) -> "FontKit":  # pyright: ignore[reportAny]
        """Parse a kit selection, falling back to the default kit for unknown values."""
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.ROBOTO


class FontFamily(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    name: str
    styles: str

    @property
    def toggle_context(self) -> str:
        """The translator context used to switch the family off for languages it cannot render."""
        return f"{self.name} font: on or off"

    @property
    def query_value(self) -> str:
        return f"{self.name}:{self.styles}"

    def is_enabled(self, disabled_families: Collection[str], translations: gettext.NullTranslations) -> bool:
        if self.name in disabled_families:
            return False

        return translations.pgettext(self.toggle_context, "on") != "off"


FONT_KITS: dict[FontKit, tuple[FontFamily, ...]] = {
    FontKit.ROBOTO: (
        FontFamily(name="Roboto", styles="400,400italic,700,700italic"),
        FontFamily(name="Roboto Slab", styles="300,700"),
    ),
    FontKit.OPENSANS: (
        FontFamily(name="Open Sans", styles="400,400italic,700,700italic"),
        FontFamily(name="Bitter", styles="400italic,700"),
    ),
}


def enabled_font_families(
    kit: FontKit | str, disabled_families: Collection[str] = (), translations: gettext.NullTranslations | None = None
) -> list[FontFamily]:
    translations = translations or get_translations()

    return [family for family in FONT_KITS[FontKit.parse(kit)] if family.is_enabled(disabled_families, translations)]


def build_fonts_url(
    kit: FontKit | str = FontKit.ROBOTO, disabled_families: Collection[str] = (), translations: gettext.NullTranslations | None = None
) -> str:
    """Build the Google Fonts stylesheet URL for a font kit.

    Returns an empty string when every family of the kit is switched off."""

    families = enabled_font_families(kit=kit, disabled_families=disabled_families, translations=translations)

    if not families:
        return ""

    query = urlencode(
        {
            "family": FAMILY_SEPARATOR.join(family.query_value for family in families),
            "subset": FONT_SUBSETS,
        },
        safe=SAFE_QUERY_CHARACTERS,
        quote_via=quote_plus,
    )

    return f"{GOOGLE_FONTS_URL}?{query}"
