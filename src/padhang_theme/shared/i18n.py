import gettext
from functools import lru_cache
from pathlib import Path

TEXT_DOMAIN = "padhang"

LANGUAGES_DIR = Path(__file__).parent.parent / "languages"

DEFAULT_LOCALE = "en_US"


@lru_cache(maxsize=16)
def get_translations(locale: str = DEFAULT_LOCALE) -> gettext.NullTranslations:
    """Load the theme's catalogue for a locale, falling back to the untranslated strings."""
    return gettext.translation(TEXT_DOMAIN, localedir=LANGUAGES_DIR, languages=[locale], fallback=True)
