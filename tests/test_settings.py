import pytest

from padhang_theme.models.view import SiteInfo
from padhang_theme.rendering.fonts import FontKit
from padhang_theme.settings import ThemeSettings, get_disabled_font_families, get_fonts_kit


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ["THEME_FONTS_KIT", "DISABLED_FONT_FAMILIES", "THEME_LOCALE", "STATUS_AVATAR_SIZE", "SITE_NAME", "SITE_DESCRIPTION", "SITE_URL"]:
        monkeypatch.delenv(name, raising=False)

    assert ThemeSettings.from_env() == ThemeSettings()


def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("THEME_FONTS_KIT", "opensans")
    monkeypatch.setenv("DISABLED_FONT_FAMILIES", " Bitter, ,Roboto Slab ")
    monkeypatch.setenv("THEME_LOCALE", "id_ID")
    monkeypatch.setenv("STATUS_AVATAR_SIZE", "48")
    monkeypatch.setenv("SITE_NAME", "My Blog")
    monkeypatch.setenv("SITE_DESCRIPTION", "Just another blog")
    monkeypatch.setenv("SITE_URL", "https://blog.example.com/")

    assert ThemeSettings.from_env() == ThemeSettings(
        fonts_kit=FontKit.OPENSANS,
        disabled_font_families=frozenset({"Bitter", "Roboto Slab"}),
        locale="id_ID",
        status_avatar_size=48,
        site=SiteInfo(name="My Blog", description="Just another blog", url="https://blog.example.com/"),
    )


def test_unknown_fonts_kit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("THEME_FONTS_KIT", "papyrus")

    assert get_fonts_kit() is FontKit.ROBOTO


def test_no_disabled_font_families(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DISABLED_FONT_FAMILIES", "")

    assert get_disabled_font_families() == frozenset()
