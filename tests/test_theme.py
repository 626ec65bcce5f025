from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.static import StaticHost
from padhang_theme.models.comment import Comment, RenderArgs
from padhang_theme.models.menu import NavMenuArgs
from padhang_theme.models.post import Author, Post
from padhang_theme.models.view import ViewContext
from padhang_theme.rendering.fonts import FontKit
from padhang_theme.settings import ThemeSettings
from padhang_theme.theme import PadhangTheme


def test_register_hooks(theme: PadhangTheme, registry: HookRegistry):
    assert sorted(registry.hooks) == ["author_data", "body_class", "padhang_footer", "the_content", "wp_page_menu_args", "wp_title"]
    assert registry.has_filter("wp_title", theme.filter_title)


def test_body_class_filter(theme: PadhangTheme, registry: HookRegistry):
    assert registry.apply_filters("body_class", ["blog"], ViewContext(is_multi_author=True, is_singular=True)) == [
        "blog",
        "group-blog",
        "singular",
    ]


def test_wp_title_filter(theme: PadhangTheme, registry: HookRegistry):
    assert registry.apply_filters("wp_title", "", "-", ViewContext(is_front_page=True)) == "My Blog - Just another blog"


def test_wp_title_filter_with_site(theme: PadhangTheme, registry: HookRegistry):
    view = ViewContext(paged=2)

    assert registry.apply_filters("wp_title", "", "|", view, theme.settings.site.model_copy(update={"name": "Other"})) == "Other | Page 2"


def test_the_content_filter(theme: PadhangTheme, registry: HookRegistry, status_post: Post):
    assert registry.apply_filters("the_content", "<p>Out for coffee.</p>", status_post).startswith("<img ")


def test_author_data_filter(theme: PadhangTheme, registry: HookRegistry, status_post: Post, post_author: Author):
    assert registry.apply_filters("author_data", None, ViewContext(is_author=True, post=status_post)) == post_author


def test_page_menu_fallback_shows_home(theme: PadhangTheme, static_host: StaticHost):
    menu = static_host.nav_menu(NavMenuArgs(theme_location="primary", fallback_cb="wp_page_menu"))

    assert '<a href="https://blog.example.com/">Home</a>' in menu


def test_render_footer_uses_credits(theme: PadhangTheme):
    html = theme.render_footer()

    assert '&copy; <a href="https://blog.example.com/" rel="home">My Blog</a>' in html
    assert "screen-reader-text" in html


def test_render_comment(theme: PadhangTheme, pingback: Comment, render_args: RenderArgs):
    assert "Pingback:" in theme.render_comment(comment=pingback, args=render_args, depth=1)


def test_fonts_url_uses_settings(static_host: StaticHost):
    theme = PadhangTheme(host=static_host, settings=ThemeSettings(fonts_kit=FontKit.OPENSANS, disabled_font_families=frozenset({"Bitter"})))

    assert theme.fonts_url() == "//fonts.googleapis.com/css?family=Open+Sans:400,400italic,700,700italic&subset=latin,latin-ext"
    assert "Roboto+Slab" in theme.fonts_url(kit="roboto")


def test_get_link_url_applies_permalink_filter(theme: PadhangTheme, registry: HookRegistry, status_post: Post):
    registry.add_filter("the_permalink", lambda permalink: permalink.replace("https:", ""))  # pyright: ignore[reportUnknownLambdaType, reportUnknownMemberType]

    assert theme.get_link_url(status_post) == "//blog.example.com/status/"


def test_default_theme_has_its_own_registry(static_host: StaticHost):
    theme = PadhangTheme(host=static_host)
    registry = theme.register_hooks()

    assert registry is theme.registry
    assert registry.has_action("padhang_footer")
