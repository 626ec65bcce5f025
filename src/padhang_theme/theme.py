import gettext
from collections.abc import Iterable
from logging import Logger
from typing import Any

from fastmcp.utilities.logging import get_logger

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.base import ThemeHost
from padhang_theme.models.comment import Comment, RenderArgs
from padhang_theme.models.post import Author, Post
from padhang_theme.models.view import SiteInfo, ViewContext
from padhang_theme.rendering import comments, filters, fonts, footer
from padhang_theme.settings import ThemeSettings
from padhang_theme.shared.i18n import get_translations


class PadhangTheme:
    """The theme's callbacks, bound to a host, settings and a translation catalogue."""

    host: ThemeHost
    settings: ThemeSettings
    translations: gettext.NullTranslations
    registry: HookRegistry
    logger: Logger

    def __init__(
        self,
        host: ThemeHost,
        settings: ThemeSettings | None = None,
        translations: gettext.NullTranslations | None = None,
        registry: HookRegistry | None = None,
        logger: Logger | None = None,
    ):
        self.logger = logger or get_logger(name=__name__)
        self.host = host
        self.settings = settings or ThemeSettings()
        self.translations = translations or get_translations(self.settings.locale)
        self.registry = registry or HookRegistry(logger=self.logger)

    def register_hooks(self, registry: HookRegistry | None = None) -> HookRegistry:
        registry = registry or self.registry

        registry.add_filter("wp_page_menu_args", self.filter_page_menu_args)
        registry.add_filter("body_class", self.filter_body_classes, accepted_args=2)
        registry.add_filter("wp_title", self.filter_title, accepted_args=4)
        registry.add_filter("author_data", self.setup_author, accepted_args=2)
        registry.add_filter("the_content", self.filter_content, accepted_args=2)
        registry.add_action(footer.FOOTER_ACTION, self.render_credits)

        self.logger.info(f"Registered theme hooks on {len(registry.hooks)} extension points")

        return registry

    def render_comment(self, comment: Comment | dict[str, Any], args: RenderArgs | dict[str, Any], depth: int) -> str:
        return comments.render_comment(comment=comment, args=args, depth=depth, host=self.host, translations=self.translations)

    def render_footer(self, site: SiteInfo | None = None) -> str:
        return footer.render_footer(host=self.host, registry=self.registry, site=site or self.settings.site, translations=self.translations)

    def render_credits(self, site: SiteInfo | None = None) -> str:
        return footer.render_credits(site=site or self.settings.site)

    def fonts_url(self, kit: fonts.FontKit | str | None = None) -> str:
        return fonts.build_fonts_url(
            kit=self.settings.fonts_kit if kit is None else kit,
            disabled_families=self.settings.disabled_font_families,
            translations=self.translations,
        )

    def filter_page_menu_args(self, args: dict[str, Any]) -> dict[str, Any]:
        return filters.filter_page_menu_args(args)

    def filter_body_classes(self, classes: Iterable[str], view: ViewContext) -> list[str]:
        return filters.filter_body_classes(classes=classes, view=view)

    def filter_title(self, title: str, sep: str, view: ViewContext, site: SiteInfo | None = None) -> str:
        return filters.filter_title(title=title, sep=sep, view=view, site=site or self.settings.site, translations=self.translations)

    def filter_content(self, content: str, post: Post) -> str:
        return filters.filter_content(content=content, post=post, host=self.host, avatar_size=self.settings.status_avatar_size)

    def setup_author(self, author: Author | None, view: ViewContext) -> Author | None:
        return filters.setup_author(author=author, view=view, host=self.host)

    def get_link_url(self, post: Post) -> str:
        return filters.get_link_url(post=post, registry=self.registry)
