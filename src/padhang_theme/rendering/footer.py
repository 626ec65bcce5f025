import gettext

from markupsafe import Markup

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.base import ThemeHost
from padhang_theme.models.menu import NavMenuArgs
from padhang_theme.models.view import SiteInfo
from padhang_theme.rendering.environment import render_template

FOOTER_TEMPLATE = "footer.html.j2"
CREDITS_TEMPLATE = "credits.html.j2"

FOOTER_ACTION = "padhang_footer"

SOCIAL_MENU_ARGS = NavMenuArgs(
    theme_location="social",
    container_class="social-menu",
    link_before='<span class="screen-reader-text">',
    link_after="</span>",
    fallback_cb=None,
    depth=1,
)


def render_credits(site: SiteInfo) -> str:
    return render_template(CREDITS_TEMPLATE, site=site)


def render_footer(host: ThemeHost, registry: HookRegistry, site: SiteInfo, translations: gettext.NullTranslations | None = None) -> str:
    """Close the content area and render the site footer, the social menu and the footer action output."""
    return render_template(
        FOOTER_TEMPLATE,
        translations=translations,
        social_menu=Markup(host.nav_menu(SOCIAL_MENU_ARGS)),
        copyright=Markup(registry.render_action(FOOTER_ACTION, site)),
        footer_scripts=Markup(host.footer_scripts()),
    )
