"""Filters that adjust host output: menu arguments, body classes, titles and post content."""

import gettext
import re
from collections.abc import Iterable
from typing import Any

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.base import ThemeHost
from padhang_theme.models.post import Author, Post, PostFormat
from padhang_theme.models.view import SiteInfo, ViewContext
from padhang_theme.shared.i18n import get_translations

GROUP_BLOG_CLASS = "group-blog"
SINGULAR_CLASS = "singular"

DEFAULT_STATUS_AVATAR_SIZE = 64

ANCHOR_HREF_PATTERN = re.compile(r"<a\s[^>]*?href=(['\"])(.+?)\1", re.IGNORECASE)


def filter_page_menu_args(args: dict[str, Any]) -> dict[str, Any]:
    """Make the page menu fallback show a link to the home page."""
    return {**args, "show_home": True}


def filter_body_classes(classes: Iterable[str], view: ViewContext) -> list[str]:
    filtered: list[str] = list(dict.fromkeys(classes))

    # Blogs with more than one published author.
    if view.is_multi_author and GROUP_BLOG_CLASS not in filtered:
        filtered.append(GROUP_BLOG_CLASS)

    if view.is_singular and SINGULAR_CLASS not in filtered:
        filtered.append(SINGULAR_CLASS)

    return filtered


def filter_title(title: str, sep: str, view: ViewContext, site: SiteInfo, translations: gettext.NullTranslations | None = None) -> str:
    """Build the document title for the current view: the title, the site name, the tagline on the home page
    and the page number on paginated views. Feeds keep the title as is."""

    if view.is_feed:
        return title

    translations = translations or get_translations()

    title += site.name

    if site.description and (view.is_home or view.is_front_page):
        title += f" {sep} {site.description}"

    if view.page_number >= 2:  # noqa: PLR2004
        title += f" {sep} " + translations.gettext("Page %s") % view.page_number

    return title


def post_author(post: Post, host: ThemeHost) -> Author | None:
    if post.author is not None:
        return post.author

    return host.get_author(post.author_id)


def filter_content(content: str, post: Post, host: ThemeHost, avatar_size: int = DEFAULT_STATUS_AVATAR_SIZE) -> str:
    """Prefix status updates with their author's avatar."""
    if post.format is not PostFormat.STATUS:
        return content

    author = post_author(post=post, host=host)

    if author is None:
        avatar = host.get_avatar(None, avatar_size)
    else:
        avatar = host.get_avatar(author.email, avatar_size, alt=author.display_name)

    return "".join([avatar, content])


def setup_author(author: Author | None, view: ViewContext, host: ThemeHost) -> Author | None:
    """Resolve the author of an author archive from its first post, so author templates do not need the loop."""
    if view.is_author and view.post is not None:
        return post_author(post=view.post, host=host)

    return author


def get_url_in_content(content: str) -> str | None:
    if match := ANCHOR_HREF_PATTERN.search(content):
        return match.group(2).strip()

    return None


def get_link_url(post: Post, registry: HookRegistry | None = None) -> str:
    """The first URL in a link post, or the post permalink when the content has none."""
    if url := get_url_in_content(post.content):
        return url

    if registry is None:
        return post.permalink

    return registry.apply_filters("the_permalink", post.permalink, post)
