import hashlib
from collections.abc import Mapping, Sequence
from logging import Logger
from typing import Any

from fastmcp.utilities.logging import get_logger
from markupsafe import Markup

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.base import ThemeHost
from padhang_theme.models.comment import Comment, ReplyLinkArgs
from padhang_theme.models.menu import MenuItem, NavMenuArgs
from padhang_theme.models.post import Author

GRAVATAR_URL = "https://secure.gravatar.com/avatar/{email_hash}?s={size}&d=mm&r=g"

PAGE_MENU_FALLBACK = "wp_page_menu"

RESPOND_ID = "respond"


def email_hash(email: str | None) -> str:
    return hashlib.md5((email or "").strip().lower().encode("utf-8"), usedforsecurity=False).hexdigest()


def add_query_arg(url: str, key: str, value: str | int) -> str:
    base, hash_mark, fragment = url.partition("#")
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{key}={value}{hash_mark}{fragment}"


class StaticHost(ThemeHost):
    """An in-memory host with fixed users, menus and capabilities."""

    site_url: str
    authors: dict[int, Author]
    menus: dict[str, list[MenuItem]]
    pages: list[MenuItem]
    can_edit: bool
    comments_open: bool
    footer_markup: str
    registry: HookRegistry | None
    logger: Logger

    def __init__(
        self,
        site_url: str = "/",
        authors: Mapping[int, Author] | None = None,
        menus: Mapping[str, Sequence[MenuItem]] | None = None,
        pages: Sequence[MenuItem] | None = None,
        can_edit: bool = False,
        comments_open: bool = True,
        footer_markup: str = "",
        registry: HookRegistry | None = None,
        logger: Logger | None = None,
    ):
        self.site_url = site_url
        self.authors = dict(authors or {})
        self.menus = {location: list(items) for location, items in (menus or {}).items()}
        self.pages = list(pages or [])
        self.can_edit = can_edit
        self.comments_open = comments_open
        self.footer_markup = footer_markup
        self.registry = registry
        self.logger = logger or get_logger(name=__name__)

    def get_avatar(self, email: str | None, size: int, alt: str = "") -> str:
        src = GRAVATAR_URL.format(email_hash=email_hash(email), size=size)

        return Markup('<img alt="{alt}" src="{src}" class="avatar avatar-{size} photo" height="{size}" width="{size}">').format(
            alt=alt, src=src, size=size
        )

    def edit_comment_link(self, comment: Comment, text: str) -> str | None:
        if not self.can_edit:
            return None

        href = f"{self.site_url.rstrip('/')}/wp-admin/comment.php?action=editcomment&c={comment.comment_id}"

        return Markup('<a class="comment-edit-link" href="{href}">{text}</a>').format(href=href, text=text)

    def comment_link(self, comment: Comment) -> str:
        return comment.url or f"#comment-{comment.comment_id}"

    def post_permalink(self, comment: Comment) -> str:
        if comment.url:
            return comment.url.partition("#")[0]

        return add_query_arg(self.site_url, "p", comment.post_id)

    def comment_reply_link(self, comment: Comment, args: ReplyLinkArgs) -> str | None:
        if not self.comments_open:
            return None

        if args.depth >= args.max_depth:
            return None

        href = add_query_arg(self.post_permalink(comment), "replytocom", comment.comment_id) + f"#{RESPOND_ID}"

        link = Markup('<a rel="nofollow" class="comment-reply-link" href="{href}">{text}</a>').format(href=href, text=args.reply_text)

        return Markup(args.before) + link + Markup(args.after)

    def nav_menu(self, args: NavMenuArgs) -> str:
        items = self.menus.get(args.theme_location)

        if items:
            return self._render_menu(items=items, container_class=args.container_class, link_before=args.link_before, link_after=args.link_after)

        if args.fallback_cb == PAGE_MENU_FALLBACK:
            return self.page_menu({"link_before": args.link_before, "link_after": args.link_after})

        self.logger.debug(f"No menu assigned to {args.theme_location} and no fallback, rendering nothing")

        return ""

    def page_menu(self, args: dict[str, Any]) -> str:
        menu_args: dict[str, Any] = {"menu_class": "menu", "show_home": False, "link_before": "", "link_after": "", **args}

        if self.registry is not None:
            menu_args = self.registry.apply_filters("wp_page_menu_args", menu_args)

        items = list(self.pages)

        if show_home := menu_args.get("show_home"):
            home_title = show_home if isinstance(show_home, str) else "Home"
            items.insert(0, MenuItem(title=home_title, url=self.site_url))

        return self._render_menu(
            items=items,
            container_class=str(menu_args["menu_class"]),
            link_before=str(menu_args["link_before"]),
            link_after=str(menu_args["link_after"]),
        )

    def footer_scripts(self) -> str:
        return Markup(self.footer_markup)

    def get_author(self, author_id: int) -> Author | None:
        return self.authors.get(author_id)

    def _render_menu(self, items: Sequence[MenuItem], container_class: str, link_before: str, link_after: str) -> str:
        if not items:
            return ""

        menu_items = Markup("").join(
            Markup('<li class="menu-item"><a href="{url}">{before}{title}{after}</a></li>').format(
                url=item.url, before=Markup(link_before), title=item.title, after=Markup(link_after)
            )
            for item in items
        )

        return Markup('<div class="{container_class}"><ul class="menu">{items}</ul></div>').format(
            container_class=container_class, items=menu_items
        )
