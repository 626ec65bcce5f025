from datetime import UTC, datetime
from gettext import NullTranslations
from typing import Any

import pytest

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.static import StaticHost
from padhang_theme.models.comment import Comment, CommentAuthor, RenderArgs
from padhang_theme.models.menu import MenuItem
from padhang_theme.models.post import Author, Post, PostFormat
from padhang_theme.models.view import SiteInfo
from padhang_theme.settings import ThemeSettings
from padhang_theme.theme import PadhangTheme

POST_AUTHOR_ID = 7
GUEST_EMAIL = "guest@example.com"
POST_AUTHOR_EMAIL = "jane@example.com"
COMMENT_DATE = datetime(2014, 9, 21, 14, 5, tzinfo=UTC)


class CatalogTranslations(NullTranslations):
    """Translations backed by a dictionary, keyed by message or (context, message)."""

    def __init__(self, catalog: dict[str | tuple[str, str], str]):
        super().__init__()
        self.catalog = catalog

    def gettext(self, message: str) -> str:
        return self.catalog.get(message, message)

    def pgettext(self, context: str, message: str) -> str:
        return self.catalog.get((context, message), message)


@pytest.fixture
def translations() -> NullTranslations:
    return NullTranslations()


@pytest.fixture
def site() -> SiteInfo:
    return SiteInfo(name="My Blog", description="Just another blog", url="https://blog.example.com/")


@pytest.fixture
def post_author() -> Author:
    return Author(author_id=POST_AUTHOR_ID, display_name="Jane Doe", email=POST_AUTHOR_EMAIL, url="https://jane.example.com")


@pytest.fixture
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def static_host(post_author: Author, registry: HookRegistry) -> StaticHost:
    return StaticHost(
        site_url="https://blog.example.com/",
        authors={post_author.author_id: post_author},
        menus={"social": [MenuItem(title="Twitter", url="https://twitter.com/padhang")]},
        pages=[MenuItem(title="About", url="https://blog.example.com/about/")],
        footer_markup='<script src="/wp-includes/js/comment-reply.min.js"></script>',
        registry=registry,
    )


@pytest.fixture
def editor_host(post_author: Author) -> StaticHost:
    return StaticHost(site_url="https://blog.example.com/", authors={post_author.author_id: post_author}, can_edit=True)


@pytest.fixture
def render_args() -> RenderArgs:
    return RenderArgs(avatar_size=56, max_depth=5)


def new_comment(**overrides: Any) -> Comment:  # pyright: ignore[reportAny]
    comment: dict[str, Any] = {
        "comment_id": 42,
        "post_id": 3,
        "post_author_id": POST_AUTHOR_ID,
        "author": CommentAuthor(name="Guest Reader", email=GUEST_EMAIL, url="https://reader.example.com"),
        "content": "<p>Great post!</p>",
        "date": COMMENT_DATE,
        "url": "https://blog.example.com/hello-world/#comment-42",
        **overrides,
    }
    return Comment.model_validate(comment)


@pytest.fixture
def comment() -> Comment:
    return new_comment()


@pytest.fixture
def post_author_comment() -> Comment:
    return new_comment(author=CommentAuthor(name="Jane Doe", email=POST_AUTHOR_EMAIL, user_id=POST_AUTHOR_ID))


@pytest.fixture
def pending_comment() -> Comment:
    return new_comment(approved="0")


@pytest.fixture
def pingback() -> Comment:
    return new_comment(
        comment_type="pingback",
        author=CommentAuthor(name="Another Blog", url="https://another.example.com/linking-post/"),
        content="[&#8230;] a pingback excerpt [&#8230;]",
    )


@pytest.fixture
def status_post(post_author: Author) -> Post:
    return Post(
        post_id=9,
        author_id=post_author.author_id,
        permalink="https://blog.example.com/status/",
        content="<p>Out for coffee.</p>",
        format=PostFormat.STATUS,
    )


@pytest.fixture
def settings(site: SiteInfo) -> ThemeSettings:
    return ThemeSettings(site=site)


@pytest.fixture
def theme(static_host: StaticHost, settings: ThemeSettings, translations: NullTranslations, registry: HookRegistry) -> PadhangTheme:
    theme = PadhangTheme(host=static_host, settings=settings, translations=translations, registry=registry)
    _ = theme.register_hooks()
    return theme
