import gettext
from typing import Any

from fastmcp.utilities.logging import get_logger
from markupsafe import Markup
from pydantic import ValidationError

from padhang_theme.host.base import ThemeHost
from padhang_theme.models.comment import Comment, CommentAuthor, RenderArgs, format_datetime
from padhang_theme.rendering.environment import render_template
from padhang_theme.shared.errors import RenderArgumentError
from padhang_theme.shared.i18n import get_translations

LINKBACK_TEMPLATE = "linkback.html.j2"
COMMENT_TEMPLATE = "comment.html.j2"

logger = get_logger(__name__)


def author_link(author: CommentAuthor) -> Markup:
    """The comment author's name, linked to their site when they left one."""
    if not author.url:
        return Markup.escape(author.name)

    return Markup('<a href="{url}" rel="external nofollow" class="url">{name}</a>').format(url=author.url, name=author.name)


def _validate(comment: Comment | dict[str, Any], args: RenderArgs | dict[str, Any], depth: int) -> tuple[Comment, RenderArgs]:
    if depth < 0:
        raise RenderArgumentError(callback="render_comment", message=f"depth must be zero or more, got {depth}")

    try:
        comment = comment if isinstance(comment, Comment) else Comment.model_validate(comment)
        args = args if isinstance(args, RenderArgs) else RenderArgs.model_validate(args)
    except ValidationError as e:
        raise RenderArgumentError(callback="render_comment", message=str(e)) from e

    return comment, args


def render_comment(
    comment: Comment | dict[str, Any],
    args: RenderArgs | dict[str, Any],
    depth: int,
    host: ThemeHost,
    translations: gettext.NullTranslations | None = None,
) -> str:
    """Render one comment of a threaded comment list.

    Pingbacks and trackbacks get a compact fragment without an avatar. Regular comments get the avatar, author,
    permalinked date, moderation notice, body and reply link. The list item is left open for the host's walker
    to close after any child comments."""

    comment, args = _validate(comment=comment, args=args, depth=depth)
    translations = translations or get_translations()

    logger.debug(f"Rendering {comment.comment_type.value} {comment.comment_id} at depth {depth}")

    if comment.comment_type.is_linkback:
        return render_template(
            LINKBACK_TEMPLATE,
            translations=translations,
            comment=comment,
            classes=comment.css_classes(depth=depth),
            author_link=author_link(comment.author),
            edit_link=_host_markup(host.edit_comment_link(comment, translations.gettext("(Edit)"))),
        )

    reply_args = args.for_reply(depth=depth, reply_text=translations.gettext("Reply"))

    return render_template(
        COMMENT_TEMPLATE,
        translations=translations,
        comment=comment,
        classes=comment.css_classes(depth=depth),
        avatar=_host_markup(host.get_avatar(comment.author.email, args.avatar_size)),
        author_link=author_link(comment.author),
        permalink=host.comment_link(comment),
        comment_date=format_datetime(comment.date, args.date_format),
        comment_time=format_datetime(comment.date, args.time_format),
        edit_link=_host_markup(host.edit_comment_link(comment, translations.gettext("Edit"))),
        content=Markup(comment.content),
        reply_link=_host_markup(host.comment_reply_link(comment, reply_args)),
    )


def _host_markup(markup: str | None) -> Markup | None:
    """Host APIs return trusted HTML."""
    if markup is None:
        return None

    return Markup(markup)
