from typing import Annotated, Any

from pydantic import Field

from padhang_theme.models.comment import Comment, RenderArgs
from padhang_theme.models.post import Post
from padhang_theme.models.view import SiteInfo, ViewContext

COMMENT = Annotated[Comment, Field(description="The comment to render, as supplied by the host.")]
RENDER_ARGS = Annotated[RenderArgs, Field(description="The comment list options, including avatar size and maximum depth.")]
DEPTH = Annotated[int, Field(description="The nesting depth of the comment. Top-level comments are at depth 1.", ge=0)]

VIEW = Annotated[ViewContext, Field(description="What is being viewed on the current request.")]
SITE = Annotated[SiteInfo | None, Field(description="The site being rendered. Defaults to the configured site.")]
POST = Annotated[Post, Field(description="The post being rendered.")]

TITLE = Annotated[str, Field(description="The title text produced by the host for the current view.")]
SEPARATOR = Annotated[str, Field(description="The separator placed between title parts.")]
CONTENT = Annotated[str, Field(description="The post content.")]
BODY_CLASSES = Annotated[list[str], Field(description="The classes of the <body> element.")]
PAGE_MENU_ARGS = Annotated[dict[str, Any], Field(description="The arguments of the page menu fallback.")]

FONT_KIT = Annotated[str | None, Field(description="The font kit, 'roboto' or 'opensans'. Defaults to the configured kit.")]
