from logging import Logger
from typing import Any

from fastmcp.server import FastMCP
from fastmcp.tools import Tool
from fastmcp.utilities.logging import get_logger

from padhang_theme.shared.annotations import (
    BODY_CLASSES,
    COMMENT,
    CONTENT,
    DEPTH,
    FONT_KIT,
    PAGE_MENU_ARGS,
    POST,
    RENDER_ARGS,
    SEPARATOR,
    SITE,
    TITLE,
    VIEW,
)
from padhang_theme.theme import PadhangTheme


class ThemeServer:
    """Exposes the theme's render callbacks as tools, so a host's render loop can call them remotely."""

    theme: PadhangTheme
    logger: Logger

    def __init__(self, theme: PadhangTheme, logger: Logger | None = None):
        self.logger = logger or get_logger(name=__name__)
        self.theme = theme

    def register_tools(self, fastmcp: FastMCP[Any]) -> FastMCP[Any]:
        for tool in self.tools():
            _ = fastmcp.add_tool(tool=tool)

        return fastmcp

    def tools(self) -> list[Tool]:
        return [
            Tool.from_function(fn=self.render_comment),
            Tool.from_function(fn=self.render_footer),
            Tool.from_function(fn=self.build_fonts_url),
            Tool.from_function(fn=self.filter_page_menu_args),
            Tool.from_function(fn=self.filter_body_classes),
            Tool.from_function(fn=self.filter_title),
            Tool.from_function(fn=self.filter_content),
            Tool.from_function(fn=self.get_link_url),
        ]

    def render_comment(self, comment: COMMENT, args: RENDER_ARGS, depth: DEPTH) -> str:
        """Render the list item of a comment, pingback or trackback in a threaded comment list."""
        return self.theme.render_comment(comment=comment, args=args, depth=depth)

    def render_footer(self, site: SITE = None) -> str:
        """Render the site footer and close the page markup."""
        return self.theme.render_footer(site=site)

    def build_fonts_url(self, kit: FONT_KIT = None) -> str:
        """Build the Google Fonts stylesheet URL for a font kit."""
        return self.theme.fonts_url(kit=kit)

    def filter_page_menu_args(self, args: PAGE_MENU_ARGS) -> dict[str, Any]:
        """Make the page menu fallback show a link to the home page."""
        return self.theme.filter_page_menu_args(args=args)

    def filter_body_classes(self, classes: BODY_CLASSES, view: VIEW) -> list[str]:
        """Add the theme's classes to the classes of the <body> element."""
        return self.theme.filter_body_classes(classes=classes, view=view)

    def filter_title(self, title: TITLE, sep: SEPARATOR, view: VIEW, site: SITE = None) -> str:
        """Build the document title for the current view."""
        return self.theme.filter_title(title=title, sep=sep, view=view, site=site)

    def filter_content(self, content: CONTENT, post: POST) -> str:
        """Prefix status updates with their author's avatar."""
        return self.theme.filter_content(content=content, post=post)

    def get_link_url(self, post: POST) -> str:
        """Get the first URL in a post, falling back to the post permalink."""
        return self.theme.get_link_url(post=post)
