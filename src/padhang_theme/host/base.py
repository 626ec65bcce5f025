from abc import ABC, abstractmethod

from padhang_theme.models.comment import Comment, ReplyLinkArgs
from padhang_theme.models.menu import NavMenuArgs
from padhang_theme.models.post import Author


class ThemeHost(ABC):
    """The host APIs the theme renders through. The host owns users, comments, menus and capabilities."""

    @abstractmethod
    def get_avatar(self, email: str | None, size: int, alt: str = "") -> str:
        """Return an avatar <img> tag for an email address."""

    @abstractmethod
    def edit_comment_link(self, comment: Comment, text: str) -> str | None:
        """Return the edit link for a comment, or None when the viewer may not edit it."""

    @abstractmethod
    def comment_reply_link(self, comment: Comment, args: ReplyLinkArgs) -> str | None:
        """Return the reply link for a comment, or None when replies are not possible."""

    @abstractmethod
    def comment_link(self, comment: Comment) -> str:
        """Return the permalink of a comment."""

    @abstractmethod
    def nav_menu(self, args: NavMenuArgs) -> str:
        """Render the menu assigned to a theme location."""

    @abstractmethod
    def footer_scripts(self) -> str:
        """Return the markup the host prints before </body>."""

    @abstractmethod
    def get_author(self, author_id: int) -> Author | None:
        """Look up a user by id."""
