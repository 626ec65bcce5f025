import re
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator, model_validator


class CommentType(str, Enum):
    COMMENT = "comment"
    PINGBACK = "pingback"
    TRACKBACK = "trackback"

    @property
    def is_linkback(self) -> bool:
        return self in (CommentType.PINGBACK, CommentType.TRACKBACK)

    @classmethod
    def from_host(cls, value: Any) -> "CommentType":  # pyright: ignore[reportAny]
        """Normalise a host comment type. Empty and custom types render as regular comments."""
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.COMMENT


class ApprovalStatus(str, Enum):
    APPROVED = "approved"
    PENDING = "pending"
    SPAM = "spam"
    TRASH = "trash"
    POST_TRASHED = "post-trashed"

    @property
    def awaiting_moderation(self) -> bool:
        return self is ApprovalStatus.PENDING

    @classmethod
    def from_host(cls, value: Any) -> "ApprovalStatus":  # pyright: ignore[reportAny]
        """Normalise the host's approval flag, which mixes numeric strings and words."""
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().lower()

        if normalized in HOST_APPROVED_VALUES:
            return cls.APPROVED

        if normalized in HOST_PENDING_VALUES:
            return cls.PENDING

        return cls(normalized)


HOST_APPROVED_VALUES = {"1", "approve", "approved", "true"}
HOST_PENDING_VALUES = {"0", "hold", "pending", "unapproved", "false"}


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


UNPADDED_DAY = "%-d"


def format_datetime(value: datetime, date_format: str) -> str:
    """strftime, plus the unpadded day directive on every platform."""
    return value.strftime(date_format.replace(UNPADDED_DAY, str(value.day)))


class CommentAuthor(BaseModel):
    """The person, or linking site, a comment is attributed to."""

    name: str
    email: str | None = None
    url: str | None = None
    user_id: int | None = Field(default=None, description="The registered user behind the comment. None or 0 for guests.")

    @property
    def is_registered(self) -> bool:
        return bool(self.user_id)


class Comment(BaseModel):
    """A comment on a post, as handed to the theme by the host."""

    comment_id: int = Field(gt=0)
    post_id: int = Field(gt=0)
    post_author_id: int = Field(description="The user id of the author of the post the comment belongs to.")
    author: CommentAuthor
    content: str = Field(description="The comment body, already filtered by the host.")
    date: datetime
    approved: ApprovalStatus = ApprovalStatus.APPROVED
    comment_type: CommentType = CommentType.COMMENT
    host_type: str | None = Field(default=None, exclude=True, description="The comment type as the host stores it, custom types included.")
    parent_id: int = Field(default=0, ge=0)
    has_children: bool = False
    url: str | None = Field(default=None, description="The permalink of the comment.")

    @model_validator(mode="before")
    @classmethod
    def keep_host_type(cls, data: Any) -> Any:  # pyright: ignore[reportAny]
        if isinstance(data, dict) and "host_type" not in data:
            comment_type = data.get("comment_type")  # pyright: ignore[reportUnknownMemberType, reportUnknownVariableType]
            if isinstance(comment_type, str):
                host_type = comment_type.value if isinstance(comment_type, CommentType) else comment_type.strip()
                return {**data, "host_type": host_type or None}

        return data  # pyright: ignore[reportUnknownVariableType]

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Naive host dates are UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)

        return value

    @field_validator("approved", mode="before")
    @classmethod
    def normalize_approved(cls, value: Any) -> ApprovalStatus:  # pyright: ignore[reportAny]
        return ApprovalStatus.from_host(value)

    @field_validator("comment_type", mode="before")
    @classmethod
    def normalize_comment_type(cls, value: Any) -> CommentType:  # pyright: ignore[reportAny]
        return CommentType.from_host(value)

    @field_serializer("date")
    def serialize_datetime(self, value: datetime) -> str:
        return value.isoformat()

    @computed_field
    @property
    def is_by_post_author(self) -> bool:
        return self.author.is_registered and self.author.user_id == self.post_author_id

    def css_classes(self, depth: int) -> list[str]:
        """The classes of the comment's list item."""
        classes: list[str] = [self.host_type or self.comment_type.value]

        if self.author.is_registered:
            classes.append("byuser")
            if author_slug := slugify(self.author.name):
                classes.append(f"comment-author-{author_slug}")

        if self.is_by_post_author:
            classes.append("bypostauthor")

        classes.append(f"depth-{depth}")

        if self.has_children:
            classes.append("parent")

        return classes


DEFAULT_REPLY_AFTER = " <span>&darr;</span>"


class ReplyLinkArgs(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    reply_text: str
    before: str = ""
    after: str = ""
    depth: int = Field(ge=0)
    max_depth: int = Field(ge=1)


class RenderArgs(BaseModel):
    """Options passed by the host's comment walker to every comment callback."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    avatar_size: int = Field(gt=0, description="The size of the comment avatar in pixels.")
    max_depth: int = Field(ge=1, description="The maximum depth of threaded comments.")
    reply_text: str = "Reply"
    before: str = ""
    after: str = ""
    date_format: str = Field(default="%B %-d, %Y", description="A strftime format for comment dates. %-d is the unpadded day.")
    time_format: str = Field(default="%H:%M", description="A strftime format for comment times.")

    def for_reply(self, depth: int, reply_text: str = "Reply", after: str = DEFAULT_REPLY_AFTER) -> ReplyLinkArgs:
        """The reply link arguments: these args merged with the reply overrides for the current depth."""
        return ReplyLinkArgs(
            reply_text=reply_text,
            before=self.before,
            after=after,
            depth=depth,
            max_depth=self.max_depth,
        )
