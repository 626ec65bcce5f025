from enum import Enum

from pydantic import BaseModel, Field


class PostFormat(str, Enum):
    STANDARD = "standard"
    ASIDE = "aside"
    AUDIO = "audio"
    CHAT = "chat"
    GALLERY = "gallery"
    IMAGE = "image"
    LINK = "link"
    QUOTE = "quote"
    STATUS = "status"
    VIDEO = "video"


class Author(BaseModel):
    """A user who publishes posts."""

    author_id: int = Field(gt=0)
    display_name: str
    email: str | None = None
    url: str | None = None


class Post(BaseModel):
    """A post supplied by the host."""

    post_id: int = Field(gt=0)
    author_id: int = Field(gt=0)
    permalink: str
    content: str = ""
    format: PostFormat = PostFormat.STANDARD
    author: Author | None = Field(default=None, description="The post author, when the host supplies it with the post.")
