from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    title: str
    url: str


class NavMenuArgs(BaseModel):
    """Arguments for rendering a navigation menu assigned to a theme location."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    theme_location: str
    container_class: str = ""
    link_before: str = ""
    link_after: str = ""
    fallback_cb: str | None = Field(default=None, description="The fallback used when no menu is assigned. None renders nothing.")
    depth: int = Field(default=0, ge=0, description="How many levels of the hierarchy to include. 0 means all.")
