from pydantic import BaseModel, Field, computed_field

from padhang_theme.models.post import Post


class SiteInfo(BaseModel):
    """The blog's identity as configured in the host."""

    name: str = Field(default="", description="The name of the site.")
    description: str = Field(default="", description="The tagline of the site. May be empty.")
    url: str = Field(default="/", description="The home URL of the site.")


class ViewContext(BaseModel):
    """What is being viewed on the current request.

    The host exposes these as global query predicates; the theme receives them explicitly."""

    is_feed: bool = False
    is_home: bool = False
    is_front_page: bool = False
    is_singular: bool = False
    is_author: bool = False
    is_multi_author: bool = Field(default=False, description="Whether the site has more than one published author.")

    page: int = Field(default=0, ge=0, description="The page of a multi-page post.")
    paged: int = Field(default=0, ge=0, description="The page of a paginated archive.")

    post: Post | None = Field(default=None, description="The queried post, if any.")

    @computed_field
    @property
    def page_number(self) -> int:
        return max(self.page, self.paged)
