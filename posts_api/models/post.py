"""Pydantic models for the ``posts`` table.

Attributes are snake_case in Python and camelCase in the table and in JSON
payloads; always dump with ``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from posts_api.models.enums import AppCategory, NewsCategory, Region

# Client-supplied free-form fields, copied verbatim on create
CLIENT_TEXT_FIELDS: tuple[str, ...] = (
    "source",
    "author",
    "title",
    "description",
    "url",
    "imageVer",
    "imageHor",
    "publishedAt",
    "body",
)


class Post(BaseModel):
    """Full post record as stored and returned by the API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    post_id: int
    created_at: str
    source: str | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_ver: str | None = None
    image_hor: str | None = None
    published_at: str | None = None
    body: str | None = None
    app_category: AppCategory
    news_category: NewsCategory
    region: Region

    def to_record(self) -> dict:
        """Return the table row / JSON payload for this post."""
        return self.model_dump(mode="json", by_alias=True)


class PostUpdate(BaseModel):
    """Payload for updating a post; only title and body are mutable."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    body: str | None = None
