"""Pydantic models for feed metadata and normalized items."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unirss.utils.text import strip_invalid_xml_chars
from unirss.utils.urls import is_valid_item_link


class FeedConfig(BaseModel):
    """Feed-level metadata, created once per request.

    Attributes:
        id: Source page URL
        title: Feed title (page title or hostname-derived default)
        description: Feed description
        link: Link back to the source page

    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description='Source URL')
    title: str = Field(description='Feed title')
    description: str = Field(description='Feed description')
    link: str = Field(description='Source page link')

    @field_validator('id', 'title', 'description', 'link', mode='before')
    @classmethod
    def _xml_safe(cls, value: object) -> object:
        return strip_invalid_xml_chars(value) if isinstance(value, str) else value


class ItemRecord(BaseModel):
    """A normalized feed item.

    Attributes:
        id: Stable unique key (magnet URI or resolved absolute link)
        title: Non-empty, trimmed title
        link: Absolute URL or magnet URI
        description: Possibly empty description
        published_at: Publication time (UTC) or None

    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description='Unique item key')
    title: str = Field(description='Item title')
    link: str = Field(description='Item link')
    description: str = Field(default='', description='Item description')
    published_at: datetime | None = Field(default=None, description='Publication time')

    @field_validator('id', 'title', 'link', 'description', mode='before')
    @classmethod
    def _xml_safe(cls, value: object) -> object:
        return strip_invalid_xml_chars(value) if isinstance(value, str) else value

    @field_validator('title')
    @classmethod
    def _title_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('title must not be empty')
        return value

    @field_validator('id', 'link')
    @classmethod
    def _absolute_link(cls, value: str) -> str:
        if not is_valid_item_link(value):
            raise ValueError(f'not an absolute URL or magnet URI: {value!r}')
        return value
