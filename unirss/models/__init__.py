"""Pydantic models for selectors, feeds and results."""

from unirss.models.feed import FeedConfig, ItemRecord
from unirss.models.results import ATOM_CONTENT_TYPE, RSS_CONTENT_TYPE, FeedResponse, FetchResult
from unirss.models.selectors import ExtractionConfig, ListingConfig

__all__ = [
    'ATOM_CONTENT_TYPE',
    'RSS_CONTENT_TYPE',
    'ExtractionConfig',
    'FeedConfig',
    'FeedResponse',
    'FetchResult',
    'ItemRecord',
    'ListingConfig',
]
