"""unirss - Universal RSS Generator.

Scrape any listing page into an RSS 2.0 feed with BeautifulSoup.
"""

from unirss.config import Settings, load_settings
from unirss.core import FeedPipeline, parse_max_items
from unirss.core.dom import DomQuery
from unirss.core.extraction import GenericExtractor, ItemExtractor, ListingExtractor, create_extractor
from unirss.core.feed import FeedBuilder, feed_config_from_document
from unirss.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher
from unirss.exceptions import FetchError, InvalidUrlError, NetworkError, ParseError, SelectorError, UniRSSError
from unirss.models import ExtractionConfig, FeedConfig, FeedResponse, FetchResult, ItemRecord, ListingConfig
from unirss.utils.urls import is_valid_url

__all__ = [
    # Pipeline
    'FeedPipeline',
    'parse_max_items',
    'Settings',
    'load_settings',
    # Components
    'DomQuery',
    'FeedBuilder',
    'feed_config_from_document',
    'is_valid_url',
    # Extraction
    'ItemExtractor',
    'GenericExtractor',
    'ListingExtractor',
    'create_extractor',
    # Fetchers
    'HTMLFetcher',
    'SimpleFetcher',
    'create_fetcher',
    # Models
    'ExtractionConfig',
    'ListingConfig',
    'FeedConfig',
    'ItemRecord',
    'FetchResult',
    'FeedResponse',
    # Exceptions
    'UniRSSError',
    'InvalidUrlError',
    'FetchError',
    'NetworkError',
    'ParseError',
    'SelectorError',
]
