"""Feed serialization."""

from unirss.core.feed.builder import FEED_FORMATS, FeedBuilder, feed_config_from_document

__all__ = ['FEED_FORMATS', 'FeedBuilder', 'feed_config_from_document']
