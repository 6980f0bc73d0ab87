"""Core feed generation components."""

from unirss.core.pipeline import FeedPipeline, parse_max_items

__all__ = ['FeedPipeline', 'parse_max_items']
