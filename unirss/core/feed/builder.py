"""Builds RSS and Atom documents from extracted items."""

import logging
from datetime import datetime, timezone

from feedgen.feed import FeedGenerator

from unirss.core.dom import DomQuery
from unirss.models import FeedConfig, ItemRecord
from unirss.utils.text import strip_invalid_xml_chars
from unirss.utils.urls import hostname, is_valid_url

GENERATOR_NAME = 'Universal RSS Generator'
FEED_FORMATS = ('rss', 'atom')


def feed_config_from_document(dom: DomQuery, url: str) -> FeedConfig:
    """Derive feed metadata from the page title, or the hostname when there is none.

    Args:
        dom: Parsed page
        url: Page URL

    Returns:
        FeedConfig for the page

    """
    return FeedConfig(
        id=url,
        title=dom.title() or f'RSS for {hostname(url)}',
        description=f'Generated RSS feed for {url}',
        link=url,
    )


class FeedBuilder:
    """Serializes feed metadata and items with feedgen.

    The builder never writes XML itself; escaping is left to feedgen.

    Attributes:
        feed_format: 'rss' or 'atom'
        pretty: Whether to indent the output

    """

    def __init__(self, feed_format: str = 'rss', pretty: bool = True):
        """Initialize the builder.

        Args:
            feed_format: Output format ('rss' or 'atom'). Defaults to 'rss'.
            pretty: Indent the XML. Defaults to True.

        """
        if feed_format not in FEED_FORMATS:
            raise ValueError(f'Unknown feed format: {feed_format}. Choose from: {list(FEED_FORMATS)}')
        self.feed_format = feed_format
        self.pretty = pretty
        self.logger = logging.getLogger(__name__)

    def build(self, feed_config: FeedConfig, items: list[ItemRecord]) -> str:
        """Serialize a feed with its items in the given order.

        Args:
            feed_config: Feed-level metadata
            items: Items in extraction order (may be empty)

        Returns:
            Serialized feed XML

        """
        fg = self._generator(feed_config)

        for item in items:
            fe = fg.add_entry(order='append')
            fe.id(item.id)
            fe.guid(item.id, permalink=is_valid_url(item.id))
            fe.title(item.title)
            fe.link(href=item.link)
            if item.description:
                fe.description(item.description)
            if item.published_at is not None:
                fe.pubDate(item.published_at)
                fe.updated(item.published_at)

        self.logger.info(f'Built {self.feed_format} feed with {len(items)} items')
        return self._serialize(fg)

    def build_error_feed(self, url: str | None, message: str, title: str = 'Processing Error') -> str:
        """Serialize a feed holding exactly one item that explains a failure.

        Args:
            url: The requested page URL, if any
            message: Failure reason shown as the item description
            title: Title of the feed and of the item

        Returns:
            Serialized feed XML

        """
        # Messages and URLs may echo raw input
        url = strip_invalid_xml_chars(url) if url else url
        message = strip_invalid_xml_chars(message)
        title = strip_invalid_xml_chars(title)
        link = url if is_valid_url(url) else 'about:blank'
        fg = self._generator(
            FeedConfig(
                id=link,
                title=title,
                description=f'Failed to generate RSS feed for {url or "an unknown URL"}',
                link=link,
            )
        )

        now = datetime.now(timezone.utc)
        fe = fg.add_entry(order='append')
        fe.id(f'urn:unirss:error:{now.strftime("%Y%m%dT%H%M%S%fZ")}')
        fe.title(title)
        fe.link(href=link)
        fe.description(message)
        fe.pubDate(now)
        return self._serialize(fg)

    def build_invalid_url_feed(self, url: str | None) -> str:
        """Serialize the item-less feed answering a missing or invalid URL parameter."""
        if url:
            description = f"The provided URL '{url}' is not valid."
        else:
            description = "Missing required 'url' parameter. Usage: ?url=https://example.com"
        fg = self._generator(
            FeedConfig(id='invalid_url', title='Invalid URL', description=description, link='about:blank')
        )
        return self._serialize(fg)

    def build_invalid_parameter_feed(self, name: str, value: str, choices: tuple[str, ...]) -> str:
        """Serialize the item-less feed answering a query parameter outside its allowed values."""
        description = f"Invalid '{name}' parameter '{value}'. Choose from: {', '.join(choices)}"
        fg = self._generator(
            FeedConfig(id='invalid_parameter', title='Invalid Parameter', description=description, link='about:blank')
        )
        return self._serialize(fg)

    def _generator(self, feed_config: FeedConfig) -> FeedGenerator:
        """Create a FeedGenerator carrying the feed-level fields."""
        fg = FeedGenerator()
        fg.id(feed_config.id)
        fg.title(feed_config.title)
        fg.author({'name': GENERATOR_NAME})
        fg.link(href=feed_config.link, rel='alternate')
        fg.description(feed_config.description)
        fg.generator(GENERATOR_NAME)
        return fg

    def _serialize(self, fg: FeedGenerator) -> str:
        if self.feed_format == 'atom':
            return fg.atom_str(pretty=self.pretty).decode('utf-8')
        return fg.rss_str(pretty=self.pretty).decode('utf-8')
