"""Request pipeline: validate, fetch, parse, extract and build a feed.

Every failure is turned into a well-formed feed; callers always get a
FeedResponse, never an exception.
"""

import logging
from collections.abc import Mapping

import logfire

from unirss.config import DEFAULT_MAX_ITEMS, Settings
from unirss.core.dom import DomQuery
from unirss.core.extraction import ItemExtractor, create_extractor
from unirss.core.feed import FeedBuilder, feed_config_from_document
from unirss.core.fetcher import HTMLFetcher, create_fetcher
from unirss.exceptions import FetchError, InvalidUrlError, NetworkError, ParseError, UniRSSError
from unirss.models import ATOM_CONTENT_TYPE, RSS_CONTENT_TYPE, FeedResponse
from unirss.utils.urls import is_valid_url


def parse_max_items(value: str | int | None, default: int = DEFAULT_MAX_ITEMS) -> int:
    """Parse the item cap, falling back to ``default`` on missing, non-numeric or negative input.

    Args:
        value: Raw parameter value
        default: Cap used when the value is unusable

    Returns:
        A non-negative item cap

    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


class FeedPipeline:
    """Turns a page URL into a feed response.

    Attributes:
        settings: Deployment settings
        builder: Feed serializer
        extractor: Item extraction strategy
        logger: Logger instance for detailed run tracking

    """

    def __init__(
        self,
        settings: Settings | None = None,
        strategy: str | None = None,
        extractor: ItemExtractor | None = None,
        feed_format: str = 'rss',
    ):
        """Initialize the pipeline.

        Args:
            settings: Deployment settings. Defaults to Settings().
            strategy: Extraction strategy override ('generic' or 'listing')
            extractor: Ready-made extractor, takes precedence over ``strategy``
            feed_format: Output format ('rss' or 'atom'). Defaults to 'rss'.

        """
        self.settings = settings or Settings()
        self.builder = FeedBuilder(feed_format=feed_format)
        self.extractor = extractor or create_extractor(
            strategy or self.settings.strategy,
            extraction_config=self.settings.extraction_config(),
            listing_config=self.settings.listing_config(),
        )
        self.logger = logging.getLogger(__name__)

    @property
    def content_type(self) -> str:
        """MIME type of the feeds this pipeline produces."""
        return ATOM_CONTENT_TYPE if self.builder.feed_format == 'atom' else RSS_CONTENT_TYPE

    def handle(self, params: Mapping[str, str | None]) -> FeedResponse:
        """Generate a feed from query-string style parameters.

        Args:
            params: Mapping with 'url' (required) and 'max_items' (optional)

        Returns:
            FeedResponse for the request

        """
        max_items = parse_max_items(params.get('max_items'), default=self.settings.max_items)
        return self.generate(params.get('url'), max_items)

    def generate(self, url: str | None, max_items: int | None = None) -> FeedResponse:
        """Generate a feed for a page.

        Args:
            url: Absolute URL of the page to scrape
            max_items: Item cap. Defaults to the configured cap.

        Returns:
            FeedResponse with status 200 and real items, 400 for a bad URL,
            or 5xx with a single error item

        """
        if max_items is None:
            max_items = self.settings.max_items

        with logfire.span('generate_feed', url=url, max_items=max_items):
            try:
                page_url = self._validate(url)
            except InvalidUrlError as e:
                self.logger.error(str(e))
                logfire.warn('Invalid URL', url=url)
                return self._response(400, self.builder.build_invalid_url_feed(url))

            try:
                with create_fetcher('simple', timeout=self.settings.timeout) as fetcher:
                    return self._run(page_url, max_items, fetcher)
            except (FetchError, NetworkError, ParseError) as e:
                self.logger.error(f'Error processing {url}: {e}')
                logfire.error('Feed generation failed', url=url, error=str(e))
                return self._response(502, self.builder.build_error_feed(url, str(e)), item_count=1)
            except UniRSSError as e:
                self.logger.error(f'Error processing {url}: {e}')
                logfire.error('Feed generation failed', url=url, error=str(e))
                return self._response(500, self.builder.build_error_feed(url, str(e)), item_count=1)
            except Exception as e:
                self.logger.exception(f'Critical error processing {url}')
                logfire.error('Feed generation crashed', url=url, error=str(e))
                return self._response(500, self.builder.build_error_feed(url, str(e)), item_count=1)

    def _run(self, url: str, max_items: int, fetcher: HTMLFetcher) -> FeedResponse:
        """Fetch, parse, extract and build. Errors propagate to generate()."""
        result = fetcher.fetch(url)
        dom = DomQuery(result.html, result.base_url, parser=self.settings.parser)

        feed_config = feed_config_from_document(dom, url)
        items = self.extractor.extract(dom, max_items)
        body = self.builder.build(feed_config, items)

        logfire.info('Feed generated', url=url, items=len(items))
        headers = {'Cache-Control': f'public, max-age={self.settings.cache_max_age}'}
        return self._response(200, body, headers=headers, item_count=len(items))

    def _validate(self, url: str | None) -> str:
        """Return the URL if it is absolute, else raise InvalidUrlError."""
        if url is None or not is_valid_url(url):
            raise InvalidUrlError(url)
        return url

    def _response(
        self,
        status_code: int,
        body: str,
        headers: dict[str, str] | None = None,
        item_count: int = 0,
    ) -> FeedResponse:
        return FeedResponse(
            status_code=status_code,
            body=body,
            content_type=self.content_type,
            headers=headers or {},
            item_count=item_count,
        )
