"""Result containers for fetches and generated feeds."""

from dataclasses import dataclass, field

RSS_CONTENT_TYPE = 'application/rss+xml; charset=utf-8'
ATOM_CONTENT_TYPE = 'application/atom+xml; charset=utf-8'


@dataclass
class FetchResult:
    """Result of an HTML fetch operation.

    Attributes:
        url: URL that was requested
        html: HTML content returned by the server
        status_code: HTTP status code of the response
        fetch_time: Total time for the HTML to be fetched
        final_url: URL after redirects, used to resolve relative links

    """

    url: str
    html: str
    status_code: int = 200
    fetch_time: float = 0.0
    final_url: str | None = None

    @property
    def base_url(self) -> str:
        """URL that relative links on the page are resolved against."""
        return self.final_url or self.url


@dataclass
class FeedResponse:
    """A serialized feed plus the HTTP-equivalent status describing it.

    Attributes:
        status_code: 200 for a real feed, 4xx/5xx for a synthetic error feed
        body: Serialized feed XML
        content_type: MIME type of the body
        headers: Extra response headers (e.g. Cache-Control)
        item_count: Number of items in the feed

    """

    status_code: int
    body: str
    content_type: str = RSS_CONTENT_TYPE
    headers: dict[str, str] = field(default_factory=dict)
    item_count: int = 0

    @property
    def success(self) -> bool:
        """Whether the feed holds real items rather than an error."""
        return 200 <= self.status_code < 300
