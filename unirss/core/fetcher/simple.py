"""Simple HTTP fetcher with realistic browser headers."""

import gzip
import logging
import time

import logfire
import requests

from unirss.core.fetcher.base import HTMLFetcher
from unirss.exceptions import FetchError, NetworkError
from unirss.models.results import FetchResult
from unirss.utils.headers import HeaderGenerator


class SimpleFetcher(HTMLFetcher):
    """Single-shot HTTP fetcher sending desktop browser headers.

    No retries are made. Redirects are followed by requests.

    Attributes:
        timeout: Request timeout in seconds, or None to wait indefinitely
        user_agent: User agent sent with every request
        session: Requests session used for the fetch

    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the simple fetcher.

        Args:
            timeout: Seconds to wait for the server. Defaults to None (no limit).
            user_agent: User agent override. Defaults to a desktop Chrome agent.
            session: Existing session to reuse. Defaults to a new one owned by the fetcher.

        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML with a single GET request.

        Args:
            url: The URL that is being fetched

        Returns:
            The fetched HTML with status and timing

        Raises:
            FetchError: On a non-2xx status
            NetworkError: If the request could not be completed

        """
        start_time = time.time()
        headers = HeaderGenerator.generate_headers(user_agent=self.user_agent)

        with logfire.span('fetch_html', url=url):
            self.logger.info(f'Fetching URL: {url}')
            try:
                response = self.session.get(url, headers=headers, timeout=self.timeout, allow_redirects=True)
            except requests.RequestException as e:
                logfire.error('Network error', url=url, error=str(e))
                raise NetworkError(url, str(e)) from e

            if not response.ok:
                logfire.error('Fetch failed', url=url, status_code=response.status_code)
                raise FetchError(url, response.status_code, response.reason or '')

            html = self._decode(response)
            fetch_time = time.time() - start_time
            self.logger.info(f'Fetched {len(html):,} characters from {url} ({fetch_time:.2f}s)')

            return FetchResult(
                url=url,
                html=html,
                status_code=response.status_code,
                fetch_time=fetch_time,
                final_url=response.url or url,
            )

    def _decode(self, response: requests.Response) -> str:
        """Decode the response body, tolerating bad encodings.

        Args:
            response: The HTTP response

        Returns:
            The body as text

        """
        try:
            html = response.text

            # Some servers send gzip without announcing it
            if html.startswith('\x1f\x8b'):
                html = gzip.decompress(response.content).decode('utf-8', errors='replace')

        except (LookupError, OSError, EOFError):
            try:
                html = response.content.decode('utf-8')
            except UnicodeDecodeError:
                html = response.content.decode('latin-1', errors='replace')

        return html

    def close(self):
        """Close the session if the fetcher created it."""
        if self._owns_session:
            self.session.close()
