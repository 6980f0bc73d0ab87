"""Custom exceptions for unirss."""


class UniRSSError(Exception):
    """Base class for all unirss exceptions."""

    pass


class InvalidUrlError(UniRSSError):
    """Raised when the requested page URL is missing or not absolute."""

    def __init__(self, url: str | None):
        """Initialize invalid URL error.

        Args:
            url: The rejected URL (None when the parameter was missing)

        """
        self.url = url
        if url:
            super().__init__(f"The provided URL '{url}' is not valid.")
        else:
            super().__init__("Missing required 'url' parameter.")


class FetchError(UniRSSError):
    """Raised when the upstream page answers with a non-success status."""

    def __init__(self, url: str, status_code: int, status_text: str = ''):
        """Initialize fetch error.

        Args:
            url: URL that was fetched
            status_code: HTTP status code received
            status_text: Reason phrase sent with the status

        """
        self.url = url
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f'HTTP Error {status_code}: {status_text}'.rstrip(': '))


class NetworkError(UniRSSError):
    """Raised when the upstream page could not be reached at all."""

    def __init__(self, url: str, reason: str):
        """Initialize network error.

        Args:
            url: URL that was fetched
            reason: Transport-level failure description

        """
        self.url = url
        self.reason = reason
        super().__init__(f'Network error fetching {url}: {reason}')


class ParseError(UniRSSError):
    """Raised when the HTML parse tree could not be built."""

    pass


class SelectorError(UniRSSError):
    """Raised when a configured CSS selector cannot be evaluated."""

    def __init__(self, selector: str, reason: str):
        """Initialize selector error.

        Args:
            selector: The CSS selector that was attempted
            reason: Why the selector failed

        """
        self.selector = selector
        self.reason = reason
        super().__init__(f"Invalid selector '{selector}': {reason}")
