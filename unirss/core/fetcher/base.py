"""Abstract base class for HTML fetchers."""

from abc import ABC, abstractmethod

from unirss.models.results import FetchResult


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Implement this interface to create custom HTML fetchers.
    """

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """Fetch HTML from a URL.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with HTML and status

        Raises:
            FetchError: If the server answers with a non-success status
            NetworkError: If the server could not be reached

        """
        pass

    def close(self):  # noqa: B027
        """Release any held resources."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
