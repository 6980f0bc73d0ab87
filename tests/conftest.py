import pytest

from unirss.config import Settings
from unirss.core.dom import DomQuery
from unirss.models import FetchResult

BLOG_URL = 'https://example.com/blog/'
LISTING_URL = 'https://torrents.example.org/?f=0&c=1_2'


@pytest.fixture
def blog_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>
            My   Blog
        </title>
    </head>
    <body>
        <main>
            <div class="post">
                <h2 class="post-title">First Post Title</h2>
                <a href="/posts/first">Read more about first</a>
                <p>First post summary.</p>
            </div>
            <div class="post">
                <h2>Second Post</h2>
                <a href="https://other.example.org/second">Go</a>
                <p class="excerpt">Second excerpt.</p>
            </div>
            <div class="post">
                <a href="javascript:void(0)">Share this post</a>
                <a href="">Empty link</a>
            </div>
            <div class="post">
                <a href="//cdn.example.net/third" title="Third via title attr">3</a>
            </div>
        </main>
    </body>
    </html>
    """


@pytest.fixture
def listing_html():
    return """
    <html>
    <head><title>Torrent Index</title></head>
    <body>
    <table class="torrent-list">
        <thead>
            <tr><th>Category</th><th>Name</th><th>Link</th><th>Size</th><th>Seeders</th><th>Date</th></tr>
        </thead>
        <tbody>
            <tr class="default">
                <td><a href="/?c=1_2">Anime</a></td>
                <td><a href="/view/1">[Group] Show - 01 [1080p].mkv</a></td>
                <td class="text-center">
                    <a href="/download/1.torrent">T</a>
                    <a href="magnet:?xt=urn:btih:AAA111&amp;dn=show01">M</a>
                </td>
                <td class="text-center">1.4 GiB</td>
                <td class="text-center">120</td>
                <td class="text-center">2024-03-15 10:30:00</td>
            </tr>
            <tr class="default">
                <td>Anime</td>
                <td>Plain Title Row</td>
                <td class="text-center"><a href="magnet:?xt=urn:btih:BBB222">M</a></td>
                <td class="text-center">700 MiB</td>
                <td class="text-center">2024-03-16 08:00:00</td>
            </tr>
            <tr class="default">
                <td>Anime</td>
                <td><a href="/view/3">Torrent File Only</a></td>
                <td class="text-center"><a href="/download/3.torrent">T</a></td>
            </tr>
            <tr class="default">
                <td>Anime</td>
                <td>   </td>
                <td class="text-center"><a href="magnet:?xt=urn:btih:CCC333">M</a></td>
            </tr>
            <tr class="default">
                <td>Anime</td>
                <td><a href="/view/5">Bad Date Row</a></td>
                <td class="text-center"><a href="magnet:?xt=urn:btih:DDD444">M</a></td>
                <td class="text-center">1 GiB</td>
                <td class="text-center">3</td>
                <td class="text-center">not-a-date</td>
            </tr>
            <tr class="default">
                <td>Anime</td>
                <td>No Time Row</td>
                <td><a href="magnet:?xt=urn:btih:EEE555">M</a></td>
            </tr>
        </tbody>
    </table>
    </body>
    </html>
    """


@pytest.fixture
def blog_dom(blog_html):
    return DomQuery(blog_html, BLOG_URL)


@pytest.fixture
def listing_dom(listing_html):
    return DomQuery(listing_html, LISTING_URL)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def mock_fetcher(mocker):
    """Patch the pipeline's fetcher factory; set ``fetch.return_value`` or ``side_effect`` per test."""
    fetcher = mocker.MagicMock()
    fetcher.__enter__.return_value = fetcher
    mocker.patch('unirss.core.pipeline.create_fetcher', return_value=fetcher)
    return fetcher


@pytest.fixture
def serve_html(mock_fetcher):
    """Make the patched fetcher return the given HTML for any URL."""

    def _serve(html, url=BLOG_URL):
        mock_fetcher.fetch.return_value = FetchResult(url=url, html=html, status_code=200)
        return mock_fetcher

    return _serve


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
