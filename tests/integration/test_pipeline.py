import xml.etree.ElementTree as ET

import pytest

from unirss.config import Settings
from unirss.core import FeedPipeline, parse_max_items
from unirss.exceptions import FetchError, NetworkError
from unirss.models import RSS_CONTENT_TYPE

BLOG_URL = 'https://example.com/blog/'


def items_of(body: str) -> list[ET.Element]:
    return ET.fromstring(body.encode('utf-8')).find('channel').findall('item')


def test_generic_page_happy_path(serve_html, blog_html):
    fetcher = serve_html(blog_html)

    result = FeedPipeline().generate(BLOG_URL, max_items=20)

    assert result.status_code == 200
    assert result.success
    assert result.content_type == RSS_CONTENT_TYPE
    assert result.headers['Cache-Control'] == 'public, max-age=300'
    assert result.item_count == 3
    assert [i.findtext('title') for i in items_of(result.body)] == [
        'Read more about first',
        'Second Post',
        'Third via title attr',
    ]
    fetcher.fetch.assert_called_once_with(BLOG_URL)


def test_listing_page_happy_path(serve_html, listing_html):
    serve_html(listing_html, url='https://torrents.example.org/')

    result = FeedPipeline(strategy='listing').generate('https://torrents.example.org/', max_items=2)

    assert result.status_code == 200
    links = [i.findtext('link') for i in items_of(result.body)]
    assert links == ['magnet:?xt=urn:btih:AAA111&dn=show01', 'magnet:?xt=urn:btih:BBB222']
    channel = ET.fromstring(result.body.encode('utf-8')).find('channel')
    assert channel.findtext('title') == 'Torrent Index'


def test_missing_url_is_client_error_without_fetch(mock_fetcher):
    result = FeedPipeline().handle({})

    assert result.status_code == 400
    assert not result.success
    channel = ET.fromstring(result.body.encode('utf-8')).find('channel')
    assert channel.findtext('title') == 'Invalid URL'
    assert channel.findall('item') == []
    mock_fetcher.fetch.assert_not_called()


def test_invalid_url_is_client_error_without_fetch(mock_fetcher):
    result = FeedPipeline().handle({'url': 'example.com/no-scheme'})

    assert result.status_code == 400
    mock_fetcher.fetch.assert_not_called()


@pytest.mark.parametrize(
    ('error', 'message'),
    [
        (NetworkError('https://down.example.com/', 'Connection refused'), 'Connection refused'),
        (FetchError('https://down.example.com/', 503, 'Service Unavailable'), 'HTTP Error 503: Service Unavailable'),
    ],
)
def test_fetch_failures_become_single_item_error_feed(mock_fetcher, error, message):
    mock_fetcher.fetch.side_effect = error

    result = FeedPipeline().generate('https://down.example.com/')

    assert result.status_code == 502
    assert result.item_count == 1
    (item,) = items_of(result.body)
    assert item.findtext('title') == 'Processing Error'
    assert message in item.findtext('description')


def test_unexpected_errors_become_processing_error(mock_fetcher, mocker):
    mock_fetcher.fetch.side_effect = RuntimeError('boom')

    result = FeedPipeline().generate(BLOG_URL)

    assert result.status_code == 500
    (item,) = items_of(result.body)
    assert item.findtext('description') == 'boom'


def test_bad_configured_selector_is_processing_error(serve_html, blog_html):
    serve_html(blog_html)
    settings = Settings(container_selector='div[')

    result = FeedPipeline(settings=settings).generate(BLOG_URL)

    assert result.status_code == 500
    assert len(items_of(result.body)) == 1


def test_max_items_from_params(serve_html, blog_html):
    serve_html(blog_html)
    pipeline = FeedPipeline()

    assert pipeline.handle({'url': BLOG_URL, 'max_items': '1'}).item_count == 1
    assert pipeline.handle({'url': BLOG_URL, 'max_items': 'lots'}).item_count == 3
    zero = pipeline.handle({'url': BLOG_URL, 'max_items': '0'})
    assert zero.status_code == 200
    assert items_of(zero.body) == []


def test_atom_pipeline(serve_html, blog_html):
    serve_html(blog_html)
    result = FeedPipeline(feed_format='atom').generate(BLOG_URL)
    assert result.content_type.startswith('application/atom+xml')
    assert ET.fromstring(result.body.encode('utf-8')).tag == '{http://www.w3.org/2005/Atom}feed'


def test_invalid_url_with_control_characters_is_client_error(mock_fetcher):
    result = FeedPipeline().handle({'url': 'not a url\x01'})

    assert result.status_code == 400
    channel = ET.fromstring(result.body.encode('utf-8')).find('channel')
    assert channel.findtext('title') == 'Invalid URL'
    mock_fetcher.fetch.assert_not_called()


def test_one_broken_anchor_does_not_fail_the_feed(serve_html):
    serve_html(
        """
        <div class="post"><a href="http://[oops/">Broken link here</a></div>
        <div class="post"><a href="/good">Good article</a></div>
        """
    )

    result = FeedPipeline().generate(BLOG_URL)

    assert result.status_code == 200
    assert [item.findtext('link') for item in items_of(result.body)] == ['https://example.com/good']


def test_control_characters_in_page_text_still_give_a_feed(serve_html):
    serve_html(
        """
        <title>News &#8;page</title>
        <div class="post"><a href="/good">Good \x0b article</a></div>
        <div class="post"><a href="/b">Other &#8; item</a></div>
        """
    )

    result = FeedPipeline().generate(BLOG_URL)

    assert result.status_code == 200
    assert [item.findtext('title') for item in items_of(result.body)] == ['Good article', 'Other item']


def test_error_message_with_control_characters_is_well_formed(mock_fetcher):
    mock_fetcher.fetch.side_effect = RuntimeError('boom\x01')

    result = FeedPipeline().generate(BLOG_URL)

    assert result.status_code == 500
    (item,) = items_of(result.body)
    assert item.findtext('description') == 'boom'


@pytest.mark.parametrize(
    ('value', 'expected'),
    [(None, 20), ('5', 5), (' 7 ', 7), ('0', 0), ('-3', 20), ('abc', 20), ('2.5', 20), (9, 9)],
)
def test_parse_max_items(value, expected):
    assert parse_max_items(value) == expected
