"""FastAPI app serving generated feeds over HTTP.

GET /rss?url=https://example.com&max_items=20
"""

import logging

import logfire
from fastapi import FastAPI, Query, Response

from unirss.config import load_settings
from unirss.core import FeedPipeline
from unirss.core.extraction import STRATEGIES
from unirss.core.feed import FEED_FORMATS, FeedBuilder
from unirss.models import RSS_CONTENT_TYPE

settings = load_settings()
if settings.logfire_token:
    logfire.configure(token=settings.logfire_token)

logger = logging.getLogger(__name__)

app = FastAPI(title='Universal RSS Generator', version='0.1.0')


def _invalid_parameter(name: str, value: str, choices: tuple[str, ...]) -> Response:
    logger.error(f"Rejected '{name}' parameter: {value!r}")
    return Response(
        content=FeedBuilder().build_invalid_parameter_feed(name, value, choices),
        status_code=400,
        media_type=RSS_CONTENT_TYPE,
    )


@app.get('/health')
def health() -> dict[str, str]:
    return {'status': 'ok'}


@app.get('/')
@app.get('/rss')
def rss(
    url: str | None = Query(default=None, description='Absolute URL of the page to scrape'),
    max_items: str | None = Query(default=None, description='Maximum number of items'),
    strategy: str | None = Query(default=None, description='Extraction strategy (generic or listing)'),
    feed_format: str = Query(default='rss', alias='format', description='Feed format (rss or atom)'),
) -> Response:
    if strategy and strategy not in STRATEGIES:
        return _invalid_parameter('strategy', strategy, STRATEGIES)
    if feed_format not in FEED_FORMATS:
        return _invalid_parameter('format', feed_format, FEED_FORMATS)

    # Sync handler: FastAPI runs it in its worker thread pool while the fetch blocks
    pipeline = FeedPipeline(settings=settings, strategy=strategy, feed_format=feed_format)
    result = pipeline.handle({'url': url, 'max_items': max_items})
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type,
        headers=result.headers,
    )
