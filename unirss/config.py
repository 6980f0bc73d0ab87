"""Runtime settings for unirss, read from the environment."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from unirss.models import ExtractionConfig, ListingConfig
from unirss.models.selectors import DEFAULT_CONTAINER_SELECTOR

DEFAULT_MAX_ITEMS = 20


class Settings(BaseModel):
    """Deployment settings shared by the CLI and the HTTP app.

    Attributes:
        max_items: Item cap used when a request gives none
        strategy: Extraction strategy ('generic' or 'listing')
        parser: BeautifulSoup tree builder
        timeout: Fetch timeout in seconds, None to leave it to the environment
        cache_max_age: Cache lifetime advertised on successful feeds, in seconds
        row_selector: Listing row selector for the listing strategy
        container_selector: Container selector for the generic strategy ('' disables containers)
        logfire_token: Logfire token, logfire stays unconfigured without it

    """

    model_config = ConfigDict(frozen=True)

    max_items: int = Field(default=DEFAULT_MAX_ITEMS, ge=0)
    strategy: str = Field(default='generic', pattern='^(generic|listing)$')
    parser: str = 'lxml'
    timeout: float | None = None
    cache_max_age: int = Field(default=300, ge=0)
    row_selector: str = 'tr'
    container_selector: str = DEFAULT_CONTAINER_SELECTOR
    logfire_token: str | None = None

    def extraction_config(self) -> ExtractionConfig:
        """Selector set for the generic strategy."""
        return ExtractionConfig(container_selector=self.container_selector)

    def listing_config(self) -> ListingConfig:
        """Layout for the listing strategy."""
        return ListingConfig(row_selector=self.row_selector)


def load_settings() -> Settings:
    """Load settings from the environment (and a .env file, if present).

    Returns:
        Settings with unset values left at their defaults

    """
    load_dotenv()

    values: dict[str, object] = {}
    env_map = {
        'UNIRSS_MAX_ITEMS': 'max_items',
        'UNIRSS_STRATEGY': 'strategy',
        'UNIRSS_PARSER': 'parser',
        'UNIRSS_TIMEOUT': 'timeout',
        'UNIRSS_CACHE_MAX_AGE': 'cache_max_age',
        'UNIRSS_ROW_SELECTOR': 'row_selector',
        'UNIRSS_CONTAINER_SELECTOR': 'container_selector',
        'LOGFIRE_TOKEN': 'logfire_token',
    }
    for env_name, field_name in env_map.items():
        value = os.getenv(env_name)
        # An empty container selector is meaningful, it disables containers
        if value is not None and (value or field_name == 'container_selector'):
            values[field_name] = value

    return Settings(**values)
