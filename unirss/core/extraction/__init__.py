"""Item extraction strategies and factory."""

from unirss.core.extraction.base import ItemExtractor, RawCandidate, parse_timestamp
from unirss.core.extraction.generic import GenericExtractor
from unirss.core.extraction.listing import ListingExtractor
from unirss.models import ExtractionConfig, ListingConfig

STRATEGIES = ('generic', 'listing')


def create_extractor(
    strategy: str = 'generic',
    extraction_config: ExtractionConfig | None = None,
    listing_config: ListingConfig | None = None,
) -> ItemExtractor:
    """Create the item extractor for a strategy.

    Args:
        strategy: 'generic' for heuristic pages, 'listing' for magnet-link tables
        extraction_config: Selectors for the generic strategy
        listing_config: Layout for the listing strategy

    Returns:
        ItemExtractor instance

    """
    if strategy == 'generic':
        return GenericExtractor(extraction_config)
    if strategy == 'listing':
        return ListingExtractor(listing_config)
    raise ValueError(f'Unknown extraction strategy: {strategy}. Choose from: {list(STRATEGIES)}')


__all__ = [
    'STRATEGIES',
    'GenericExtractor',
    'ItemExtractor',
    'ListingExtractor',
    'RawCandidate',
    'create_extractor',
    'parse_timestamp',
]
