"""Row-based extraction for listings with a magnet-link column."""

import re

from bs4 import Tag

from unirss.core.dom import DomQuery
from unirss.core.extraction.base import ItemExtractor, RawCandidate, parse_timestamp
from unirss.models import ItemRecord, ListingConfig

NO_DESCRIPTION = 'No description'


class ListingExtractor(ItemExtractor):
    """Extracts one item per table row that carries a magnet link.

    Attributes:
        config: Row and cell selectors for the listing layout

    """

    def __init__(self, config: ListingConfig | None = None):
        """Initialize the listing extractor.

        Args:
            config: Listing layout. Defaults to ListingConfig().

        """
        super().__init__()
        self.config = config or ListingConfig()
        self.dedupe = self.config.dedupe
        self._magnet_re = re.compile(self.config.magnet_pattern, re.IGNORECASE)

    def candidates(self, dom: DomQuery, max_items: int) -> list[RawCandidate]:
        rows = dom.select_all(None, self.config.row_selector)
        self.logger.info(f"Found {len(rows)} rows using selector '{self.config.row_selector}'")
        return [RawCandidate(element=row, context=row) for row in rows]

    def build_item(self, dom: DomQuery, candidate: RawCandidate) -> ItemRecord | None:
        row = candidate.element

        magnet = self._find_magnet(dom, row)
        if magnet is None:
            return None

        title = self._resolve_title(dom, row)
        if not title:
            self.logger.debug(f'Skipping row without title for magnet: {magnet[:60]}')
            return None

        time_text = self._resolve_time_text(dom, row)

        return ItemRecord(
            id=magnet,
            link=magnet,
            title=title,
            description=f'Published: {time_text}' if time_text else NO_DESCRIPTION,
            published_at=parse_timestamp(time_text, self.config.time_format),
        )

    def _find_magnet(self, dom: DomQuery, row: Tag) -> str | None:
        """Return the href of the first magnet anchor in the row."""
        for anchor in dom.select_all(row, 'a[href]'):
            href = (dom.attr(anchor, 'href') or '').strip()
            if self._magnet_re.match(href):
                return href
        return None

    def _resolve_title(self, dom: DomQuery, row: Tag) -> str:
        """Title from the title cell: its anchor text, else the cell text."""
        cells = dom.children(row, 'td') or dom.select_all(row, 'td')
        if len(cells) <= self.config.title_cell_index:
            return ''

        cell = cells[self.config.title_cell_index]
        anchor = dom.select_one(cell, 'a')
        if anchor is not None:
            title = dom.text(anchor)
            if title:
                return title
        return dom.text(cell)

    def _resolve_time_text(self, dom: DomQuery, row: Tag) -> str:
        """Raw upload time text from the first centered cell position that exists."""
        cells = dom.select_all(row, self.config.time_cell_selector)
        for index in self.config.time_cell_indices:
            if len(cells) > index:
                return dom.text(cells[index])
        return ''
