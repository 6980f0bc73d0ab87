"""Heuristic extraction for pages without a known structure."""

from unirss.core.dom import DomQuery
from unirss.core.extraction.base import ItemExtractor, RawCandidate, utc_now
from unirss.models import ExtractionConfig, ItemRecord
from unirss.utils.urls import is_valid_url


class GenericExtractor(ItemExtractor):
    """Extracts items from links, using their container or parent for title and description.

    Attributes:
        config: Selectors for containers, links, titles and descriptions

    """

    def __init__(self, config: ExtractionConfig | None = None):
        """Initialize the generic extractor.

        Args:
            config: Selector set. Defaults to ExtractionConfig().

        """
        super().__init__()
        self.config = config or ExtractionConfig()
        self.dedupe = self.config.dedupe

    def candidates(self, dom: DomQuery, max_items: int) -> list[RawCandidate]:
        config = self.config
        candidates: list[RawCandidate] = []

        if config.container_selector:
            containers = dom.select_all(None, config.container_selector)
            self.logger.info(f"Found {len(containers)} containers using selector '{config.container_selector}'")
            for container in containers[: max_items * 2]:
                for link_tag in dom.select_all(container, config.link_selector):
                    candidates.append(RawCandidate(element=link_tag, context=container))
        else:
            links = dom.select_all(None, config.link_selector)
            self.logger.info(f"Found {len(links)} links using selector '{config.link_selector}'")
            for link_tag in links:
                candidates.append(RawCandidate(element=link_tag, context=dom.parent(link_tag)))

        return candidates

    def build_item(self, dom: DomQuery, candidate: RawCandidate) -> ItemRecord | None:
        link_href = dom.attr(candidate.element, 'href')
        if not link_href or not link_href.strip():
            return None

        full_link = dom.resolve_url(link_href)
        if not is_valid_url(full_link):
            self.logger.debug(f'Skipping invalid generated link: {full_link}')
            return None

        title = self._resolve_title(dom, candidate)
        if not title:
            self.logger.debug(f'Skipping item, no title found for link: {full_link}')
            return None

        return ItemRecord(
            id=full_link,
            link=full_link,
            title=title,
            description=self._resolve_description(dom, candidate),
            published_at=utc_now(),
        )

    def _resolve_title(self, dom: DomQuery, candidate: RawCandidate) -> str:
        """Link title attribute or text, else a title element near the link."""
        anchor = candidate.element
        title = (dom.attr(anchor, 'title') or '').strip() or dom.text(anchor)
        if len(title) >= self.config.min_title_length:
            return title

        if candidate.has_distinct_context:
            title_tag = dom.select_one(candidate.context, self.config.title_selector)
            if title_tag is not None and title_tag is not anchor:
                context_title = dom.text(title_tag)
                if len(context_title) >= self.config.min_title_length:
                    return context_title

        # Too short to stand on its own
        return ''

    def _resolve_description(self, dom: DomQuery, candidate: RawCandidate) -> str:
        """Text of the first description element in the context, truncated."""
        if not candidate.has_distinct_context:
            return ''

        desc_tag = dom.select_one(candidate.context, self.config.description_selector)
        if desc_tag is None:
            return ''
        return dom.text(desc_tag)[: self.config.description_max_length]
