"""Shared machinery for item extraction strategies."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

from bs4 import Tag
from pydantic import ValidationError

from unirss.core.dom import DomQuery
from unirss.models import ItemRecord


@dataclass
class RawCandidate:
    """An element considered for promotion to an item.

    Attributes:
        element: The anchor or row the item would come from
        context: Element searched for a title or description when ``element`` lacks one

    """

    element: Tag
    context: Tag

    @property
    def has_distinct_context(self) -> bool:
        """Whether the context can be searched without matching the element itself."""
        return self.context is not self.element


def utc_now() -> datetime:
    """Current time in UTC, used as the timestamp of undated items."""
    return datetime.now(timezone.utc)


def parse_timestamp(text: str | None, fmt: str = '%Y-%m-%d %H:%M:%S') -> datetime:
    """Parse a listing timestamp, falling back to the current time.

    Naive timestamps are read as UTC. Unparsable or missing input never raises.

    Args:
        text: Raw timestamp text
        fmt: strptime format. Defaults to 'YYYY-MM-DD HH:MM:SS'.

    Returns:
        A timezone-aware datetime

    """
    if not text:
        return utc_now()
    try:
        parsed = datetime.strptime(text.strip(), fmt)
    except ValueError:
        return utc_now()
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class ItemExtractor(ABC):
    """Turns a parsed document into an ordered, capped list of items.

    Subclasses yield candidates in document order and build records from
    them. The base class enforces the cap and drops duplicates and
    candidates that fail normalization, so one bad row never aborts the
    batch.
    """

    dedupe: bool = True

    def __init__(self):
        """Initialize the extractor."""
        self.logger = logging.getLogger(self.__class__.__module__)

    def extract(self, dom: DomQuery, max_items: int) -> list[ItemRecord]:
        """Extract up to ``max_items`` items from a document.

        Args:
            dom: Parsed document
            max_items: Item cap (0 yields no items)

        Returns:
            Items in document order

        """
        items: list[ItemRecord] = []
        seen: set[str] = set()
        if max_items <= 0:
            return items

        candidates = self.candidates(dom, max_items)
        self.logger.info(f'Processing {len(candidates)} potential items...')

        for candidate in candidates:
            if len(items) >= max_items:
                break

            try:
                item = self.build_item(dom, candidate)
            except ValidationError as e:
                self.logger.debug(f'Dropping candidate that failed normalization: {e}')
                continue

            if item is None:
                continue

            if self.dedupe and item.id in seen:
                self.logger.debug(f'Skipping duplicate item: {item.id}')
                continue

            seen.add(item.id)
            items.append(item)

        self.logger.info(f'Extracted {len(items)} items')
        return items

    @abstractmethod
    def candidates(self, dom: DomQuery, max_items: int) -> list[RawCandidate]:
        """Collect candidates in document order."""
        pass

    @abstractmethod
    def build_item(self, dom: DomQuery, candidate: RawCandidate) -> ItemRecord | None:
        """Build an item from a candidate, or return None to skip it."""
        pass
