"""Pydantic models for the selector sets driving item extraction."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TITLE_SELECTOR = 'h1, h2, h3, .title, .post-title'
DEFAULT_LINK_SELECTOR = 'a[href]'
DEFAULT_DESCRIPTION_SELECTOR = 'p, .excerpt, .summary'
DEFAULT_CONTAINER_SELECTOR = '.post, .article, .entry, main .content'


class ExtractionConfig(BaseModel):
    """Selectors for the generic heuristic strategy.

    Attributes:
        title_selector: Searched inside the context element when the link has no usable title
        link_selector: Selects candidate anchors
        description_selector: Searched inside the context element for a description
        container_selector: Selects item containers, or None to treat every link as a candidate
        description_max_length: Descriptions are truncated to this many characters
        min_title_length: Link titles shorter than this fall back to the context title
        dedupe: Skip items whose link was already accepted

    """

    model_config = ConfigDict(frozen=True)

    title_selector: str = Field(default=DEFAULT_TITLE_SELECTOR, description='Title selector inside context')
    link_selector: str = Field(default=DEFAULT_LINK_SELECTOR, description='Candidate anchor selector')
    description_selector: str = Field(default=DEFAULT_DESCRIPTION_SELECTOR, description='Description selector')
    container_selector: str | None = Field(default=DEFAULT_CONTAINER_SELECTOR, description='Item container selector')
    description_max_length: int = Field(default=300, ge=0, description='Maximum description length')
    min_title_length: int = Field(default=3, ge=0, description='Minimum link text length')
    dedupe: bool = Field(default=True, description='Drop repeated links')

    @field_validator('container_selector')
    @classmethod
    def _blank_means_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class ListingConfig(BaseModel):
    """Selectors and cell positions for row-based listings (torrent indexes).

    The defaults describe the common layout: title in the 2nd cell, upload
    time in the 4th centered cell, falling back to the 3rd. Both are
    heuristics for that layout, not guarantees.

    Attributes:
        row_selector: Selects listing rows
        magnet_pattern: Regex an anchor href must match to count as the item link
        title_cell_index: Zero-based index of the cell holding the title
        time_cell_selector: Selects the centered cells that may hold the upload time
        time_cell_indices: Candidate positions of the time cell, tried in order
        time_format: strptime format of the upload time (read as UTC)
        dedupe: Skip rows whose magnet URI was already accepted

    """

    model_config = ConfigDict(frozen=True)

    row_selector: str = Field(default='tr', description='Listing row selector')
    magnet_pattern: str = Field(default=r'^magnet:\?xt=urn:btih:', description='Magnet href pattern')
    title_cell_index: int = Field(default=1, ge=0, description='Title cell position')
    time_cell_selector: str = Field(default='td.text-center', description='Centered cell selector')
    time_cell_indices: tuple[int, ...] = Field(default=(3, 2), description='Time cell positions in priority order')
    time_format: str = Field(default='%Y-%m-%d %H:%M:%S', description='Upload time format')
    dedupe: bool = Field(default=True, description='Drop repeated magnet URIs')
