"""Data models for the crawler pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single listing-page fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ItemRecord:
    """One listing entry as persisted to ``<data_dir>/<id>.json``.

    ``id``, ``title``, ``price`` and ``product_url`` are always non-empty;
    ``condition`` is empty when the entry carries no condition sub-label.
    """

    id: str
    title: str
    price: str
    condition: str
    product_url: str

    def to_json(self) -> str:
        """Serialise the record body; the id is carried by the file name."""
        body = {
            "title": self.title,
            "condition": self.condition,
            "price": self.price,
            "product_url": self.product_url,
        }
        return json.dumps(body, indent="\t", ensure_ascii=False)


@dataclass
class CrawlState:
    """Cursor threaded through the page loop."""

    current_page_url: str
    has_more_pages: bool = True
    pages_crawled: int = 0


@dataclass
class CrawlSummary:
    """Tallies for a finished crawl."""

    pages: int = 0
    items_found: int = 0
    items_saved: int = 0
    items_skipped: int = 0
