"""Exception hierarchy for the crawler.

``CrawlError`` and ``MarkupError`` end a crawl; ``FieldMissing`` only ever
costs the one item it was raised for.
"""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for every error raised by ``listings.scraper``."""


class NotAnElement(ScraperError):
    """An attribute was requested from a node that is not an element."""


class AttributeNotFound(ScraperError):
    """The element has no attribute with the requested name."""

    def __init__(self, attr_name: str) -> None:
        super().__init__(f"Attribute {attr_name!r} not found")
        self.attr_name = attr_name


class MarkupError(ScraperError):
    """The page body could not be parsed into a markup tree."""


class FieldMissing(ScraperError):
    """A mandatory field could not be extracted from an item node."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class CrawlError(ScraperError):
    """Fatal crawl failure: network, unparsable page or empty result set."""
