"""Scraper package: listing-page fetch, item extraction and pagination."""

from listings.scraper.crawler import build_start_url, crawl, extract_file
from listings.scraper.errors import CrawlError, FieldMissing, ScraperError
from listings.scraper.fetcher import fetch_page
from listings.scraper.models import CrawlState, CrawlSummary, ItemRecord, RawPage
from listings.scraper.pipeline import build_record, process_item, write_record

__all__ = [
    "build_start_url",
    "crawl",
    "extract_file",
    "fetch_page",
    "build_record",
    "process_item",
    "write_record",
    "CrawlError",
    "FieldMissing",
    "ScraperError",
    "CrawlState",
    "CrawlSummary",
    "ItemRecord",
    "RawPage",
]
