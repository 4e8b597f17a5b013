"""Page Crawler: fetch, parse, fan out per item, paginate.

One page is handled at a time.  Items on a page are processed on a
``ThreadPoolExecutor``; the executor block is the barrier, so every item of
page N is persisted (or skipped) before page N+1 is fetched.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import Tag

from listings.config import settings
from listings.scraper.errors import (
    AttributeNotFound,
    CrawlError,
    FieldMissing,
    MarkupError,
    NotAnElement,
)
from listings.scraper.fetcher import fetch_page
from listings.scraper.matcher import attr_value, find_all_by_class, find_first_by_attr, parse_html
from listings.scraper.models import CrawlState, CrawlSummary
from listings.scraper.pipeline import process_item

ITEM_TAG = "li"
ITEM_CLASS = "s-item"
NEXT_PAGE_CLASS = "pagination__next icon-link"
CONDITION_PARAM = "LH_ItemCondition"


def build_start_url(base_url: str, condition: Optional[int] = None) -> str:
    """Return *base_url*, filtered by item condition when *condition* is set."""
    if condition is None:
        return base_url
    sep = "&" if "?" in base_url else "?"
    return f"{base_url}{sep}{CONDITION_PARAM}={condition}"


def extract_page(html: str) -> tuple[List[Tag], Optional[Tag]]:
    """Parse *html* and return ``(item_nodes, next_anchor)``.

    Raises:
        CrawlError: If the markup is unparsable or holds no item nodes.
    """
    try:
        tree = parse_html(html)
    except MarkupError as exc:
        raise CrawlError(str(exc)) from exc

    items = find_all_by_class(tree, ITEM_TAG, ITEM_CLASS)
    if not items:
        raise CrawlError("Failed to get items")

    next_anchor = find_first_by_attr(tree, "a", "class", NEXT_PAGE_CLASS)
    return items, next_anchor


def process_items(items: List[Tag], data_dir: Path) -> tuple[int, int]:
    """Run the item pipeline over *items* concurrently; return ``(saved, skipped)``.

    Failures are reported and skipped rather than aborting the page.
    """
    saved = skipped = 0
    workers = settings.max_workers if settings.max_workers > 0 else len(items) or 1

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="item") as pool:
        futures = [pool.submit(process_item, node, data_dir) for node in items]
        for future in as_completed(futures):
            try:
                record = future.result()
            except FieldMissing as exc:
                skipped += 1
                print(f"[ERROR] Failed processing item: {exc}")
            except OSError as exc:
                skipped += 1
                print(f"[ERROR] Failed writing item: {exc}")
            else:
                saved += 1
                print(f"[ITEM] Saved {record.id}")

    return saved, skipped


def next_page_url(anchor: Optional[Tag], current_url: str) -> Optional[str]:
    """Return the absolute URL behind *anchor*, or ``None`` to stop paginating.

    An anchor without a usable ``href``, or one pointing back at the current
    page, ends the crawl rather than refetching the same page forever.
    """
    if anchor is None:
        return None
    try:
        href = attr_value(anchor, "href")
    except (NotAnElement, AttributeNotFound) as exc:
        print(f"[ERROR] Failed to get next page: {exc}")
        return None
    try:
        url = urljoin(current_url, href.strip())
    except ValueError as exc:
        print(f"[ERROR] Failed to get next page: {href!r}: {exc}")
        return None
    if not href.strip() or url == current_url:
        print(f"[ERROR] Next page link does not advance: {href!r}")
        return None
    return url


def crawl(start_url: str, data_dir: Optional[Path] = None) -> CrawlSummary:
    """Crawl from *start_url* until no next page remains.

    Raises:
        CrawlError: On a fetch failure, unparsable page or a page with no
            items.  Pages already processed keep their output.
    """
    out_dir = settings.ensure_data_dir(data_dir)
    state = CrawlState(current_page_url=start_url)
    summary = CrawlSummary()

    while state.has_more_pages:
        print(f"[CRAWL] Fetching {state.current_page_url}")
        raw = fetch_page(state.current_page_url)
        items, next_anchor = extract_page(raw.html)
        print(f"[CRAWL] Found {len(items)} items")

        saved, skipped = process_items(items, out_dir)
        state.pages_crawled += 1
        summary.pages = state.pages_crawled
        summary.items_found += len(items)
        summary.items_saved += saved
        summary.items_skipped += skipped

        next_url = next_page_url(next_anchor, state.current_page_url)
        if next_url is None:
            state.has_more_pages = False
        else:
            state.current_page_url = next_url

    print(
        f"[CRAWL] Done: {summary.pages} page(s), {summary.items_saved} saved, "
        f"{summary.items_skipped} skipped"
    )
    return summary


def extract_file(html: str, data_dir: Optional[Path] = None) -> CrawlSummary:
    """Run item extraction over one saved page without touching the network."""
    out_dir = settings.ensure_data_dir(data_dir)
    items, _ = extract_page(html)
    saved, skipped = process_items(items, out_dir)
    return CrawlSummary(pages=1, items_found=len(items), items_saved=saved, items_skipped=skipped)
