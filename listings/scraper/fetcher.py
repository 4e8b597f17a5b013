"""HTTP fetcher for listing pages."""

from __future__ import annotations

import httpx

from listings.config import settings
from listings.scraper.errors import CrawlError
from listings.scraper.models import RawPage


def fetch_page(url: str) -> RawPage:
    """GET *url* and return a :class:`RawPage`.

    No custom headers, cookies or retries.  Redirects are followed.

    Raises:
        CrawlError: On an invalid URL, a transport failure, a body read
            failure or a 4xx/5xx status code.
    """
    try:
        with httpx.Client(timeout=settings.request_timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.InvalidURL as exc:
        raise CrawlError(f"Can't create request: {exc}") from exc
    except httpx.HTTPStatusError as exc:
        raise CrawlError(f"Bad response status: {exc}") from exc
    except httpx.HTTPError as exc:
        raise CrawlError(f"Can't make http request: {exc}") from exc

    return RawPage(url=url, html=html, status_code=status_code)
