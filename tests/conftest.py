"""Shared markup builders for the crawler tests."""

from __future__ import annotations

import pytest

BASE_URL = "https://shop.example.com/sch/store/m.html"


def item_html(
    item_id: str = "123456789012",
    *,
    price: str = "$19.99",
    title: str = "Dell OptiPlex 7010",
    condition: str | None = "Pre-Owned",
    subtitle: bool = True,
    li_id: str | None = None,
) -> str:
    """Return one ``<li class="s-item">`` listing entry."""
    if not subtitle:
        subtitle_html = ""
    elif condition is None:
        subtitle_html = '<div class="s-item__subtitle"><span>Refurbished seller</span></div>'
    else:
        subtitle_html = (
            '<div class="s-item__subtitle">'
            f'<span class="SECONDARY_INFO">{condition}</span></div>'
        )
    return (
        f'<li class="s-item s-item__pl-on-bottom" id="{li_id or "item" + item_id}">'
        '<div class="s-item__wrapper">'
        f'<a class="s-item__link" href="https://www.ebay.com/itm/{item_id}?hash=item1c">'
        f'<div class="s-item__title"><span role="heading" aria-level="3">{title}</span></div>'
        "</a>"
        f"{subtitle_html}"
        f'<span class="s-item__price">{price}</span>'
        "</div></li>"
    )


def page_html(items: list[str], next_href: str | None = None, *, bare_next: bool = False) -> str:
    """Wrap *items* into a results page.

    *next_href* adds a next-page anchor; *bare_next* adds one with no href.
    """
    pagination = ""
    if bare_next:
        pagination = '<a class="pagination__next icon-link" aria-disabled="true">Next</a>'
    elif next_href is not None:
        pagination = f'<a class="pagination__next icon-link" href="{next_href}">Next</a>'
    return (
        "<!DOCTYPE html><html><head><title>Results</title></head><body>"
        '<ul class="srp-results">'
        + "".join(items)
        + f"</ul><nav>{pagination}</nav></body></html>"
    )


@pytest.fixture
def data_dir(tmp_path):
    """Fresh output directory for each test."""
    return tmp_path / "data"
