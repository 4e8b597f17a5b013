"""Field Extractor: one recipe per field of an :class:`ItemRecord`.

Every recipe is a short chain of Tree Matcher lookups scoped to a single
item node, followed by an optional regex normalisation.  Mandatory fields
raise :class:`FieldMissing`; the condition is optional as long as its
container is absent.
"""

from __future__ import annotations

import re
from typing import Tuple

from bs4 import Tag

from listings.scraper.errors import AttributeNotFound, FieldMissing, NotAnElement
from listings.scraper.matcher import attr_value, find_first_by_attr, first_text_value

PRICE_RE = re.compile(r"\d+(?:[.,]\d+)*")
ITEM_ID_RE = re.compile(r"itm/([0-9]+)")

LINK_CLASS = "s-item__link"
PRICE_CLASS = "s-item__price"
TITLE_CLASS = "s-item__title"
SUBTITLE_CLASS = "s-item__subtitle"
CONDITION_CLASS = "SECONDARY_INFO"


def normalize_price(text: str) -> str | None:
    """Return the first numeric token of *text*, e.g. ``"$1,234.56 to $2"`` -> ``"1,234.56"``."""
    match = PRICE_RE.search(text)
    return match.group(0) if match else None


def parse_item_id(href: str) -> str | None:
    """Return the numeric listing id embedded in an ``.../itm/<id>`` URL."""
    match = ITEM_ID_RE.search(href)
    return match.group(1) if match else None


def extract_link(node: Tag) -> Tuple[str, str]:
    """Return ``(item_id, product_url)`` from the item's main link."""
    link = find_first_by_attr(node, "a", "class", LINK_CLASS)
    if link is None:
        raise FieldMissing("id", "item link node not found")
    try:
        href = attr_value(link, "href")
    except (NotAnElement, AttributeNotFound) as exc:
        raise FieldMissing("product_url", str(exc)) from exc
    item_id = parse_item_id(href)
    if not item_id:
        raise FieldMissing("id", f"item id cannot be parsed from {href!r}")
    return item_id, href


def extract_price(node: Tag) -> str:
    price_node = find_first_by_attr(node, "span", "class", PRICE_CLASS)
    if price_node is None:
        raise FieldMissing("price", "price node not found")
    text = first_text_value(price_node)
    if text is None:
        raise FieldMissing("price", "price value not found")
    price = normalize_price(text)
    if price is None:
        raise FieldMissing("price", f"price value cannot be parsed from {text!r}")
    return price


def extract_title(node: Tag) -> str:
    title_div = find_first_by_attr(node, "div", "class", TITLE_CLASS)
    if title_div is None:
        raise FieldMissing("title", "title DIV node not found")
    heading = find_first_by_attr(title_div, "span", "role", "heading")
    if heading is None:
        raise FieldMissing("title", "title SPAN node not found")
    title = first_text_value(heading)
    if not title:
        raise FieldMissing("title", "title value not found")
    return title


def extract_condition(node: Tag, item_id: str = "") -> str:
    """Return the condition sub-label, or ``""`` when the item has none.

    A missing subtitle container is only warned about.  Once the container
    exists, its ``SECONDARY_INFO`` span and that span's text are required.
    """
    subtitle = find_first_by_attr(node, "div", "class", SUBTITLE_CLASS)
    if subtitle is None:
        print(f"[WARN] Condition DIV node not found {item_id}")
        return ""
    condition_node = find_first_by_attr(subtitle, "span", "class", CONDITION_CLASS)
    if condition_node is None:
        raise FieldMissing("condition", "condition SPAN node not found")
    condition = first_text_value(condition_node)
    if condition is None:
        raise FieldMissing("condition", "condition value not found")
    return condition
