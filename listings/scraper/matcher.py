"""Tree Matcher: predicate searches over a parsed markup tree.

The tree is built by :func:`parse_html` with the html5lib builder, which
closes implied end tags (an unclosed ``<li>`` ends at the next ``<li>``) the
way browsers do, and with ``multi_valued_attributes=None`` so that ``class``
stays the raw string written in the markup.  Matching is by
*substring*, which lets ``"s-item__price is-bold"`` satisfy a search for
``"s-item__price"`` without tokenising class lists.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement, PreformattedString

from listings.scraper.errors import AttributeNotFound, MarkupError, NotAnElement


def parse_html(markup: str) -> BeautifulSoup:
    """Parse *markup* into a read-only tree.

    Raises:
        MarkupError: If the parser rejects the document outright.
    """
    try:
        return BeautifulSoup(markup, "html5lib", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise MarkupError(f"Can't parse HTML: {exc}") from exc


def _is_text(node: PageElement) -> bool:
    # Comments, CDATA and doctypes are strings too, but not text nodes.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def find_all_by_class(root: PageElement, tag: str, class_substring: str) -> List[Tag]:
    """Return every ``<tag>`` under *root* whose class contains *class_substring*.

    Only elements that also carry a non-empty ``id`` attribute qualify.
    Results are in document (pre-order) order, *root* included.
    """
    found: List[Tag] = []
    _collect_by_class(root, tag, class_substring, found)
    return found


def _collect_by_class(node: PageElement, tag: str, class_substring: str, found: List[Tag]) -> None:
    if not isinstance(node, Tag):
        return
    if node.name == tag:
        classes = node.attrs.get("class")
        if classes is not None and class_substring in classes and node.attrs.get("id"):
            found.append(node)
    for child in node.children:
        _collect_by_class(child, tag, class_substring, found)


def find_first_by_attr(root: PageElement, tag: str, attr_name: str, value_substring: str) -> Optional[Tag]:
    """Return the first ``<tag>`` whose *attr_name* contains *value_substring*.

    Depth-first pre-order: a node is tested before its descendants, and the
    search stops at the first hit.  Returns ``None`` when nothing qualifies.
    """
    if not isinstance(root, Tag):
        return None
    if root.name == tag:
        value = root.attrs.get(attr_name)
        if value is not None and value_substring in value:
            return root
    for child in root.children:
        match = find_first_by_attr(child, tag, attr_name, value_substring)
        if match is not None:
            return match
    return None


def first_text_value(node: PageElement) -> Optional[str]:
    """Return the raw text of the first direct text child of *node*, if any."""
    if not isinstance(node, Tag):
        return None
    for child in node.children:
        if _is_text(child):
            return str(child)
    return None


def attr_value(node: PageElement, attr_name: str) -> str:
    """Return the value of *node*'s attribute named exactly *attr_name*.

    Raises:
        NotAnElement: If *node* is a text, comment or other non-element node.
        AttributeNotFound: If the element has no such attribute.
    """
    if not isinstance(node, Tag):
        raise NotAnElement("Node is not an element")
    if attr_name not in node.attrs:
        raise AttributeNotFound(attr_name)
    return node.attrs[attr_name]
