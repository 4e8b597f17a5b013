"""Item Pipeline: item node -> :class:`ItemRecord` -> ``<data_dir>/<id>.json``.

Each call works on its own item node and writes its own file, so calls for
different items can run in parallel without coordination.
"""

from __future__ import annotations

from pathlib import Path

from bs4 import Tag

from listings.scraper.fields import extract_condition, extract_link, extract_price, extract_title
from listings.scraper.models import ItemRecord


def build_record(node: Tag) -> ItemRecord:
    """Extract every field of one item node.

    Raises:
        FieldMissing: If a mandatory field (id, product URL, price, title) or
            the condition span inside an existing subtitle is missing.
    """
    item_id, product_url = extract_link(node)
    price = extract_price(node)
    title = extract_title(node)
    condition = extract_condition(node, item_id)
    return ItemRecord(
        id=item_id,
        title=title,
        price=price,
        condition=condition,
        product_url=product_url,
    )


def record_path(item_id: str, data_dir: Path) -> Path:
    return Path(data_dir) / f"{item_id}.json"


def write_record(record: ItemRecord, data_dir: Path) -> Path:
    """Write *record* to ``<data_dir>/<id>.json``, replacing any previous copy."""
    path = record_path(record.id, data_dir)
    path.write_text(record.to_json(), encoding="utf-8")
    return path


def process_item(node: Tag, data_dir: Path) -> ItemRecord:
    """Build the record for *node* and persist it; nothing is written on failure."""
    record = build_record(node)
    write_record(record, data_dir)
    return record
