"""Read the raw scraped catalog file and guard its shape."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from modcatalog.catalog.types import CatalogItem


class CatalogFormatError(ValueError):
    """Raised when the catalog file is not a JSON array of {title, link} objects."""


def expect_str(row: dict, key: str, context: str) -> str:
    value = row.get(key)
    if isinstance(value, str):
        return value
    value_type = type(value).__name__
    raise CatalogFormatError(f"{context}.{key} has unexpected type '{value_type}'")


def parse_catalog_payload(payload: object, source: str = "catalog") -> List[CatalogItem]:
    if not isinstance(payload, list):
        raise CatalogFormatError(f"{source} root must be a list, got '{type(payload).__name__}'")
    items: List[CatalogItem] = []
    for idx, row in enumerate(payload):
        context = f"{source}[{idx}]"
        if not isinstance(row, dict):
            raise CatalogFormatError(f"{context} has unexpected type '{type(row).__name__}'")
        items.append(CatalogItem(title=expect_str(row, "title", context), link=expect_str(row, "link", context)))
    return items


def load_catalog_items(path: Path) -> List[CatalogItem]:
    """Load every listing from *path*.

    A missing file raises FileNotFoundError; anything that is not a JSON
    array of string title/link pairs raises CatalogFormatError. One bad row
    rejects the whole file.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogFormatError(f"{path} is not valid JSON: {exc}") from exc
    return parse_catalog_payload(payload, source=Path(path).name)
