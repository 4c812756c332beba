"""Group catalog listings by parsed app name and order their versions."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

from modcatalog.catalog.metadata import resolve_developer
from modcatalog.catalog.title_parser import parse_title
from modcatalog.catalog.types import AppVersionEntry, CatalogItem, ProcessedApp
from modcatalog.config import VersionOrder

_DIGITS_RE = re.compile(r"\d+")


def version_key(version: str) -> tuple[int, ...]:
    """Numeric segments of a version string: '1.10.2' -> (1, 10, 2)."""
    return tuple(int(part) for part in _DIGITS_RE.findall(version))


def order_versions(versions: Iterable[AppVersionEntry], order: VersionOrder = "semantic") -> List[AppVersionEntry]:
    """Newest first. Ties keep their catalog order.

    'lexical' compares the raw strings, so '10.0' sorts below '9.0'.
    """
    if order == "lexical":
        return sorted(versions, key=lambda entry: entry.version, reverse=True)
    if order == "semantic":
        return sorted(versions, key=lambda entry: version_key(entry.version), reverse=True)
    raise ValueError(f"Unknown version order '{order}'. Expected 'semantic' or 'lexical'.")


def group_items(items: Iterable[CatalogItem]) -> Dict[str, ProcessedApp]:
    """Collapse listings sharing a parsed name into one group.

    Keys are the exact parsed names, in first-seen order. The first listing
    of a name fixes the group's category, developer and mod info.
    """
    groups: Dict[str, ProcessedApp] = {}
    for item in items:
        parsed = parse_title(item.title)
        group = groups.get(parsed.name)
        if group is None:
            group = ProcessedApp(
                name=parsed.name,
                category=parsed.category,
                developer=resolve_developer(parsed.name),
                mod_info=parsed.mod_info,
            )
            groups[parsed.name] = group
        group.versions.append(
            AppVersionEntry(
                version=parsed.version,
                download_url=item.link,
                mod_info=parsed.mod_info,
            )
        )
    return groups
