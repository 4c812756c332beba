"""Shared data structures for the catalog pipeline."""

from dataclasses import dataclass, field
from typing import List

from modcatalog.models import Category

DEFAULT_CATEGORY: Category = "games"
DEFAULT_VERSION = "1.0.0"


@dataclass(frozen=True)
class CatalogItem:
    """One scraped listing as found in the raw catalog file."""
    title: str
    link: str


@dataclass(frozen=True)
class ParsedTitle:
    """Fields recovered from a listing title."""
    name: str
    version: str
    mod_info: str
    category: Category


@dataclass
class AppVersionEntry:
    """One observed version of a named app."""
    version: str
    download_url: str
    mod_info: str = ""


@dataclass
class ProcessedApp:
    """All listings sharing one parsed name."""
    name: str
    category: Category
    developer: str
    mod_info: str = ""
    versions: List[AppVersionEntry] = field(default_factory=list)
