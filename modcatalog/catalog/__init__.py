"""Catalog ingestion pipeline: title parsing, metadata synthesis, version grouping."""

from .fallback import SAMPLE_APPS, load_apps_with_fallback, sample_apps
from .grouping import group_items, order_versions, version_key
from .loader import CatalogFormatError, load_catalog_items
from .metadata import name_hash, resolve_developer, synthesize_metadata
from .processor import CatalogProcessor
from .protocols import RandomSource, make_random_source
from .title_parser import classify_category, parse_title
from .types import AppVersionEntry, CatalogItem, ParsedTitle, ProcessedApp

__all__ = [
    "AppVersionEntry",
    "CatalogFormatError",
    "CatalogItem",
    "CatalogProcessor",
    "ParsedTitle",
    "ProcessedApp",
    "RandomSource",
    "SAMPLE_APPS",
    "classify_category",
    "group_items",
    "load_apps_with_fallback",
    "load_catalog_items",
    "make_random_source",
    "name_hash",
    "order_versions",
    "parse_title",
    "resolve_developer",
    "sample_apps",
    "synthesize_metadata",
    "version_key",
]
