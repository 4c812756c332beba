"""Catalog ingestion and normalization for the modded APK storefront."""

__version__ = "0.3.0"
