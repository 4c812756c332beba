"""Turn raw catalog listings into storefront records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from modcatalog import logger
from modcatalog.catalog.grouping import group_items, order_versions
from modcatalog.catalog.loader import load_catalog_items
from modcatalog.catalog.metadata import (
    DEFAULT_FEATURED_PROBABILITY,
    synthesize_featured,
    synthesize_metadata,
)
from modcatalog.catalog.protocols import RandomSource, make_random_source
from modcatalog.catalog.title_parser import category_rule_for
from modcatalog.catalog.types import CatalogItem, ProcessedApp
from modcatalog.config import MetadataConfig, VersionOrder
from modcatalog.models import InsertApp


class CatalogProcessor:
    """Parse, group and assemble catalog listings.

    Each distinct app name yields one primary record (its newest version)
    followed by up to ``max_secondary_versions`` records for older versions.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        *,
        version_order: VersionOrder = "semantic",
        max_secondary_versions: int = 2,
        featured_probability: float = DEFAULT_FEATURED_PROBABILITY,
        requirements: str = "Android 5.0+",
        languages: str = "Español, Inglés",
    ) -> None:
        self.rng = rng if rng is not None else make_random_source()
        self.version_order = version_order
        self.max_secondary_versions = max_secondary_versions
        self.featured_probability = featured_probability
        self.requirements = requirements
        self.languages = languages
        self.group_count = 0

    @classmethod
    def from_config(cls, config: MetadataConfig, rng: RandomSource | None = None) -> CatalogProcessor:
        return cls(
            rng if rng is not None else make_random_source(config.seed),
            version_order=config.version_order,
            max_secondary_versions=config.max_secondary_versions,
            featured_probability=config.featured_probability,
            requirements=config.requirements,
            languages=config.languages,
        )

    def process(self, items: Iterable[CatalogItem]) -> List[InsertApp]:
        groups = group_items(items)
        self.group_count = len(groups)
        apps: List[InsertApp] = []
        for group in groups.values():
            apps.extend(self._assemble(group))
        return apps

    def process_file(self, path: Path) -> List[InsertApp]:
        items = load_catalog_items(path)
        logger.debug(f"Read {len(items)} listings from {path}")
        apps = self.process(items)
        logger.get_logger().catalog_loaded(len(apps), self.group_count, str(path))
        return apps

    def _assemble(self, group: ProcessedApp) -> List[InsertApp]:
        versions = order_versions(group.versions, self.version_order)
        latest = versions[0]
        meta = synthesize_metadata(
            group.name,
            group.category,
            latest.mod_info,
            self.rng,
            developer=group.developer,
        )
        primary = InsertApp(
            name=group.name,
            developer=meta.developer,
            description=meta.description,
            category=group.category,
            download_url=latest.download_url,
            icon_url=None,
            rating=meta.rating,
            downloads=meta.downloads,
            size=meta.size,
            version=latest.version,
            requirements=self.requirements,
            languages=self.languages,
            features=meta.features,
            is_featured=synthesize_featured(self.rng, self.featured_probability),
        )
        rule = category_rule_for(group.name)
        logger.debug(
            f"{group.name!r}: {len(versions)} version(s), primary {latest.version}, "
            f"category={group.category} ({rule[0] if rule else 'default'}), developer={meta.developer}"
        )

        records = [primary]
        for entry in versions[1:1 + self.max_secondary_versions]:
            records.append(
                primary.model_copy(
                    update={
                        "name": f"{group.name} v{entry.version}",
                        "version": entry.version,
                        "download_url": entry.download_url,
                        "is_featured": False,
                    },
                    deep=True,
                )
            )
        return records
