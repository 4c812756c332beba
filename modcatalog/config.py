"""
config.py - Configuration model for modcatalog
"""

import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from rich.console import Console

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

console = Console()

VersionOrder = Literal["semantic", "lexical"]


class CatalogSourceConfig(BaseModel):
    path: Path = Path("catalogo_juegos.json")
    output: Optional[Path] = None


class MetadataConfig(BaseModel):
    """Parameters for the placeholder metadata attached to every app."""

    seed: Optional[int] = Field(
        default=None,
        description="Seed for rating/downloads/size/featured draws; unset means a fresh draw per run"
    )
    featured_probability: float = Field(
        default=0.15,
        ge=0.0,
        le=1.0,
        description="Chance that a primary listing is marked as featured"
    )
    max_secondary_versions: int = Field(
        default=2,
        ge=0,
        description="How many older versions of the same app get their own listing"
    )
    version_order: VersionOrder = Field(
        default="semantic",
        description="'semantic' compares numeric segments, 'lexical' compares raw strings"
    )
    requirements: str = "Android 5.0+"
    languages: str = "Español, Inglés"


class CatalogConfig(BaseModel):
    catalog: CatalogSourceConfig = Field(default_factory=CatalogSourceConfig)
    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    config_path: Optional[Path] = None


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from TOML file"""

    if not config_path.exists():
        console.print(f"[red][ERROR][/red] Configuration file not found: {config_path}")
        console.print("Create config.toml or run without --config to use the defaults")
        sys.exit(1)

    try:
        with open(config_path, "rb") as f:
            config_data = tomllib.load(f)

        config = CatalogConfig(
            catalog=CatalogSourceConfig(**config_data.get("catalog", {})),
            metadata=MetadataConfig(**config_data.get("metadata", {})),
            config_path=config_path,
        )

        # Relative catalog and output paths are resolved against the config file location
        if not config.catalog.path.is_absolute():
            config.catalog.path = config_path.parent / config.catalog.path
        if config.catalog.output and not config.catalog.output.is_absolute():
            config.catalog.output = config_path.parent / config.catalog.output

        return config

    except Exception as e:
        console.print(f"[red][ERROR][/red] Error loading configuration: {e}")
        sys.exit(1)
