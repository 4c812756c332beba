from __future__ import annotations

from pathlib import Path

import pytest

from modcatalog.config import CatalogConfig, MetadataConfig, load_config


def test_defaults_match_storage_schema_defaults() -> None:
    config = CatalogConfig()
    assert config.catalog.path == Path("catalogo_juegos.json")
    assert config.catalog.output is None
    assert config.metadata.seed is None
    assert config.metadata.featured_probability == 0.15
    assert config.metadata.max_secondary_versions == 2
    assert config.metadata.version_order == "semantic"
    assert config.metadata.requirements == "Android 5.0+"
    assert config.metadata.languages == "Español, Inglés"


def test_load_config_reads_sections_and_resolves_catalog_path(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        "\n".join([
            "[catalog]",
            'path = "data/catalog.json"',
            "",
            "[metadata]",
            "seed = 7",
            "featured_probability = 0.5",
            'version_order = "lexical"',
        ]),
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.config_path == config_file
    assert config.catalog.path == tmp_path / "data" / "catalog.json"
    assert config.metadata.seed == 7
    assert config.metadata.featured_probability == 0.5
    assert config.metadata.version_order == "lexical"
    assert config.metadata.max_secondary_versions == 2


def test_load_config_keeps_absolute_catalog_path(tmp_path: Path) -> None:
    absolute = tmp_path / "elsewhere" / "catalog.json"
    config_file = tmp_path / "config.toml"
    config_file.write_text(f"[catalog]\npath = '{absolute.as_posix()}'\n", encoding="utf-8")

    assert load_config(config_file).catalog.path == absolute


def test_load_config_resolves_output_against_config_dir(tmp_path: Path) -> None:
    config_dir = tmp_path / "cfg"
    config_dir.mkdir()
    config_file = config_dir / "config.toml"
    config_file.write_text("[catalog]\noutput = 'out/apps.json'\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.catalog.output == config_dir / "out" / "apps.json"
    assert config.catalog.path == config_dir / "catalogo_juegos.json"


def test_load_config_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        load_config(tmp_path / "missing.toml")
    assert exc.value.code == 1


@pytest.mark.parametrize(
    "body",
    [
        "[metadata]\nfeatured_probability = 2.0\n",
        "[metadata]\nversion_order = \"newest\"\n",
        "[metadata]\nmax_secondary_versions = -1\n",
        "[catalog\npath = 'x'\n",
    ],
)
def test_load_config_invalid_content_exits(tmp_path: Path, body: str) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text(body, encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        load_config(config_file)
    assert exc.value.code == 1


def test_metadata_config_validates_probability() -> None:
    with pytest.raises(ValueError):
        MetadataConfig(featured_probability=-0.1)
