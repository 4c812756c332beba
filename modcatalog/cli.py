#!/usr/bin/env python3
"""
cli.py - Entry point for modcatalog
Normalize a scraped APK catalog into storefront listings.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

import modcatalog as pkg
from . import logger
from .catalog.fallback import load_apps_with_fallback
from .catalog.processor import CatalogProcessor
from .config import CatalogConfig, load_config
from .formatters import build_listing_table, build_summary_table
from .models import InsertApp

console = Console()


def _ui_info(message: str) -> None:
    console.print(f"[cyan][INFO][/cyan] {message}")


def _ui_warn(message: str) -> None:
    console.print(f"[yellow][WARNING][/yellow] {message}")


def _ui_error(message: str) -> None:
    console.print(f"[red][ERROR][/red] {message}")


def resolve_config_path(args_config: Optional[str]) -> Optional[Path]:
    if args_config:
        p = Path(args_config).expanduser()
        if p.is_dir():
            p = p / "config.toml"
        return p

    cwd_candidate = Path.cwd() / "config.toml"
    if cwd_candidate.exists():
        return cwd_candidate
    return None


def apply_overrides(config: CatalogConfig, args: argparse.Namespace) -> CatalogConfig:
    """Command-line flags win over the config file."""
    if args.catalog:
        config.catalog.path = Path(args.catalog).expanduser()
    if args.output:
        config.catalog.output = Path(args.output).expanduser()
    if args.seed is not None:
        config.metadata.seed = args.seed
    if args.lexical_versions:
        config.metadata.version_order = "lexical"
    return config


def write_apps(apps: List[InsertApp], output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = [app.to_storage() for app in apps]
    output.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def show_help(parser: argparse.ArgumentParser) -> None:
    print(f"MODCATALOG v{getattr(pkg, '__version__', '0.0.0')} - Normalize scraped APK catalogs")
    print()
    parser.print_help()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modcatalog", add_help=False)
    for args, kwargs in (
        (("-h", "--help"), {"action": "store_true", "help": "Show help"}),
        (("-c", "--config"), {"metavar": "PATH", "help": "Path to config.toml (file or directory)"}),
        (("-o", "--output"), {"metavar": "FILE", "help": "Write the processed listings as JSON"}),
        (("--seed",), {"type": int, "metavar": "N", "help": "Seed placeholder metadata for repeatable output"}),
        (("--strict",), {"action": "store_true", "help": "Fail instead of falling back to sample data"}),
        (("--lexical-versions",), {"action": "store_true", "help": "Order versions as raw strings"}),
        (("-l", "--list"), {"type": int, "metavar": "N", "help": "Show the first N listings"}),
        (("--log-file",), {"metavar": "FILE", "help": "Also write the run log to FILE"}),
        (("-d", "--debug"), {"action": "store_true", "help": "Debug mode with per-app details and timestamps"}),
    ):
        parser.add_argument(*args, **kwargs)
    parser.add_argument("catalog", nargs="?", help="Catalog JSON file (overrides config)")
    return parser


def main(argv: Optional[List[str]] = None):
    """Entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        show_help(parser)
        sys.exit(0)

    try:
        config_path = resolve_config_path(args.config)
        config = load_config(config_path) if config_path else CatalogConfig()
        config = apply_overrides(config, args)

        log_file = Path(args.log_file).expanduser() if args.log_file else None
        with logger.CatalogLogger(log_file=log_file, debug=args.debug) as run_logger:
            logger.set_logger(run_logger)
            processor = CatalogProcessor.from_config(config.metadata)
            apps, used_fallback = load_apps_with_fallback(
                config.catalog.path,
                processor,
                strict=args.strict,
            )

        if used_fallback:
            _ui_warn(f"Catalog {config.catalog.path} unavailable; showing {len(apps)} sample listings")
        console.print(build_summary_table(apps, used_fallback=used_fallback))
        if args.list:
            console.print(build_listing_table(apps, limit=args.list))

        if config.catalog.output:
            write_apps(apps, config.catalog.output)
            _ui_info(f"Wrote {len(apps)} listings to {config.catalog.output}")
        sys.exit(0)
    except KeyboardInterrupt:
        _ui_info("Interrupted")
        sys.exit(130)
    except Exception as e:
        _ui_error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
