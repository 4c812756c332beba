from __future__ import annotations

from collections import Counter
from typing import Sequence

from rich.table import Table

from modcatalog.models import CATEGORIES, InsertApp


def format_stars(app: InsertApp) -> str:
    return f"{app.stars:.1f}"


def category_counts(apps: Sequence[InsertApp]) -> dict[str, int]:
    counts = Counter(app.category for app in apps)
    return {category: counts.get(category, 0) for category in CATEGORIES}


def build_summary_table(apps: Sequence[InsertApp], *, used_fallback: bool = False) -> Table:
    title = "Catalog summary (sample data)" if used_fallback else "Catalog summary"
    table = Table(title=title)
    table.add_column("Category", style="cyan")
    table.add_column("Listings", justify="right", style="green")
    table.add_column("Featured", justify="right", style="yellow")
    featured = Counter(app.category for app in apps if app.is_featured)
    for category, count in category_counts(apps).items():
        table.add_row(category, str(count), str(featured.get(category, 0)))
    table.add_row("total", str(len(apps)), str(sum(featured.values())), style="bold")
    return table


def build_listing_table(apps: Sequence[InsertApp], limit: int = 20) -> Table:
    table = Table(title=f"First {min(limit, len(apps))} of {len(apps)} listings")
    table.add_column("Name", style="cyan")
    table.add_column("Version")
    table.add_column("Category")
    table.add_column("Developer")
    table.add_column("Rating", justify="right")
    table.add_column("Downloads", justify="right")
    for app in apps[:limit]:
        name = f"{app.name} ★" if app.is_featured else app.name
        table.add_row(name, app.version, app.category, app.developer, format_stars(app), app.downloads or "0")
    return table
