"""Parse scraped listing titles into name / version / mod info / category."""

from __future__ import annotations

import re

from modcatalog.catalog.types import DEFAULT_CATEGORY, DEFAULT_VERSION, ParsedTitle
from modcatalog.models import Category

# Decorative glyphs the scraped site sprinkles into titles
_DECORATIONS_RE = re.compile("[\u1405\ufe0f\u2714\u2705\u26a1]")
_VERSION_RE = re.compile(r"\d+(?:\.\d+)+")
_PARENS_RE = re.compile(r"\((.*?)\)")
_NAME_END_RE = re.compile(r"Mod APK|APK|\d+\.\d+")
_WHITESPACE_RE = re.compile(r"\s+")

MOD_MARKER = "Mod APK"
DEFAULT_MOD_INFO = "Modificado"
UNKNOWN_NAME = "Aplicación desconocida"

# Evaluated top to bottom against the lowercased name; first hit wins.
CATEGORY_RULES: tuple[tuple[str, tuple[str, ...], Category], ...] = (
    ("racing", ("drift", "racing", "car", "driving", "motocross", "demolition"), "games"),
    ("action", ("hero", "sniper", "war", "battle", "zombie", "superhero"), "games"),
    ("simulation", ("tycoon", "miner", "simulator", "craft", "factory"), "games"),
    ("social", ("whatsapp", "instagram", "telegram", "discord", "messenger"), "social"),
    ("media", ("spotify", "youtube", "netflix", "music", "video"), "media"),
    ("productivity", ("office", "pdf", "document", "note"), "productivity"),
    ("tools", ("cleaner", "manager", "vpn", "antivirus"), "tools"),
)


def clean_title(title: str) -> str:
    return _DECORATIONS_RE.sub("", title).strip()


def extract_version(title: str) -> str:
    match = _VERSION_RE.search(title)
    return match.group(0) if match else DEFAULT_VERSION


def extract_mod_info(title: str) -> str:
    if MOD_MARKER not in title:
        return ""
    match = _PARENS_RE.search(title)
    return match.group(1) if match else DEFAULT_MOD_INFO


def extract_name(title: str) -> str:
    prefix = _NAME_END_RE.split(title, maxsplit=1)[0]
    return _WHITESPACE_RE.sub(" ", prefix).strip()


def category_rule_for(name: str) -> tuple[str, tuple[str, ...], Category] | None:
    """Return the first rule whose keywords appear in *name*, or None."""
    lowered = name.lower()
    for rule in CATEGORY_RULES:
        if any(keyword in lowered for keyword in rule[1]):
            return rule
    return None


def classify_category(name: str) -> Category:
    rule = category_rule_for(name)
    return rule[2] if rule else DEFAULT_CATEGORY


def parse_title(title: str) -> ParsedTitle:
    """Best-effort parse of a listing title. Never raises.

    A title with nothing before its version/APK marker keeps the whole
    cleaned title as the name so no listing ends up nameless.
    """
    cleaned = clean_title(title or "")
    name = extract_name(cleaned)
    if not name:
        name = _WHITESPACE_RE.sub(" ", cleaned).strip() or UNKNOWN_NAME
    return ParsedTitle(
        name=name,
        version=extract_version(cleaned),
        mod_info=extract_mod_info(cleaned),
        category=classify_category(name),
    )
