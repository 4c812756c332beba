"""Placeholder metadata for catalog apps that arrive without any.

Developer attribution is deterministic (same name, same developer). Rating,
downloads, size and the featured flag are drawn from an injected
``RandomSource`` so callers decide whether runs are repeatable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from modcatalog.catalog.protocols import RandomSource
from modcatalog.models import Category

# Checked in order against the lowercased name; first hit wins.
KNOWN_PUBLISHERS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("whatsapp",), "Meta"),
    (("instagram",), "Meta"),
    (("spotify",), "Spotify AB"),
    (("minecraft", "mc "), "Mojang Studios"),
    (("fortnite",), "Epic Games"),
    (("pubg",), "PUBG Corporation"),
    (("free fire",), "Garena"),
    (("tiktok",), "ByteDance"),
    (("youtube",), "Google LLC"),
    (("netflix",), "Netflix Inc."),
)

STUDIOS: tuple[str, ...] = (
    "Digital Storm Games",
    "Apex Interactive",
    "Fusion Studios",
    "Thunder Games",
    "Elite Gaming Co.",
    "Pixel Forge",
    "Infinity Labs",
    "Storm Entertainment",
    "Quantum Studios",
    "Nexus Games",
    "Cyber Interactive",
    "Phoenix Games",
)

SIZE_LABELS: tuple[str, ...] = (
    "25MB", "35MB", "45MB", "55MB", "68MB", "75MB", "89MB", "125MB", "156MB", "245MB",
)
DOWNLOAD_LABELS: tuple[str, ...] = ("1M+", "5M+", "10M+", "25M+", "50M+", "100M+")

MIN_RATING = 35
MAX_RATING = 50
MAX_FEATURES = 5
DEFAULT_FEATURED_PROBABILITY = 0.15

BASE_FEATURES: tuple[str, ...] = (
    "Interfaz optimizada",
    "Rendimiento mejorado",
    "Compatibilidad amplia",
)

# (mod-info tokens, clause) pairs for the description's "Incluye ..." sentence
DESCRIPTION_CLAUSES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("infinito", "unlimited"), "recursos ilimitados"),
    (("premium", "pro"), "funciones premium desbloqueadas"),
    (("mod", "modificado"), "mejoras exclusivas"),
)

MOD_FEATURES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("infinito", "unlimited"), ("Recursos ilimitados",)),
    (("premium",), ("Funciones premium",)),
    (("sin anuncios", "no ads"), ("Sin publicidad",)),
    (("desbloqueado",), ("Todo desbloqueado",)),
)

NAME_FEATURES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("game", "juego"), ("Gráficos HD", "Controles intuitivos")),
    (("music", "spotify"), ("Calidad superior", "Modo offline")),
    (("social", "chat"), ("Privacidad mejorada", "Funciones extra")),
)


@dataclass(frozen=True)
class SynthesizedMetadata:
    developer: str
    description: str
    features: list[str]
    size: str
    rating: int
    downloads: str


def _contains_any(text: str, tokens: Sequence[str]) -> bool:
    return any(token in text for token in tokens)


def name_hash(name: str) -> int:
    """31-multiplier string hash wrapped to a signed 32-bit int.

    Runs over UTF-16 code units so names outside the BMP hash the same way
    the storefront front end hashes them.
    """
    data = name.encode("utf-16-le")
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def resolve_developer(name: str) -> str:
    lowered = name.lower()
    for tokens, publisher in KNOWN_PUBLISHERS:
        if _contains_any(lowered, tokens):
            return publisher
    return STUDIOS[abs(name_hash(name)) % len(STUDIOS)]


def synthesize_description(name: str, category: Category | str, mod_info: str) -> str:
    kind = "de juego" if category == "games" else f"de {category}"
    flavour = f"modificada con {mod_info.lower()}" if mod_info else "premium"
    description = f"{name} es una aplicación {kind} {flavour} que ofrece una experiencia única y emocionante."

    # Mod-info tokens are case-sensitive: "Modificado" and "Premium" add nothing
    clauses = [clause for tokens, clause in DESCRIPTION_CLAUSES if _contains_any(mod_info, tokens)]
    if clauses:
        description += f" Incluye {', '.join(clauses)}."
    return description


def synthesize_features(name: str, mod_info: str) -> list[str]:
    features = list(BASE_FEATURES)
    for tokens, extra in MOD_FEATURES:
        if _contains_any(mod_info, tokens):
            features.extend(extra)
    lowered_name = name.lower()
    for tokens, extra in NAME_FEATURES:
        if _contains_any(lowered_name, tokens):
            features.extend(extra)
    return features[:MAX_FEATURES]


def synthesize_rating(rng: RandomSource) -> int:
    return rng.randint(MIN_RATING, MAX_RATING)


def synthesize_downloads(rng: RandomSource) -> str:
    return rng.choice(DOWNLOAD_LABELS)


def synthesize_size(rng: RandomSource) -> str:
    return rng.choice(SIZE_LABELS)


def synthesize_featured(rng: RandomSource, probability: float = DEFAULT_FEATURED_PROBABILITY) -> bool:
    return rng.random() < probability


def synthesize_metadata(
    name: str,
    category: Category | str,
    mod_info: str,
    rng: RandomSource,
    developer: str | None = None,
) -> SynthesizedMetadata:
    """Build the full placeholder metadata set for one app."""
    return SynthesizedMetadata(
        developer=developer or resolve_developer(name),
        description=synthesize_description(name, category, mod_info),
        features=synthesize_features(name, mod_info),
        size=synthesize_size(rng),
        rating=synthesize_rating(rng),
        downloads=synthesize_downloads(rng),
    )
