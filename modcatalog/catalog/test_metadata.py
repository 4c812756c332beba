from __future__ import annotations

import random
from typing import Sequence

import pytest

from modcatalog.catalog import metadata
from modcatalog.catalog.metadata import (
    BASE_FEATURES,
    DOWNLOAD_LABELS,
    SIZE_LABELS,
    STUDIOS,
    name_hash,
    resolve_developer,
    synthesize_description,
    synthesize_featured,
    synthesize_features,
    synthesize_metadata,
    synthesize_rating,
)


class _FixedRandom:
    """Random source pinned to the top of every range."""

    def __init__(self, value: float = 0.1) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def randint(self, a: int, b: int) -> int:
        return b

    def choice(self, seq: Sequence):
        return seq[-1]


def test_name_hash_matches_31_multiplier_string_hash() -> None:
    assert name_hash("") == 0
    assert name_hash("a") == 97
    assert name_hash("ab") == 3105
    assert name_hash("hello") == 99162322


def test_name_hash_wraps_to_signed_32_bit() -> None:
    assert name_hash("Hello World") == -862545276
    long_name = "Super Mega Ultra Extreme Racing Championship " * 4
    assert -(2 ** 31) <= name_hash(long_name) < 2 ** 31


def test_name_hash_counts_utf16_code_units() -> None:
    # Astral characters are two code units (a surrogate pair)
    assert name_hash("\U0001F600") == 0xD83D * 31 + 0xDE00


@pytest.mark.parametrize(
    ("name", "developer"),
    [
        ("WhatsApp Plus", "Meta"),
        ("Instagram Pro", "Meta"),
        ("Spotify Premium", "Spotify AB"),
        ("Minecraft PE", "Mojang Studios"),
        ("MC Pocket Edition", "Mojang Studios"),
        ("Fortnite", "Epic Games"),
        ("PUBG Mobile", "PUBG Corporation"),
        ("Free Fire", "Garena"),
        ("TikTok Pro", "ByteDance"),
        ("YouTube Vanced", "Google LLC"),
        ("Netflix Mod", "Netflix Inc."),
    ],
)
def test_resolve_developer_known_publishers(name: str, developer: str) -> None:
    assert resolve_developer(name) == developer


def test_resolve_developer_publisher_table_order() -> None:
    assert resolve_developer("Spotify for YouTube") == "Spotify AB"


def test_resolve_developer_unknown_name_picks_studio_by_hash() -> None:
    assert resolve_developer("Super Utility Tool") == "Apex Interactive"
    assert resolve_developer("Hello World") == "Digital Storm Games"
    assert resolve_developer("Pixel Dungeon") == STUDIOS[abs(name_hash("Pixel Dungeon")) % 12]


def test_resolve_developer_is_deterministic() -> None:
    names = ["Pixel Dungeon", "Idle Miner Tycoon", "Zombie Sniper", "Geometry Dash"]
    assert [resolve_developer(n) for n in names] == [resolve_developer(n) for n in names]
    assert all(resolve_developer(n) in STUDIOS for n in names)


def test_description_for_modded_game_includes_feature_clause() -> None:
    assert synthesize_description("Free Fire", "games", "Diamantes infinitos") == (
        "Free Fire es una aplicación de juego modificada con diamantes infinitos "
        "que ofrece una experiencia única y emocionante. Incluye recursos ilimitados."
    )


def test_description_without_mod_info_is_premium_and_has_no_clause() -> None:
    assert synthesize_description("Netflix", "media", "") == (
        "Netflix es una aplicación de media premium que ofrece una experiencia única y emocionante."
    )


def test_description_clauses_keep_order() -> None:
    description = synthesize_description("Clash", "games", "unlimited gems, premium, mod menu")
    assert description.endswith(
        " Incluye recursos ilimitados, funciones premium desbloqueadas, mejoras exclusivas."
    )


def test_features_baseline_only() -> None:
    assert synthesize_features("Pixel Dungeon", "") == list(BASE_FEATURES)


def test_features_name_keywords() -> None:
    assert synthesize_features("Spotify Music", "") == [
        *BASE_FEATURES,
        "Calidad superior",
        "Modo offline",
    ]


def test_features_truncated_to_five_in_insertion_order() -> None:
    features = synthesize_features("Music Game Chat", "unlimited premium sin anuncios desbloqueado")
    assert features == [*BASE_FEATURES, "Recursos ilimitados", "Funciones premium"]


def test_mod_tokens_are_case_sensitive() -> None:
    assert " Incluye" not in synthesize_description("Pixel Dungeon", "games", "Premium desbloqueado")
    assert synthesize_features("Pixel Dungeon", "Premium desbloqueado") == [*BASE_FEATURES, "Todo desbloqueado"]


def test_default_mod_info_adds_no_clause() -> None:
    assert synthesize_description("Pixel Dungeon", "games", "Modificado") == (
        "Pixel Dungeon es una aplicación de juego modificada con modificado "
        "que ofrece una experiencia única y emocionante."
    )


def test_rating_stays_within_bounds() -> None:
    rng = random.Random(7)
    ratings = {synthesize_rating(rng) for _ in range(500)}
    assert min(ratings) >= 35
    assert max(ratings) <= 50
    assert ratings == set(range(35, 51))


def test_featured_draw_uses_probability() -> None:
    assert synthesize_featured(_FixedRandom(0.1), 0.15) is True
    assert synthesize_featured(_FixedRandom(0.1), 0.05) is False


def test_synthesize_metadata_with_fixed_random_source() -> None:
    meta = synthesize_metadata("Free Fire", "games", "Diamantes infinitos", _FixedRandom())

    assert meta.developer == "Garena"
    assert meta.size == SIZE_LABELS[-1]
    assert meta.downloads == DOWNLOAD_LABELS[-1]
    assert meta.rating == metadata.MAX_RATING
    assert "Recursos ilimitados" in meta.features


def test_synthesize_metadata_prefers_given_developer() -> None:
    meta = synthesize_metadata("Free Fire", "games", "", _FixedRandom(), developer="Someone")
    assert meta.developer == "Someone"


def test_seeded_sources_draw_the_same_metadata() -> None:
    first = synthesize_metadata("Pixel Dungeon", "games", "", random.Random(42))
    second = synthesize_metadata("Pixel Dungeon", "games", "", random.Random(42))
    assert first == second
