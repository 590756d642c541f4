"""Lookup helpers over the static Benin city directory."""

from __future__ import annotations

import functools
import re
import unicodedata
from typing import Optional

from ..models.domain import City
from .benin_cities import BENIN_CITIES

_SEPARATORS = re.compile(r"[-'’]")
_WHITESPACE = re.compile(r"\s+")

# Ranking tiers for autocomplete; shorter matches win within a tier.
NAME_PREFIX_SCORE = 100
VARIANT_PREFIX_SCORE = 80
NAME_SUBSTRING_SCORE = 50
VARIANT_SUBSTRING_SCORE = 30


def normalize(value: str) -> str:
    """Lowercase, strip accents, turn hyphens/apostrophes into spaces and collapse whitespace."""

    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    spaced = _SEPARATORS.sub(" ", stripped)
    return _WHITESPACE.sub(" ", spaced).strip()


@functools.lru_cache(maxsize=1)
def _normalized_index() -> dict[str, City]:
    index: dict[str, City] = {}
    for city in BENIN_CITIES:
        index.setdefault(normalize(city.name), city)
    for city in BENIN_CITIES:
        for variant in sorted(city.variants):
            index.setdefault(normalize(variant), city)
    return index


def find_city(value: str) -> Optional[City]:
    """Return the city whose name or any variant normalizes to the same key, else None."""

    if not value:
        return None
    return _normalized_index().get(normalize(value))


def _score(city: City, query: str) -> Optional[int]:
    name = normalize(city.name)
    if name.startswith(query):
        return NAME_PREFIX_SCORE - len(name)
    if query in name:
        return NAME_SUBSTRING_SCORE - len(name)

    best: Optional[int] = None
    for variant in city.variants:
        normalized_variant = normalize(variant)
        if normalized_variant.startswith(query):
            candidate = VARIANT_PREFIX_SCORE - len(normalized_variant)
        elif query in normalized_variant:
            candidate = VARIANT_SUBSTRING_SCORE - len(normalized_variant)
        else:
            continue
        if best is None or candidate > best:
            best = candidate
    return best


def search_cities(query: str, limit: int = 10) -> list[City]:
    """Rank directory cities against an autocomplete query."""

    if not query or len(query) < 1 or limit < 1:
        return []
    normalized_query = normalize(query)
    if not normalized_query:
        return []

    scored: list[tuple[int, int, City]] = []
    for position, city in enumerate(BENIN_CITIES):
        score = _score(city, normalized_query)
        if score is not None:
            scored.append((score, position, city))

    scored.sort(key=lambda item: (-item[0], item[1]))
    return [city for _, _, city in scored[:limit]]


def get_city_coords(name: str) -> Optional[tuple[float, float]]:
    """Return (lat, lng) for a known city."""

    city = find_city(name)
    return (city.lat, city.lng) if city else None


def list_departments() -> dict[str, list[City]]:
    departments: dict[str, list[City]] = {}
    for city in BENIN_CITIES:
        departments.setdefault(city.department, []).append(city)
    return departments
