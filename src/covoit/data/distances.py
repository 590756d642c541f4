"""Known road distances (km) between major Beninese cities.

Each pair is stored once; lookups must try both directions.
"""

from __future__ import annotations

import functools

from ..models.domain import DistanceEntry

_ROAD_DISTANCES: dict[str, dict[str, int]] = {
    "Cotonou": {
        "Porto-Novo": 35,
        "Abomey-Calavi": 18,
        "Ouidah": 42,
        "Bohicon": 120,
        "Abomey": 135,
        "Parakou": 415,
        "Natitingou": 560,
        "Sèmè-Kpodji": 15,
        "Lokossa": 105,
        "Djougou": 460,
        "Kandi": 570,
        "Malanville": 680,
        "Savalou": 210,
        "Dassa-Zoumé": 200,
        "Glazoué": 230,
        "Tchaourou": 350,
        "Allada": 55,
        "Comé": 70,
        "Grand-Popo": 85,
    },
    "Porto-Novo": {
        "Abomey-Calavi": 50,
        "Sèmè-Kpodji": 25,
        "Adjarra": 10,
        "Pobè": 45,
        "Kétou": 85,
    },
    "Parakou": {
        "Natitingou": 150,
        "Bohicon": 295,
        "Djougou": 135,
        "Kandi": 160,
        "Tchaourou": 65,
        "Nikki": 90,
        "Bembèrèkè": 70,
        "N'Dali": 25,
    },
    "Bohicon": {
        "Abomey": 8,
        "Lokossa": 75,
        "Savalou": 90,
        "Dassa-Zoumé": 80,
        "Covè": 25,
        "Zagnanado": 45,
    },
    "Natitingou": {
        "Djougou": 85,
        "Tanguiéta": 55,
        "Boukoumbé": 45,
        "Kouandé": 35,
    },
    "Lokossa": {
        "Comé": 40,
        "Grand-Popo": 55,
        "Athiémé": 15,
        "Aplahoué": 30,
        "Dogbo": 20,
    },
    "Djougou": {
        "Bassila": 65,
        "Copargo": 25,
        "Ouaké": 40,
    },
    "Kandi": {
        "Malanville": 110,
        "Banikoara": 50,
        "Gogounou": 35,
        "Ségbana": 85,
    },
    "Ouidah": {
        "Grand-Popo": 45,
        "Comé": 30,
        "Allada": 35,
    },
    "Abomey-Calavi": {
        "Allada": 25,
        "Tori-Bossito": 35,
        "Zè": 30,
    },
}


@functools.lru_cache(maxsize=1)
def load_distance_table() -> dict[tuple[str, str], int]:
    """Flatten the nested table into (origin, destination) -> km."""

    return {
        (origin, destination): km
        for origin, destinations in _ROAD_DISTANCES.items()
        for destination, km in destinations.items()
    }


def iter_distance_entries() -> tuple[DistanceEntry, ...]:
    return tuple(
        DistanceEntry(city_a=origin, city_b=destination, km=km)
        for (origin, destination), km in load_distance_table().items()
    )
