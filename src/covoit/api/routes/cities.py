"""City directory endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from ...data.cities_repository import find_city, list_departments, search_cities
from ...schemas.cities import CityModel, DepartmentModel

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("", response_model=List[CityModel], status_code=status.HTTP_200_OK)
def autocomplete_cities(
    q: str = Query(default="", description="Partial city name typed by the user"),
    limit: int = Query(default=10, ge=1, le=50),
) -> List[CityModel]:
    return [CityModel.from_city(city) for city in search_cities(q, limit)]


@router.get("/departments", response_model=List[DepartmentModel], status_code=status.HTTP_200_OK)
def get_departments() -> List[DepartmentModel]:
    return [
        DepartmentModel(name=name, cities=[CityModel.from_city(city) for city in cities])
        for name, cities in list_departments().items()
    ]


@router.get("/{name}", response_model=CityModel, status_code=status.HTTP_200_OK)
def get_city(name: str) -> CityModel:
    city = find_city(name)
    if city is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Ville inconnue: {name}")
    return CityModel.from_city(city)
