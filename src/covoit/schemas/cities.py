"""City directory API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..models.domain import City


class CityModel(BaseModel):
    name: str
    department: str
    lat: float
    lng: float

    @classmethod
    def from_city(cls, city: City) -> "CityModel":
        return cls(name=city.name, department=city.department, lat=city.lat, lng=city.lng)


class DepartmentModel(BaseModel):
    name: str
    cities: List[CityModel]
