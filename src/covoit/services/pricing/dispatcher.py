"""Factory for fare models based on configuration."""

from __future__ import annotations

from ...config import settings
from .base import PricingModel
from .cost_sharing import FuelSharingModel, FuelWearTollSharingModel
from .moto_taxi import MotoTaxiParityModel


def get_model(name: str | None = None) -> PricingModel:
    match name or settings.pricing_model:
        case "moto_taxi_parity":
            return MotoTaxiParityModel(
                base_price=settings.zem_base_price,
                per_km_rate=settings.zem_per_km_rate,
            )
        case "fuel_sharing":
            return FuelSharingModel(
                fuel_price_per_liter=settings.fuel_price_per_liter,
                consumption_l_per_100km=settings.average_consumption_l_per_100km,
            )
        case "fuel_wear_toll_sharing":
            return FuelWearTollSharingModel(
                fuel_price_per_liter=settings.fuel_price_per_liter,
                consumption_l_per_100km=settings.average_consumption_l_per_100km,
                wear_per_km=settings.vehicle_wear_per_km,
                toll_per_100km=settings.toll_fee_per_100km,
            )
        case other:
            raise ValueError(f"Unknown pricing model '{other}'.")
