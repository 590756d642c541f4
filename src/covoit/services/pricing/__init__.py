"""Fare engine: distance to bounded seat price and commission."""

from .base import Commission, FareQuote, PricingModel
from .commission import commission_rate, compute_commission
from .dispatcher import get_model
from .engine import quote_fare, quote_route
from .validator import PriceCheck, check_route_price, validate_price

__all__ = [
    "Commission",
    "FareQuote",
    "PricingModel",
    "PriceCheck",
    "check_route_price",
    "commission_rate",
    "compute_commission",
    "get_model",
    "quote_fare",
    "quote_route",
    "validate_price",
]
