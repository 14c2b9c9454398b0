"""
Pydantic schemas for API request/response validation.
"""
from agrifusion.schemas.advice import (
    FarmerAdviceRequest,
    FarmingAdvice,
    TimingAdvice,
)
from agrifusion.schemas.market import (
    MarketData,
    PriceHistory,
    PricePoint,
)
from agrifusion.schemas.common import ErrorResponse, SuccessResponse
from agrifusion.schemas.weather import WeatherAlert, WeatherReport

__all__ = [
    "FarmerAdviceRequest",
    "FarmingAdvice",
    "TimingAdvice",
    "MarketData",
    "PriceHistory",
    "PricePoint",
    "WeatherAlert",
    "WeatherReport",
    "SuccessResponse",
    "ErrorResponse",
]
