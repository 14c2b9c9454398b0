"""
Market-related Pydantic schemas.
"""
from pydantic import BaseModel


class CropTrend(BaseModel):
    """Price trend for a single crop."""
    crop: str
    currentPrice: int
    priceChange: float
    trend: str  # up, down, stable
    volume: int


class CropPrice(BaseModel):
    crop: str
    price: int


class RegionalPrice(BaseModel):
    """Average price and top crops for a region."""
    location: str
    averagePrice: int
    topCrops: list[CropPrice]


class MarketInsights(BaseModel):
    overallTrend: str
    bestTimeToSell: str
    recommendedActions: list[str]


class MarketData(BaseModel):
    """Market overview returned by /market/trends."""
    timestamp: str
    trends: list[CropTrend]
    regionalPrices: list[RegionalPrice]
    marketInsights: MarketInsights


class PricePoint(BaseModel):
    """Single day of price history."""
    date: str  # YYYY-MM-DD
    price: float
    volume: int


class PriceHistory(BaseModel):
    label: str
    history: list[PricePoint]
    period: str
