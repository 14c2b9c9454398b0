"""
Market data service.

Mock market overview and simulated price history. No real market feed is
integrated; all figures are random within fixed, realistic ranges.
"""
import math
import random
from datetime import date, datetime, timezone
from typing import Any

from agrifusion.services.series import RandomSource, SeriesRequest, generate_series

CROPS = ("Wheat", "Rice", "Corn", "Soybeans", "Cotton")
LOCATIONS = ("California", "Texas", "Iowa", "Kansas", "Illinois")
TRENDS = ("up", "down", "stable")

MARKET_INSIGHTS = {
    "overallTrend": "Prices are stable with slight upward movement expected",
    "bestTimeToSell": "Next 2-3 weeks",
    "recommendedActions": [
        "Monitor weather patterns closely",
        "Consider storage options for surplus",
        "Explore contract farming opportunities",
    ],
}


def _randint(rng: RandomSource, low: int, span: int) -> int:
    """Uniform integer in [low, low + span)."""
    return math.floor(rng.random() * span) + low


def _choice(rng: RandomSource, options: tuple[str, ...]) -> str:
    return options[math.floor(rng.random() * len(options))]


def get_market_data(rng: RandomSource | None = None) -> dict[str, Any]:
    """
    Build a market overview: per-crop trends, regional prices and insights.

    Args:
        rng: Randomness source. Defaults to a fresh ``random.Random()``.
    """
    rng = rng or random.Random()

    trends = [
        {
            "crop": crop,
            "currentPrice": _randint(rng, 100, 200),
            "priceChange": (rng.random() - 0.5) * 20,
            "trend": _choice(rng, TRENDS),
            "volume": _randint(rng, 1000, 10000),
        }
        for crop in CROPS
    ]

    regional_prices = [
        {
            "location": location,
            "averagePrice": _randint(rng, 80, 150),
            "topCrops": [
                {"crop": crop, "price": _randint(rng, 50, 100)}
                for crop in CROPS[:3]
            ],
        }
        for location in LOCATIONS
    ]

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "trends": trends,
        "regionalPrices": regional_prices,
        "marketInsights": {
            **MARKET_INSIGHTS,
            "recommendedActions": list(MARKET_INSIGHTS["recommendedActions"]),
        },
    }


def get_price_history(
    crop: str,
    days: int = 30,
    rng: RandomSource | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """
    Simulated daily price history for a crop.

    Args:
        crop: Crop name, used as the series label.
        days: Number of days before today to cover.
        rng: Randomness source.
        today: Last date of the history. Defaults to the current UTC date.

    Returns:
        Dict with label, history (date/price/volume points) and period.

    Raises:
        InvalidParameterError: If days is negative.
    """
    samples = generate_series(SeriesRequest(periods=days), rng=rng, today=today)

    return {
        "label": crop,
        "history": [
            {
                "date": sample.date.isoformat(),
                "price": sample.value,
                "volume": sample.volume,
            }
            for sample in samples
        ],
        "period": f"{days} days",
    }
