"""Mock weather data and farming alerts."""
import math
import random
from datetime import datetime, timezone
from typing import Any

from agrifusion.services.series import RandomSource

CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Partly Cloudy")

FORECAST = (
    {"day": "Today", "temp": 25, "condition": "Sunny"},
    {"day": "Tomorrow", "temp": 23, "condition": "Cloudy"},
    {"day": "Day 3", "temp": 22, "condition": "Rainy"},
)

ALERTS = (
    {
        "type": "warning",
        "message": "Heavy rainfall expected in the next 48 hours. Prepare for waterlogging.",
        "severity": "moderate",
    },
    {
        "type": "info",
        "message": "Temperature dropping below optimal range for crop growth.",
        "severity": "low",
    },
)


def get_weather_data(location: str, rng: RandomSource | None = None) -> dict[str, Any]:
    """Current conditions (temperature in Celsius, rainfall in mm) and a short forecast."""
    rng = rng or random.Random()

    return {
        "location": location,
        "temperature": math.floor(rng.random() * 30) + 10,
        "humidity": math.floor(rng.random() * 50) + 30,
        "rainfall": math.floor(rng.random() * 20),
        "conditions": CONDITIONS[math.floor(rng.random() * len(CONDITIONS))],
        "forecast": [dict(day) for day in FORECAST],
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }


def get_weather_alerts(location: str) -> list[dict[str, str]]:
    # Alerts are not location specific
    return [dict(alert) for alert in ALERTS]
