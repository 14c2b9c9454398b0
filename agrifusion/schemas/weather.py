"""
Weather-related Pydantic schemas.
"""
from pydantic import BaseModel


class ForecastDay(BaseModel):
    day: str
    temp: int
    condition: str


class WeatherAlert(BaseModel):
    type: str  # warning, info, alert
    message: str
    severity: str  # low, moderate, high


class WeatherReport(BaseModel):
    """Current conditions, short forecast and active alerts for a location."""
    location: str
    temperature: int
    humidity: int
    rainfall: int
    conditions: str
    forecast: list[ForecastDay]
    lastUpdated: str
    alerts: list[WeatherAlert] = []
