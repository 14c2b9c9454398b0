"""
Advice-related Pydantic schemas.
"""
from typing import Literal, Optional

from pydantic import BaseModel


class FarmerAdviceRequest(BaseModel):
    """Body of a farming advice request. Presence is checked by the route."""
    crop: Optional[str] = None
    location: Optional[str] = None


class FarmingAdvice(BaseModel):
    crop: str
    location: str
    advice: str
    timestamp: str
    note: Optional[str] = None


class TimingAdvice(BaseModel):
    recommendation: str
    timestamp: str
    marketIndicator: Literal["BUY", "WAIT"]
    note: Optional[str] = None
