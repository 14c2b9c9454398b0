"""
API module for FastAPI routes.
"""
from fastapi import APIRouter

from agrifusion.api.routes import (
    buyer,
    farmer,
    health,
    market,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(farmer.router, prefix="/farmer", tags=["Farmer"])
api_router.include_router(market.router, prefix="/market", tags=["Market"])
api_router.include_router(buyer.router, prefix="/buyer", tags=["Buyer"])
