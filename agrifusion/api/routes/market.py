"""
Market API endpoints for trends and price history.
"""
import structlog
from fastapi import APIRouter, Depends, Query

from agrifusion.api.deps import get_rng
from agrifusion.api.utils import error_response
from agrifusion.core.config import settings
from agrifusion.schemas.common import SuccessResponse
from agrifusion.schemas.market import MarketData, PriceHistory
from agrifusion.services.market import get_market_data, get_price_history
from agrifusion.services.series import InvalidParameterError, RandomSource

router = APIRouter()
logger = structlog.get_logger()


@router.get("/trends", response_model=SuccessResponse[MarketData])
async def get_market_trends(rng: RandomSource = Depends(get_rng)):
    """Current prices, trends and regional pricing for major crops."""
    try:
        market_data = get_market_data(rng=rng)
    except Exception as e:
        logger.error("Error in get_market_trends", error=str(e))
        return error_response(500, "Failed to get market trends", message=str(e))

    return {"success": True, "data": market_data}


@router.get("/history/{crop}", response_model=SuccessResponse[PriceHistory])
async def get_market_history(
    crop: str,
    days: int = Query(
        default=settings.history_default_days,
        ge=0,
        le=settings.history_max_days,
        description="Number of days of history before today",
    ),
    rng: RandomSource = Depends(get_rng),
):
    """Daily price and volume history for a crop, ending today."""
    try:
        history = get_price_history(crop, days=days, rng=rng)
    except InvalidParameterError as e:
        return error_response(400, "Invalid request parameters", message=str(e))
    except Exception as e:
        logger.error("Error in get_market_history", error=str(e), crop=crop, days=days)
        return error_response(500, "Failed to get price history", message=str(e))

    return {"success": True, "data": history}
