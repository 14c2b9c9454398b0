"""
Farmer API endpoints: crop advice and local weather.
"""
import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from agrifusion.api.deps import get_llm, get_rng
from agrifusion.api.utils import error_response
from agrifusion.schemas.advice import FarmerAdviceRequest, FarmingAdvice
from agrifusion.schemas.common import SuccessResponse
from agrifusion.schemas.weather import WeatherReport
from agrifusion.services.advisor import get_farming_advice
from agrifusion.services.llm import LLMClient
from agrifusion.services.series import RandomSource
from agrifusion.services.weather import get_weather_alerts, get_weather_data

router = APIRouter()
logger = structlog.get_logger()


@router.post(
    "/advice",
    response_model=SuccessResponse[FarmingAdvice],
    response_model_exclude_none=True,
)
async def get_farmer_advice(
    payload: FarmerAdviceRequest,
    llm: LLMClient = Depends(get_llm),
):
    """
    Farming advice for a crop and location.

    Body: ``{"crop": "wheat", "location": "Iowa"}``.
    """
    crop = (payload.crop or "").strip()
    location = (payload.location or "").strip()
    if not crop or not location:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: crop and location are required",
        )

    try:
        advice = await get_farming_advice(crop, location, client=llm)
    except Exception as e:
        logger.error("Error in get_farmer_advice", error=str(e), crop=crop, location=location)
        return error_response(500, "Failed to get farming advice", message=str(e))

    return {"success": True, "data": advice}


@router.get("/weather/{location}", response_model=SuccessResponse[WeatherReport])
async def get_farmer_weather(location: str, rng: RandomSource = Depends(get_rng)):
    """Current weather, short forecast and farming alerts for a location."""
    try:
        report = get_weather_data(location, rng=rng)
        report["alerts"] = get_weather_alerts(location)
    except Exception as e:
        logger.error("Error in get_farmer_weather", error=str(e), location=location)
        return error_response(500, "Failed to get weather data", message=str(e))

    return {"success": True, "data": report}
