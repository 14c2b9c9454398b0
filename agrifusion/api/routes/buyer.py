"""
Buyer API endpoints.
"""
import structlog
from fastapi import APIRouter, Depends

from agrifusion.api.deps import get_llm, get_rng
from agrifusion.api.utils import error_response
from agrifusion.schemas.advice import TimingAdvice
from agrifusion.schemas.common import SuccessResponse
from agrifusion.services.advisor import get_timing_advice
from agrifusion.services.llm import LLMClient
from agrifusion.services.series import RandomSource

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/timing",
    response_model=SuccessResponse[TimingAdvice],
    response_model_exclude_none=True,
)
async def get_buyer_timing(
    llm: LLMClient = Depends(get_llm),
    rng: RandomSource = Depends(get_rng),
):
    """Whether buyers should purchase now or wait, with a BUY/WAIT indicator."""
    try:
        timing_advice = await get_timing_advice(client=llm, rng=rng)
    except Exception as e:
        logger.error("Error in get_buyer_timing", error=str(e))
        return error_response(500, "Failed to get buying timing advice", message=str(e))

    return {"success": True, "data": timing_advice}
