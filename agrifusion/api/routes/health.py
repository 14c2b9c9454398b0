"""
Health check endpoints.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from agrifusion.api.deps import get_llm
from agrifusion.core.config import settings, validate_api_key
from agrifusion.services.llm import LLMClient

router = APIRouter()


@router.get("/health")
async def health_check(llm: LLMClient = Depends(get_llm)):
    """
    Health check endpoint.

    Reports which LLM provider is serving advice. A mock provider means
    advice endpoints answer with fallback responses.
    ``api_key_configured`` reflects the OpenAI key regardless of provider.
    """
    return {
        "status": "degraded" if llm.is_fallback else "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "services": {
            "api": "ok",
            "llm": llm.provider_name,
            "api_key_configured": validate_api_key(),
        },
    }
