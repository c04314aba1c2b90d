from fastapi import APIRouter
from core.config import settings

router = APIRouter()

@router.get("/test-env")
async def test_env():
    """Report which Alltius credentials are configured without exposing them"""
    return {
        "environment": settings.ENVIRONMENT,
        "has_alltius_key": bool(settings.ALLTIUS_API_KEY),
        "has_assistant_id": bool(settings.ALLTIUS_ASSISTANT_ID),
        "key_prefix": settings.ALLTIUS_API_KEY[:4] + "..." if settings.ALLTIUS_API_KEY else "not found"
    }
