"""
System API endpoints (health).
"""

from fastapi import APIRouter

from tossremote.api.config import get_openai_api_key, get_tmdb_api_key

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check():
    """Report whether both upstream services are configured."""
    openai_configured = get_openai_api_key() is not None
    tmdb_configured = get_tmdb_api_key() is not None
    return {
        "status": "healthy" if openai_configured and tmdb_configured else "degraded",
        "openai_configured": openai_configured,
        "tmdb_configured": tmdb_configured,
    }
