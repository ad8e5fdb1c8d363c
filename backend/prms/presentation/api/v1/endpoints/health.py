"""Health check endpoint — no authentication, always available."""

from fastapi import APIRouter

from prms.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Liveness plus the version, environment and storage backend in use."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage": "sqlalchemy" if settings.storage_url.strip() else "memory",
    }
