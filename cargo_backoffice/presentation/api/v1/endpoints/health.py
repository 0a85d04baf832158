"""Liveness check. Touches no database, so it answers even when storage is down."""

from fastapi import APIRouter

from cargo_backoffice.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
