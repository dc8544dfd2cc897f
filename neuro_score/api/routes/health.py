"""Health check endpoints."""

from fastapi import APIRouter

from neuro_score import __version__
from neuro_score.registry import list_tests

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Basic health check with the size of the loaded catalogue."""
    return {
        "status": "healthy",
        "service": "neuro-score",
        "version": __version__,
        "tests": len(list_tests()),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - basic process health."""
    return {"status": "alive"}
