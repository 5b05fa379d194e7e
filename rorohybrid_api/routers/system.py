"""
System API router: root descriptor and health check.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from rorohybrid import __version__
from rorohybrid.metrics import metrics

router = APIRouter(tags=["System"])

logger = logging.getLogger(__name__)


@router.get("/")
async def root():
    """
    API root endpoint.

    Returns basic API information and available endpoint categories.
    """
    return {
        "name": "RoRo Hybrid Advisor API",
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs",
        "endpoints": {
            "health": "/api/health",
            "advisor": "/api/advisor/...",
            "simulation": "/api/simulation/run",
            "comparison": "/api/comparison",
        },
    }


@router.get("/api/health")
async def health_check():
    """
    Health check for load balancers.

    The engine has no external dependencies, so a responding process is
    healthy. Includes the in-process performance metrics.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "metrics": metrics.get_summary(),
    }
