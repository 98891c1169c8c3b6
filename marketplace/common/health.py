"""
Health check endpoints shared by the marketplace services
"""
from fastapi import APIRouter, HTTPException, Request, status
from datetime import datetime
from typing import Dict, Any

from .db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Returns:
        dict: Health status, service name and timestamp
    """
    return {
        "status": "healthy",
        "service": request.app.title,
        "timestamp": datetime.utcnow().isoformat()
    }


@router.get("/ready", status_code=status.HTTP_200_OK)
def readiness_check(request: Request) -> Dict[str, Any]:
    """
    Readiness check endpoint with database status.

    Raises:
        HTTPException: 503 if the database is unreachable
    """
    db_connected = check_db_connection(request.app.state.session_factory)

    response = {
        "status": "ready" if db_connected else "not_ready",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": datetime.utcnow().isoformat()
    }

    if not db_connected:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=response
        )

    return response
