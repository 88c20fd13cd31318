"""Health check router."""
from fastapi import APIRouter

from app.core.config import settings
from app.core.database import check_db_connection

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    """Service and database status."""
    database_ok = check_db_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "connected" if database_ok else "unavailable",
        "environment": settings.ENVIRONMENT,
    }
