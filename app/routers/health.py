from datetime import datetime, timezone
from fastapi import APIRouter
from app.core.config import settings

router = APIRouter(
    prefix="/api",
    tags=["health"]
)

@router.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "database": "configured" if settings.DATABASE_URL else "not configured",
    }
