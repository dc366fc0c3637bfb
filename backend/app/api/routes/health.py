"""Health check endpoints."""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.db.session import check_db_connection

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.
    Returns status.
    """
    return {"status": "ok"}


@router.get("/health/db")
def db_health_check() -> JSONResponse:
    """Readiness check: 503 when the database cannot be reached."""
    if check_db_connection():
        return JSONResponse({"status": "ok"})
    return JSONResponse(
        {"status": "unavailable"},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
