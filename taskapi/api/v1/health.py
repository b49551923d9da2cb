"""Health check endpoint with optional database connectivity check."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskapi.core.config import settings
from taskapi.core.database import check_db_connected, get_db
from taskapi.schemas.common import ApiResponse
from taskapi.schemas.health import HealthData

router = APIRouter()


@router.get("", response_model=ApiResponse[HealthData], response_model_exclude_unset=True)
def get_health(db: Session = Depends(get_db)) -> ApiResponse[HealthData]:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return ApiResponse[HealthData](
        success=True,
        message="Task API is running",
        data=HealthData(status="ok", environment=settings.APP_ENV, database=db_status),
    )
