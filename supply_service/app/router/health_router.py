import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import DbHealthOut, HealthOut

logger = logging.getLogger(__name__)

SERVICE_NAME = "school-supply-orders"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", service=SERVICE_NAME,
                     timestamp=datetime.now(timezone.utc))


@router.get("/db-health", response_model=DbHealthOut)
def db_health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return JSONResponse(status_code=500,
                            content={"status": "error", "db": "disconnected"})
    return DbHealthOut(status="ok", db="connected",
                       timestamp=datetime.now(timezone.utc))
