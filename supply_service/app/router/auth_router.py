from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..schemas import auth_schemas
from ..services import auth_services

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=auth_schemas.LoginResponse)
def login(req: auth_schemas.LoginRequest, db: Session = Depends(get_db)):
    return auth_services.login(db, req)
