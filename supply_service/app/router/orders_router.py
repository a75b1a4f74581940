# app/routers/orders_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..schemas.orders_schemas import OrderCreate, OrderOut, OrderStatusUpdate, OrderUpdate
from ..crud import orders_crud as crud

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order(order: OrderCreate, db: Session = Depends(get_db)):
    return crud.create_order(db, order)


@router.get("", response_model=List[OrderOut])
def read_orders(
    status: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return crud.get_orders(db, status=status, search=search)


@router.get("/{order_id}", response_model=OrderOut)
def read_order(order_id: str, db: Session = Depends(get_db)):
    return crud.get_order_by_id(db, order_id)


@router.patch("/{order_id}", response_model=OrderOut)
def update_order(order_id: str, order: OrderUpdate, db: Session = Depends(get_db)):
    return crud.update_order(db, order_id, order)


@router.patch("/{order_id}/status", response_model=OrderOut)
def update_order_status(order_id: str, req: OrderStatusUpdate, db: Session = Depends(get_db)):
    return crud.update_order_status(db, order_id, req.status, req.tracking_code)
