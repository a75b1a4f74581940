# app/routers/items_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..schemas.items_schemas import ItemCreate, ItemOut, ItemUpdate, StockAdjustRequest
from ..schemas.stock_movements_schemas import StockMovementOut
from ..crud import items_crud as crud
from ..crud import stock_movements_crud

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=List[ItemOut])
def read_items(
    category: Optional[str] = None,
    only_active: Optional[bool] = Query(None, alias="onlyActive"),
    db: Session = Depends(get_db),
):
    return crud.get_items(db, category=category, only_active=only_active)


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(item: ItemCreate, db: Session = Depends(get_db)):
    return crud.create_item(db, item)


@router.get("/{item_id}", response_model=ItemOut)
def read_item(item_id: str, db: Session = Depends(get_db)):
    return crud.get_item_by_id(db, item_id)


@router.patch("/{item_id}", response_model=ItemOut)
def adjust_stock(item_id: str, req: StockAdjustRequest, db: Session = Depends(get_db)):
    return stock_movements_crud.adjust_item_stock(
        db,
        item_id,
        req.stock_quantity,
        reason=req.reason,
        performed_by=req.performed_by,
        order_id=req.order_id,
    )


@router.put("/{item_id}", response_model=ItemOut)
def update_item(item_id: str, item: ItemUpdate, db: Session = Depends(get_db)):
    return crud.update_item(db, item_id, item)


@router.get("/{item_id}/movements", response_model=List[StockMovementOut])
def read_item_movements(
    item_id: str,
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return stock_movements_crud.get_item_movements(db, item_id, limit=limit)
