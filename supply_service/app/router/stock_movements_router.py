from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from ..schemas.stock_movements_schemas import StockMovementOut
from ..crud import stock_movements_crud as crud

router = APIRouter(prefix="/stock-movements", tags=["stock_movements"])


@router.get("", response_model=List[StockMovementOut])
def read_stock_movements(
    limit: Optional[int] = None,
    item_id: Optional[str] = Query(None, alias="itemId"),
    order_id: Optional[str] = Query(None, alias="orderId"),
    db: Session = Depends(get_db),
):
    return crud.get_stock_movements(db, limit=limit, item_id=item_id, order_id=order_id)
