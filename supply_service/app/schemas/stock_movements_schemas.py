from datetime import datetime
from typing import Optional

from shared.core.schemas import ApiModel
from ..enum.order_enum import MovementType
from .items_schemas import ItemOut
from .orders_schemas import OrderSummary


class StockMovementOut(ApiModel):
    id: str
    item_id: str
    order_id: Optional[str] = None
    type: MovementType
    quantity: int
    reason: str
    performed_by: Optional[str] = None
    created_at: Optional[datetime] = None
    item: Optional[ItemOut] = None
    order: Optional[OrderSummary] = None
