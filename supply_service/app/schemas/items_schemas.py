from datetime import datetime
from typing import Annotated, Optional
from pydantic import Field, StrictBool, StrictInt

from shared.core.schemas import ApiModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..models.items import MAX_QUANTITY

Quantity = Annotated[StrictInt, Field(le=MAX_QUANTITY)]


class ItemCreate(EmptyStringModel):
    name: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    stock_quantity: Optional[Quantity] = None
    is_active: Optional[StrictBool] = None


class ItemUpdate(EmptyStringModel):
    """Descriptive fields only. Stock goes through StockAdjustRequest."""
    name: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    is_active: Optional[StrictBool] = None


class StockAdjustRequest(EmptyStringModel):
    stock_quantity: Quantity
    reason: Optional[str] = None
    performed_by: Optional[str] = None
    order_id: Optional[str] = None


class ItemOut(ApiModel):
    id: str
    name: str
    category: str
    size: Optional[str] = None
    stock_quantity: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
