from datetime import datetime
from typing import List, Optional

from shared.core.schemas import ApiModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..enum.order_enum import OrderStatus
from .items_schemas import ItemOut, Quantity


class OrderLineIn(EmptyStringModel):
    item_id: Optional[str] = None
    quantity: Optional[Quantity] = None


class OrderCreate(EmptyStringModel):
    student_name: Optional[str] = None
    student_class: Optional[str] = None
    requested_by: Optional[str] = None
    items: Optional[List[OrderLineIn]] = None


class OrderUpdate(OrderCreate):
    pass


class OrderStatusUpdate(EmptyStringModel):
    status: OrderStatus
    tracking_code: Optional[str] = None


class OrderLineOut(ApiModel):
    id: str
    order_id: str
    item_id: str
    quantity: int
    item: ItemOut


class OrderOut(ApiModel):
    id: str
    student_name: str
    student_class: str
    requested_by: str
    status: OrderStatus
    tracking_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderLineOut] = []


class OrderSummary(ApiModel):
    id: str
    student_name: str
    student_class: str
    status: OrderStatus
