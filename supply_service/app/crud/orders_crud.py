# app/crud/orders_crud.py
"""Orders and their lifecycle.

Status moves only forward along ``ALLOWED_TRANSITIONS``. Stock is never touched
here: deducting inventory when an order goes to production is a separate call
to ``stock_movements_crud.adjust_item_stock`` made by the caller.
"""
import logging
from typing import List, Optional, Union
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from shared.core.exceptions import (
    InvalidState,
    InvalidTransition,
    MissingField,
    NotFound,
    ValidationError,
)
from ..enum.order_enum import OrderStatus
from ..models.items import MAX_QUANTITY, Item
from ..models.orders import Order, OrderLine
from ..schemas.orders_schemas import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PRODUCING, OrderStatus.CANCELLED},
    OrderStatus.PRODUCING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def parse_status(value: Union[str, OrderStatus]) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        valid = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Invalid status '{value}'. Use one of: {valid}")


def _order_query(db: Session):
    return db.query(Order).options(
        selectinload(Order.items).joinedload(OrderLine.item)
    )


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _validated_lines(db: Session, order: OrderCreate) -> List[OrderLine]:
    """Check the whole payload and build the new lines, writing nothing."""
    if not (_clean(order.student_name) and _clean(order.student_class) and _clean(order.requested_by)):
        raise ValidationError(
            "studentName, studentClass and requestedBy are required")

    if not order.items:
        raise ValidationError("At least one item is required")

    for line in order.items:
        quantity = line.quantity
        if (
            not _clean(line.item_id)
            or isinstance(quantity, bool)
            or not isinstance(quantity, int)
            or quantity <= 0
            or quantity > MAX_QUANTITY
        ):
            raise ValidationError("Each item needs an itemId and a quantity > 0")

    item_ids = {line.item_id.strip() for line in order.items}
    found = {
        row.id for row in db.query(Item.id).filter(Item.id.in_(item_ids)).all()
    }
    missing = item_ids - found
    if missing:
        raise ValidationError(
            f"Unknown item(s): {', '.join(sorted(missing))}")

    return [
        OrderLine(item_id=line.item_id.strip(),
                  quantity=line.quantity, position=index)
        for index, line in enumerate(order.items)
    ]


def _contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` literally, for use with escape="\\"."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def get_orders(db: Session, status: Optional[Union[str, OrderStatus]] = None, search: Optional[str] = None) -> List[Order]:
    query = _order_query(db)

    if status:
        query = query.filter(Order.status == parse_status(status))

    term = _clean(search)
    if term:
        pattern = _contains_pattern(term)
        query = query.filter(or_(
            Order.student_name.ilike(pattern, escape="\\"),
            Order.student_class.ilike(pattern, escape="\\"),
        ))

    return query.order_by(Order.created_at.desc(), Order.id.desc()).all()


def get_order_by_id(db: Session, order_id: str) -> Order:
    order = _order_query(db).filter(Order.id == order_id).first()
    if not order:
        raise NotFound("Order not found")
    return order


def create_order(db: Session, order: OrderCreate) -> Order:
    lines = _validated_lines(db, order)

    db_order = Order(
        student_name=_clean(order.student_name),
        student_class=_clean(order.student_class),
        requested_by=_clean(order.requested_by),
        status=OrderStatus.PENDING,
        items=lines,
    )
    try:
        db.add(db_order)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Order %s created for %s (%s) with %d line(s)",
                db_order.id, db_order.student_name, db_order.student_class, len(lines))
    return get_order_by_id(db, db_order.id)


def update_order(db: Session, order_id: str, order: OrderUpdate) -> Order:
    """Replace header fields and every line of a PENDING order.

    The payload is validated in full before anything is written; the old
    lines are deleted and the new ones inserted in a single commit.
    """
    db_order = db.query(Order).filter(Order.id == order_id).with_for_update().first()
    if not db_order:
        raise NotFound("Order not found")

    if db_order.status != OrderStatus.PENDING:
        raise InvalidState("Only orders with status PENDING can be edited")

    lines = _validated_lines(db, order)

    try:
        db_order.student_name = _clean(order.student_name)
        db_order.student_class = _clean(order.student_class)
        db_order.requested_by = _clean(order.requested_by)
        # delete-orphan cascade removes the previous lines
        db_order.items = lines
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Order %s replaced with %d line(s)", order_id, len(lines))
    return get_order_by_id(db, order_id)


def update_order_status(
    db: Session,
    order_id: str,
    status: Union[str, OrderStatus],
    tracking_code: Optional[str] = None,
) -> Order:
    target = parse_status(status)

    db_order = db.query(Order).filter(Order.id == order_id).with_for_update().first()
    if not db_order:
        raise NotFound("Order not found")

    current = db_order.status
    if not can_transition(current, target):
        raise InvalidTransition(
            f"Invalid status transition: {current.value} -> {target.value}")

    if target == OrderStatus.SHIPPED:
        code = _clean(tracking_code)
        if not code:
            raise MissingField(
                "trackingCode is required when marking an order as SHIPPED")
        db_order.tracking_code = code

    try:
        db_order.status = target
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Order %s moved %s -> %s",
                order_id, current.value, target.value)
    return get_order_by_id(db, order_id)
