# app/crud/stock_movements_crud.py
"""Stock ledger.

Every change to ``Item.stock_quantity`` goes through :func:`adjust_item_stock`,
which writes the new quantity and exactly one ``StockMovement`` in the same
transaction. Movements are only ever inserted.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from shared.core.exceptions import NotFound, ValidationError
from ..enum.order_enum import MovementType
from ..models.items import MAX_QUANTITY, Item
from ..models.orders import Order
from ..models.stock_movements import DEFAULT_MOVEMENT_REASON, StockMovement

logger = logging.getLogger(__name__)

MAX_MOVEMENTS_LIMIT = 200


def adjust_item_stock(
    db: Session,
    item_id: str,
    stock_quantity,
    reason: Optional[str] = None,
    performed_by: Optional[str] = None,
    order_id: Optional[str] = None,
) -> Item:
    """Set an item's stock to an absolute quantity and record the delta.

    A target equal to the current quantity is a no-op: nothing is written and
    the item is returned as is. Otherwise the delta becomes one IN or OUT
    movement of ``abs(delta)`` units. Both paths end the session's
    transaction with a commit.

    Raises:
        ValidationError: target is not an integer in 0..MAX_QUANTITY, or ``order_id``
            does not reference an existing order.
        NotFound: the item does not exist.
    """
    if isinstance(stock_quantity, bool) or not isinstance(stock_quantity, int):
        raise ValidationError("stockQuantity must be a number")
    if stock_quantity < 0:
        raise ValidationError("stockQuantity must be a non-negative integer")
    if stock_quantity > MAX_QUANTITY:
        raise ValidationError(f"stockQuantity must be at most {MAX_QUANTITY}")

    # row lock: concurrent adjustments of one item are serialized
    item = (
        db.query(Item)
        .filter(Item.id == item_id)
        .with_for_update()
        .first()
    )
    if not item:
        raise NotFound("Item not found")

    if order_id is not None and not db.query(Order.id).filter(Order.id == order_id).first():
        raise ValidationError(f"Order {order_id} does not exist")

    delta = stock_quantity - item.stock_quantity
    if delta == 0:
        # ends the transaction like the write path, releasing the row lock
        db.commit()
        return item

    movement = StockMovement(
        item_id=item.id,
        order_id=order_id,
        type=MovementType.IN if delta > 0 else MovementType.OUT,
        quantity=abs(delta),
        reason=reason or DEFAULT_MOVEMENT_REASON,
        performed_by=performed_by,
    )

    try:
        item.stock_quantity = stock_quantity
        db.add(movement)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(item)
    logger.info(
        "Stock of item %s set to %s (%s %s, order=%s, by=%s)",
        item.id, item.stock_quantity, movement.type.value, movement.quantity,
        order_id, performed_by,
    )
    return item


def get_stock_movements(
    db: Session,
    limit: Optional[int] = None,
    item_id: Optional[str] = None,
    order_id: Optional[str] = None,
) -> List[StockMovement]:
    """Newest first. ``limit`` defaults to, and is capped at, 200."""
    if limit is None:
        limit = MAX_MOVEMENTS_LIMIT
    limit = max(1, min(limit, MAX_MOVEMENTS_LIMIT))

    query = db.query(StockMovement).options(
        joinedload(StockMovement.item),
        joinedload(StockMovement.order),
    )
    if item_id:
        query = query.filter(StockMovement.item_id == item_id)
    if order_id:
        query = query.filter(StockMovement.order_id == order_id)

    return (
        query.order_by(StockMovement.created_at.desc(),
                       StockMovement.id.desc())
        .limit(limit)
        .all()
    )


def get_item_movements(db: Session, item_id: str, limit: Optional[int] = None) -> List[StockMovement]:
    if not db.query(Item.id).filter(Item.id == item_id).first():
        raise NotFound("Item not found")
    return get_stock_movements(db, limit=limit, item_id=item_id)
