# app/crud/items_crud.py
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import NotFound, ValidationError
from ..models.items import MAX_QUANTITY, Item
from ..schemas.items_schemas import ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)


def get_items(db: Session, category: Optional[str] = None, only_active: Optional[bool] = None) -> List[Item]:
    query = db.query(Item)
    if category:
        query = query.filter(Item.category == category)
    if only_active is not None:
        query = query.filter(Item.is_active == only_active)
    return query.order_by(Item.name.asc(), Item.id.asc()).all()


def get_item_by_id(db: Session, item_id: str) -> Item:
    item = db.query(Item).filter(Item.id == item_id).first()
    if not item:
        raise NotFound("Item not found")
    return item


def create_item(db: Session, item: ItemCreate) -> Item:
    if not item.name or not item.category:
        raise ValidationError("name and category are required")

    stock_quantity = item.stock_quantity if item.stock_quantity is not None else 0
    if stock_quantity < 0:
        raise ValidationError("stockQuantity must be a non-negative integer")
    if stock_quantity > MAX_QUANTITY:
        raise ValidationError(f"stockQuantity must be at most {MAX_QUANTITY}")

    db_item = Item(
        name=item.name,
        category=item.category,
        size=item.size,
        stock_quantity=stock_quantity,
        is_active=item.is_active if item.is_active is not None else True,
    )
    try:
        db.add(db_item)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(db_item)
    logger.info("Item %s created (%s, stock=%s)",
                db_item.id, db_item.name, db_item.stock_quantity)
    return db_item


def update_item(db: Session, item_id: str, item: ItemUpdate) -> Item:
    db_item = get_item_by_id(db, item_id)

    data = item.model_dump(exclude_unset=True)
    for field in ("name", "category", "is_active"):
        if field in data and data[field] is None:
            raise ValidationError(f"{field} cannot be empty")

    for k, v in data.items():
        setattr(db_item, k, v)

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(db_item)
    logger.info("Item %s updated: %s", db_item.id, sorted(data))
    return db_item
