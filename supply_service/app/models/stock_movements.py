# app/models/stock_movements.py
import uuid
from sqlalchemy import CheckConstraint, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from shared.core.database import Base
from ..enum.order_enum import MovementType
from .items import utcnow

DEFAULT_MOVEMENT_REASON = "manual adjustment"


class StockMovement(Base):
    """Append-only ledger entry. Rows are inserted, never updated or deleted."""
    __tablename__ = "stock_movements"
    __table_args__ = (
        CheckConstraint("quantity > 0",
                        name="ck_stock_movements_quantity_positive"),
    )

    id = Column(String(36), primary_key=True,
                default=lambda: str(uuid.uuid4()))
    item_id = Column(String(36), ForeignKey("items.id"),
                     nullable=False, index=True)
    order_id = Column(String(36), ForeignKey("orders.id"),
                      nullable=True, index=True)
    type = Column(Enum(MovementType, name="movement_type"), nullable=False)
    quantity = Column(Integer, nullable=False)
    reason = Column(String(255), nullable=False,
                    default=DEFAULT_MOVEMENT_REASON)
    performed_by = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    item = relationship("Item", back_populates="movements")
    order = relationship("Order")
