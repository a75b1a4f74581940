# app/models/orders.py
import uuid
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, CheckConstraint
from sqlalchemy.orm import relationship

from shared.core.database import Base
from ..enum.order_enum import OrderStatus
from .items import utcnow


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True,
                default=lambda: str(uuid.uuid4()))
    student_name = Column(String(200), nullable=False)
    student_class = Column(String(64), nullable=False)
    requested_by = Column(String(200), nullable=False)
    status = Column(Enum(OrderStatus, name="order_status"),
                    nullable=False, default=OrderStatus.PENDING, index=True)
    tracking_code = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow,
                        onupdate=utcnow)

    items = relationship(
        "OrderLine",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLine.position",
    )


class OrderLine(Base):
    __tablename__ = "order_lines"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_lines_quantity_positive"),
    )

    id = Column(String(36), primary_key=True,
                default=lambda: str(uuid.uuid4()))
    order_id = Column(
        String(36),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_id = Column(
        String(36),
        ForeignKey("items.id", ondelete="RESTRICT"),
        nullable=False,
    )
    quantity = Column(Integer, nullable=False)
    # insertion order within the order
    position = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="items")
    item = relationship("Item")
