# app/models/items.py
import threading
import uuid
from datetime import datetime, timedelta, timezone
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from shared.core.database import Base


# upper bound of the Integer (int4) quantity columns
MAX_QUANTITY = 2**31 - 1

_clock_lock = threading.Lock()
_last_stamp = None


def utcnow():
    """Current UTC time, strictly increasing within the process.

    Rows created in the same clock tick still sort in insertion order.
    """
    global _last_stamp
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_stamp is not None and now <= _last_stamp:
            now = _last_stamp + timedelta(microseconds=1)
        _last_stamp = now
        return now


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("stock_quantity >= 0",
                        name="ck_items_stock_non_negative"),
    )

    id = Column(String(36), primary_key=True,
                default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    category = Column(String(64), nullable=False, index=True)
    size = Column(String(32), nullable=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow,
                        onupdate=utcnow)

    movements = relationship("StockMovement", back_populates="item")
