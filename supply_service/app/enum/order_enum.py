from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PRODUCING = "PRODUCING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class MovementType(str, Enum):
    IN = "IN"
    OUT = "OUT"
