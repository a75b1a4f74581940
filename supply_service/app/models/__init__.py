# Import all models to ensure they are registered with SQLAlchemy
from shared.models.users import Users
from .items import Item
from .orders import Order, OrderLine
from .stock_movements import StockMovement
