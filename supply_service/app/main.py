import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.helpers.exception_handler import setup_exception_handlers
from . import models  # noqa: F401  registers tables
from .router import (
    auth_router,
    health_router,
    items_router,
    orders_router,
    stock_movements_router,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Create all tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="School Supply Orders API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(health_router.router)
app.include_router(auth_router.router)
app.include_router(items_router.router)
app.include_router(orders_router.router)
app.include_router(stock_movements_router.router)
