"""
Pytest fixtures for the school supply orders test suite.

Provides:
- an in-memory SQLite engine per test (StaticPool, so every session sees the
  same database)
- a plain ORM session for crud-level tests
- a FastAPI TestClient whose ``get_db`` dependency is bound to that engine
- small factories for items, orders and users
"""

import os

# must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import Base, get_db
from shared.models.users import Users
from shared.utils.enums import UserRole
from supply_service.app.main import app
from supply_service.app.models import Item, Order, OrderLine
from supply_service.app.enum.order_enum import OrderStatus


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_item(db):
    def _make(name="Camiseta uniforme - tamanho P", category="uniforme",
              size="P", stock_quantity=10, is_active=True):
        item = Item(name=name, category=category, size=size,
                    stock_quantity=stock_quantity, is_active=is_active)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item
    return _make


@pytest.fixture
def make_order(db):
    """Insert an order directly, in any status, bypassing the lifecycle."""
    def _make(lines, status=OrderStatus.PENDING, student_name="Ana Souza",
              student_class="5º ano A", requested_by="Coordenação",
              tracking_code=None):
        order = Order(
            student_name=student_name,
            student_class=student_class,
            requested_by=requested_by,
            status=status,
            tracking_code=tracking_code,
            items=[
                OrderLine(item_id=item.id, quantity=qty, position=i)
                for i, (item, qty) in enumerate(lines)
            ],
        )
        db.add(order)
        db.commit()
        db.refresh(order)
        return order
    return _make


@pytest.fixture
def seeded_users(session_factory):
    session = session_factory()
    try:
        for username, password, role in (
            ("admin_coordenacao", "coord123", UserRole.COORDENACAO_ADMIN),
            ("admin_estoque", "estoque123", UserRole.ESTOQUE_ADMIN),
        ):
            user = Users(username=username, role=role)
            user.set_password(password)
            session.add(user)
        session.commit()
    finally:
        session.close()
