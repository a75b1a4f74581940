"""Seed the catalog and the two role users.

Run with ``python -m supply_service.seed``. Existing rows are left alone, so
running it twice is harmless.
"""
import logging
from sqlalchemy.orm import Session

from shared.core.database import Base, SessionLocal, engine
from shared.models.users import Users
from shared.utils.enums import UserRole
from supply_service.app.models import Item

logger = logging.getLogger(__name__)

CATALOG = [
    {"name": "Camiseta uniforme - tamanho P", "category": "uniforme",
     "size": "P", "stock_quantity": 30},
    {"name": "Camiseta uniforme - tamanho M", "category": "uniforme",
     "size": "M", "stock_quantity": 40},
    {"name": "Camiseta uniforme - tamanho G", "category": "uniforme",
     "size": "G", "stock_quantity": 35},
    {"name": "Mochila escolar padrão", "category": "mochila",
     "size": "único", "stock_quantity": 20},
    {"name": "Kit material básico", "category": "material",
     "size": "único", "stock_quantity": 50},
]

USERS = [
    ("admin_coordenacao", "coord123", UserRole.COORDENACAO_ADMIN),
    ("admin_estoque", "estoque123", UserRole.ESTOQUE_ADMIN),
]


def seed_data(db: Session):
    created_items = 0
    for data in CATALOG:
        exists = db.query(Item).filter(Item.name == data["name"]).first()
        if not exists:
            db.add(Item(**data))
            created_items += 1

    created_users = 0
    for username, password, role in USERS:
        if db.query(Users).filter(Users.username == username).first():
            continue
        user = Users(username=username, role=role)
        user.set_password(password)
        db.add(user)
        created_users += 1

    db.commit()
    logger.info("Seed finished: %d item(s), %d user(s) created",
                created_items, created_users)
    return created_items, created_users


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_data(db)
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()
