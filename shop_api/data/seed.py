# shop_api/data/seed.py
from decimal import Decimal

import shop_api.data.models  # noqa: F401
from shop_api.data.database import Base, SessionLocal, engine
from shop_api.data.models.product import ProductModel
from shop_api.data.models.specification import SpecificationModel
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Keyboard",
        "price": Decimal("199.99"),
        "category": "Peripherals",
        "description": "Mechanical keyboard",
        "specifications": [("Layout", "US"), ("Switches", "Brown")],
    },
    {
        "name": "Mouse",
        "price": Decimal("49.50"),
        "category": "Peripherals",
        "description": "Wireless mouse",
        "specifications": [("DPI", "1600")],
    },
    {
        "name": "Monitor",
        "price": Decimal("899.00"),
        "category": "Displays",
        "description": "27 inch IPS monitor",
        "specifications": [("Size", "27\""), ("Resolution", "2560x1440")],
    },
]


def seed(db=None) -> int:
    """Wstawia demo katalog tylko gdy tabela products jest pusta."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        if db.query(ProductModel).first():
            return 0
        for data in DEMO_PRODUCTS:
            specs = data["specifications"]
            db.add(
                ProductModel(
                    name=data["name"],
                    price=data["price"],
                    category=data["category"],
                    description=data["description"],
                    specifications=[SpecificationModel(name=n, value=v) for n, v in specs],
                )
            )
        db.commit()
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
        return len(DEMO_PRODUCTS)
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    seed()
