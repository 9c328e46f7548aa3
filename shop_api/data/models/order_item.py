from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from shop_api.data.database import Base


class OrderItemModel(Base):
    """Snapshot linii koszyka w momencie skladania zamowienia."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=False)

    order = relationship("OrderModel", back_populates="items")
