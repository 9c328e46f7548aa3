from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from shop_api.data.database import Base


class SpecificationModel(Base):
    __tablename__ = "specifications"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    value = Column(String(255), nullable=False)

    product = relationship("ProductModel", back_populates="specifications")

    __table_args__ = (UniqueConstraint("product_id", "name", name="u_specification_product_name"),)
