from sqlalchemy import Column, Integer, String

from shop_api.data.database import Base

ROLE_CLIENT = "CLIENT"
ROLE_ADMIN = "ADMIN"


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(22), nullable=False, unique=True)
    # tylko hash bcrypt, nigdy plain text
    password = Column(String, nullable=False)
    role = Column(String(10), nullable=False, default=ROLE_CLIENT)
