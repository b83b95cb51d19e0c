from sqlalchemy import Column, Integer, String
from shared.config.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Integer, nullable=False) # smallest currency unit (rupiah)
    stock = Column(Integer, nullable=False)
