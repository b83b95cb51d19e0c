from sqlalchemy import Column, Integer, String
from shared.config.database import Base

class Category(Base):
    __tablename__ = "categories"
    # No link to products: the schema has no foreign key between the two

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
