from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

# JSON field names are Indonesian (nama/harga/stok); Python attributes are English


class ProductCreate(BaseModel):
    # Accepted but ignored: the store assigns identity, the path wins on update
    id: Optional[int] = None
    name: str = Field(default="", validation_alias=AliasChoices("nama", "name"))
    price: int = Field(default=0, validation_alias=AliasChoices("harga", "price"))
    stock: int = Field(default=0, validation_alias=AliasChoices("stok", "stock"))


class ProductResponse(BaseModel):
    id: int
    name: str = Field(serialization_alias="nama")
    price: int = Field(serialization_alias="harga")
    stock: int = Field(serialization_alias="stok")

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
