from typing import Optional

from pydantic import BaseModel


class CategoryCreate(BaseModel):
    id: Optional[int] = None
    name: str = ""
    description: str = ""


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
