# isp_crud/models.py
from pydantic import BaseModel, Field


class Product(BaseModel):
    id: int = 0
    name: str
    description: str = ""
    price: float
    stock: int


class User(BaseModel):
    id: int = 0
    username: str
    email: str
    # stored exactly as given, never hashed
    password: str = Field(repr=False)
    role: str = "USER"
    active: bool = True
