# isp_crud/core.py
from pydantic import BaseModel

from isp_crud.models import Product, User


class ProductIn(BaseModel):
    name: str
    description: str = ""
    price: float
    stock: int


class UserIn(BaseModel):
    username: str
    email: str
    password: str
    role: str = "USER"
    active: bool = True


def _make_product(product_id: int, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description,
        price=p.price,
        stock=p.stock,
    )


def _make_user(user_id: int, u: UserIn) -> User:
    return User(
        id=user_id,
        username=u.username,
        email=u.email,
        password=u.password,
        role=u.role,
        active=u.active,
    )
