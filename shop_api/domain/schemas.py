# shop_api/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from shop_api.data.models.user import ROLE_ADMIN, ROLE_CLIENT

# Decimal w pythonie, liczba w JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class InModel(BaseModel):
    """Body requestu: przyjmuje camelCase i snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OutModel(BaseModel):
    """Response budowany z modeli ORM, serializowany do camelCase."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


# ---------------------------------------------------------------- auth


class RegisterIn(InModel):
    """Schema dla rejestracji uzytkownika."""

    username: str = Field(..., min_length=2, max_length=22, examples=["john_doe"])
    password: str = Field(..., min_length=8, max_length=22, examples=["P@$$wOrd123"])


class LoginIn(RegisterIn):
    pass


class RoleIn(InModel):
    role: Literal[ROLE_CLIENT, ROLE_ADMIN]


class TokenOut(BaseModel):
    access_token: str


class UserRead(OutModel):
    id: int
    username: str
    role: str


class ProfileOut(BaseModel):
    """Claimy z tokena."""

    sub: int
    username: str
    role: Optional[str] = None
    iat: int
    exp: int


# ---------------------------------------------------------------- products


class SpecificationIn(InModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Color"])
    value: str = Field(..., min_length=1, max_length=255, examples=["Red"])


class ProductCreate(InModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    specifications: Optional[List[SpecificationIn]] = None


class ProductUpdate(InModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    category: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    specifications: Optional[List[SpecificationIn]] = None

    # pola mozna pominac, ale nie wyzerowac (NOT NULL w bazie)
    @field_validator("name", "price", "category")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class ProductSearch(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    min_price: Optional[Decimal] = Field(None, ge=0)
    max_price: Optional[Decimal] = Field(None, ge=0)

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class SpecificationOut(OutModel):
    id: int
    name: str
    value: str


class ProductOut(OutModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    category: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    specifications: List[SpecificationOut] = []


# ---------------------------------------------------------------- cart


class CartItemIn(InModel):
    """Zmiana ilosci produktu w koszyku, ujemna wartosc zmniejsza."""

    product_id: int = Field(..., gt=0, examples=[1])
    quantity: int = Field(..., examples=[2])


class CartItemOut(OutModel):
    id: int
    cart_id: int
    product_id: Optional[int] = None
    quantity: int


class CartProductOut(OutModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    category: str
    image_url: Optional[str] = None


class CartLineOut(CartItemOut):
    product: Optional[CartProductOut] = None


class CartOut(OutModel):
    id: int
    user_id: int
    items: List[CartLineOut] = Field(default_factory=list, serialization_alias="cartItems")


# ---------------------------------------------------------------- orders / payment


class OrderItemOut(OutModel):
    id: int
    order_id: int
    product_id: Optional[int] = None
    quantity: int


class OrderOut(OutModel):
    id: int
    user_id: int
    total_amount: Money
    is_confirmed: bool
    created_at: datetime
    items: List[OrderItemOut] = Field(default_factory=list, serialization_alias="orderItems")


class PixPaymentIn(InModel):
    order_id: int = Field(..., gt=0, examples=[1])


class CardPaymentIn(PixPaymentIn):
    """Walidowany tylko ksztalt danych karty, bez bramki platniczej."""

    card_number: str = Field(..., min_length=16, max_length=16, examples=["1234567890123456"])
    card_holder_name: str = Field(..., min_length=1, max_length=50, examples=["JOHN DOE"])
    expiration_date: str = Field(..., min_length=5, max_length=7, examples=["12/29"])
    cvv: str = Field(..., min_length=3, max_length=4, examples=["123"])
