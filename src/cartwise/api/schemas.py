"""Pydantic request/response schemas for the Cartwise API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands and aggregates.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# User Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254)
    wallet_balance: float | None = Field(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Lovelace",
                    "email": "ada@example.com",
                }
            ]
        }
    }


class ChangeAddressRequest(BaseModel):
    address: str = Field(min_length=1, max_length=500)


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    wallet_balance: float
    shipping_address: str

    @classmethod
    def from_user(cls, user):
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            wallet_balance=user.wallet_balance,
            shipping_address=user.shipping_address,
        )


class UserIdResponse(BaseModel):
    user_id: str


# ---------------------------------------------------------------------------
# Product Schemas
# ---------------------------------------------------------------------------
class AddProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    cost: float = Field(ge=0)
    category: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    image: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str | None = None
    cost: float
    rating: float | None = None
    image: str | None = None

    @classmethod
    def from_product(cls, product):
        return cls(
            id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class CartItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class CartItemResponse(BaseModel):
    product_id: str
    product_name: str | None = None
    cost: float
    quantity: int


class CartResponse(BaseModel):
    owner_id: str
    items: list[CartItemResponse]
    total: float

    @classmethod
    def from_cart(cls, cart):
        return cls(
            owner_id=str(cart.owner_id),
            items=[
                CartItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    cost=item.cost,
                    quantity=item.quantity,
                )
                for item in cart.items
            ],
            total=cart.total(),
        )


# ---------------------------------------------------------------------------
# Shared Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    code: int
    kind: str
    message: str
