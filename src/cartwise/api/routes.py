"""FastAPI routes for Cartwise — users, products and the cart.

Authentication happens upstream; the authenticated user's id arrives in the
``X-User-Id`` header and is trusted as-is.
"""

from fastapi import APIRouter, Depends, Header

from cartwise.account import operations as accounts
from cartwise.api.schemas import (
    AddProductRequest,
    CartItemRequest,
    CartResponse,
    ChangeAddressRequest,
    ErrorResponse,
    ProductIdResponse,
    ProductResponse,
    RegisterUserRequest,
    StatusResponse,
    UserIdResponse,
    UserResponse,
)
from cartwise.cart import operations as carts
from cartwise.catalogue import operations as catalogue
from cartwise.utils.logging import add_context


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def current_user_id(x_user_id: str = Header()) -> str:
    add_context(user_id=x_user_id)
    return x_user_id


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"], responses=ERROR_RESPONSES)


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    user_id = accounts.register_user(
        name=body.name,
        email=body.email,
        wallet_balance=body.wallet_balance,
    )
    return UserIdResponse(user_id=user_id)


@user_router.get("/me", response_model=UserResponse)
async def get_me(user_id: str = Depends(current_user_id)) -> UserResponse:
    return UserResponse.from_user(accounts.get_user(user_id))


@user_router.put("/me/address", response_model=UserResponse)
async def change_address(body: ChangeAddressRequest, user_id: str = Depends(current_user_id)) -> UserResponse:
    user = accounts.change_shipping_address(user_id, body.address)
    return UserResponse.from_user(user)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"], responses=ERROR_RESPONSES)


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [ProductResponse.from_product(product) for product in catalogue.list_products()]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(catalogue.get_product(product_id))


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    product_id = catalogue.add_product(
        name=body.name,
        cost=body.cost,
        category=body.category,
        rating=body.rating,
        image=body.image,
    )
    return ProductIdResponse(product_id=product_id)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"], responses=ERROR_RESPONSES)


@cart_router.get("", response_model=CartResponse)
async def get_cart(user_id: str = Depends(current_user_id)) -> CartResponse:
    return CartResponse.from_cart(carts.get_cart(user_id))


@cart_router.post("", response_model=CartResponse)
async def add_to_cart(body: CartItemRequest, user_id: str = Depends(current_user_id)) -> CartResponse:
    cart = carts.add_item(user_id, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.put("", response_model=CartResponse)
async def update_cart_item(body: CartItemRequest, user_id: str = Depends(current_user_id)) -> CartResponse:
    cart = carts.update_item(user_id, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.delete("/items/{product_id}", response_model=StatusResponse)
async def delete_cart_item(product_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    carts.delete_item(user_id, product_id)
    return StatusResponse()


@cart_router.post("/checkout", response_model=UserResponse)
async def checkout(user_id: str = Depends(current_user_id)) -> UserResponse:
    user = carts.checkout(user_id)
    return UserResponse.from_user(user)
