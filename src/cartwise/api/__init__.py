"""Cartwise API package."""

from cartwise.api.routes import cart_router, product_router, user_router

__all__ = ["cart_router", "product_router", "user_router"]
