"""Cartwise error taxonomy.

Every rejection raised by the cart operations carries an ``ErrorKind`` and a
fixed message. Callers (the HTTP layer, tests, other services) match on the
kind and may show the message verbatim, so the messages below are part of
the public contract.
"""

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    INVALID_INPUT = "InvalidInput"
    CONFLICT = "Conflict"
    INTERNAL = "Internal"


# Cart
CART_NOT_FOUND = "user does not have a cart"
CART_MISSING_USE_CREATE = "user does not have a cart; use create"
CART_EMPTY = "cart has no product"
PRODUCT_ALREADY_IN_CART = "product already in cart"
PRODUCT_NOT_IN_CART = "product not in cart"
CART_CREATION_FAILED = "cart creation failed"
CART_SAVE_FAILED = "cart could not be saved"

# Catalogue
PRODUCT_DOES_NOT_EXIST = "product doesn't exist"
PRODUCT_NOT_FOUND = "product not found"

# Users and checkout
USER_NOT_FOUND = "user not found"
EMAIL_TAKEN = "email already taken"
ADDRESS_NOT_SET = "address not set"
INSUFFICIENT_BALANCE = "insufficient balance"
CHECKOUT_FAILED = "checkout could not be settled"


class CartwiseError(Exception):
    """Base class for all typed Cartwise failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NotFound(CartwiseError):
    """A record the operation must read does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidInput(CartwiseError):
    """A caller-correctable precondition failed."""

    kind = ErrorKind.INVALID_INPUT


class Conflict(CartwiseError):
    """The request collides with existing state."""

    kind = ErrorKind.CONFLICT


class Internal(CartwiseError):
    """Persistence failed in a way the domain cannot recover from."""

    kind = ErrorKind.INTERNAL
