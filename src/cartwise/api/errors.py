"""Translate Cartwise errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from cartwise.errors import CartwiseError, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


async def cartwise_error_handler(request: Request, exc: CartwiseError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    return JSONResponse(
        status_code=status_code,
        content={"code": status_code, "kind": exc.kind.value, "message": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's exception handlers plus the Cartwise error mapping."""
    register_exception_handlers(app)
    app.add_exception_handler(CartwiseError, cartwise_error_handler)
