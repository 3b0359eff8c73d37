"""FastAPI application factory for Cartwise."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cartwise.api.errors import register_error_handlers
from cartwise.api.routes import cart_router, product_router, user_router
from cartwise.domain import cartwise
from cartwise.utils.logging import clear_context


def create_app() -> FastAPI:
    app = FastAPI(
        title="Cartwise API",
        description="Users, product catalogue, shopping cart and checkout",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Cartwise domain context for every request except the health probe."""
        clear_context()
        if request.url.path == "/health":
            return await call_next(request)
        with cartwise.domain_context():
            response = await call_next(request)
        return response

    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": cartwise.name})

    return app
