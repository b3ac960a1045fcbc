"""FarmFresh FastAPI application.

Web server that processes commands synchronously via HTTP. Every request
runs inside the farmfresh domain context.

Usage:
    uvicorn farmfresh.app:create_app --factory --host 0.0.0.0 --port 8000 --reload
"""

import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from farmfresh.api import (
    cart_router,
    category_router,
    order_router,
    product_router,
    register_error_handlers,
    review_router,
)
from farmfresh.domain import farmfresh, logger
from farmfresh.utils.logging import add_context, clear_context


def create_app(initialize: bool = True) -> FastAPI:
    """Build the API.

    ``initialize`` is False when the caller (e.g. the test suite) has
    already initialized the domain.
    """
    if initialize:
        farmfresh.init()

    app = FastAPI(
        title="FarmFresh API",
        description="Farm-to-table marketplace: catalogue, cart, checkout and reviews",
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
        """Push the farmfresh domain context for each request."""
        clear_context()
        add_context(method=request.method, path=request.url.path, user_id=request.headers.get("x-user-id"))
        with farmfresh.domain_context():
            response = await call_next(request)
        return response

    app.include_router(category_router)
    app.include_router(product_router)
    app.include_router(review_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": farmfresh.name})

    if os.environ.get("FARMFRESH_SEED"):
        from farmfresh.seed import seed_catalogue

        with farmfresh.domain_context():
            seed_catalogue()

    logger.info("FarmFresh API ready", environment=os.environ.get("PROTEAN_ENV", "development"))
    return app
