"""Main entrypoint for the Product Catalog API.

``create_app`` builds and configures the FastAPI application; an
instance built from environment settings is created at import time
as ``app`` so it can be served directly::

    uvicorn catalog.infrastructure.api.app:app --reload
"""

from __future__ import annotations

from fastapi import FastAPI

from catalog.infrastructure.api.errors import register_exception_handlers
from catalog.infrastructure.api.products import router as products_router
from catalog.infrastructure.bootstrap import product_store_factory
from catalog.infrastructure.config import Settings, settings as default_settings
from catalog.infrastructure.logging_config import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns its own store factory, so two apps built in
    the same process never share an in-memory catalog.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store_factory = product_store_factory(settings)

    register_exception_handlers(app)
    app.include_router(products_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
